"""Turn Claude's reply into a ranked list of command suggestions."""

from __future__ import annotations

from please.exceptions import EmptyResponseError


def parse_response(raw: str | None) -> list[str]:
    """Split a reply into suggestions, one per non-blank line.

    Lines are stripped and kept in the order the model ranked them. Nothing
    is truncated or padded, so a reply with more or fewer than three lines
    passes through as is.

    Args:
        raw: Reply text, or None when the reply had no content.

    Raises:
        EmptyResponseError: If ``raw`` is None.
    """
    if raw is None:
        raise EmptyResponseError()
    return [line.strip() for line in raw.split("\n") if line.strip()]
