"""Prompt asking Claude for three ranked shell commands."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

PREAMBLE = (
    "You are an expert at bash command line for {os_label}. "
    "Here is my zsh command history for context:\n"
)

# The parser relies on the model answering with one command per line.
INSTRUCTION = (
    "Based on this history and the following request, generate ONLY three "
    "bash commands in your response, each on a new line and in order of best "
    "to worst, and nothing else, no other text, that accomplish what is "
    "described: "
)


def build_prompt(os_label: str, history: Sequence[str], request: str) -> str:
    """Assemble the full prompt from the OS, recent history and the request."""
    parts = [PREAMBLE.format(os_label=os_label)]
    for entry in history:
        parts.append(entry)
        parts.append("\n")
    parts.append(INSTRUCTION)
    parts.append(request)
    return "".join(parts)


@dataclass(frozen=True)
class PromptContext:
    """Everything the prompt is built from, gathered once per invocation."""

    os_label: str
    history: tuple[str, ...]
    request: str

    def build(self) -> str:
        return build_prompt(self.os_label, self.history, self.request)
