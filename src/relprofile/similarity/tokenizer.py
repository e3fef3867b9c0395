"""Character n-gram tokenizer."""

from __future__ import annotations

from dataclasses import dataclass

PAD_START = "#"
PAD_END = "$"


@dataclass(frozen=True)
class Tokenizer:
    """Splits strings into overlapping character n-grams.

    With padding, ``size - 1`` start and end markers are added so that the
    first and last characters appear in as many tokens as inner ones.
    Strings shorter than ``size`` yield themselves as a single token.
    """

    size: int = 3
    padding: bool = False

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Token size must be positive, got {self.size}")

    def tokenize(self, value: str | None) -> list[str]:
        if not value:
            return []
        if self.padding:
            value = PAD_START * (self.size - 1) + value + PAD_END * (self.size - 1)
        if len(value) <= self.size:
            return [value]
        return [value[i : i + self.size] for i in range(len(value) - self.size + 1)]
