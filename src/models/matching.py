"""
Matcher-specific data models

Type-safe structures threaded through the matcher and returned by the
public entry points.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .status import Status


@dataclass
class Cursor:
    """
    Pair of positions used throughout backtracking

    Each matcher run owns its own cursor; it is never shared between runs.

    Attributes:
        mask_pos: Current position in the mask
        input_pos: Current position in the input buffer
    """
    mask_pos: int = 0
    input_pos: int = 0

    def copy(self) -> "Cursor":
        return Cursor(self.mask_pos, self.input_pos)


@dataclass
class TextBuffer:
    """
    Growable, mutable text buffer

    The interactive driver rewrites characters (case normalisation, space
    placeholders) and inserts autofilled literals into this buffer. Each
    element is a single code unit.

    Example:
        >>> buffer = TextBuffer.from_text("12")
        >>> buffer.insert(2, "/")
        >>> buffer.text
        '12/'
    """
    chars: List[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(list(text))

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        return self.chars[index]

    def __setitem__(self, index: int, char: str) -> None:
        self.chars[index] = char

    def __str__(self) -> str:
        return self.text

    def insert(self, index: int, char: str) -> None:
        self.chars.insert(index, char)

    def copy(self) -> "TextBuffer":
        return TextBuffer(list(self.chars))

    def replace_with(self, chars: Iterable[str]) -> None:
        """Replace the whole content in place (keeps the caller's object)"""
        self.chars[:] = list(chars)


@dataclass(frozen=True)
class SyntaxIssue:
    """
    First rule a malformed mask violates

    Returned by syntax_diagnose() for masks that check_syntax() rejects.

    Attributes:
        reason: Human-readable description of the violated rule
        position: Mask position the rule refers to (len(mask) for problems
                  only detectable at the end, such as unbalanced groups)
    """
    reason: str
    position: int


@dataclass
class InputCheck:
    """
    Result of interactive validation through a validator

    Attributes:
        valid: Whether the input should be accepted as typed so far
        status: Public match status (None when the validator's base rules
                decided without running the matcher)
        text: The (possibly rewritten or autofilled) input text
    """
    valid: bool
    status: Optional[Status]
    text: str
