"""
Picture mask syntax checker

Validates that a mask is well-formed before it is ever used for matching.
The matcher relies on the guarantees established here (balanced groups, no
dangling escape or iteration operator), so a mask must pass check_syntax()
before it is installed.

Rules:
    - An empty mask is valid (it matches everything).
    - A trailing ';' must itself be escaped (';;' is fine, ';;;' is not).
    - A trailing '*' must be escaped (';*').
    - An iteration without a count (or with a zero count) must not be
      followed directly by '[' or '{': '*[' , '*{' and '*0[' are
      rejected, '*2[#]' is fine.
    - '[' / ']' and '{' / '}' must balance over the whole mask, and a
      closer may not appear before its opener. ';' always skips the next
      character, so escaped brackets never count.

Example:
    >>> check_syntax("##/##/##[##]")
    True
    >>> check_syntax("[*#")
    False
    >>> syntax_diagnose("{*#")
    SyntaxIssue(reason="unbalanced '{'", position=3)
"""

from typing import Optional

from ..models.matching import SyntaxIssue

ESCAPE = ';'
ITERATION = '*'
GROUP_OPENERS = '[{'
COUNT_DIGITS = '0123456789'


class MaskSyntaxError(ValueError):
    """Raised when a malformed picture mask is installed or matched against"""

    def __init__(self, mask: str, issue: Optional[SyntaxIssue] = None):
        self.mask = mask
        self.issue = issue if issue is not None else syntax_diagnose(mask)
        detail = f": {self.issue.reason} at position {self.issue.position}" if self.issue else ""
        super().__init__(f"Invalid picture mask '{mask}'{detail}")


def syntax_diagnose(mask: str) -> Optional[SyntaxIssue]:
    """
    Find the first syntax rule a mask violates

    Args:
        mask: Picture mask to check

    Returns:
        SyntaxIssue describing the problem, or None if the mask is valid
    """
    if not mask:
        return None

    last = len(mask) - 1
    brackets = 0
    braces = 0
    pos = 0

    while pos < len(mask):
        char = mask[pos]

        if char == ITERATION:
            if pos == last:
                return SyntaxIssue("iteration '*' without a pattern to repeat", pos)
            issue = iterationCount_check(mask, pos)
            if issue:
                return issue
        elif char == '[':
            brackets += 1
        elif char == ']':
            brackets -= 1
            if brackets < 0:
                return SyntaxIssue("unmatched ']'", pos)
        elif char == '{':
            braces += 1
        elif char == '}':
            braces -= 1
            if braces < 0:
                return SyntaxIssue("unmatched '}'", pos)
        elif char == ESCAPE:
            if pos == last:
                return SyntaxIssue("escape ';' without a character to escape", pos)
            pos += 1

        pos += 1

    if brackets != 0:
        return SyntaxIssue("unbalanced '['", len(mask))
    if braces != 0:
        return SyntaxIssue("unbalanced '{'", len(mask))

    return None


def iterationCount_check(mask: str, pos: int) -> Optional[SyntaxIssue]:
    """
    Check the count that follows the iteration operator at pos

    An optional or option group may only be repeated a fixed (nonzero)
    number of times; an unbounded repetition of something that may match
    nothing could never decide when to stop.

    Args:
        mask: Picture mask
        pos: Position of '*' in mask

    Returns:
        SyntaxIssue if '*' with a missing or zero count is followed by a
        group opener, otherwise None
    """
    end = pos + 1
    count = 0
    while end < len(mask) and mask[end] in COUNT_DIGITS:
        count = count * 10 + int(mask[end])
        end += 1

    if count == 0 and end < len(mask) and mask[end] in GROUP_OPENERS:
        return SyntaxIssue(
            f"unbounded iteration must not be followed by '{mask[end]}'", pos
        )

    return None


def check_syntax(mask: str) -> bool:
    """
    Check whether a picture mask is syntactically valid

    Args:
        mask: Picture mask to check

    Returns:
        True if mask can be installed, False otherwise
    """
    return syntax_diagnose(mask) is None
