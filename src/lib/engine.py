"""
Entry points for picture mask validation

Two call paths share the matcher:

- run_interactive(): live validation while the user types. Accepts partial
  input and, when asked, autofills the next run of literal mask characters
  (e.g. the '/' of a date) into the caller's buffer.
- run_commit(): one-shot validation of a finished value. Never modifies
  anything and reports mask problems (SYNTAX) separately from input
  problems (ERROR).

Both map the matcher's internal status onto the public Status explicitly.

Example:
    >>> buffer = TextBuffer.from_text("12")
    >>> run_interactive("##/##/##[##]", buffer, autofill=True)
    <Status.INCOMPLETE: 'incomplete'>
    >>> buffer.text
    '12/'
    >>> run_commit("##/##/##[##]", "12/12/12")
    <Status.COMPLETE: 'complete'>
"""

from ..models.matching import TextBuffer
from ..models.status import MatchStatus, Status
from .log import LOG
from .matcher import Matcher
from .syntax import ESCAPE

# Mask characters that end an autofill run
SPECIAL_TOKENS = '#?&!@*{}[],'

_REJECTED = (MatchStatus.ERROR, MatchStatus.SYNTAX)


def autofill_literals(mask: str, mask_pos: int, buffer: TextBuffer, input_pos: int) -> int:
    """
    Copy the run of literal mask characters at mask_pos into the buffer

    Stops at the first special token or at the end of the mask. Escaped
    characters are copied without their ';'.

    Args:
        mask: Picture mask
        mask_pos: Mask position where the next input character is expected
        buffer: Buffer to insert into
        input_pos: Buffer position to insert at

    Returns:
        Number of characters inserted

    Example:
        For mask "##/##" at mask_pos 2 and buffer "12" at input_pos 2:
        Inserts "/" (buffer becomes "12/") and returns 1
    """
    inserted = 0

    while mask_pos < len(mask) and mask[mask_pos] not in SPECIAL_TOKENS:
        if mask[mask_pos] == ESCAPE:
            mask_pos += 1

        buffer.insert(input_pos, mask[mask_pos])
        input_pos += 1
        mask_pos += 1
        inserted += 1

    return inserted


def run_interactive(mask: str, buffer: TextBuffer, autofill: bool) -> Status:
    """
    Validate partial input as typed, optionally autofilling literals

    Matching happens on a copy of the buffer. The copy, with its case
    normalisation, blank-to-literal rewrites and autofilled literals, is
    written back to the caller's buffer only if the input is acceptable;
    a rejected input leaves the buffer exactly as it was.

    Args:
        mask: Picture mask (must pass check_syntax(); an empty mask accepts
              everything)
        buffer: Current input; rewritten in place when acceptable
        autofill: Insert the next run of literal mask characters when the
                  input is incomplete

    Returns:
        EMPTY for an empty buffer, otherwise COMPLETE, INCOMPLETE, ERROR
        or SYNTAX

    Raises:
        MaskSyntaxError: If mask fails check_syntax()
    """
    if len(buffer) == 0:
        return Status.EMPTY

    if not mask:
        return Status.COMPLETE

    work = buffer.copy()
    matcher = Matcher(mask, work)
    result = matcher.match()

    if result is MatchStatus.INCOMPLETE and autofill:
        filled = work.copy()
        inserted = autofill_literals(
            mask, matcher.cursor.mask_pos, filled, matcher.cursor.input_pos
        )

        if inserted:
            refill = Matcher(mask, filled).match()
            LOG(f"autofilled {inserted} character(s): '{filled.text}' is {refill.value}", level=3)

            if refill not in _REJECTED:
                work = filled
                result = refill

    status = Status.from_match(result)

    if status.input_acceptable:
        buffer.replace_with(work.chars)

    return status


def run_commit(mask: str, text: str) -> Status:
    """
    Validate a finished value without autofill

    Args:
        mask: Picture mask (must pass check_syntax(); an empty mask accepts
              everything)
        text: Value to validate; never modified

    Returns:
        EMPTY for empty text, otherwise COMPLETE, INCOMPLETE, ERROR or
        SYNTAX. Only COMPLETE and EMPTY are acceptable for a finished
        value (see Status.commit_acceptable).

    Raises:
        MaskSyntaxError: If mask fails check_syntax()
    """
    if not text:
        return Status.EMPTY

    if not mask:
        return Status.COMPLETE

    return Status.from_match(Matcher(mask, TextBuffer.from_text(text)).match())
