"""
Match status enums

Two enums, deliberately kept apart:

- MatchStatus: the full set of outcomes the backtracking matcher works
  with internally, including the two states that never reach a caller
  (AMBIGUOUS and INCOMPLETE_NO_FILL).
- Status: what the public entry points (run_interactive, run_commit)
  report. Each entry point maps MatchStatus onto Status explicitly.
"""

from enum import Enum


class MatchStatus(Enum):
    """
    Internal matcher outcome

    These are distinct outcomes, not a ranking:
        COMPLETE           input fully satisfies the (sub-)mask
        INCOMPLETE         input is a valid prefix, more input required
        AMBIGUOUS          complete along one branch, another branch still open
        EMPTY              no input was available at this point
        ERROR              input cannot be completed into a match
        SYNTAX             the mask is malformed (count with nothing to repeat)
        INCOMPLETE_NO_FILL incomplete, but the token before the end of input
                           could still absorb more input, so autofill must not
                           insert literals yet
    """
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    AMBIGUOUS = "ambiguous"
    EMPTY = "empty"
    ERROR = "error"
    SYNTAX = "syntax"
    INCOMPLETE_NO_FILL = "incomplete_no_fill"

    @property
    def complete(self) -> bool:
        """True for COMPLETE and AMBIGUOUS"""
        return self in (MatchStatus.COMPLETE, MatchStatus.AMBIGUOUS)

    @property
    def incomplete(self) -> bool:
        """True for INCOMPLETE and INCOMPLETE_NO_FILL"""
        return self in (MatchStatus.INCOMPLETE, MatchStatus.INCOMPLETE_NO_FILL)


class Status(Enum):
    """
    Public match outcome reported by run_interactive() and run_commit()

    Attributes:
        COMPLETE: input fully satisfies the mask
        INCOMPLETE: input is a valid prefix; more characters are required
        EMPTY: input string has length zero
        ERROR: input cannot possibly be completed into a match
        SYNTAX: the mask itself is malformed
    """
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    EMPTY = "empty"
    ERROR = "error"
    SYNTAX = "syntax"

    @classmethod
    def from_match(cls, status: MatchStatus) -> "Status":
        """
        Map an internal matcher status onto the public status

        AMBIGUOUS is reported as COMPLETE and INCOMPLETE_NO_FILL as
        INCOMPLETE; every other status maps onto its namesake.
        """
        if status is MatchStatus.AMBIGUOUS:
            return cls.COMPLETE
        if status is MatchStatus.INCOMPLETE_NO_FILL:
            return cls.INCOMPLETE
        return cls(status.value)

    @property
    def input_acceptable(self) -> bool:
        """Whether an interactive caller should accept the current input"""
        return self not in (Status.ERROR, Status.SYNTAX)

    @property
    def commit_acceptable(self) -> bool:
        """Whether a finished (committed) value is acceptable"""
        return self in (Status.COMPLETE, Status.EMPTY)
