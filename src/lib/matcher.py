"""
Backtracking matcher for picture masks

Decides whether an input string is a complete match for a picture mask, a
still-valid prefix of one, or hopeless.

The matcher works with a single cursor (mask position, input position)
and three mutually recursive operations, each bounded by an explicit
upper mask position ("term"):

1. alternatives_process: try each comma-separated alternative of the
   current scope in turn, restoring the cursor before every attempt
2. tokens_scan: walk a comma-free run of tokens, consuming input
3. group_match / iteration_match: recurse into '{...}', '[...]' and
   '*N...' sub-ranges

Tie-breaks:
- An alternative that ran out of input (incomplete) beats a later
  alternative that completed after consuming less input.
- An optional group that fails is ambiguous (its absence is a legal
  completion), never an error.
- An unbounded iteration that fails on its first attempt is ambiguous
  (zero repetitions are legal); a counted iteration that runs out of
  input is incomplete.

Literal characters rewrite the input to the mask's spelling (case, and a
blank used as placeholder), '&' and '!' force upper case. All rewrites go
to the TextBuffer the matcher was created with.

Example:
    >>> buffer = TextBuffer.from_text("gr")
    >>> Matcher("{White,Gr{ay,een},Red}", buffer).match()
    <MatchStatus.INCOMPLETE: 'incomplete'>
    >>> buffer.text
    'Gr'
"""

from typing import Optional

from ..models.matching import Cursor, TextBuffer
from ..models.status import MatchStatus
from .log import LOG
from .syntax import COUNT_DIGITS, ESCAPE, MaskSyntaxError, check_syntax

ALTERNATIVE = ','


def char_upper(char: str) -> str:
    """Upper-case a single character, keeping it a single code unit"""
    upper = char.upper()
    return upper if len(upper) == 1 else char


class Matcher:
    """
    One match run of an input buffer against a picture mask

    Handles:
    - Character classes (# ? & ! @) and literals, with ';' escapes
    - Alternation groups {A,B,C} and optional groups [X]
    - Counted (*N X) and unbounded (*X) iteration
    - Partial input: reports INCOMPLETE/AMBIGUOUS instead of ERROR while the
      input can still grow into a match
    """

    def __init__(self, mask: str, buffer: TextBuffer):
        """
        Initialize matcher with a mask and the buffer to match

        Args:
            mask: Picture mask; must pass check_syntax()
            buffer: Input text; rewritten in place while matching

        Raises:
            MaskSyntaxError: If mask is malformed. Matching an unchecked mask
                             is a programming error, not an input error.
        """
        if not check_syntax(mask):
            raise MaskSyntaxError(mask)

        self.mask = mask
        self.buffer = buffer
        self.cursor = Cursor()

    def match(self) -> MatchStatus:
        """
        Match the whole buffer against the whole mask

        Returns:
            Internal status. Input left over after an otherwise successful
            match demotes the result to ERROR. After the call, self.cursor
            points where matching stopped (for INCOMPLETE: where the next
            input character is expected).
        """
        self.cursor.mask_pos = 0
        self.cursor.input_pos = 0

        result = self.alternatives_process(len(self.mask))

        if (
            result not in (MatchStatus.ERROR, MatchStatus.SYNTAX)
            and self.cursor.input_pos < len(self.buffer)
        ):
            result = MatchStatus.ERROR

        LOG(f"'{self.buffer.text}' against '{self.mask}': {result.value}", level=3)
        return result

    def alternatives_process(self, term: int) -> MatchStatus:
        """
        Try each comma-separated alternative up to term

        The first alternative that completes wins, unless an earlier
        alternative ran out of input further along the input: the
        interpretation that keeps more typed characters meaningful is
        preferred, so the result is INCOMPLETE at that earlier position.

        Args:
            term: Exclusive upper mask position of the current scope

        Returns:
            COMPLETE, AMBIGUOUS (complete, but another alternative is still
            open), INCOMPLETE (cursor left at the best incomplete
            alternative), or the failure of the last alternative
        """
        cursor = self.cursor
        start = cursor.copy()
        incomplete_at: Optional[Cursor] = None

        while True:
            result = self.tokens_scan(term)

            if (
                result.complete
                and incomplete_at is not None
                and cursor.input_pos < incomplete_at.input_pos
            ):
                result = MatchStatus.INCOMPLETE

            if result not in (MatchStatus.ERROR, MatchStatus.INCOMPLETE):
                break

            if incomplete_at is None and result is MatchStatus.INCOMPLETE:
                incomplete_at = cursor.copy()

            cursor.mask_pos = start.mask_pos
            cursor.input_pos = start.input_pos

            if not self.comma_skipTo(term):
                if incomplete_at is not None:
                    cursor.mask_pos = incomplete_at.mask_pos
                    cursor.input_pos = incomplete_at.input_pos
                    return MatchStatus.INCOMPLETE
                return result

            start.mask_pos = cursor.mask_pos

        if result is MatchStatus.COMPLETE and incomplete_at is not None:
            return MatchStatus.AMBIGUOUS

        return result

    def tokens_scan(self, term: int) -> MatchStatus:
        """
        Match a comma-free run of tokens against the input

        Args:
            term: Exclusive upper mask position of the current scope

        Returns:
            COMPLETE or AMBIGUOUS if the run was matched to its end,
            EMPTY if no input was left when the run started,
            INCOMPLETE/INCOMPLETE_NO_FILL/AMBIGUOUS if the input ran out
            part way, ERROR on a mismatch, or the failure of a nested
            group or iteration
        """
        mask = self.mask
        buffer = self.buffer
        cursor = self.cursor
        result = MatchStatus.EMPTY

        while cursor.mask_pos != term and mask[cursor.mask_pos] != ALTERNATIVE:
            if cursor.input_pos >= len(buffer):
                return self.optionals_skip(term, result)

            token = mask[cursor.mask_pos]
            char = buffer[cursor.input_pos]

            if token == '#':
                if not char.isdecimal():
                    return MatchStatus.ERROR
                cursor.input_pos += 1
                cursor.mask_pos += 1

            elif token == '?':
                if not char.isalpha():
                    return MatchStatus.ERROR
                cursor.input_pos += 1
                cursor.mask_pos += 1

            elif token == '&':
                if not char.isalpha():
                    return MatchStatus.ERROR
                buffer[cursor.input_pos] = char_upper(char)
                cursor.input_pos += 1
                cursor.mask_pos += 1

            elif token == '!':
                buffer[cursor.input_pos] = char_upper(char)
                cursor.input_pos += 1
                cursor.mask_pos += 1

            elif token == '@':
                cursor.input_pos += 1
                cursor.mask_pos += 1

            elif token == '*':
                result = self.iteration_match(term)
                if not result.complete:
                    return result

            elif token == '{':
                result = self.group_match(term)
                if not result.complete:
                    return result

            elif token == '[':
                result = self.group_match(term)
                if result.incomplete or result is MatchStatus.SYNTAX:
                    return result
                if result is MatchStatus.ERROR:
                    result = MatchStatus.AMBIGUOUS

            else:
                if token == ESCAPE:
                    cursor.mask_pos += 1
                literal = mask[cursor.mask_pos]
                if literal.upper() != char.upper() and char != ' ':
                    return MatchStatus.ERROR
                buffer[cursor.input_pos] = literal
                cursor.input_pos += 1
                cursor.mask_pos += 1

            # Remember whether the last token could have taken more input
            if result is MatchStatus.AMBIGUOUS:
                result = MatchStatus.INCOMPLETE_NO_FILL
            else:
                result = MatchStatus.INCOMPLETE

        if result is MatchStatus.INCOMPLETE_NO_FILL:
            return MatchStatus.AMBIGUOUS
        return MatchStatus.COMPLETE

    def optionals_skip(self, term: int, result: MatchStatus) -> MatchStatus:
        """
        Reclassify running out of input when only optional pieces remain

        Called when the input ends before the current run of tokens does.
        If everything from the cursor to term is optional ('[...]' groups
        and unbounded iterations), the input is acceptable as it is and the
        result becomes AMBIGUOUS.

        Args:
            term: Exclusive upper mask position of the current scope
            result: Status of the run so far

        Returns:
            AMBIGUOUS if only optional pieces remain, otherwise result
        """
        if not result.incomplete:
            return result

        mask = self.mask
        pos = self.cursor.mask_pos

        while True:
            if mask[pos] == '[':
                pos = self.groupEnd_find(term, pos)
            elif mask[pos] == '*':
                after = pos + 1
                if after < term and mask[after] in COUNT_DIGITS:
                    break
                pos = self.groupEnd_find(term, after)
            else:
                break

            if pos == term:
                return MatchStatus.AMBIGUOUS

        return result

    def groupEnd_find(self, term: int, pos: int) -> int:
        """
        Find the position just past the token or group starting at pos

        Tracks bracket and brace depth, skips escaped characters, and treats
        an iteration ('*', its count, and the repeated item) as one token.

        Args:
            term: Exclusive upper mask position; never scanned past
            pos: Position of the token to skip

        Returns:
            Position after the token (after the closing bracket/brace for a
            group), or term if the scope ends first

        Example:
            For mask "##[##]" at position 2:
            Returns 6
        """
        mask = self.mask
        brackets = 0
        braces = 0

        while True:
            if pos >= term:
                return term

            token = mask[pos]
            if token == '[':
                brackets += 1
            elif token == ']':
                brackets -= 1
            elif token == '{':
                braces += 1
            elif token == '}':
                braces -= 1
            elif token == ESCAPE:
                pos += 1
            elif token == '*':
                pos += 1
                while pos < term and mask[pos] in COUNT_DIGITS:
                    pos += 1
                pos = self.groupEnd_find(term, pos)
                if brackets > 0 or braces > 0:
                    continue
                return pos

            pos += 1
            if brackets <= 0 and braces <= 0:
                return min(pos, term)

    def comma_skipTo(self, term: int) -> bool:
        """
        Move the cursor to the start of the next alternative in scope

        Args:
            term: Exclusive upper mask position of the current scope

        Returns:
            True if the cursor now points at another alternative, False if
            the scope has no further alternative
        """
        cursor = self.cursor

        while True:
            cursor.mask_pos = self.groupEnd_find(term, cursor.mask_pos)

            if cursor.mask_pos == term:
                return False

            if self.mask[cursor.mask_pos] == ALTERNATIVE:
                cursor.mask_pos += 1
                return cursor.mask_pos < term

    def group_match(self, term: int) -> MatchStatus:
        """
        Match the '{...}' or '[...]' group at the cursor

        The caller decides what a failure means: an alternation group
        propagates it, an optional group turns ERROR into AMBIGUOUS.

        Args:
            term: Exclusive upper mask position of the enclosing scope

        Returns:
            Status of the group's alternatives. Unless incomplete, the
            cursor is moved past the closing bracket; an incomplete group
            leaves it where the next input character is expected.
        """
        cursor = self.cursor
        end = self.groupEnd_find(term, cursor.mask_pos)

        cursor.mask_pos += 1
        result = self.alternatives_process(end - 1)

        if not result.incomplete:
            cursor.mask_pos = end

        return result

    def iteration_match(self, term: int) -> MatchStatus:
        """
        Match the iteration '*[count]item' at the cursor

        With a nonzero count, item must match exactly count times. Without
        a count (or with 0), item repeats greedily while it keeps matching
        completely; zero repetitions are a legal completion.

        Args:
            term: Exclusive upper mask position of the enclosing scope

        Returns:
            SYNTAX if nothing follows the count within term. Counted:
            COMPLETE/AMBIGUOUS, or the first failing repetition's status
            (EMPTY reported as INCOMPLETE, since required repetitions are
            missing). Unbounded: the status of the last attempt, with
            EMPTY and ERROR turned into AMBIGUOUS.
        """
        mask = self.mask
        cursor = self.cursor

        cursor.mask_pos += 1  # Skip '*'

        count = 0
        while cursor.mask_pos < term and mask[cursor.mask_pos] in COUNT_DIGITS:
            count = count * 10 + int(mask[cursor.mask_pos])
            cursor.mask_pos += 1

        if cursor.mask_pos == term:
            LOG(f"iteration without item in '{mask}' at {cursor.mask_pos}", level=3)
            return MatchStatus.SYNTAX

        item = cursor.mask_pos
        end = self.groupEnd_find(term, item)
        result = MatchStatus.ERROR

        if count:
            for _ in range(count):
                cursor.mask_pos = item
                result = self.alternatives_process(end)

                if not result.complete:
                    if result is MatchStatus.EMPTY:
                        return MatchStatus.INCOMPLETE
                    return result
        else:
            while True:
                cursor.mask_pos = item
                consumed = cursor.input_pos
                result = self.alternatives_process(end)

                # A complete pass that consumed nothing would repeat forever
                if not result.complete or cursor.input_pos == consumed:
                    break

            if result in (MatchStatus.EMPTY, MatchStatus.ERROR):
                result = MatchStatus.AMBIGUOUS

        cursor.mask_pos = end
        return result
