"""
Basic matcher tests

Tests character classes, literals, escapes, case rewriting and the blank
placeholder against the Matcher directly.
"""

import pytest

from picmask.lib.matcher import Matcher, char_upper
from picmask.lib.syntax import MaskSyntaxError
from picmask.models.matching import TextBuffer
from picmask.models.status import MatchStatus


def match(mask, text):
    """Run a matcher and return (status, rewritten text, matcher)"""
    buffer = TextBuffer.from_text(text)
    matcher = Matcher(mask, buffer)
    status = matcher.match()
    return status, buffer.text, matcher


class TestCharacterClasses:
    """The five character classes"""

    def test_digits(self):
        """'#' accepts digits only"""
        assert match("###", "123")[0] is MatchStatus.COMPLETE
        assert match("###", "12a")[0] is MatchStatus.ERROR

    def test_unicode_decimal_digit(self):
        """Any decimal digit counts, not just ASCII"""
        assert match("#", "٣")[0] is MatchStatus.COMPLETE

    def test_letters(self):
        """'?' accepts letters and leaves their case alone"""
        status, text, _ = match("??", "aB")
        assert status is MatchStatus.COMPLETE
        assert text == "aB"
        assert match("?", "1")[0] is MatchStatus.ERROR

    def test_letter_uppercased(self):
        """'&' accepts letters and upper-cases them"""
        status, text, _ = match("&&", "ab")
        assert status is MatchStatus.COMPLETE
        assert text == "AB"
        assert match("&", "1")[0] is MatchStatus.ERROR

    def test_any_uppercased(self):
        """'!' accepts anything and upper-cases it"""
        status, text, _ = match("!!!", "a1-")
        assert status is MatchStatus.COMPLETE
        assert text == "A1-"

    def test_any(self):
        """'@' accepts anything unchanged"""
        status, text, _ = match("@@", "a ")
        assert status is MatchStatus.COMPLETE
        assert text == "a "

    def test_uppercase_keeps_single_character(self):
        """Characters whose upper case is longer stay as they are"""
        assert char_upper("a") == "A"
        assert char_upper("ß") == "ß"

        status, text, _ = match("&", "ß")
        assert status is MatchStatus.COMPLETE
        assert text == "ß"


class TestLiterals:
    """Literal mask characters"""

    def test_literal_matches_case_insensitively(self):
        """Input is rewritten to the mask's spelling"""
        status, text, _ = match("abc", "ABC")
        assert status is MatchStatus.COMPLETE
        assert text == "abc"

    def test_literal_mismatch(self):
        """A different character is an error"""
        assert match("abc", "abd")[0] is MatchStatus.ERROR

    def test_blank_is_placeholder(self):
        """A blank in the input stands for the literal"""
        status, text, _ = match("(abc)", "( b )")
        assert status is MatchStatus.COMPLETE
        assert text == "(abc)"

    def test_blank_does_not_stand_for_class(self):
        """Blanks only replace literals"""
        assert match("#", " ")[0] is MatchStatus.ERROR

    def test_escaped_class_is_literal(self):
        """';#' matches '#' only"""
        assert match(";#;#", "##")[0] is MatchStatus.COMPLETE
        assert match(";#;#", "12")[0] is MatchStatus.ERROR

    def test_escaped_escape(self):
        """';;' matches ';'"""
        assert match("#;;", "1;")[0] is MatchStatus.COMPLETE


class TestInputLength:
    """Running out of input, and input left over"""

    def test_partial_input_is_incomplete(self):
        """Cursor points where the next character is expected"""
        status, _, matcher = match("###", "12")
        assert status is MatchStatus.INCOMPLETE
        assert matcher.cursor.mask_pos == 2
        assert matcher.cursor.input_pos == 2

    def test_extra_input_is_error(self):
        """Characters beyond the mask"""
        assert match("###", "1234")[0] is MatchStatus.ERROR

    def test_trailing_optional_is_ambiguous(self):
        """Input complete, but the optional part could still follow"""
        assert match("##[##]", "12")[0] is MatchStatus.AMBIGUOUS
        assert match("##[##]", "1212")[0] is MatchStatus.COMPLETE


class TestMatcherPrecondition:
    """Matching requires a checked mask"""

    @pytest.mark.parametrize("mask", ["[*#", "#*", "a;"])
    def test_malformed_mask_raises(self, mask):
        """Constructing a matcher for a malformed mask"""
        with pytest.raises(MaskSyntaxError):
            Matcher(mask, TextBuffer.from_text("1"))
