"""
Interactive validation tests

Tests run_interactive(): partial input, case rewriting, autofill of literal
mask characters, and that rejected input leaves the buffer untouched.
"""

import pytest

from picmask.lib.engine import autofill_literals, run_interactive
from picmask.lib.syntax import MaskSyntaxError
from picmask.models.matching import TextBuffer
from picmask.models.status import Status

DATE = "##/##/##[##]"
COLOURS = "{White,Gr{ay,een},B{l{ack,ue},rown},Red}"


def interactive(mask, text, autofill=True):
    """Run run_interactive() and return (status, resulting text)"""
    buffer = TextBuffer.from_text(text)
    status = run_interactive(mask, buffer, autofill)
    return status, buffer.text


class TestAutofillLiterals:
    """Copying literal runs into the buffer"""

    def test_inserts_up_to_special_token(self):
        """Stops at the next class character"""
        buffer = TextBuffer.from_text("12")
        assert autofill_literals("##/##", 2, buffer, 2) == 1
        assert buffer.text == "12/"

    def test_escape_is_dropped(self):
        """Escaped characters are copied without ';'"""
        buffer = TextBuffer.from_text("(")
        assert autofill_literals("(;#)##", 1, buffer, 1) == 2
        assert buffer.text == "(#)"

    def test_nothing_to_insert(self):
        """Special token at the cursor"""
        buffer = TextBuffer.from_text("1")
        assert autofill_literals("##", 1, buffer, 1) == 0
        assert buffer.text == "1"


class TestDateAutofill:
    """Typing a date"""

    @pytest.mark.parametrize("typed, expected", [
        ("1", "1"),
        ("12", "12/"),
        ("12/", "12/"),
        ("12/1", "12/1"),
        ("12/12", "12/12/"),
        ("12/12/1", "12/12/1"),
        ("12/12/12", "12/12/12"),
        ("12/12/121", "12/12/121"),
        ("12/12/1212", "12/12/1212"),
    ])
    def test_valid_while_typing(self, typed, expected):
        """Separators are filled in as soon as they are due"""
        status, text = interactive(DATE, typed)
        assert status.input_acceptable
        assert text == expected

    def test_complete_dates(self):
        """Two and four digit years"""
        assert interactive(DATE, "12/12/12")[0] is Status.COMPLETE
        assert interactive(DATE, "12/12/1212")[0] is Status.COMPLETE

    def test_partial_year(self):
        """Three year digits are still a valid prefix"""
        assert interactive(DATE, "12/12/121")[0] is Status.INCOMPLETE

    @pytest.mark.parametrize("typed", ["A", "1a", "12/12/12121"])
    def test_invalid_left_unchanged(self, typed):
        """Rejected input is returned exactly as typed"""
        status, text = interactive(DATE, typed)
        assert status is Status.ERROR
        assert text == typed

    def test_without_autofill(self):
        """Nothing is inserted"""
        assert interactive(DATE, "12", autofill=False) == (Status.INCOMPLETE, "12")
        assert interactive(DATE, "12/", autofill=False) == (Status.INCOMPLETE, "12/")


class TestColourAutofill:
    """Typing one of a set of words"""

    @pytest.mark.parametrize("typed, expected", [
        ("W", "White"),
        ("w", "White"),
        ("Gr", "Gr"),
        ("gr", "Gr"),
        ("B", "B"),
        ("b", "B"),
        ("Bl", "Bl"),
        ("Blu", "Blue"),
        ("Br", "Brown"),
        ("r", "Red"),
    ])
    def test_valid_while_typing(self, typed, expected):
        """Unique continuations are filled, branch points are not"""
        status, text = interactive(COLOURS, typed)
        assert status.input_acceptable
        assert text == expected

    @pytest.mark.parametrize("typed", ["Grr", "l", "Bli", "Gray1"])
    def test_invalid_left_unchanged(self, typed):
        """Rejected input is not rewritten"""
        status, text = interactive(COLOURS, typed)
        assert status is Status.ERROR
        assert text == typed

    def test_case_rewritten_without_autofill(self):
        """Rewrites apply to accepted input even without autofill"""
        assert interactive(COLOURS, "w", autofill=False) == (Status.INCOMPLETE, "W")
        assert interactive(COLOURS, "Blu", autofill=False) == (Status.INCOMPLETE, "Blu")


class TestInteractiveEdgeCases:
    """Empty input, empty mask, blanks, ambiguity"""

    def test_empty_buffer(self):
        """Nothing typed yet"""
        assert interactive(DATE, "") == (Status.EMPTY, "")

    def test_empty_mask_accepts_anything(self):
        """No picture, no restriction"""
        assert interactive("", "anything") == (Status.COMPLETE, "anything")

    def test_literal_only_mask(self):
        """The rest of a literal mask is filled at once"""
        assert interactive("ABC", "a") == (Status.COMPLETE, "ABC")

    def test_blank_placeholder(self):
        """Blanks become literals"""
        assert interactive("ABC", "A C") == (Status.COMPLETE, "ABC")
        assert interactive("ABC", " ", autofill=False) == (Status.INCOMPLETE, "A")

    def test_escaped_literal_filled(self):
        """Autofill inserts the escaped character itself"""
        assert interactive("(;#)##", "(") == (Status.INCOMPLETE, "(#)")

    def test_ambiguous_input_not_filled(self):
        """Complete along one branch: nothing is inserted"""
        assert interactive("{abc,a}", "a") == (Status.COMPLETE, "a")

    def test_repetition_end_not_filled(self):
        """The repetition could still take more input"""
        assert interactive("*#-", "12") == (Status.INCOMPLETE, "12")

    def test_uppercased_name(self):
        """First letter upper-cased, the rest left alone"""
        assert interactive("&*?", "hello") == (Status.COMPLETE, "Hello")
        assert interactive("&*?", "h1")[0] is Status.ERROR

    def test_time_separator(self):
        """Separator after a group"""
        assert interactive("{##}:{##}[:{##}]", "12") == (Status.INCOMPLETE, "12:")

    def test_buffer_object_is_kept(self):
        """The caller's buffer is updated in place"""
        buffer = TextBuffer.from_text("12")
        chars = buffer.chars
        run_interactive(DATE, buffer, True)
        assert buffer.chars is chars
        assert buffer.text == "12/"

    def test_malformed_mask_raises(self):
        """Unchecked masks are refused"""
        with pytest.raises(MaskSyntaxError):
            run_interactive("[#", TextBuffer.from_text("1"), True)


class TestPrefixStability:
    """Autofill only ever appends"""

    @pytest.mark.parametrize("mask, typed", [
        (DATE, "12"),
        (DATE, "12/12"),
        (COLOURS, "Bro"),
        (COLOURS, "Whi"),
        ("{##}:{##}[:{##}]", "12:30"),
        ("[(*3#*2[#]) ]*3#-*4#", "555"),
    ])
    def test_typed_text_is_prefix(self, mask, typed):
        """Accepted results start with what was typed"""
        status, text = interactive(mask, typed)
        assert status.input_acceptable
        assert text.startswith(typed)
