"""
Syntax checker tests

Tests which masks may be installed: escapes, iteration operators, and
bracket/brace balance.
"""

import pytest

from picmask.lib.syntax import check_syntax, syntax_diagnose, MaskSyntaxError
from picmask.models.matching import SyntaxIssue


class TestValidMasks:
    """Masks that must be accepted"""

    @pytest.mark.parametrize("mask", [
        "",
        "{White,Gr{ay,een},B{l{ack,ue},rown},Red}",
        "##/##/##[##]",
        "&*?",
        "[(*3#*2[#]) ]*3#-*4#",
        "&*?;*",
        "&*?;;",
    ])
    def test_documented_examples(self, mask):
        """Masks from the mask language documentation"""
        assert check_syntax(mask) is True
        assert syntax_diagnose(mask) is None

    def test_escaped_brackets_do_not_count(self):
        """';' hides brackets and braces from the balance check"""
        assert check_syntax(";[") is True
        assert check_syntax(";{##") is True
        assert check_syntax("[;]]") is True

    def test_counted_iteration_of_group(self):
        """A nonzero count may be followed by a group"""
        assert check_syntax("*2[#]") is True
        assert check_syntax("*3{a,b}") is True

    def test_count_at_end_passes(self):
        """A dangling count is not detected here; the matcher reports it"""
        assert check_syntax("#*3") is True


class TestInvalidMasks:
    """Masks that must be rejected"""

    @pytest.mark.parametrize("mask", [
        "&*?;",
        "&*?*",
        "*",
        ";",
        "[*#",
        "{*#",
    ])
    def test_documented_rejections(self, mask):
        """Trailing operators and unbalanced groups"""
        assert check_syntax(mask) is False

    def test_escaped_escape_then_dangling_escape(self):
        """';;;' ends with an unescaped ';'"""
        assert check_syntax(";;;") is False

    @pytest.mark.parametrize("mask", ["*[#]", "*{a,b}", "*0[#]", "*00{a}"])
    def test_unbounded_iteration_of_group(self, mask):
        """Missing or zero count directly followed by a group opener"""
        assert check_syntax(mask) is False

    @pytest.mark.parametrize("mask", ["##]", "a}", "][", "}{"])
    def test_closer_without_opener(self, mask):
        """Closing bracket or brace before its opener"""
        assert check_syntax(mask) is False


class TestDiagnostics:
    """syntax_diagnose reports the rule and position"""

    def test_unbalanced_reported_at_end(self):
        """Balance problems point past the last character"""
        assert syntax_diagnose("[*#") == SyntaxIssue("unbalanced '['", 3)
        assert syntax_diagnose("{*#") == SyntaxIssue("unbalanced '{'", 3)

    def test_trailing_iteration(self):
        """Position of the dangling '*'"""
        issue = syntax_diagnose("#*")
        assert issue is not None
        assert issue.position == 1
        assert "iteration" in issue.reason

    def test_trailing_escape(self):
        """Position of the dangling ';'"""
        issue = syntax_diagnose("ab;")
        assert issue is not None
        assert issue.position == 2
        assert "escape" in issue.reason

    def test_iteration_followed_by_group(self):
        """Position of the offending '*'"""
        issue = syntax_diagnose("##*[#]")
        assert issue is not None
        assert issue.position == 2

    def test_unmatched_closer(self):
        """Position of the closer"""
        assert syntax_diagnose("a}") == SyntaxIssue("unmatched '}'", 1)


class TestMaskSyntaxError:
    """Exception raised for malformed masks"""

    def test_is_value_error(self):
        """Configuration errors are ValueErrors"""
        assert issubclass(MaskSyntaxError, ValueError)

    def test_carries_mask_and_issue(self):
        """Mask and diagnosis are available to the caller"""
        error = MaskSyntaxError("[*#")
        assert error.mask == "[*#"
        assert error.issue == SyntaxIssue("unbalanced '['", 3)
        assert "[*#" in str(error)
