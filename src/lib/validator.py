"""
Validators hosting the picture mask engine

Validator carries the policy every text field needs (is input required,
are blanks acceptable, custom error message); PictureValidator adds the
picture mask and delegates to the engine.

Two ways to validate:
    - is_valid_input(text, autofill): while typing. Accepts incomplete input
      and may rewrite or extend the text.
    - validate(text): when the value is committed. Raises ValidatorError
      unless the value is complete (or empty and allowed to be).

Example:
    >>> validator = PictureValidator("##/##/##[##]")
    >>> validator.is_valid_input("12").text
    '12/'
    >>> validator.validate("12/12")
    Traceback (most recent call last):
    ...
    ValidatorError: Input does not conform to picture '##/##/##[##]'.
"""

from enum import IntFlag
from typing import Any, Optional

from ..config import appsettings
from ..models.matching import InputCheck, TextBuffer
from ..models.status import Status
from .engine import run_commit, run_interactive
from .log import LOG
from .syntax import MaskSyntaxError, syntax_diagnose


class ValidatorOptions(IntFlag):
    """
    Options that control validator behaviour

    NEEDS_INPUT: an empty string is invalid
    BLANKS_VALID: a string of blanks counts as input
    AUTO_FILL: input may be filled with literal mask characters
    """
    NONE = 0x00
    NEEDS_INPUT = 0x01
    BLANKS_VALID = 0x02
    AUTO_FILL = 0x04


class ValidatorError(Exception):
    """Raised when a committed value is invalid"""

    def __init__(self, message: str, status: Optional[Status] = None):
        super().__init__(message)
        self.message = message
        self.status = status


def options_fromSettings(picture: bool = False) -> ValidatorOptions:
    """
    Default validator options from configuration

    Args:
        picture: Include AUTO_FILL when configured (picture validators only)
    """
    options = ValidatorOptions.NONE
    if appsettings.needs_input:
        options |= ValidatorOptions.NEEDS_INPUT
    if appsettings.blanks_valid:
        options |= ValidatorOptions.BLANKS_VALID
    if picture and appsettings.autofill:
        options |= ValidatorOptions.AUTO_FILL
    return options


class Validator:
    """
    Basic text validator: input required and blank checks

    Attributes:
        options: Combination of ValidatorOptions
        error_message: Custom message used instead of the default ones;
                       empty or blank messages are stored as None
        tag: Application data associated with the validator; unused here
    """

    def __init__(self, options: Optional[ValidatorOptions] = None):
        self.options = options if options is not None else options_fromSettings()
        self._error_message: Optional[str] = None
        self.tag: Any = None

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @error_message.setter
    def error_message(self, message: Optional[str]) -> None:
        self._error_message = message if message and message.strip() else None

    def has_option(self, option: ValidatorOptions) -> bool:
        """True if at least one of the given options is set"""
        return bool(self.options & option)

    def is_valid_input(self, text: str, autofill: bool = True) -> InputCheck:
        """
        Validate text that is still being typed

        Args:
            text: Current input
            autofill: Allow the text to be filled; only honoured if the
                      options contain AUTO_FILL

        Returns:
            InputCheck with validity and the (possibly modified) text
        """
        return self.input_check(text, autofill and self.has_option(ValidatorOptions.AUTO_FILL))

    def input_check(self, text: str, autofill: bool) -> InputCheck:
        """Interactive validation hook; the base accepts everything"""
        return InputCheck(valid=True, status=None, text=text)

    def validate(self, text: str) -> None:
        """
        Validate a committed value

        Raises:
            ValidatorError: text is invalid
        """
        self.value_check(text)

    def is_valid(self, text: str) -> bool:
        """Like validate(), but returns False instead of raising"""
        try:
            self.validate(text)
        except ValidatorError:
            return False
        return True

    def value_check(self, text: str) -> None:
        """
        Commit validation hook: input required and blank checks

        Raises:
            ValidatorError: text is empty while input is required, or blank
                            while blanks are not valid
        """
        if not text:
            if self.has_option(ValidatorOptions.NEEDS_INPUT):
                raise ValidatorError(self.message_make(appsettings.message_input_required), Status.EMPTY)
        elif not text.strip() and not self.has_option(ValidatorOptions.BLANKS_VALID):
            raise ValidatorError(self.message_make(appsettings.message_blanks_not_allowed))

    def message_make(self, default: str) -> str:
        """The custom error message if set, otherwise default"""
        return self._error_message if self._error_message is not None else default


class PictureValidator(Validator):
    """
    Validator that checks text against a picture mask

    The picture is checked when it is set: a malformed mask is a
    configuration error (MaskSyntaxError), never a validation failure.
    An empty picture accepts every input.
    """

    def __init__(self, picture: str = "", options: Optional[ValidatorOptions] = None):
        """
        Args:
            picture: Picture mask; empty accepts everything
            options: Validator options; defaults to NEEDS_INPUT | AUTO_FILL
                     (as configured in appsettings)

        Raises:
            MaskSyntaxError: picture is malformed
        """
        super().__init__(options if options is not None else options_fromSettings(picture=True))
        self._picture = ""
        self.picture = picture

    @property
    def picture(self) -> str:
        return self._picture

    @picture.setter
    def picture(self, picture: str) -> None:
        issue = syntax_diagnose(picture)
        if issue is not None:
            raise MaskSyntaxError(picture, issue)
        self._picture = picture
        LOG(f"Picture installed: {picture}", level=2)

    def input_check(self, text: str, autofill: bool) -> InputCheck:
        """
        Match partial input against the picture

        Incomplete input is valid; the returned text carries case
        normalisation and autofilled literals.
        """
        buffer = TextBuffer.from_text(text)
        status = run_interactive(self._picture, buffer, autofill)
        return InputCheck(valid=status.input_acceptable, status=status, text=buffer.text)

    def value_check(self, text: str) -> None:
        """
        Match a committed value against the picture

        Raises:
            ValidatorError: base checks failed, the picture reported a syntax
                            problem, or the value is not a complete match
        """
        super().value_check(text)

        status = run_commit(self._picture, text)
        if status.commit_acceptable:
            return

        if status is Status.SYNTAX:
            template = appsettings.message_picture_syntax
        else:
            template = appsettings.message_input_mismatch

        raise ValidatorError(
            self.message_make(appsettings.message_format(template, self._picture)), status
        )
