"""
picmask - Picture mask validation engine

Validates text against Paradox-style picture masks, including partial
input while it is being typed.
"""

__version__ = "1.0.0"

from .syntax import check_syntax, syntax_diagnose, MaskSyntaxError
from .matcher import Matcher
from .engine import run_interactive, run_commit, autofill_literals
from .validator import Validator, PictureValidator, ValidatorOptions, ValidatorError
from .library import MaskLibrary, MaskLibraryError, NamedMask
from .lexer import PictureMaskLexer, mask_highlight
from .log import LOG, state_connectToLogger

__all__ = [
    "check_syntax",
    "syntax_diagnose",
    "MaskSyntaxError",
    "Matcher",
    "run_interactive",
    "run_commit",
    "autofill_literals",
    "Validator",
    "PictureValidator",
    "ValidatorOptions",
    "ValidatorError",
    "MaskLibrary",
    "MaskLibraryError",
    "NamedMask",
    "PictureMaskLexer",
    "mask_highlight",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
