"""
picmask - Picture mask validation engine

Validates text against Paradox-style picture masks, including partial
input while it is being typed.
"""

__version__ = "1.0.0"

from .lib import (
    check_syntax,
    run_interactive,
    run_commit,
    PictureValidator,
    ValidatorOptions,
    ValidatorError,
    MaskSyntaxError,
    MaskLibrary,
    LOG,
    state_connectToLogger,
)
from .models import Status, TextBuffer

__all__ = [
    "check_syntax",
    "run_interactive",
    "run_commit",
    "PictureValidator",
    "ValidatorOptions",
    "ValidatorError",
    "MaskSyntaxError",
    "MaskLibrary",
    "Status",
    "TextBuffer",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
