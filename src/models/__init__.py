"""
Models package for picmask

Contains data structures and type definitions for matching and the
command line pipeline.
"""

from .state import ProgramState, pipeline
from .status import MatchStatus, Status
from .matching import Cursor, TextBuffer, SyntaxIssue, InputCheck
from .report import ValueResult, ValidationReport

__all__ = [
    "ProgramState",
    "pipeline",
    "MatchStatus",
    "Status",
    "Cursor",
    "TextBuffer",
    "SyntaxIssue",
    "InputCheck",
    "ValueResult",
    "ValidationReport",
]
