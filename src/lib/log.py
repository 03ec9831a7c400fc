"""
Centralized logging using Loguru with context-aware verbosity.

The matching engine is called once per keystroke, so it must stay silent
unless someone asked for output. LOG() only emits when a ProgramState with
a high enough verbosity has been connected to the current context; library
callers that never connect a state get no log output at all.

Usage:
    from picmask.lib.log import LOG, state_connectToLogger

    # At the start of a pipeline stage:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Validated 12 values", level=1)
    LOG("Mask installed: ##/##/##[##]", level=2)
    LOG("group ends at 12, process [9, 11)", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <8}</cyan>:"
    "<cyan>{function: <22}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: Object with a verbosity attribute (normally ProgramState);
               None disconnects and silences LOG()
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v): mask installation, per-value results
        3 = Trace (-vv): matcher decisions
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
