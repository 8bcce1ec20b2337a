"""
EE Toolbox - Exceptions

Only two conditions escape a calculation as exceptions:

  InputClosedError   the input stream ended; nothing more can be asked, so
                     main() exits with EXIT_INPUT_CLOSED.
  ComputationError   a formula hit a degenerate case (e.g. a zero reciprocal
                     sum); the calculation is aborted without a result.

Bad keyboard input never raises: the console re-prompts in a loop.
"""


class ToolboxError(Exception):
    """Base class for toolbox errors."""


class InputClosedError(ToolboxError):
    """Raised when the console runs out of input lines."""


class ComputationError(ToolboxError):
    """Raised when a calculation cannot produce a finite result."""
