"""Error action enum for handling listing failures below the start directory."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when a nested directory cannot be listed during a walk.

    Values:
        REPORT: Yield an error node in place of the subtree and continue with its siblings
        RAISE: Abort the walk with a PathReadError
    """

    REPORT = "report"
    RAISE = "raise"
