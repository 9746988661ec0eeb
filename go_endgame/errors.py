"""
Error hierarchy for the scoring phase.

All custom exceptions inherit from EndgameError so callers can catch the
whole family at the phase boundary.

Usage:
    from go_endgame.errors import ActionAfterTerminationError

    try:
        controller.make_action(player_id, Pass())
    except ActionAfterTerminationError as e:
        logger.warning(f"Rejected action: {e.message}")
"""
from __future__ import annotations
from typing import Any, Dict, Optional

__all__ = [
    "ActionAfterTerminationError",
    "ConfigError",
    "EndgameError",
    "InvalidStateError",
    "PointOutOfRangeError",
    "SnapshotVersionError",
]


class EndgameError(Exception):
    """Base exception for all scoring-phase errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "ENDGAME_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class PointOutOfRangeError(EndgameError, ValueError):
    """A Place action addressed a coordinate that is not on the board.

    The scoring phase does not raise it: it logs the error and reports its
    code as the reason of a NoChange transition, so callers can tell it
    apart from the benign "no group at this point" case.
    """
    code: str = "POINT_OUT_OF_RANGE"

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"point ({x}, {y}) is outside the {width}x{height} board",
            context={"x": x, "y": y, "width": width, "height": height},
        )


class ActionAfterTerminationError(EndgameError):
    """An action was delivered to a phase that already finished."""
    code: str = "ACTION_AFTER_TERMINATION"


class InvalidStateError(EndgameError):
    """Phase stack or shared context is in a configuration that should not happen."""
    code: str = "INVALID_STATE"


class SnapshotVersionError(EndgameError):
    """Serialized snapshot carries a version this build cannot read."""
    code: str = "SNAPSHOT_VERSION"


class ConfigError(EndgameError):
    """Position/config file is malformed."""
    code: str = "CONFIG_ERROR"
