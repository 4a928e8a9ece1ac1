"""Status line input payload read from stdin."""

from dataclasses import dataclass
from typing import Any, Optional


class InputError(Exception):
    """Raised when the stdin payload is missing required fields."""


@dataclass(frozen=True)
class Cost:
    total_cost_usd: Optional[float] = None
    total_lines_added: Optional[int] = None
    total_lines_removed: Optional[int] = None


@dataclass(frozen=True)
class ContextWindow:
    context_window_size: Optional[int] = None


@dataclass(frozen=True)
class InputData:
    model_name: str
    current_dir: str
    transcript_path: str = ""
    cost: Optional[Cost] = None
    context_window: Optional[ContextWindow] = None

    @classmethod
    def from_dict(cls, raw: Any) -> "InputData":
        """Build InputData from the decoded stdin object.

        Raises InputError when the payload is not an object or lacks
        ``model.display_name`` / ``workspace.current_dir``.
        """
        if not isinstance(raw, dict):
            raise InputError("status line input must be a JSON object")

        model = raw.get("model")
        if not isinstance(model, dict) or not isinstance(model.get("display_name"), str):
            raise InputError("missing model.display_name")

        workspace = raw.get("workspace")
        if not isinstance(workspace, dict) or not isinstance(workspace.get("current_dir"), str):
            raise InputError("missing workspace.current_dir")

        transcript_path = raw.get("transcript_path") or ""
        if not isinstance(transcript_path, str):
            raise InputError("transcript_path must be a string")

        return cls(
            model_name=model["display_name"],
            current_dir=workspace["current_dir"],
            transcript_path=transcript_path,
            cost=_parse_cost(raw.get("cost")),
            context_window=_parse_context_window(raw.get("context_window")),
        )


def _number(value) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _line_count(value) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _parse_cost(raw) -> Optional[Cost]:
    if not isinstance(raw, dict):
        return None
    return Cost(
        total_cost_usd=_number(raw.get("total_cost_usd")),
        total_lines_added=_line_count(raw.get("total_lines_added")),
        total_lines_removed=_line_count(raw.get("total_lines_removed")),
    )


def _parse_context_window(raw) -> Optional[ContextWindow]:
    if not isinstance(raw, dict):
        return None
    size = _number(raw.get("context_window_size"))
    return ContextWindow(context_window_size=int(size) if size is not None and size > 0 else None)
