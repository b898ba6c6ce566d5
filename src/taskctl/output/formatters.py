"""JSON and plain-text helpers shared by the console UI."""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from taskctl.domain.tasks import Task
    from taskctl.services.result import ServiceResult


def task_payload(task: Task, **extra: Any) -> dict[str, Any]:
    """JSON-safe dict for *task*, with extra keys merged in front."""
    return {**extra, **task.model_dump(mode="json")}


def format_event(event: str, **payload: Any) -> str:
    """Serialize one display notification as a JSON document."""
    return _json.dumps({"event": event, **payload}, indent=2)


def format_failure(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a failed ServiceResult for stderr.

    Args:
        result: The failed result.
        json_output: If True, return the full result as JSON.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    message = result.error.message if result.error else "Unknown error"
    return f"ERROR: {message}"
