"""Clock tools — wall-clock time and instant timing.

``current_time`` reports local wall-clock time.  ``create_instant`` and
``elapsed_since`` use an :class:`InstantRegistry` so an agent can measure
how long a user took to answer a question.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from interview_tool.tools.base import require_str

if TYPE_CHECKING:
    from interview_tool.instants import InstantRegistry

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class CurrentTimeTool:
    """Report the current local time.

    Implements the :class:`Tool` protocol.
    """

    def __init__(self, *, now: Callable[[], datetime] = datetime.now) -> None:
        self._now = now

    @property
    def name(self) -> str:
        return "current_time"

    @property
    def description(self) -> str:
        return "Get the current local time, formatted as 'YYYY-MM-DD HH:MM:SS'."

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def execute(self, **kwargs: Any) -> str:
        return self._now().strftime(TIME_FORMAT)


class CreateInstantTool:
    """Record a labelled point in time.

    Implements the :class:`Tool` protocol.
    """

    def __init__(self, instants: InstantRegistry) -> None:
        self._instants = instants

    @property
    def name(self) -> str:
        return "create_instant"

    @property
    def description(self) -> str:
        return "Record a labelled point in time and return its instance_id."

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "label": {
                    "type": "string",
                    "description": "Free-form label, e.g. the question being asked.",
                },
            },
            "required": ["label"],
        }

    async def execute(self, **kwargs: Any) -> str:
        label = require_str(kwargs, "label", allow_empty=True)
        return self._instants.create(label)


class ElapsedSinceTool:
    """Report time elapsed since a recorded instant.

    Implements the :class:`Tool` protocol.
    """

    def __init__(self, instants: InstantRegistry) -> None:
        self._instants = instants

    @property
    def name(self) -> str:
        return "elapsed_since"

    @property
    def description(self) -> str:
        return (
            "Compute the time elapsed since the given instance_id, "
            "formatted as 'mm:ss'. Use it to check whether an answer "
            "took too long."
        )

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "instance_id": {
                    "type": "string",
                    "description": "Identifier returned by create_instant.",
                },
            },
            "required": ["instance_id"],
        }

    async def execute(self, **kwargs: Any) -> Sequence[str]:
        instance_id = require_str(kwargs, "instance_id")
        label, elapsed = self._instants.elapsed(instance_id)
        return [f"instance label: {label}", f"time has elapsed {elapsed}"]
