from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

# Strong references so the event loop does not drop running detached tasks.
_detached_tasks: set[asyncio.Task[Any]] = set()


@dataclass(frozen=True)
class StepOutcome:
    step: str
    ok: bool
    value: Any = None
    error: str | None = None


async def run_best_effort(step: str, operation: Callable[[], Awaitable[Any]]) -> StepOutcome:
    """Await operation, log the outcome under step, and never raise."""
    try:
        value = await operation()
    except Exception as e:
        logger.warning("Best-effort step failed", extra={"step": step, "error": str(e)})
        return StepOutcome(step=step, ok=False, error=str(e))

    # Notification results report failures through their value.
    if getattr(value, "success", True) is False:
        logger.info(
            "Best-effort step did not deliver",
            extra={"step": step, "reason": getattr(value, "message", None)},
        )
    else:
        logger.info("Best-effort step completed", extra={"step": step})
    return StepOutcome(step=step, ok=True, value=value)


def spawn_detached(step: str, operation: Callable[[], Awaitable[Any]]) -> None:
    """Start operation as a best-effort task. There is no join point."""
    task = asyncio.create_task(run_best_effort(step, operation))
    _detached_tasks.add(task)
    task.add_done_callback(_detached_tasks.discard)
