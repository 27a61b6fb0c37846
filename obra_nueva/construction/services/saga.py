# construction/services/saga.py
"""
Two-step sequences with a compensating action.

Step one creates something outside our database (an auth identity, say);
step two depends on it. If step two fails the compensator undoes step one.
A failing compensator is logged as an inconsistent state and the original
step-two error is still raised to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from ..exceptions import InconsistentStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompensatedStep:
    name: str
    action: Callable[[], Any]
    # Receives the action's result
    compensate: Callable[[Any], None]


def run_compensated(first: CompensatedStep, second: Callable[[Any], Any]):
    """
    Run `first.action`, then `second(first_result)`.

    Returns (first_result, second_result). Errors from the first step
    propagate untouched. On a second-step error the compensator runs once;
    the second-step error is then re-raised either way.
    """
    first_result = first.action()

    try:
        second_result = second(first_result)
    except Exception as error:
        logger.warning(f"[Saga] ↩️ '{first.name}' follow-up failed ({error}), compensating")
        try:
            first.compensate(first_result)
            logger.info(f"[Saga] 🧹 '{first.name}' compensated")
        except Exception as compensation_error:
            inconsistency = InconsistentStateError(
                f"Compensation of '{first.name}' failed",
                details=str(compensation_error),
            )
            logger.critical(
                f"[Saga] INCONSISTENT STATE: could not undo '{first.name}' "
                f"(result={first_result!r}): {compensation_error}",
                exc_info=inconsistency,
            )
        raise

    return first_result, second_result
