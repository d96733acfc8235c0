"""Return values for a reconcile pass."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Tuple


@dataclass(frozen=True)
class ReconcileResult:
    """What the reconcile loop should do once a pass returns."""

    requeue: bool = False
    requeue_after: timedelta = timedelta(0)


def do_not_requeue() -> Tuple[ReconcileResult, Optional[Exception]]:
    return ReconcileResult(), None


def requeue_after(duration: timedelta) -> Tuple[ReconcileResult, Optional[Exception]]:
    return ReconcileResult(requeue=True, requeue_after=duration), None


def requeue_on_err(err: Exception) -> Tuple[ReconcileResult, Optional[Exception]]:
    return ReconcileResult(), err
