# freshora/services/tracking.py
from datetime import datetime
from typing import Any, Dict, List

TRACKING_STEPS = (
    ("pending", "Order Placed"),
    ("confirmed", "Order Confirmed"),
    ("processing", "Processing"),
    ("ready_for_pickup", "Ready for Pickup"),
    ("out_for_delivery", "Out for Delivery"),
    ("completed", "Completed"),
)

_STEP_INDEX = {status: i for i, (status, _) in enumerate(TRACKING_STEPS)}


def build_tracking_steps(current_status: str, created_at: datetime | None) -> List[Dict[str, Any]]:
    """
    One entry per lifecycle stage. A step is completed when the current status
    is that step or a later one. A cancelled order only shows the placement step.
    Per-transition times are not recorded, so only the first step has a timestamp.
    """
    reached = _STEP_INDEX.get(current_status, 0)

    steps = []
    for i, (status, label) in enumerate(TRACKING_STEPS):
        steps.append(
            {
                "status": status,
                "label": label,
                "completed": i <= reached,
                "timestamp": created_at if i == 0 else None,
            }
        )
    return steps
