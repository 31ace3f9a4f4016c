from datetime import datetime, timezone

from freshora.services.tracking import TRACKING_STEPS, build_tracking_steps

CREATED = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def completed_map(status):
    return {s["status"]: s["completed"] for s in build_tracking_steps(status, CREATED)}


def test_steps_follow_lifecycle_order():
    steps = build_tracking_steps("pending", CREATED)
    assert [s["status"] for s in steps] == [status for status, _ in TRACKING_STEPS]
    assert steps[0]["label"] == "Order Placed"


def test_pending_only_first_step_completed():
    done = completed_map("pending")
    assert done == {
        "pending": True,
        "confirmed": False,
        "processing": False,
        "ready_for_pickup": False,
        "out_for_delivery": False,
        "completed": False,
    }


def test_out_for_delivery_marks_earlier_steps():
    done = completed_map("out_for_delivery")
    assert done["pending"]
    assert done["confirmed"]
    assert done["processing"]
    assert done["ready_for_pickup"]
    assert done["out_for_delivery"]
    assert done["completed"] is False


def test_completed_marks_everything():
    assert all(completed_map("completed").values())


def test_cancelled_only_shows_placement():
    done = completed_map("cancelled")
    assert done["pending"] is True
    assert not any(v for k, v in done.items() if k != "pending")


def test_only_first_step_has_timestamp():
    steps = build_tracking_steps("processing", CREATED)
    assert steps[0]["timestamp"] == CREATED
    assert all(s["timestamp"] is None for s in steps[1:])
