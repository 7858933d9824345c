"""Tests for slot usage in pyosum classes."""

import pyosum as ps


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ps.Some(42))
    assert _check_slots(ps.NoneOption())
    assert _check_slots(ps.Left(42))
    assert _check_slots(ps.Right(42))
    assert _check_slots(ps.Task.of(1))
    assert _check_slots(ps.TaskEither.right(1))
