"""Tests for the Either type."""

import logging

import pytest

import pyosum as ps


def _fail(_: object) -> object:
    msg = "should not be called"
    raise AssertionError(msg)


def test_constructors() -> None:
    """Test the free constructors."""
    assert ps.right(5) == ps.Right(5)
    assert ps.left("x") == ps.Left("x")
    assert ps.Right(1) != ps.Left(1)


def test_try_catch_success() -> None:
    """Test that a successful thunk becomes Right."""
    assert ps.try_catch(lambda: 5, lambda e: e) == ps.Right(5)


def test_try_catch_failure() -> None:
    """Test that a raised exception becomes Left, converted by `on_error`."""

    def _raise() -> int:
        msg = "x"
        raise ValueError(msg)

    assert ps.try_catch(_raise, str) == ps.Left("x")


def test_try_catch_does_not_catch_base_exceptions() -> None:
    """Test that interrupts are not turned into values."""

    def _interrupt() -> int:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        ps.try_catch(_interrupt, str)


def test_try_catch_on_error_failure_propagates() -> None:
    """Test that an exception raised by `on_error` is not swallowed."""

    def _bad_handler(_: Exception) -> str:
        msg = "handler"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="handler"):
        ps.try_catch(lambda: 1 / 0, _bad_handler)


def test_try_catch_logs_caught_exception(caplog: pytest.LogCaptureFixture) -> None:
    """Test that the conversion is logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="pyosum")
    ps.try_catch(lambda: 1 / 0, str)
    assert any("ZeroDivisionError" in r.getMessage() for r in caplog.records)


def test_catching_decorator() -> None:
    """Test that the decorator wraps results and errors."""

    @ps.catching(lambda e: type(e).__name__)
    def _div(a: int, b: int) -> float:
        return a / b

    assert _div(6, 3) == ps.Right(2.0)
    assert _div(1, 0) == ps.Left("ZeroDivisionError")
    assert _div.__name__ == "_div"


def test_left_short_circuits_and_keeps_error() -> None:
    """Test that a Left is passed through unchanged by any chain."""
    error = ValueError("original")
    start: ps.Either[ValueError, int] = ps.Left(error)
    result = (
        start.map(_fail)
        .flat_map(_fail)  # type: ignore[arg-type]
        .map(_fail)
        .flat_map(_fail)  # type: ignore[arg-type]
    )
    assert result is start
    assert result.unwrap_left() is error


def test_first_left_wins() -> None:
    """Test that the first failing step stops the chain."""

    def _positive(x: int) -> ps.Either[str, int]:
        return ps.Right(x) if x > 0 else ps.Left(f"{x} is not positive")

    result = (
        ps.Right(1)
        .map(lambda x: x - 2)
        .flat_map(_positive)
        .map(lambda x: x - 100)
        .flat_map(lambda x: ps.Left(f"other {x}"))
    )
    assert result == ps.Left("-1 is not positive")


def test_right_map_and_flat_map() -> None:
    """Test transformations on Right."""
    assert ps.Right(2).map(lambda x: x * 3) == ps.Right(6)
    assert ps.Right(2).flat_map(lambda x: ps.Right(x + 1)) == ps.Right(3)


def test_map_left_and_bimap() -> None:
    """Test transformations of the error side."""
    assert ps.Left("boom").map_left(len) == ps.Left(4)
    assert ps.Right(1).map_left(len) == ps.Right(1)
    assert ps.Left("boom").bimap(len, str) == ps.Left(4)
    assert ps.Right(1).bimap(len, str) == ps.Right("1")


def test_fold() -> None:
    """Test terminal extraction with both branches."""
    assert ps.Right(2).fold(lambda _: -1, lambda x: x * 2) == 4
    assert ps.Left("e").fold(lambda _: -1, lambda x: x * 2) == -1


def test_get_or_else_and_unwrap_or_else() -> None:
    """Test terminal extraction with defaults."""
    assert ps.Right(1).get_or_else(0) == 1
    assert ps.Left("boom").get_or_else(0) == 0
    assert ps.Left("boom").unwrap_or_else(len) == 4


def test_or_else_recovers() -> None:
    """Test recovery from a Left."""
    assert ps.Left("boom").or_else(lambda e: ps.Right(len(e))) == ps.Right(4)
    assert ps.Right(1).or_else(_fail) == ps.Right(1)  # type: ignore[arg-type]


def test_unwrap_errors() -> None:
    """Test the raising extractors."""
    with pytest.raises(ps.EitherUnwrapError, match="boom"):
        ps.Left("boom").unwrap()
    with pytest.raises(ps.EitherUnwrapError, match="on Right"):
        ps.Right(1).unwrap_left()
    with pytest.raises(ps.EitherUnwrapError, match="need it: 'boom'"):
        ps.Left("boom").expect("need it")


def test_swap_and_options() -> None:
    """Test conversions."""
    assert ps.Right(1).swap() == ps.Left(1)
    assert ps.Left(1).swap() == ps.Right(1)
    assert ps.Right(1).to_option() == ps.Some(1)
    assert ps.Right(None).to_option() is ps.NONE
    assert ps.Left(1).to_option() is ps.NONE
    assert ps.Left(1).left_option() == ps.Some(1)
    assert ps.Right(1).left_option() is ps.NONE


def test_chain_is_deprecated_alias() -> None:
    """Test that `chain` warns and behaves like `flat_map`."""
    with pytest.warns(DeprecationWarning, match="flat_map"):
        result = ps.Right(2).chain(lambda x: ps.Right(x + 1))
    assert result == ps.Right(3)


def test_repr() -> None:
    """Test the variants representation."""
    assert repr(ps.Right(5)) == "Right(5)"
    assert repr(ps.Left("x")) == "Left('x')"
