"""Tests for the functor and monad laws of Option and Either."""

from collections.abc import Callable

import pytest

import pyosum as ps


def _inc(x: int) -> int:
    return x + 1


def _double(x: int) -> int:
    return x * 2


def _half_option(x: int) -> ps.Option[int]:
    return ps.Some(x // 2) if x % 2 == 0 else ps.NONE


def _half_either(x: int) -> ps.Either[str, int]:
    return ps.Right(x // 2) if x % 2 == 0 else ps.Left(f"{x} is odd")


def _positive_either(x: int) -> ps.Either[str, int]:
    return ps.Right(x) if x > 0 else ps.Left(f"{x} is not positive")


OPTIONS: list[ps.Option[int]] = [ps.Some(4), ps.Some(-3), ps.Some(0), ps.NONE]
EITHERS: list[ps.Either[str, int]] = [ps.Right(4), ps.Right(-3), ps.Left("err")]


@pytest.mark.parametrize("value", [None, 0, 1, "", "a", [], False])
def test_from_nullable_is_none_iff_none(value: object) -> None:
    """Test `from_nullable` for all kinds of inputs."""
    result = ps.from_nullable(value)
    if value is None:
        assert result is ps.NONE
    else:
        assert result == ps.Some(value)


@pytest.mark.parametrize("opt", OPTIONS)
def test_option_functor_identity(opt: ps.Option[int]) -> None:
    """Test that mapping the identity changes nothing."""
    assert opt.map(ps.identity) == opt


@pytest.mark.parametrize("opt", OPTIONS)
@pytest.mark.parametrize(("f", "g"), [(_inc, _double), (_double, _inc)])
def test_option_functor_composition(
    opt: ps.Option[int], f: Callable[[int], int], g: Callable[[int], int]
) -> None:
    """Test that mapping twice equals mapping the composition."""
    assert opt.map(f).map(g) == opt.map(lambda x: g(f(x)))


@pytest.mark.parametrize("value", [4, 3, 0])
def test_option_monad_left_identity(value: int) -> None:
    """Test that wrapping then flat mapping equals calling the function."""
    assert ps.Some(value).flat_map(_half_option) == _half_option(value)


@pytest.mark.parametrize("opt", OPTIONS)
def test_option_monad_right_identity(opt: ps.Option[int]) -> None:
    """Test that flat mapping the constructor changes nothing."""
    assert opt.flat_map(ps.Some) == opt


@pytest.mark.parametrize("opt", [ps.Some(8), ps.Some(12), ps.Some(6), ps.NONE])
def test_option_monad_associativity(opt: ps.Option[int]) -> None:
    """Test that nesting of flat_map doesn't matter."""
    assert opt.flat_map(_half_option).flat_map(_half_option) == opt.flat_map(
        lambda x: _half_option(x).flat_map(_half_option)
    )


@pytest.mark.parametrize("value", EITHERS)
def test_either_functor_identity(value: ps.Either[str, int]) -> None:
    """Test that mapping the identity changes nothing."""
    assert value.map(ps.identity) == value


@pytest.mark.parametrize("value", EITHERS)
def test_either_functor_composition(value: ps.Either[str, int]) -> None:
    """Test that mapping twice equals mapping the composition."""
    assert value.map(_inc).map(_double) == value.map(lambda x: _double(_inc(x)))


@pytest.mark.parametrize("value", [ps.Right(8), ps.Right(6), ps.Right(-4), ps.Left("e")])
def test_either_monad_associativity(value: ps.Either[str, int]) -> None:
    """Test that nesting of flat_map doesn't matter."""
    assert value.flat_map(_half_either).flat_map(_positive_either) == value.flat_map(
        lambda x: _half_either(x).flat_map(_positive_either)
    )


@pytest.mark.parametrize("steps", [0, 1, 5, 20])
def test_left_is_absorbing(steps: int) -> None:
    """Test that any finite chain keeps the identical error value."""
    error = {"code": 42}
    value: ps.Either[dict[str, int], int] = ps.Left(error)
    for i in range(steps):
        value = value.map(_inc) if i % 2 else value.flat_map(_half_either)  # type: ignore[arg-type]
    assert value.is_left()
    assert value.unwrap_left() is error
