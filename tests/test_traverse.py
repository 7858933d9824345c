"""Tests for the collection helpers."""

from collections.abc import Iterator

import pyosum as ps


def _tracked(values: list[ps.Option[int]], seen: list[int]) -> Iterator[ps.Option[int]]:
    for idx, value in enumerate(values):
        seen.append(idx)
        yield value


def test_sequence_option_all_some() -> None:
    """Test that all values are collected."""
    assert ps.sequence_option([ps.Some(1), ps.Some(2), ps.Some(3)]) == ps.Some([1, 2, 3])


def test_sequence_option_stops_at_first_none() -> None:
    """Test that the input is not consumed past the first NONE."""
    seen: list[int] = []
    values = [ps.Some(1), ps.NONE, ps.Some(3)]
    assert ps.sequence_option(_tracked(values, seen)) is ps.NONE
    assert seen == [0, 1]


def test_traverse_option() -> None:
    """Test that the function is applied lazily."""
    calls: list[str] = []
    table = {"a": 1, "b": 2}

    def _lookup(key: str) -> ps.Option[int]:
        calls.append(key)
        return ps.from_nullable(table.get(key))

    assert ps.traverse_option(["a", "b"], _lookup) == ps.Some([1, 2])
    calls.clear()
    assert ps.traverse_option(["a", "z", "b"], _lookup) is ps.NONE
    assert calls == ["a", "z"]


def test_sequence_either_returns_first_left() -> None:
    """Test that the first Left is returned unchanged."""
    first = ps.Left("first")
    assert ps.sequence_either([ps.Right(1), first, ps.Left("second")]) is first
    assert ps.sequence_either([ps.Right(1), ps.Right(2)]) == ps.Right([1, 2])
    assert ps.sequence_either([]) == ps.Right([])


def test_traverse_either() -> None:
    """Test the fallible traversal."""
    to_int = ps.catching(lambda e: type(e).__name__)(int)
    assert ps.traverse_either(["1", "2"], to_int) == ps.Right([1, 2])
    assert ps.traverse_either(["1", "x"], to_int) == ps.Left("ValueError")


def test_compact() -> None:
    """Test that NONE values are dropped."""
    assert ps.compact([ps.NONE, ps.Some(1), ps.NONE, ps.Some(2)]) == [1, 2]
    assert ps.compact([]) == []


def test_separate() -> None:
    """Test that both sides are split with their order kept."""
    assert ps.separate([ps.Left(1), ps.Right(2), ps.Left(3)]) == ([1, 3], [2])
    assert ps.separate(iter([ps.Right("a"), ps.Right("b")])) == ([], ["a", "b"])


def test_first_some() -> None:
    """Test finding the first present value."""
    assert ps.first_some([ps.NONE, ps.Some(2), ps.Some(3)]) == ps.Some(2)
    assert ps.first_some([ps.NONE, ps.NONE]) is ps.NONE
    assert ps.first_some([]) is ps.NONE
