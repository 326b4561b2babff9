"""End-to-end comprehensions over every built-in kind."""

from __future__ import annotations

import pytest
from kungfu import Error, Ok

from bindable import (
    NOTHING,
    Just,
    LazySeq,
    MissingCapabilityError,
    comprehend,
    gen,
    guard,
    let,
)

from fakes import Box, PullLog


def test_maybe_guard_failure_gives_nothing():
    result = comprehend(
        gen("x", Just(1)),
        gen("y", Just(2)),
        guard(lambda e: e.x + e.y > 4),
        gen("z", Just(3)),
        yields=lambda e: e.x + e.y + e.z,
    )
    assert result is NOTHING


def test_maybe_all_present():
    result = comprehend(
        gen("x", Just(1)),
        gen("y", Just(2)),
        guard(lambda e: e.x + e.y > 2),
        gen("z", Just(3)),
        yields=lambda e: e.x + e.y + e.z,
    )
    assert result == Just(6)


def test_maybe_short_circuits_on_nothing():
    seen = []

    def later(e):
        seen.append(e.x)
        return Just(e.x)

    result = comprehend(
        gen("x", NOTHING),
        gen("y", later),
        yields=lambda e: e.y,
    )
    assert result is NOTHING
    assert seen == []


def test_list_nested_generators_assign_and_guards():
    xs = [[10, 20], [30]]
    result = comprehend(
        gen("x", xs),
        guard(lambda e: len(e.x) > 1),
        gen("y", lambda e: e.x),
        let("z", lambda e: e.y + 1),
        guard(lambda e: e.y + e.z > 21),
        yields=lambda e: (e.y, e.z),
    )
    assert result == [(20, 21)]


def test_tuple_keeps_its_kind():
    result = comprehend(
        gen("x", (1, 2)),
        gen("y", lambda e: (e.x, e.x * 10)),
        yields=lambda e: e.y,
    )
    assert result == (1, 10, 2, 20)


def test_lazy_pairs_pull_only_what_is_consumed():
    xs_log = PullLog(1)
    ys_log = PullLog(5)
    lazy_xs = xs_log.seq().take(2)
    lazy_ys = ys_log.seq().take(2)

    result = comprehend(
        gen("x", lazy_xs),
        gen("y", lazy_ys),
        yields=lambda e: (e.x, e.y),
    )

    assert isinstance(result, LazySeq)
    assert xs_log.pulled == []
    assert ys_log.pulled == []

    assert list(result) == [(1, 5), (1, 6), (2, 5), (2, 6)]
    assert xs_log.pulled == [1, 2]
    assert ys_log.pulled == [5, 6, 5, 6]


def test_lazy_infinite_source_consumed_partially():
    result = comprehend(
        gen("x", LazySeq.count(1)),
        guard(lambda e: e.x % 3 == 0),
        yields=lambda e: e.x * e.x,
    )
    assert result.take(3).to_list() == [9, 36, 81]


def test_one_shot_iterator_kind():
    result = comprehend(
        gen("x", (i for i in range(4))),
        guard(lambda e: e.x % 2 == 1),
        gen("y", lambda e: iter([e.x, -e.x])),
        yields=lambda e: e.y,
    )
    assert not isinstance(result, list)
    assert list(result) == [1, -1, 3, -3]


class TestKindWithoutEmpty:
    """Box and kungfu Result have sequence and inject but no empty_of."""

    def test_generators_and_assigns_work(self, registry):
        result = comprehend(
            gen("x", Box(1)),
            let("y", lambda e: e.x + 1),
            gen("z", lambda e: Box(e.y * 2)),
            yields=lambda e: e.z,
            registry=registry,
        )
        assert result == Box(4)

    def test_guard_is_rejected_while_desugaring(self, registry):
        with pytest.raises(MissingCapabilityError) as info:
            comprehend(
                gen("x", Box(1)),
                guard(lambda e: e.x > 0),
                yields=lambda e: e.x,
                registry=registry,
            )
        assert info.value.kind is Box
        assert info.value.capability == "empty_of"

    def test_guard_on_dynamic_source_is_rejected_when_evaluated(self, registry):
        with pytest.raises(MissingCapabilityError):
            comprehend(
                gen("x", Box(1)),
                gen("y", lambda e: Box(e.x)),
                guard(lambda e: e.y > 0),
                yields=lambda e: e.y,
                registry=registry,
            )

    def test_result_generators_and_assigns(self):
        result = comprehend(
            gen("x", Ok(1)),
            let("y", lambda e: e.x + 1),
            gen("z", lambda e: Ok(e.y * 2)),
            yields=lambda e: e.z,
        )
        match result:
            case Ok(value):
                assert value == 4
            case _:
                pytest.fail(f"expected Ok, got {result!r}")

    def test_result_error_short_circuits(self):
        failure = Error("boom")
        result = comprehend(
            gen("x", Ok(1)),
            gen("y", lambda e: failure),
            gen("z", lambda e: Ok(e.y)),
            yields=lambda e: e.z,
        )
        assert result is failure

    def test_result_guard_is_rejected(self):
        with pytest.raises(MissingCapabilityError, match="empty_of"):
            comprehend(
                gen("x", Ok(1)),
                guard(lambda e: e.x > 0),
                yields=lambda e: e.x,
            )
