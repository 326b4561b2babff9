"""Tests for the desugaring engine: tree shape, determinism, validation."""

from __future__ import annotations

import warnings

import pytest

from bindable import (
    Bind,
    Comprehension,
    Const,
    DesugarPolicy,
    HoistableGuardWarning,
    Just,
    MalformedComprehensionError,
    MissingCapabilityError,
    Name,
    Program,
    Yield,
    builtin_registry,
    desugar,
    gen,
    guard,
    hoistable_guards,
    let,
)
from bindable._helpers import referenced_names

from fakes import Box


def _scenario():
    outer_guard = guard(lambda e: len(e.x) > 1)
    assign = let("z", lambda e: e.y + 1)
    inner_guard = guard(lambda e: e.y + e.z > 21)
    inner_source = lambda e: e.x  # noqa: E731
    comprehension = Comprehension(
        (
            gen("x", [[10, 20], [30]]),
            outer_guard,
            gen("y", inner_source),
            assign,
            inner_guard,
        ),
        lambda e: (e.y, e.z),
    )
    return comprehension, outer_guard, assign, inner_guard, inner_source


class TestTreeShape:
    def test_one_bind_per_generator(self):
        comprehension, outer_guard, assign, inner_guard, inner_source = _scenario()
        program = desugar(comprehension)

        assert isinstance(program, Program)
        root = program.root
        assert isinstance(root, Bind)
        assert root.source == Const([[10, 20], [30]])
        assert root.pattern == Name("x")
        assert root.assigns == ()
        assert root.guards == (outer_guard,)

        inner = root.body
        assert isinstance(inner, Bind)
        assert inner.source is inner_source
        assert inner.assigns == (assign,)
        assert inner.guards == (inner_guard,)
        assert isinstance(inner.body, Yield)
        assert inner.body.value is comprehension.yields

    def test_guard_stays_with_the_generator_before_it(self):
        late = guard(lambda e: e.x < 2)
        program = desugar(
            Comprehension((gen("x", [1, 2]), gen("y", [3, 4]), late), lambda e: (e.x, e.y))
        )
        assert program.root.guards == ()
        assert program.root.body.guards == (late,)

    def test_assigns_and_guards_keep_declaration_order(self):
        clauses = (
            gen("x", [1]),
            let("a", lambda e: e.x),
            guard(lambda e: True),
            let("b", lambda e: e.a),
            guard(lambda e: True),
        )
        root = desugar(Comprehension(clauses, lambda e: e.b)).root
        assert root.assigns == (clauses[1], clauses[3])
        assert root.guards == (clauses[2], clauses[4])

    def test_desugaring_is_deterministic(self):
        comprehension, *_ = _scenario()
        assert desugar(comprehension) == desugar(comprehension)

    def test_program_is_reusable(self):
        comprehension, *_ = _scenario()
        program = desugar(comprehension)
        assert program.evaluate() == [(20, 21)]
        assert program.evaluate() == [(20, 21)]

    def test_programs_over_hashable_sources_hash(self):
        comprehension = Comprehension((gen("x", (1, 2)), guard(lambda e: e.x > 1)), lambda e: e.x)
        first, second = desugar(comprehension), desugar(comprehension)
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_program_uses_the_builtin_registry_by_default(self):
        comprehension, *_ = _scenario()
        assert desugar(comprehension).registry is builtin_registry()


class TestMalformed:
    def test_empty_clause_list(self):
        with pytest.raises(MalformedComprehensionError):
            Comprehension((), lambda e: 1)

    def test_must_start_with_generator(self):
        with pytest.raises(MalformedComprehensionError, match="start with a generator"):
            Comprehension((guard(lambda e: True), gen("x", [1])), lambda e: e.x)

    def test_assign_before_generator(self):
        with pytest.raises(MalformedComprehensionError):
            Comprehension((let("a", 1),), lambda e: e.a)

    def test_missing_yield(self):
        with pytest.raises(MalformedComprehensionError, match="yield"):
            Comprehension((gen("x", [1]),), None)

    def test_foreign_clause(self):
        with pytest.raises(MalformedComprehensionError):
            Comprehension((gen("x", [1]), "if x > 1"), lambda e: e.x)

    def test_desugar_rejects_non_comprehension(self):
        with pytest.raises(MalformedComprehensionError):
            desugar([gen("x", [1])])  # type: ignore[arg-type]

    def test_malformed_is_a_value_error(self):
        with pytest.raises(ValueError):
            Comprehension((), lambda e: 1)


class TestCapabilityChecks:
    def test_unknown_constant_kind_fails_while_desugaring(self):
        with pytest.raises(MissingCapabilityError) as info:
            desugar(Comprehension((gen("x", range(3)),), lambda e: e.x))
        assert info.value.kind is range
        assert info.value.capability == "sequence"

    def test_unknown_dynamic_kind_fails_when_evaluated(self):
        program = desugar(Comprehension((gen("x", lambda e: range(3)),), lambda e: e.x))
        with pytest.raises(MissingCapabilityError, match="sequence"):
            program.evaluate()

    def test_missing_inject(self):
        registry = builtin_registry().extend(Box, sequence=lambda m, f: f(m.value))
        with pytest.raises(MissingCapabilityError) as info:
            desugar(Comprehension((gen("x", Box(1)),), lambda e: e.x), registry=registry)
        assert info.value.capability == "inject"

    def test_inject_only_needed_by_innermost_generator(self):
        registry = builtin_registry().extend(Box, sequence=lambda m, f: f(m.value))
        program = desugar(
            Comprehension((gen("x", Box(1)), gen("y", lambda e: Just(e.x))), lambda e: e.y),
            registry=registry,
        )
        assert program.evaluate() == Just(1)

    def test_refutable_pattern_needs_empty_of(self, registry):
        with pytest.raises(MissingCapabilityError, match="empty_of"):
            desugar(Comprehension((gen(("a", "b"), Box((1, 2))),), lambda e: e.a), registry=registry)

    def test_checks_can_be_deferred_to_evaluation(self, registry):
        comprehension = Comprehension(
            (gen("x", Box(1)), guard(lambda e: e.x > 0)),
            lambda e: e.x,
        )
        program = desugar(
            comprehension,
            registry=registry,
            policy=DesugarPolicy(check_capabilities=False),
        )
        with pytest.raises(MissingCapabilityError):
            program.evaluate()


class TestHoistableGuards:
    def test_late_guard_is_reported(self):
        late = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: e.x < 2)),
            lambda e: (e.x, e.y),
        )
        found = hoistable_guards(late)
        assert len(found) == 1
        assert found[0].position == 2
        assert found[0].generator is late.clauses[1]
        assert "could run before its generator" in str(found[0])

    def test_early_guard_is_not_reported(self):
        early = Comprehension(
            (gen("x", [1, 2]), guard(lambda e: e.x < 2), gen("y", [3, 4])),
            lambda e: (e.x, e.y),
        )
        assert hoistable_guards(early) == ()

    def test_guard_on_dependent_assign_is_not_reported(self):
        comprehension = Comprehension(
            (gen("x", [1]), gen("y", [2]), let("z", lambda e: e.y + 1), guard(lambda e: e.z > 0)),
            lambda e: e.z,
        )
        assert hoistable_guards(comprehension) == ()

    def test_opaque_predicates_are_assumed_dependent(self):
        comprehension = Comprehension(
            (gen("x", [1]), gen("y", [2]), guard(bool)),
            lambda e: e.y,
        )
        assert hoistable_guards(comprehension) == ()

    def test_strict_policy_warns(self):
        late = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: e.x < 2)),
            lambda e: (e.x, e.y),
        )
        with pytest.warns(HoistableGuardWarning):
            program = desugar(late, policy=DesugarPolicy.strict())
        assert program.evaluate() == [(1, 3), (1, 4)]

    def test_default_policy_is_silent(self):
        late = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: e.x < 2)),
            lambda e: (e.x, e.y),
        )
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            desugar(late)

    def test_item_access_guard_is_not_reported(self):
        comprehension = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: e["y"] < 4)),
            lambda e: (e.x, e.y),
        )
        assert hoistable_guards(comprehension) == ()

    def test_guard_passing_scope_to_helper_is_not_reported(self):
        def is_small(e):
            return e.y < 4

        comprehension = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: is_small(e))),
            lambda e: (e.x, e.y),
        )
        assert hoistable_guards(comprehension) == ()

    def test_guard_reading_through_scope_methods_is_not_reported(self):
        comprehension = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: e.get("y", 0) < 4)),
            lambda e: (e.x, e.y),
        )
        assert hoistable_guards(comprehension) == ()

    def test_reads_inside_nested_generators_are_followed(self):
        late = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: any(v < e.x for v in (1, 2)))),
            lambda e: (e.x, e.y),
        )
        dependent = Comprehension(
            (gen("x", [1, 2]), gen("y", [3, 4]), guard(lambda e: any(v < e.y for v in (1, 2)))),
            lambda e: (e.x, e.y),
        )
        assert [found.position for found in hoistable_guards(late)] == [2]
        assert hoistable_guards(dependent) == ()


class TestReferencedNames:
    def test_attribute_reads(self):
        assert referenced_names(lambda e: e.x + len(e.y)) == frozenset({"x", "y"})

    def test_constants_read_nothing(self):
        assert referenced_names(Const([1])) == frozenset()

    def test_opaque_expressions(self):
        assert referenced_names(bool) is None
        assert referenced_names(lambda e: e["x"]) is None
        assert referenced_names(lambda e: dict(e)) is None
        assert referenced_names(lambda e: [v for v in e]) is None
        assert referenced_names(lambda e: (lambda: e)()) is None
