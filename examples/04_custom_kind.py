from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from _infra import banner, parse_int

from bindable import MissingCapabilityError, builtin_registry, comprehend, gen, guard, let


@dataclass(frozen=True, slots=True)
class Logged[T]:
    """A value with the log lines that produced it."""

    value: T
    lines: tuple[str, ...] = ()


def _sequence_logged(m: Logged, f: Callable[[object], Logged]) -> Logged:
    nxt = f(m.value)
    return Logged(nxt.value, m.lines + nxt.lines)


def _inject_logged(example: Logged, value: object) -> Logged:
    return Logged(value)


def step(label: str, value: int) -> Logged[int]:
    return Logged(value, (f"{label}={value}",))


def main() -> None:
    banner("kungfu Result: short-circuits on the first Error")
    for raw in (("4", "5"), ("4", "five")):
        print(
            raw,
            "->",
            comprehend(
                gen("a", parse_int(raw[0])),
                gen("b", lambda e: parse_int(raw[1])),
                yields=lambda e: e.a * e.b,
            ),
        )

    banner("custom kind: register sequence + inject")
    registry = builtin_registry().extend(Logged, sequence=_sequence_logged, inject=_inject_logged)
    total = comprehend(
        gen("x", step("x", 2)),
        let("double", lambda e: e.x * 2),
        gen("y", lambda e: step("y", e.double + 1)),
        yields=lambda e: e.x + e.y,
        registry=registry,
    )
    print(total.value, total.lines)

    banner("custom kind: guards need empty_of")
    try:
        comprehend(
            gen("x", step("x", 2)),
            guard(lambda e: e.x > 1),
            yields=lambda e: e.x,
            registry=registry,
        )
    except MissingCapabilityError as exc:
        print("rejected:", exc)


if __name__ == "__main__":
    main()
