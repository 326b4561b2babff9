from __future__ import annotations

from _infra import banner

from bindable import bind, comprehend, gen, guard


def main() -> None:
    banner("lists: nested generators with a guard")
    pairs = comprehend(
        gen("x", [1, 2, 3]),
        gen("y", lambda e: list(range(e.x, 4))),
        guard(lambda e: (e.x + e.y) % 2 == 0),
        yields=lambda e: (e.x, e.y),
    )
    print(pairs)

    banner("tuples: destructuring patterns drop mismatches")
    rows = (("a", 1), ("b", 2), ("broken",), ("c", 3))
    print(comprehend(gen(("k", "v"), rows), yields=lambda e: f"{e.k}={e.v}"))

    banner("builder: the same comprehension, fluently")
    print(
        bind("x", [1, 2, 3])
        .bind("y", lambda e: list(range(e.x, 4)))
        .where(lambda e: (e.x + e.y) % 2 == 0)
        .yields(lambda e: (e.x, e.y))
    )


if __name__ == "__main__":
    main()
