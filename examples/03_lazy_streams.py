from __future__ import annotations

from _infra import banner

from bindable import LazySeq, comprehend, desugar, gen, guard, hoistable_guards, let
from bindable.comprehension import Comprehension


def main() -> None:
    banner("lazy: infinite sources, consumer decides how much to pull")
    triples = comprehend(
        gen("c", LazySeq.count(1)),
        gen("b", lambda e: LazySeq.of(range(1, e.c))),
        gen("a", lambda e: LazySeq.of(range(1, e.b))),
        guard(lambda e: e.a * e.a + e.b * e.b == e.c * e.c),
        yields=lambda e: (e.a, e.b, e.c),
    )
    print(triples.take(4).to_list())

    banner("analysis: guards that could run earlier")
    slow = Comprehension(
        (
            gen("x", LazySeq.of(range(5))),
            gen("y", LazySeq.of(range(5))),
            let("sq", lambda e: e.x * e.x),
            guard(lambda e: e.sq > 4),
        ),
        yields=lambda e: (e.x, e.y),
    )
    for finding in hoistable_guards(slow):
        print(finding)
    print(desugar(slow).evaluate().to_list())


if __name__ == "__main__":
    main()
