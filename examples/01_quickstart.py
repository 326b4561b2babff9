from __future__ import annotations

from _infra import USERS, banner

from bindable import NOTHING, comprehend, gen, guard, let, of_nullable


def manager_line(user_id: int):
    return comprehend(
        gen("user", of_nullable(USERS.get(user_id))),
        gen("boss_id", lambda e: of_nullable(e.user.manager_id)),
        gen("boss", lambda e: of_nullable(USERS.get(e.boss_id))),
        let("name", lambda e: e.boss.name.title()),
        guard(lambda e: e.name != e.user.name),
        yields=lambda e: f"{e.user.name} reports to {e.name}",
    )


def main() -> None:
    banner("quickstart: Maybe comprehension")
    for user_id in (3, 2, 1, 99):
        print(user_id, "->", manager_line(user_id))
    assert manager_line(1) is NOTHING
    assert manager_line(99) is NOTHING


if __name__ == "__main__":
    main()
