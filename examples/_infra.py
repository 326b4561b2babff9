from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    manager_id: int | None = None


USERS: dict[int, User] = {
    1: User(1, "ada"),
    2: User(2, "grace", manager_id=1),
    3: User(3, "linus", manager_id=2),
}


def parse_int(text: str) -> Result[int, str]:
    if text.lstrip("-").isdigit():
        return Ok(int(text))
    return Error(f"not an int: {text!r}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
