from __future__ import annotations

from typing import Sequence

from .model import Teacher


def search_teachers(teachers: Sequence[Teacher], text: str) -> list[Teacher]:
    needle = (text or "").strip().lower()
    if not needle:
        return list(teachers)
    return [t for t in teachers if needle in t.name.lower() or needle in t.department.lower()]
