from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SchoolEvent:
    id: str
    title: str
    date: str
    time: str
    location: str
    description: str
    color: str = "text-indigo-600"
    bg: str = "bg-indigo-50"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "time": self.time,
            "location": self.location,
            "description": self.description,
            "color": self.color,
            "bg": self.bg,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SchoolEvent":
        return cls(
            id=str(raw["id"]),
            title=str(raw.get("title", "")),
            date=str(raw.get("date", "")),
            time=str(raw.get("time", "")),
            location=str(raw.get("location", "")),
            description=str(raw.get("description", "")),
            color=str(raw.get("color", "text-indigo-600")),
            bg=str(raw.get("bg", "bg-indigo-50")),
        )
