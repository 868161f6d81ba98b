from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    id: int
    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data.get("description"),
        )
