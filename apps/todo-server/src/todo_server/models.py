"""Todo record and its defaulting rules."""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import uuid


def new_uuid() -> str:
    return str(uuid.uuid4())


@dataclass
class Todo:
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False

    @classmethod
    def create(cls, data: Dict[str, Any]) -> "Todo":
        todo = cls(id=new_uuid())
        todo.replace(data)
        return todo

    def replace(self, data: Dict[str, Any]) -> None:
        # Whole-record overwrite: omitted fields are cleared, not kept
        self.title = data.get("title")
        self.description = data.get("description")
        self.completed = data.get("completed") or False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        return cls(
            id=data["id"],
            title=data.get("title"),
            description=data.get("description"),
            completed=data.get("completed") or False,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
