"""Task entity and its JSON record form."""

from dataclasses import dataclass
from typing import Any


class MalformedRecordError(ValueError):
    """Raised when a stored record cannot be decoded into a Task."""

    pass


# Record key -> required Python type
_RECORD_FIELDS: dict[str, type] = {
    "id": int,
    "title": str,
    "description": str,
    "completed": bool,
}


@dataclass
class Task:
    """A single to-do item.

    The id is assigned by the TaskStore and never changes afterwards;
    title, description and completed are mutated in place by the store.
    """

    id: int
    title: str
    description: str
    completed: bool = False

    def render(self) -> str:
        """Format as a single display line, e.g. ``[X] 1: Buy milk - 2 liters``."""
        marker = "X" if self.completed else " "
        return f"[{marker}] {self.id}: {self.title} - {self.description}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Decode a record produced by to_dict().

        Raises:
            MalformedRecordError: If the record is not a mapping, a key is
                missing, or a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise MalformedRecordError(
                f"Expected an object, got {type(data).__name__}"
            )
        for key, expected in _RECORD_FIELDS.items():
            if key not in data:
                raise MalformedRecordError(f"Missing key '{key}'")
            value = data[key]
            # bool is a subclass of int; reject it as an id
            if not isinstance(value, expected) or (
                expected is int and isinstance(value, bool)
            ):
                raise MalformedRecordError(
                    f"Key '{key}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        if data["id"] < 1:
            raise MalformedRecordError(f"Task id must be positive, got {data['id']}")
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            completed=data["completed"],
        )
