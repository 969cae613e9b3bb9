import json
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE = "New Task"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "inprogress"
    DONE = "done"


class ParsedCommand(BaseModel):
    """Structured task fields extracted from one voice transcript.

    Serialized with camelCase keys (``dueDate``, ``autoCreate``) so the
    record can be handed straight to a task-creation API.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    transcript: str
    title: str = Field(default=DEFAULT_TITLE, min_length=1)
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = Field(default=None, alias="dueDate")
    auto_create: bool = Field(default=False, alias="autoCreate")

    @property
    def has_due_date(self) -> bool:
        return self.due_date is not None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-shaped record (ISO-8601 due date or None)."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
