from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated

from structcopy import (
    CopyDisabled,
    StructCopyable,
    clone,
    copy_similar_to,
    ignore_underscores,
    structurally_equal,
)


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Task(StructCopyable):
    """Editable task record.

    The audit trail is never copied: a clone starts with an empty history.
    """

    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    assignee: str | None = None
    history: Annotated[list[str], CopyDisabled()] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return self.status is TaskStatus.COMPLETED


@dataclass
class TaskCard:
    """Flat view rendered by a UI."""

    description: str = ""
    done: bool = False
    assignee: str | None = None


@dataclass
class TaskRow:
    """Storage row with snake_case columns."""

    task_description: str = ""
    task_assignee: str | None = None


@dataclass
class TaskPayload:
    taskDescription: str = ""  # noqa: N815
    taskAssignee: str | None = None  # noqa: N815


def main() -> None:
    task = Task("Collect data", assignee="ada")
    task.history.append("created")

    # Edit a copy, then commit or throw it away
    draft = task.clone()
    draft.status = TaskStatus.COMPLETED
    print(f"Draft differs from task: {not draft.structurally_equals(task)}")
    task.copy_from(draft)
    print(f"Committed: done={task.done}, history={task.history}")

    # Project onto a view; the read-only property feeds a plain field
    card = TaskCard()
    copy_similar_to(task, card)
    print(f"Card: {card}")

    # Rename-tolerant mapping between storage and wire formats
    row = TaskRow("Analyze data", "grace")
    payload = TaskPayload()
    copy_similar_to(row, payload, name_matcher=ignore_underscores)
    print(f"Payload: {payload}")

    backup = clone(row)
    print(f"Backup equal to row: {structurally_equal(backup, row)}")


if __name__ == "__main__":
    main()
