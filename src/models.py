from dataclasses import dataclass
from enum import Enum


class Stage(str, Enum):
    REGISTERED = "Case Registered"
    UNDER_INVESTIGATION = "Under Investigation"
    HEARING_SCHEDULED = "Hearing Scheduled"
    JUDGMENT_PASSED = "Judgment Passed"
    CLOSED = "Case Closed"


class UndoAction(str, Enum):
    ADDED = "ADD"
    DELETED = "DEL"


@dataclass(frozen=True)
class CaseRecord:
    id: int
    description: str
    priority: int


@dataclass(frozen=True)
class UndoEntry:
    action: UndoAction
    case_id: int

    @classmethod
    def added(cls, case_id: int) -> "UndoEntry":
        return cls(UndoAction.ADDED, case_id)

    @classmethod
    def deleted(cls, case_id: int) -> "UndoEntry":
        return cls(UndoAction.DELETED, case_id)

    def __str__(self) -> str:
        return f"{self.action.value} {self.case_id}"
