from dataclasses import replace
from typing import Dict, Iterator, List, Union

from avl_index import AVLIndex
from errors import IdCollision, NotFound
from models import CaseRecord, Stage, UndoEntry
from priority_index import PriorityIndex
from progress_log import ProgressLog
from undo_log import UndoLog


def _check_single_line(text: str) -> None:
    if "\n" in text or "\r" in text:
        raise ValueError("Text must not contain line breaks")


class CaseStore:
    """
    Authoritative id -> record map plus the structures derived from it.

    Every mutation updates the map first, then the id index and the
    priority index, then the history log. Checks run before anything is
    touched, so a rejected call leaves every structure as it was.
    """

    def __init__(self) -> None:
        self._cases: Dict[int, CaseRecord] = {}
        self._index = AVLIndex()
        self._priorities = PriorityIndex()
        self._progress = ProgressLog()
        self._history = UndoLog()

    @property
    def index(self) -> AVLIndex:
        return self._index

    @property
    def priorities(self) -> PriorityIndex:
        return self._priorities

    @property
    def progress(self) -> ProgressLog:
        return self._progress

    @property
    def history(self) -> UndoLog:
        return self._history

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, case_id: int) -> bool:
        return case_id in self._cases

    def records(self) -> Iterator[CaseRecord]:
        return iter(list(self._cases.values()))

    def get(self, case_id: int) -> CaseRecord:
        try:
            return self._cases[case_id]
        except KeyError:
            raise NotFound(case_id) from None

    def add(self, case_id: int, description: str, priority: int) -> CaseRecord:
        if case_id in self._cases:
            raise IdCollision(case_id)
        _check_single_line(description)

        record = CaseRecord(id=case_id, description=description, priority=priority)
        self._cases[case_id] = record
        self._progress.open(case_id)
        self._index.insert(case_id)
        self._rebuild_priorities()
        self._history.record(UndoEntry.added(case_id))
        return record

    def delete(self, case_id: int) -> CaseRecord:
        if case_id not in self._cases:
            raise NotFound(case_id)

        self._history.record(UndoEntry.deleted(case_id))
        record = self._cases.pop(case_id)
        self._progress.drop(case_id)
        self._index.delete(case_id)
        self._rebuild_priorities()
        return record

    def update(self, case_id: int, description: str, priority: int) -> CaseRecord:
        current = self.get(case_id)
        _check_single_line(description)
        record = replace(current, description=description, priority=priority)
        self._cases[case_id] = record
        self._rebuild_priorities()
        return record

    def add_progress(self, case_id: int, stage: Union[Stage, str]) -> List[str]:
        self.get(case_id)
        self._progress.append(case_id, stage)
        return self._progress.list(case_id)

    def list_progress(self, case_id: int) -> List[str]:
        self.get(case_id)
        return self._progress.list(case_id)

    def list_by_priority(self) -> List[CaseRecord]:
        return [self._cases[case_id] for _, case_id in self._priorities.snapshot_ordered()]

    def list_ordered_by_key(self) -> List[CaseRecord]:
        return [self._cases[case_id] for case_id in self._index.in_order()]

    def _rebuild_priorities(self) -> None:
        self._priorities.rebuild(self._cases.values())
