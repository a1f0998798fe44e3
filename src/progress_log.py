from typing import Dict, List, Union

from errors import NotFound
from models import Stage


class ProgressLog:
    def __init__(self) -> None:
        self._stages: Dict[int, List[str]] = {}

    def __contains__(self, case_id: int) -> bool:
        return case_id in self._stages

    def keys(self) -> List[int]:
        return list(self._stages)

    def open(self, case_id: int) -> None:
        self._stages.setdefault(case_id, [])

    def drop(self, case_id: int) -> None:
        self._stages.pop(case_id, None)

    def append(self, case_id: int, stage: Union[Stage, str]) -> None:
        if case_id not in self._stages:
            raise NotFound(case_id)
        name = stage.value if isinstance(stage, Stage) else str(stage)
        if not name.strip():
            raise ValueError("Stage name must not be empty")
        if "\n" in name or "\r" in name:
            raise ValueError("Stage name must not contain line breaks")
        self._stages[case_id].append(name)

    def list(self, case_id: int) -> List[str]:
        if case_id not in self._stages:
            raise NotFound(case_id)
        return list(self._stages[case_id])
