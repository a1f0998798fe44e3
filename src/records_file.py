"""
Plain-text case records: one block per case, blocks separated by a blank line.

    Case ID: 7
    Description: Land dispute
    Priority: 2
    Progress:
    - Case Registered
    - Hearing Scheduled

A case without stages carries the line "(no progress)" under "Progress:".
"""
import os
from dataclasses import dataclass, field
from typing import List

from case_store import CaseStore
from detect_encoding import detect_encoding
from errors import RecordsFormatError
from utils import parse_int

NO_PROGRESS = "(no progress)"


@dataclass
class ParsedCase:
    id: int
    description: str
    priority: int
    stages: List[str] = field(default_factory=list)


def format_records(store: CaseStore) -> str:
    lines: List[str] = []
    for record in store.records():
        lines.append(f"Case ID: {record.id}")
        lines.append(f"Description: {record.description}")
        lines.append(f"Priority: {record.priority}")
        lines.append("Progress:")
        stages = store.list_progress(record.id)
        if not stages:
            lines.append(NO_PROGRESS)
        lines.extend(f"- {stage}" for stage in stages)
        lines.append("")
    return "".join(line + "\n" for line in lines)


def save_records(store: CaseStore, path: str) -> int:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(format_records(store))
    return len(store)


def _field(line: str, line_no: int, label: str) -> str:
    prefix = f"{label}:"
    if not line.startswith(prefix):
        raise RecordsFormatError(line_no, f"expected '{prefix}'")
    value = line[len(prefix):]
    return value[1:] if value.startswith(" ") else value


def _int_field(line: str, line_no: int, label: str) -> int:
    value = parse_int(_field(line, line_no, label))
    if value is None:
        raise RecordsFormatError(line_no, f"'{label}' must be an integer")
    return value


def parse_records(text: str) -> List[ParsedCase]:
    # only "\n" ends a line; other separators may appear inside a value
    lines = text.replace("\r\n", "\n").split("\n")
    cases: List[ParsedCase] = []
    i = 0

    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue
        if i + 3 >= len(lines):
            raise RecordsFormatError(i + 1, "incomplete case block")

        case = ParsedCase(
            id=_int_field(lines[i], i + 1, "Case ID"),
            description=_field(lines[i + 1], i + 2, "Description"),
            priority=_int_field(lines[i + 2], i + 3, "Priority"),
        )
        if lines[i + 3].rstrip() != "Progress:":
            raise RecordsFormatError(i + 4, "expected 'Progress:'")
        i += 4

        if i < len(lines) and lines[i].rstrip() == NO_PROGRESS:
            i += 1
        else:
            while i < len(lines) and lines[i].strip():
                if not lines[i].startswith("- ") or not lines[i][2:].strip():
                    raise RecordsFormatError(i + 1, "expected a '- <stage>' line")
                case.stages.append(lines[i][2:])
                i += 1
            if not case.stages:
                raise RecordsFormatError(i + 1, f"expected stages or '{NO_PROGRESS}'")

        if i < len(lines) and lines[i].strip():
            raise RecordsFormatError(i + 1, "expected a blank line between cases")
        cases.append(case)

    return cases


def read_records(path: str) -> List[ParsedCase]:
    encoding = detect_encoding(path)
    with open(path, "r", encoding=encoding) as f:
        return parse_records(f.read())


def load_records(store: CaseStore, path: str) -> dict:
    loaded = 0
    skipped = []
    for case in read_records(path):
        if case.id in store:
            skipped.append(case.id)
            continue
        store.add(case.id, case.description, case.priority)
        for stage in case.stages:
            store.add_progress(case.id, stage)
        loaded += 1
    return {"loaded": loaded, "skipped": skipped}
