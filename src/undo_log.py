from typing import List

from models import UndoEntry


class UndoLog:
    """
    Push-only history of structural mutations (adds and deletes).

    Entries are kept for auditing; nothing replays or pops them.
    """

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, entry: UndoEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> List[UndoEntry]:
        return list(self._entries)
