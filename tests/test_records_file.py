import pytest

import records_file as rf
from case_store import CaseStore
from errors import RecordsFormatError
from models import Stage


def _store():
    store = CaseStore()
    store.add(7, "Land dispute", 2)
    store.add(3, "Theft", 1)
    store.add_progress(7, Stage.REGISTERED)
    store.add_progress(7, "Mediation")
    return store


def test_format_records_layout():
    text = rf.format_records(_store())
    assert text == (
        "Case ID: 7\n"
        "Description: Land dispute\n"
        "Priority: 2\n"
        "Progress:\n"
        "- Case Registered\n"
        "- Mediation\n"
        "\n"
        "Case ID: 3\n"
        "Description: Theft\n"
        "Priority: 1\n"
        "Progress:\n"
        "(no progress)\n"
        "\n"
    )


def test_format_empty_store():
    assert rf.format_records(CaseStore()) == ""


def test_save_and_load_records(tmp_path, monkeypatch):
    monkeypatch.setattr(rf, "detect_encoding", lambda p: "utf-8")
    path = tmp_path / "out" / "case_records.txt"

    count = rf.save_records(_store(), str(path))
    assert count == 2

    restored = CaseStore()
    summary = rf.load_records(restored, str(path))
    assert summary == {"loaded": 2, "skipped": []}
    assert restored.get(7).description == "Land dispute"
    assert restored.list_progress(7) == ["Case Registered", "Mediation"]
    assert restored.list_progress(3) == []
    assert [r.id for r in restored.list_ordered_by_key()] == [3, 7]


def test_load_skips_existing_ids(tmp_path, monkeypatch):
    monkeypatch.setattr(rf, "detect_encoding", lambda p: "utf-8")
    path = tmp_path / "case_records.txt"
    rf.save_records(_store(), str(path))

    store = CaseStore()
    store.add(3, "Already here", 9)
    summary = rf.load_records(store, str(path))

    assert summary == {"loaded": 1, "skipped": [3]}
    assert store.get(3).description == "Already here"


def test_parse_keeps_description_spacing():
    text = "Case ID: 1\nDescription:   padded\nPriority: -4\nProgress:\n- Case Closed\n"
    cases = rf.parse_records(text)
    assert len(cases) == 1
    assert cases[0].description == "  padded"
    assert cases[0].priority == -4
    assert cases[0].stages == ["Case Closed"]


def test_parse_empty_description_and_crlf():
    text = "Case ID: 1\r\nDescription: \r\nPriority: 1\r\nProgress:\r\n(no progress)\r\n\r\n"
    cases = rf.parse_records(text)
    assert cases[0].description == ""
    assert cases[0].stages == []


@pytest.mark.parametrize(
    "text,line_no",
    [
        ("Case: 1\nDescription: a\nPriority: 1\nProgress:\n(no progress)\n", 1),
        ("Case ID: x\nDescription: a\nPriority: 1\nProgress:\n(no progress)\n", 1),
        ("Case ID: 1\nDescription: a\nPriority: high\nProgress:\n(no progress)\n", 3),
        ("Case ID: 1\nDescription: a\nPriority: 1\nStages:\n(no progress)\n", 4),
        ("Case ID: 1\nDescription: a\nPriority: 1\nProgress:\n* Filed\n", 5),
        ("Case ID: 1\nDescription: a\nPriority: 1\nProgress:\n", 5),
        ("Case ID: 1\nDescription: a\n", 1),
    ],
)
def test_parse_rejects_malformed_blocks(text, line_no):
    with pytest.raises(RecordsFormatError) as exc:
        rf.parse_records(text)
    assert exc.value.line_no == line_no


@pytest.mark.parametrize(
    "description,stage",
    [
        ("form\x0cfeed", "Page\x0cbreak"),
        ("next\x85line", "Next\x85line"),
        ("line\u2028separator", "Para\u2029graph"),
        ("vertical\x0btab", "  Appeal filed "),
    ],
)
def test_unicode_separators_survive_save_and_load(tmp_path, monkeypatch, description, stage):
    monkeypatch.setattr(rf, "detect_encoding", lambda p: "utf-8")
    path = tmp_path / "case_records.txt"
    store = CaseStore()
    store.add(1, description, 3)
    store.add_progress(1, stage)
    store.add(2, "Theft", 1)
    rf.save_records(store, str(path))

    restored = CaseStore()
    assert rf.load_records(restored, str(path)) == {"loaded": 2, "skipped": []}
    assert restored.get(1).description == description
    assert restored.list_progress(1) == [stage]
    assert restored.list_progress(2) == []
