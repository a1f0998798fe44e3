import os

import pandas as pd
from tqdm import tqdm

from case_store import CaseStore
from detect_encoding import detect_encoding
from utils import parse_int

COLUMNS = ["case_id", "description", "priority", "stage_name"]


def export_cases_csv(store: CaseStore, path: str) -> int:
    rows = []
    for record in store.records():
        stages = store.list_progress(record.id)
        rows.append(
            {
                "case_id": record.id,
                "description": record.description,
                "priority": record.priority,
                "stage_name": stages[-1] if stages else "",
            }
        )

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    pd.DataFrame(rows, columns=COLUMNS).to_csv(path, index=False, encoding="utf-8")
    return len(rows)


def normalize_cases_csv(path: str) -> pd.DataFrame:
    enc = detect_encoding(path)
    try:
        df = pd.read_csv(
            path,
            encoding=enc,
            sep=None,
            engine="python",
            dtype=str,
            keep_default_na=False,
            on_bad_lines="skip",
        )
    except Exception:
        df = pd.read_csv(
            path,
            encoding=enc,
            sep=";",
            engine="python",
            dtype=str,
            keep_default_na=False,
            on_bad_lines="skip",
        )

    df.columns = [
        c.replace("\ufeff", "").strip().lower().replace(" ", "_").replace("-", "_")
        for c in df.columns
    ]

    for col in COLUMNS:
        if col not in df.columns:
            df[col] = ""

    df = df[COLUMNS].fillna("").copy()
    for col in COLUMNS:
        df[col] = (
            df[col]
            .astype(str)
            .str.replace("\xa0", " ", regex=False)
            .str.replace(r"[\r\n]+", " ", regex=True)
            .str.strip()
        )

    df["case_id"] = df["case_id"].apply(parse_int)
    df["priority"] = df["priority"].apply(parse_int)
    df = df.dropna(subset=["case_id", "priority"])
    df = df.drop_duplicates(subset=["case_id"], keep="first")
    df = df.astype({"case_id": int, "priority": int})
    return df.reset_index(drop=True)


def import_cases_csv(store: CaseStore, path: str) -> dict:
    df = normalize_cases_csv(path)
    imported = 0
    skipped = []

    for row in tqdm(df.itertuples(index=False), total=len(df), desc="Importing cases...", ncols=100):
        case_id = int(row.case_id)
        if case_id in store:
            skipped.append(case_id)
            continue
        store.add(case_id, row.description, int(row.priority))
        if row.stage_name:
            store.add_progress(case_id, row.stage_name)
        imported += 1

    return {"imported": imported, "skipped": skipped}
