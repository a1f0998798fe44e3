import os

from dotenv import load_dotenv

from case_csv import export_cases_csv, import_cases_csv
from case_store import CaseStore
from errors import CaseStoreError, RecordsFormatError
from records_file import load_records, save_records
from utils import STAGE_CHOICES, parse_int, stage_from_choice

DEFAULT_RECORDS_PATH = "case_records.txt"
DEFAULT_CSV_PATH = "cases.csv"

MENU = """=========================================
       CASE MANAGEMENT SYSTEM
=========================================
1. Add Case
2. Delete Case
3. Update Case
4. View All Cases
5. Add Progress
6. Show Progress
7. Show Cases Ordered by ID
8. Save All Data to File
9. Load Data from File
10. Export Cases to CSV
11. Import Cases from CSV
0. Exit
-----------------------------------------"""


def read_int(prompt: str) -> int:
    while True:
        value = parse_int(input(prompt))
        if value is not None:
            return value
        print("Invalid input. Enter number again.")


def read_line(prompt: str) -> str:
    return input(prompt)


def add_case(store: CaseStore):
    case_id = read_int("Enter Case ID: ")
    if case_id in store:
        print("Case already exists!")
        return
    description = read_line("Enter Description: ")
    priority = read_int("Enter Priority (lower = higher priority): ")
    store.add(case_id, description, priority)
    print("Case added successfully.")


def delete_case(store: CaseStore):
    store.delete(read_int("Enter Case ID to delete: "))
    print("Case deleted.")


def update_case(store: CaseStore):
    case_id = read_int("Enter Case ID to update: ")
    store.get(case_id)
    description = read_line("Enter new Description: ")
    priority = read_int("Enter new Priority: ")
    store.update(case_id, description, priority)
    print("Case updated successfully.")


def show_all(store: CaseStore):
    records = store.list_by_priority()
    if not records:
        print("No cases available.")
        return
    print("Priority Order (lower = higher priority):")
    print("-----------------------------------------")
    for record in records:
        print(f"Case ID: {record.id} | Priority: {record.priority} | Description: {record.description}")


def print_progress(case_id: int, stages: list[str]):
    print(f"Progress for Case ID {case_id}:")
    for stage in stages:
        print(f"- {stage}")


def add_progress(store: CaseStore):
    case_id = read_int("Enter Case ID to add progress to: ")
    store.get(case_id)

    print("Available stages:")
    for number, stage in STAGE_CHOICES.items():
        print(f"{number}. {stage.value}")
    choice = read_int(f"Enter stage number (1-{len(STAGE_CHOICES)}): ")
    stage = stage_from_choice(choice) or read_line("Enter custom stage: ")

    stages = store.add_progress(case_id, stage)
    print("Stage added successfully.")
    print_progress(case_id, stages)


def show_progress(store: CaseStore):
    case_id = read_int("Enter Case ID to show progress: ")
    stages = store.list_progress(case_id)
    if not stages:
        print("No progress recorded.")
        return
    print_progress(case_id, stages)


def show_ordered(store: CaseStore):
    ids = [str(record.id) for record in store.list_ordered_by_key()]
    print(f"Cases ordered by ID: {' '.join(ids)}")


def run_menu(store: CaseStore, records_path: str, csv_path: str):
    actions = {
        1: add_case,
        2: delete_case,
        3: update_case,
        4: show_all,
        5: add_progress,
        6: show_progress,
        7: show_ordered,
    }

    while True:
        print(MENU)
        choice = read_int("Enter choice: ")
        try:
            if choice == 0:
                print("Exiting... Goodbye!")
                return
            elif choice in actions:
                actions[choice](store)
            elif choice == 8:
                count = save_records(store, records_path)
                print(f"✅ Saved {count} cases to {records_path}")
            elif choice == 9:
                summary = load_records(store, records_path)
                print(f"✅ Loaded {summary['loaded']} cases from {records_path}")
                if summary["skipped"]:
                    print(f"Skipped existing cases: {summary['skipped']}")
            elif choice == 10:
                count = export_cases_csv(store, csv_path)
                print(f"✅ Exported {count} cases to {csv_path}")
            elif choice == 11:
                summary = import_cases_csv(store, csv_path)
                print(f"✅ Imported {summary['imported']} cases from {csv_path}")
                if summary["skipped"]:
                    print(f"Skipped existing cases: {summary['skipped']}")
            else:
                print("Invalid choice!")
        except (CaseStoreError, RecordsFormatError, ValueError, OSError) as error:
            print(f"❌ {error}")
        print()


def main():
    load_dotenv()
    records_path = os.getenv("CASE_RECORDS_PATH", DEFAULT_RECORDS_PATH)
    csv_path = os.getenv("CASE_CSV_PATH", DEFAULT_CSV_PATH)

    run_menu(CaseStore(), records_path, csv_path)


if __name__ == "__main__":
    main()
