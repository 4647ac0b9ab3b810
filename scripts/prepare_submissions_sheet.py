import sys
from pathlib import Path

# add project root to path
sys.path.append(str(Path(__file__).parents[1]))

from src.api.dependencies import get_sheets_submission_store
from src.modules.submissions.repository import SheetsSubmissionStore


def prepare_sheet(store: SheetsSubmissionStore) -> None:
    spreadsheet_id = store.ensure_sheet()
    print(f"Sheet '{store.sheet_name}' is ready in spreadsheet {spreadsheet_id}")
    print(f"Make sure the spreadsheet is shared with {store.share_with}")


if __name__ == "__main__":
    prepare_sheet(get_sheets_submission_store())
