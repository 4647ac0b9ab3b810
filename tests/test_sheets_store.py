import importlib.util
from pathlib import Path

import pytest

from src.exceptions import ConfigException, ExternalServiceException
from src.modules.submissions.constants import SHEET_HEADER
from src.modules.submissions.repository import SheetsSubmissionStore, row_to_submission, submission_to_row
from src.modules.submissions.schemas import Submission
from tests.fakes import FakeSheets, http_error

SUBMISSION = Submission(
    submission_time="2025-03-14 09:26:53",
    team_name="Analytical Engines",
    team_id="T1",
    leader_name="Ada Lovelace",
    leader_phone="+10000000000",
    leader_email="leader@example.com",
    github_link="https://github.com/x/y",
    ppt_link="https://docs.example/p",
    video_link="https://youtu.be/v",
    description="demo",
)


def make_store(sheets: FakeSheets, spreadsheet_id: str | None = "sheet-id") -> SheetsSubmissionStore:
    return SheetsSubmissionStore(sheets, spreadsheet_id, share_with="bot@project.iam.gserviceaccount.com")


def test_missing_tab_is_created_with_header():
    sheets = FakeSheets(tabs={"Sheet1": []})

    assert make_store(sheets).find_by_team_id("T1") is None
    assert sheets.tabs["Submissions"] == [SHEET_HEADER]
    assert ("batchUpdate", "sheet-id") in sheets.calls


def test_header_is_written_into_empty_tab():
    sheets = FakeSheets(tabs={"Submissions": []})

    make_store(sheets).ensure_sheet()

    assert sheets.tabs["Submissions"] == [SHEET_HEADER]
    assert ("batchUpdate", "sheet-id") not in sheets.calls


def test_existing_header_is_kept():
    header = ["Time", *SHEET_HEADER[1:]]
    sheets = FakeSheets(tabs={"Submissions": [header]})

    make_store(sheets).ensure_sheet()

    assert sheets.tabs["Submissions"] == [header]
    assert not any(call[0] == "values.update" for call in sheets.calls)


def test_append_then_find():
    sheets = FakeSheets(tabs={"Submissions": [SHEET_HEADER]})
    store = make_store(sheets)

    store.append(SUBMISSION)

    assert sheets.tabs["Submissions"][1] == [
        "2025-03-14 09:26:53",
        "Analytical Engines",
        "T1",
        "Ada Lovelace",
        "+10000000000",
        "leader@example.com",
        "https://github.com/x/y",
        "https://docs.example/p",
        "https://youtu.be/v",
        "demo",
    ]
    assert store.find_by_team_id("T1") == SUBMISSION
    assert store.find_by_team_id("T2") is None


def test_find_matches_team_id_column_only():
    sheets = FakeSheets(tabs={"Submissions": [SHEET_HEADER, ["2025-01-01 00:00:00", "T1", "T7"], ["x", "y", "T1"]]})

    found = make_store(sheets).find_by_team_id("T1")

    assert found is not None
    assert found.submission_time == "x"
    # trailing empty cells are not returned by the API
    assert found.description == ""


def test_header_row_is_never_a_match():
    sheets = FakeSheets(tabs={"Submissions": [SHEET_HEADER]})

    assert make_store(sheets).find_by_team_id("Team id") is None


def test_row_mapping_keeps_column_order():
    assert row_to_submission(submission_to_row(SUBMISSION)) == SUBMISSION


@pytest.mark.parametrize("status", [403, 404])
def test_inaccessible_spreadsheet(status):
    store = make_store(FakeSheets(error=http_error(status)))

    with pytest.raises(ExternalServiceException) as exc_info:
        store.find_by_team_id("T1")

    assert "bot@project.iam.gserviceaccount.com" in exc_info.value.details[0]


def test_sheets_outage():
    store = make_store(FakeSheets(error=http_error(500)))

    with pytest.raises(ExternalServiceException):
        store.append(SUBMISSION)


def test_network_failure():
    store = make_store(FakeSheets(error=TimeoutError("timed out")))

    with pytest.raises(ExternalServiceException):
        store.find_by_team_id("T1")


def test_missing_spreadsheet_id():
    with pytest.raises(ConfigException):
        make_store(FakeSheets(), spreadsheet_id=None).find_by_team_id("T1")


def load_prepare_script():
    path = Path(__file__).parents[1] / "scripts" / "prepare_submissions_sheet.py"
    spec = importlib.util.spec_from_file_location("prepare_submissions_sheet", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_prepare_sheet_script(capsys):
    sheets = FakeSheets(tabs={"Sheet1": []})

    load_prepare_script().prepare_sheet(make_store(sheets))

    assert sheets.tabs["Submissions"] == [SHEET_HEADER]
    out = capsys.readouterr().out
    assert "Sheet 'Submissions' is ready in spreadsheet sheet-id" in out
    assert "bot@project.iam.gserviceaccount.com" in out
