from typing import Protocol

from src.exceptions import ConfigException, ExternalServiceException
from src.logging_ import logger
from src.modules.google_.service import GOOGLE_ERRORS, http_status
from src.modules.submissions.constants import SHEET_HEADER, TEAM_ID_COLUMN
from src.modules.submissions.schemas import Submission

FIELDS = list(Submission.model_fields)


class SubmissionStore(Protocol):
    def find_by_team_id(self, team_id: str) -> Submission | None: ...

    def append(self, submission: Submission) -> None: ...


def submission_to_row(submission: Submission) -> list[str]:
    return [getattr(submission, field) or "" for field in FIELDS]


def row_to_submission(row: list[str]) -> Submission:
    padded = list(row) + [""] * (len(FIELDS) - len(row))
    return Submission(**{field: str(padded[i] or "") for i, field in enumerate(FIELDS)})


class SheetsSubmissionStore:
    """Submissions kept as rows of one Google Sheets tab, one row per team."""

    def __init__(self, sheets, spreadsheet_id: str | None, sheet_name: str = "Submissions", share_with: str = ""):
        self.sheets = sheets
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.share_with = share_with

    @property
    def columns_range(self) -> str:
        return f"'{self.sheet_name}'!A:J"

    @property
    def header_range(self) -> str:
        return f"'{self.sheet_name}'!A1:J1"

    def _spreadsheet_id(self) -> str:
        if not self.spreadsheet_id:
            raise ConfigException("Submissions spreadsheet ID is not configured")
        return self.spreadsheet_id

    def _write_header(self, spreadsheet_id: str) -> None:
        self.sheets.spreadsheets().values().update(
            spreadsheetId=spreadsheet_id,
            range=self.header_range,
            valueInputOption="RAW",
            body={"values": [SHEET_HEADER]},
        ).execute()

    def ensure_sheet(self) -> str:
        """Create the submissions tab with its header row if they are missing. Returns the spreadsheet ID."""
        spreadsheet_id = self._spreadsheet_id()
        try:
            meta = (
                self.sheets.spreadsheets()
                .get(spreadsheetId=spreadsheet_id, fields="sheets(properties(title))")
                .execute()
            )
        except GOOGLE_ERRORS as e:
            if http_status(e) in {403, 404}:
                logger.error(f"Spreadsheet is not accessible | spreadsheet_id={spreadsheet_id} error={e}")
                raise ExternalServiceException(
                    "Submission store",
                    "Access denied or spreadsheet not found. Please ensure the spreadsheet is shared with "
                    f"the service account: {self.share_with}",
                )
            logger.error(f"Google Sheets error | spreadsheet_id={spreadsheet_id} error={e}")
            raise ExternalServiceException("Submission store", str(e))

        titles = {s["properties"]["title"] for s in meta.get("sheets", [])}
        try:
            if self.sheet_name not in titles:
                self.sheets.spreadsheets().batchUpdate(
                    spreadsheetId=spreadsheet_id,
                    body={"requests": [{"addSheet": {"properties": {"title": self.sheet_name}}}]},
                ).execute()
                self._write_header(spreadsheet_id)
                logger.info(f"Created submissions sheet | spreadsheet_id={spreadsheet_id} sheet={self.sheet_name}")
            else:
                header = (
                    self.sheets.spreadsheets()
                    .values()
                    .get(spreadsheetId=spreadsheet_id, range=self.header_range)
                    .execute()
                )
                if not header.get("values"):
                    self._write_header(spreadsheet_id)
                    logger.info(f"Wrote submissions header | spreadsheet_id={spreadsheet_id} sheet={self.sheet_name}")
        except GOOGLE_ERRORS as e:
            logger.error(f"Error ensuring sheet exists | spreadsheet_id={spreadsheet_id} error={e}")
            raise ExternalServiceException("Submission store", str(e))
        return spreadsheet_id

    def find_by_team_id(self, team_id: str) -> Submission | None:
        spreadsheet_id = self.ensure_sheet()
        try:
            response = (
                self.sheets.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=self.columns_range)
                .execute()
            )
        except GOOGLE_ERRORS as e:
            logger.error(f"Error finding row by team_id | team_id={team_id} error={e}")
            raise ExternalServiceException("Submission store", str(e))

        # first row is the header
        for row in response.get("values", [])[1:]:
            if len(row) > TEAM_ID_COLUMN and row[TEAM_ID_COLUMN] == team_id:
                return row_to_submission(row)
        return None

    def append(self, submission: Submission) -> None:
        spreadsheet_id = self.ensure_sheet()
        try:
            self.sheets.spreadsheets().values().append(
                spreadsheetId=spreadsheet_id,
                range=self.columns_range,
                valueInputOption="RAW",
                insertDataOption="INSERT_ROWS",
                body={"values": [submission_to_row(submission)]},
            ).execute()
        except GOOGLE_ERRORS as e:
            logger.error(f"Error adding row to sheet | team_id={submission.team_id} error={e}")
            raise ExternalServiceException("Submission store", str(e))
