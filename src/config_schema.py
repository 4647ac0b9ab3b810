from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, FilePath, SecretStr


class SettingBaseModel(BaseModel):
    model_config = ConfigDict(use_attribute_docstrings=True, extra="forbid")


class Session(SettingBaseModel):
    """Session credential settings"""

    jwt_secret: SecretStr | None = None
    "Secret used to sign session tokens. Login and protected routes answer 500 while it is not set"
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    "HMAC algorithm for session tokens"
    expires_in: int = Field(60 * 60 * 24, gt=0)
    "Session lifetime in seconds"
    cookie_name: str = "session"
    "Name of the cookie carrying the session token"
    cookie_secure: bool = True
    "Send the session cookie over HTTPS only"
    cookie_samesite: Literal["lax", "strict", "none"] = "lax"
    "SameSite policy of the session cookie. Use `none` when the frontend lives on another domain"
    cookie_domain: str | None = None
    "Domain of the session cookie (optional)"


class Google(SettingBaseModel):
    """Google API settings (service account + submissions spreadsheet)"""

    service_account_file: FilePath | None = None
    "Path to the Google service account file with credentials"
    subject: str | None = None
    "User to impersonate with domain-wide delegation (optional)"
    spreadsheet_id: str | None = None
    "ID of the spreadsheet where submissions are stored"
    sheet_name: str = "Submissions"
    "Title of the sheet (tab) with submissions"


class Firebase(SettingBaseModel):
    """Firebase project with leaders' accounts and team registrations"""

    project_id: str | None = None
    "Firebase project ID. Defaults to the project of the service account"
    database: str = "(default)"
    "Firestore database ID"
    team_registrations_collection: str = "teamRegistrations"
    "Firestore collection with team registrations"


class Settings(SettingBaseModel):
    """Settings for the application."""

    model_config = ConfigDict(validate_default=True)

    schema_: str | None = Field(None, alias="$schema")
    app_root_path: str = ""
    'Prefix for the API path (e.g. "/api")'
    cors_allow_origin_regex: str | None = None
    "Allowed origins for CORS: from which domains requests to the API are allowed. Specify as a regex: `https://.*.example.com`. No cross-origin requests are allowed when unset"
    session: Session = Session()
    "Session credential settings"
    google: Google = Google()
    "Google API settings (service account + submissions spreadsheet)"
    firebase: Firebase = Firebase()
    "Firebase project with leaders' accounts and team registrations"

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        with open(path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f)

        return cls.model_validate(yaml_config or {})

    @classmethod
    def save_schema(cls, path: Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            schema = {
                "$schema": "https://json-schema.org/draft-07/schema",
                **cls.model_json_schema(),
            }
            yaml.dump(schema, f, sort_keys=False)
