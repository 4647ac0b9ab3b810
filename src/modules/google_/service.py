import json
from pathlib import Path

from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials as SaCredentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from src.exceptions import ConfigException
from src.logging_ import logger

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/datastore",
    "https://www.googleapis.com/auth/identitytoolkit",
]

# Raised by the discovery clients when Google cannot be reached or refuses the request
GOOGLE_ERRORS = (HttpError, GoogleAuthError, OSError)


def load_sa_creds(service_account_file: Path | None, subject: str | None = None) -> SaCredentials:
    if service_account_file is None:
        raise ConfigException("Google service account file is not configured")
    try:
        info = json.loads(service_account_file.read_text())
        creds = SaCredentials.from_service_account_info(info, scopes=SCOPES)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load service account | path={service_account_file} error={e}")
        raise ConfigException(f"Google service account file is unreadable: {service_account_file}")
    if subject:
        creds = creds.with_subject(subject)
    return creds


def sheets_service(creds: SaCredentials):
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


def firestore_service(creds: SaCredentials):
    return build("firestore", "v1", credentials=creds, cache_discovery=False)


def identitytoolkit_service(creds: SaCredentials):
    return build("identitytoolkit", "v1", credentials=creds, cache_discovery=False)


def service_email(creds: SaCredentials, subject: str | None = None) -> str:
    """Return service account email from credentials."""
    return subject or creds.service_account_email


def http_status(error: Exception) -> int | None:
    if isinstance(error, HttpError):
        return error.resp.status
    return None
