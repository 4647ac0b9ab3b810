__all__ = [
    "VerifyTokenDep",
    "SessionIssuerDep",
    "SessionTokensDep",
    "SubmissionServiceDep",
    "TeamDirectoryDep",
    "get_session_tokens",
    "get_session_issuer",
    "get_identity_provider",
    "get_team_directory",
    "get_submission_store",
    "get_sheets_submission_store",
    "get_submission_service",
]

from functools import lru_cache
from typing import Annotated

from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.config import settings
from src.modules.auth.schemas import IdentityClaim
from src.modules.auth.service import SessionIssuer, SessionTokens
from src.modules.google_.service import (
    firestore_service,
    identitytoolkit_service,
    load_sa_creds,
    service_email,
    sheets_service,
)
from src.modules.identity.repository import IdentityProvider, IdentityToolkitProvider
from src.modules.submissions.repository import SheetsSubmissionStore, SubmissionStore
from src.modules.submissions.service import SubmissionService
from src.modules.teams.repository import FirestoreTeamDirectory, TeamDirectory

bearer_scheme = HTTPBearer(
    scheme_name="Session token",
    description="Token from `POST /users/auth`",
    bearerFormat="JWT",
    auto_error=False,
)


@lru_cache(maxsize=1)
def get_sa_creds():
    return load_sa_creds(settings.google.service_account_file, settings.google.subject)


def firebase_project_id() -> str:
    return settings.firebase.project_id or get_sa_creds().project_id


@lru_cache(maxsize=1)
def get_identity_provider() -> IdentityProvider:
    return IdentityToolkitProvider(identitytoolkit_service(get_sa_creds()), firebase_project_id())


@lru_cache(maxsize=1)
def get_team_directory() -> TeamDirectory:
    return FirestoreTeamDirectory(
        firestore_service(get_sa_creds()),
        project_id=firebase_project_id(),
        database=settings.firebase.database,
        collection=settings.firebase.team_registrations_collection,
    )


@lru_cache(maxsize=1)
def get_sheets_submission_store() -> SheetsSubmissionStore:
    creds = get_sa_creds()
    return SheetsSubmissionStore(
        sheets_service(creds),
        spreadsheet_id=settings.google.spreadsheet_id,
        sheet_name=settings.google.sheet_name,
        share_with=service_email(creds, settings.google.subject),
    )


def get_submission_store() -> SubmissionStore:
    return get_sheets_submission_store()


def get_session_tokens() -> SessionTokens:
    return SessionTokens(
        secret=settings.session.jwt_secret,
        algorithm=settings.session.jwt_algorithm,
        expires_in=settings.session.expires_in,
    )


SessionTokensDep = Annotated[SessionTokens, Depends(get_session_tokens)]
TeamDirectoryDep = Annotated[TeamDirectory, Depends(get_team_directory)]


def get_session_issuer(
    tokens: SessionTokensDep,
    identity_provider: Annotated[IdentityProvider, Depends(get_identity_provider)],
    team_directory: TeamDirectoryDep,
) -> SessionIssuer:
    return SessionIssuer(identity_provider, team_directory, tokens)


def get_submission_service(
    team_directory: TeamDirectoryDep,
    submission_store: Annotated[SubmissionStore, Depends(get_submission_store)],
) -> SubmissionService:
    return SubmissionService(team_directory, submission_store)


def verify_token(
    tokens: SessionTokensDep,
    bearer: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    session_cookie: Annotated[str | None, Cookie(alias=settings.session.cookie_name)] = None,
) -> IdentityClaim:
    token = bearer.credentials if bearer else session_cookie
    return tokens.verify(token)


VerifyTokenDep = Annotated[IdentityClaim, Depends(verify_token)]
SessionIssuerDep = Annotated[SessionIssuer, Depends(get_session_issuer)]
SubmissionServiceDep = Annotated[SubmissionService, Depends(get_submission_service)]
