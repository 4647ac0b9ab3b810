from typing import Protocol

from pydantic import BaseModel

from src.exceptions import ExternalServiceException
from src.logging_ import logger
from src.modules.google_.service import GOOGLE_ERRORS, http_status


class IdentityRecord(BaseModel):
    subject_id: str
    "Firebase Auth UID"
    email: str | None = None
    "Email stored in Firebase Auth"
    email_verified: bool = False
    "Whether the email was verified"


class IdentityProvider(Protocol):
    def lookup(self, subject_id: str) -> IdentityRecord | None: ...


class IdentityToolkitProvider:
    """Firebase Auth accounts read through the Identity Toolkit admin API."""

    def __init__(self, identitytoolkit, project_id: str):
        self.identitytoolkit = identitytoolkit
        self.project_id = project_id

    def lookup(self, subject_id: str) -> IdentityRecord | None:
        try:
            response = (
                self.identitytoolkit.projects()
                .accounts()
                .lookup(targetProjectId=self.project_id, body={"localId": [subject_id]})
                .execute()
            )
        except GOOGLE_ERRORS as e:
            if http_status(e) in {400, 404}:
                logger.info(f"Identity lookup rejected | uid={subject_id} error={e}")
                return None
            logger.error(f"Identity Toolkit error | uid={subject_id} error={e}")
            raise ExternalServiceException("Identity provider", str(e))

        users = response.get("users") or []
        if not users:
            return None
        user = users[0]
        return IdentityRecord(
            subject_id=user.get("localId", subject_id),
            email=user.get("email"),
            email_verified=user.get("emailVerified", False),
        )
