from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.pydantic_base import BaseSchema


class IdentityClaim(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_id: str
    "Firebase Auth UID of the leader"
    email: str
    "Lowercase email of the leader"
    team_id: str
    "Team ID at the moment of login"


class IssuedSession(BaseModel):
    token: str
    "Signed session token"
    claim: IdentityClaim
    "Identity carried by the token"
    expires_at: datetime
    "Absolute expiry (UTC)"
    expires_in: int
    "Lifetime in seconds"


class LoginRequest(BaseSchema):
    uid: str | None = None
    "Firebase Auth UID"
    email: str | None = None
    "Email of the Firebase Auth account"


class LoginResponse(BaseSchema):
    message: str
    "Message"
    uid: str
    "Firebase Auth UID"
    email: str
    "Normalized email"
    team_id: str
    "Team ID"
    token: str
    "Session token, send it as `Authorization: Bearer <token>`"
    expires_in: int
    "Session lifetime in seconds"


class LogoutResponse(BaseSchema):
    message: str
    "Message"
    note: str
    "Hint for clients keeping the token themselves"
