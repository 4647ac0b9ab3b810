import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt
from pydantic import SecretStr

from src.exceptions import (
    ConfigException,
    ForbiddenException,
    InvalidCredentialException,
    InvalidInputException,
    UnauthorizedException,
)
from src.logging_ import logger
from src.modules.auth.schemas import IdentityClaim, IssuedSession
from src.modules.identity.repository import IdentityProvider
from src.modules.teams.repository import TeamDirectory

MAX_UID_LENGTH = 128
MIN_UID_LENGTH = 10
MAX_EMAIL_LENGTH = 255
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DEFAULT_EXPIRES_IN = 60 * 60 * 24


def utcnow() -> datetime:
    return datetime.now(UTC)


def sanitize_credentials(uid, email) -> tuple[str, str]:
    """Check types and shape of login input, return trimmed UID and lowercase email."""
    if not uid or not email:
        raise InvalidInputException("Missing required fields", ["uid and email are required"])
    if not isinstance(uid, str) or not isinstance(email, str):
        raise InvalidInputException("Invalid input types", ["uid and email must be strings"])

    uid = uid.strip()[:MAX_UID_LENGTH]
    email = email.strip().lower()[:MAX_EMAIL_LENGTH]

    if not EMAIL_RE.fullmatch(email):
        raise InvalidInputException("Invalid email format", ["email must be a valid email address"])
    if not MIN_UID_LENGTH <= len(uid) <= MAX_UID_LENGTH:
        raise InvalidInputException(
            "Invalid UID format", [f"uid must be between {MIN_UID_LENGTH} and {MAX_UID_LENGTH} characters"]
        )
    return uid, email


class SessionTokens:
    """Signs and verifies session tokens.

    Tokens are self-contained: nothing is stored server-side, validity is the signature plus `exp`.
    """

    def __init__(
        self,
        secret: SecretStr | str | None,
        algorithm: str = "HS256",
        expires_in: int = DEFAULT_EXPIRES_IN,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.secret = secret.get_secret_value() if isinstance(secret, SecretStr) else secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.clock = clock

    def _require_secret(self) -> str:
        if not self.secret:
            logger.error("JWT secret is not set in settings")
            raise ConfigException("JWT secret is not configured")
        return self.secret

    def encode(self, claim: IdentityClaim) -> IssuedSession:
        secret = self._require_secret()
        now = self.clock()
        expires_at = now + timedelta(seconds=self.expires_in)
        token = jwt.encode(
            {
                "uid": claim.subject_id,
                "email": claim.email,
                "leaderUserId": claim.subject_id,
                "teamId": claim.team_id,
                "iat": now,
                "exp": expires_at,
            },
            secret,
            algorithm=self.algorithm,
        )
        return IssuedSession(token=token, claim=claim, expires_at=expires_at, expires_in=self.expires_in)

    def verify(self, token: str | None) -> IdentityClaim:
        if not token:
            raise UnauthorizedException("missing token")
        secret = self._require_secret()

        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm], options={"require": ["exp"]})
        except jwt.ExpiredSignatureError:
            raise UnauthorizedException("expired")
        except jwt.MissingRequiredClaimError:
            raise UnauthorizedException("malformed payload")
        except jwt.InvalidTokenError:
            raise UnauthorizedException("invalid signature")

        uid = payload.get("uid")
        team_id = payload.get("teamId")
        email = payload.get("email") or ""
        if not isinstance(uid, str) or not isinstance(team_id, str) or not uid or not team_id:
            raise UnauthorizedException("malformed payload")
        if not isinstance(email, str):
            raise UnauthorizedException("malformed payload")
        return IdentityClaim(subject_id=uid, email=email, team_id=team_id)


class SessionIssuer:
    """Logs in team leaders: checks the account and the team registration, then signs a session token.

    Leadership and confirmation are read from the directory on every login, a team may be unconfirmed
    after registering.
    """

    def __init__(self, identity_provider: IdentityProvider, team_directory: TeamDirectory, tokens: SessionTokens):
        self.identity_provider = identity_provider
        self.team_directory = team_directory
        self.tokens = tokens

    def issue(self, uid, email) -> IssuedSession:
        uid, email = sanitize_credentials(uid, email)
        logger.info(f"Verifying user | uid={uid} email={email}")

        record = self.identity_provider.lookup(uid)
        if record is None:
            raise InvalidCredentialException("Invalid user: User not found")
        if (record.email or "").lower() != email:
            raise InvalidCredentialException("Email does not match the user record")

        team = self.team_directory.find_by_leader_id(uid)
        if team is None:
            raise ForbiddenException("Only team leaders are allowed to login", ["not a team leader"])
        if not team.is_confirmed:
            raise ForbiddenException("Registration not confirmed yet!", ["registration not confirmed"])

        session = self.tokens.encode(IdentityClaim(subject_id=uid, email=email, team_id=team.team_id))
        logger.info(f"Issued session | uid={uid} team_id={team.team_id} expires_at={session.expires_at.isoformat()}")
        return session
