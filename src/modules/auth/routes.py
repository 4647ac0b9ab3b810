from fastapi import APIRouter, Response
from fastapi_derive_responses import AutoDeriveResponsesAPIRoute

from src.api.dependencies import SessionIssuerDep
from src.config import settings
from src.logging_ import logger
from src.modules.auth.schemas import LoginRequest, LoginResponse, LogoutResponse

router = APIRouter(prefix="/users", tags=["Auth"], route_class=AutoDeriveResponsesAPIRoute)


@router.post("/auth")
def login(request: LoginRequest, response: Response, issuer: SessionIssuerDep) -> LoginResponse:
    """Log in as a team leader of a confirmed team and get a session token."""
    session = issuer.issue(request.uid, request.email)

    response.set_cookie(
        key=settings.session.cookie_name,
        value=session.token,
        max_age=session.expires_in,
        path="/",
        domain=settings.session.cookie_domain,
        secure=settings.session.cookie_secure or settings.session.cookie_samesite == "none",
        httponly=True,
        samesite=settings.session.cookie_samesite,
    )

    return LoginResponse(
        message="Login successful",
        uid=session.claim.subject_id,
        email=session.claim.email,
        team_id=session.claim.team_id,
        token=session.token,
        expires_in=session.expires_in,
    )


@router.post("/logout")
def logout(response: Response) -> LogoutResponse:
    """Clear the session cookie. Clients keeping the token themselves should drop it too."""
    logger.info("Logout requested")
    response.delete_cookie(
        key=settings.session.cookie_name,
        path="/",
        domain=settings.session.cookie_domain,
        secure=settings.session.cookie_secure or settings.session.cookie_samesite == "none",
        httponly=True,
        samesite=settings.session.cookie_samesite,
    )
    return LogoutResponse(
        message="Logged out successfully",
        note="Please remove the stored token from localStorage on the client.",
    )
