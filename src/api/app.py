__all__ = ["app"]

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import src.api.docs as docs
from src.api.exceptions import setup_exception_handlers
from src.config import settings
from src.modules.auth.routes import router as router_auth
from src.modules.submissions.routes import router as router_submissions
from src.modules.teams.routes import router as router_teams

app = FastAPI(
    title=docs.TITLE,
    summary=docs.SUMMARY,
    description=docs.DESCRIPTION,
    version=docs.VERSION,
    license_info=docs.LICENSE_INFO,
    openapi_tags=docs.TAGS_INFO,
    root_path=settings.app_root_path,
    root_path_in_servers=False,
    swagger_ui_parameters={"tryItOutEnabled": True, "persistAuthorization": True, "filter": True},
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.cors_allow_origin_regex,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

setup_exception_handlers(app)


class HealthCheckResponse(BaseModel):
    status: str
    "Health status"
    service: str
    "Service name"


@app.get("/health", tags=["Health"])
def health_check() -> HealthCheckResponse:
    """Health check endpoint to verify service is running."""
    return HealthCheckResponse(status="healthy", service="submissions")


app.include_router(router_auth)
app.include_router(router_teams)
app.include_router(router_submissions)
