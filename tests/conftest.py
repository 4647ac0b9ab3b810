import os
from pathlib import Path

# must be set before anything imports src.config
os.environ.setdefault("SETTINGS_PATH", str(Path(__file__).parent / "settings.test.yaml"))

import pytest  # noqa: E402

from src.modules.auth.service import SessionIssuer, SessionTokens  # noqa: E402
from src.modules.submissions.service import SubmissionService  # noqa: E402
from tests.fakes import (  # noqa: E402
    FIXED_NOW,
    SECRET,
    FakeIdentityProvider,
    FakeSubmissionStore,
    FakeTeamDirectory,
    make_team,
)


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def team_directory() -> FakeTeamDirectory:
    return FakeTeamDirectory(make_team())


@pytest.fixture
def submission_store() -> FakeSubmissionStore:
    return FakeSubmissionStore()


@pytest.fixture
def tokens() -> SessionTokens:
    return SessionTokens(secret=SECRET)


@pytest.fixture
def issuer(identity_provider, team_directory, tokens) -> SessionIssuer:
    return SessionIssuer(identity_provider, team_directory, tokens)


@pytest.fixture
def submission_service(team_directory, submission_store) -> SubmissionService:
    return SubmissionService(team_directory, submission_store, clock=lambda: FIXED_NOW)
