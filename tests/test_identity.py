from unittest.mock import MagicMock

import pytest

from src.exceptions import ExternalServiceException
from src.modules.identity.repository import IdentityToolkitProvider
from tests.fakes import LEADER_UID, http_error


def make_provider(response=None, error: Exception | None = None) -> tuple[IdentityToolkitProvider, MagicMock]:
    identitytoolkit = MagicMock()
    lookup = identitytoolkit.projects.return_value.accounts.return_value.lookup
    if error is not None:
        lookup.return_value.execute.side_effect = error
    else:
        lookup.return_value.execute.return_value = response
    return IdentityToolkitProvider(identitytoolkit, project_id="test-project"), lookup


def test_lookup():
    provider, lookup = make_provider(
        {"users": [{"localId": LEADER_UID, "email": "Leader@Example.com", "emailVerified": True}]}
    )

    record = provider.lookup(LEADER_UID)

    assert record is not None
    assert record.subject_id == LEADER_UID
    assert record.email == "Leader@Example.com"
    assert record.email_verified
    lookup.assert_called_once_with(targetProjectId="test-project", body={"localId": [LEADER_UID]})


def test_unknown_user():
    provider, _ = make_provider({"kind": "identitytoolkit#GetAccountInfoResponse"})

    assert provider.lookup(LEADER_UID) is None


@pytest.mark.parametrize("status", [400, 404])
def test_rejected_lookup_means_unknown_user(status):
    provider, _ = make_provider(error=http_error(status))

    assert provider.lookup(LEADER_UID) is None


@pytest.mark.parametrize("error", [http_error(500), http_error(403), ConnectionRefusedError()])
def test_provider_failure(error):
    provider, _ = make_provider(error=error)

    with pytest.raises(ExternalServiceException):
        provider.lookup(LEADER_UID)
