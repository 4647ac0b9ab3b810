from datetime import datetime, timedelta, timezone

import pytest

from src.exceptions import NotFoundException
from src.modules.auth.schemas import IdentityClaim
from src.modules.submissions.schemas import SubmissionContent
from src.modules.submissions.service import SubmissionService
from tests.fakes import LEADER_EMAIL, LEADER_UID, FakeSubmissionStore, FakeTeamDirectory, make_team

CLAIM = IdentityClaim(subject_id=LEADER_UID, email=LEADER_EMAIL, team_id="T1")
FIRST = SubmissionContent(
    github_link="https://github.com/x/y",
    ppt_link="https://docs.example/p",
    video_link="https://youtu.be/v",
    description="demo",
)
SECOND = SubmissionContent(
    github_link="https://github.com/other/repo",
    ppt_link="https://docs.example/other",
    video_link="https://youtu.be/other",
    description="completely different",
)


def test_first_submission_is_stored(submission_service, submission_store):
    result = submission_service.submit(CLAIM, FIRST)

    assert result.is_existing is False
    assert submission_store.rows == [result.submission]
    submission = result.submission
    assert submission.submission_time == "2025-03-14 09:26:53"
    assert submission.team_id == "T1"
    assert submission.team_name == "Analytical Engines"
    assert submission.leader_name == "Ada Lovelace"
    assert submission.leader_phone == "+10000000000"
    assert submission.leader_email == LEADER_EMAIL
    assert submission.github_link == FIRST.github_link
    assert submission.description == "demo"


def test_resubmission_returns_first_submission_unchanged(submission_service, submission_store):
    first = submission_service.submit(CLAIM, FIRST)
    second = submission_service.submit(CLAIM, SECOND)

    assert second.is_existing is True
    assert second.submission == first.submission
    assert len(submission_store.rows) == 1


def test_retrieve_before_submit_is_none(submission_service):
    assert submission_service.retrieve(CLAIM) is None


def test_retrieve_after_submit(submission_service):
    submitted = submission_service.submit(CLAIM, FIRST).submission

    assert submission_service.retrieve(CLAIM) == submitted


def test_team_is_read_from_directory_not_from_token(submission_store):
    service = SubmissionService(FakeTeamDirectory(make_team(team_id="T2")), submission_store)
    stale_claim = IdentityClaim(subject_id=LEADER_UID, email=LEADER_EMAIL, team_id="T1")

    result = service.submit(stale_claim, FIRST)

    assert result.submission.team_id == "T2"
    assert service.retrieve(stale_claim) == result.submission


def test_submissions_of_different_teams_do_not_mix(submission_store):
    other_uid = "zyxwvutsrq0987654321"
    directory = FakeTeamDirectory(make_team(), make_team(team_id="T9", leader_id=other_uid))
    service = SubmissionService(directory, submission_store)

    service.submit(CLAIM, FIRST)
    other = service.submit(IdentityClaim(subject_id=other_uid, email="o@example.com", team_id="T9"), SECOND)

    assert other.is_existing is False
    assert other.submission.github_link == SECOND.github_link
    assert len(submission_store.rows) == 2


@pytest.mark.parametrize("method", ["submit", "retrieve"])
def test_missing_registration(method):
    service = SubmissionService(FakeTeamDirectory(), FakeSubmissionStore())
    args = (CLAIM, FIRST) if method == "submit" else (CLAIM,)

    with pytest.raises(NotFoundException) as exc_info:
        getattr(service, method)(*args)

    assert exc_info.value.what == "team registration"


def test_missing_leader_info(submission_store):
    service = SubmissionService(FakeTeamDirectory(make_team(members=[])), submission_store)

    with pytest.raises(NotFoundException) as exc_info:
        service.submit(CLAIM, FIRST)

    assert exc_info.value.what == "leader info"
    assert submission_store.rows == []


def test_submission_time_is_utc(submission_store):
    moscow = timezone(timedelta(hours=3))
    service = SubmissionService(
        FakeTeamDirectory(make_team()),
        submission_store,
        clock=lambda: datetime(2025, 1, 1, 2, 30, 0, tzinfo=moscow),
    )

    assert service.submit(CLAIM, FIRST).submission.submission_time == "2024-12-31 23:30:00"
