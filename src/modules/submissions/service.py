from collections.abc import Callable
from datetime import UTC, datetime

from src.exceptions import NotFoundException
from src.logging_ import logger
from src.modules.auth.schemas import IdentityClaim
from src.modules.submissions.constants import SUBMISSION_TIME_FORMAT
from src.modules.submissions.repository import SubmissionStore
from src.modules.submissions.schemas import Submission, SubmissionContent, SubmissionResult
from src.modules.teams.repository import TeamDirectory
from src.modules.teams.schemas import TeamRecord


def utcnow() -> datetime:
    return datetime.now(UTC)


class SubmissionService:
    """
    One submission per team, first write wins.

    The team is always re-read from the directory by the leader's UID instead of trusting the `teamId`
    inside the session token. The existence check and the append are two separate store calls, so two
    simultaneous first submissions of one team may both be written.
    """

    def __init__(
        self,
        team_directory: TeamDirectory,
        submission_store: SubmissionStore,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.team_directory = team_directory
        self.submission_store = submission_store
        self.clock = clock

    def _team(self, claim: IdentityClaim) -> TeamRecord:
        team = self.team_directory.find_by_leader_id(claim.subject_id)
        if team is None:
            raise NotFoundException("team registration")
        if team.team_id != claim.team_id:
            logger.warning(
                f"Team ID changed since login | uid={claim.subject_id} "
                f"token_team_id={claim.team_id} team_id={team.team_id}"
            )
        return team

    def submit(self, claim: IdentityClaim, content: SubmissionContent) -> SubmissionResult:
        team = self._team(claim)
        leader = team.leader
        if leader is None:
            raise NotFoundException("leader info")

        existing = self.submission_store.find_by_team_id(team.team_id)
        if existing is not None:
            logger.info(f"Submission already exists, returning previous entry | team_id={team.team_id}")
            return SubmissionResult(submission=existing, is_existing=True)

        submission = Submission(
            submission_time=self.clock().astimezone(UTC).strftime(SUBMISSION_TIME_FORMAT),
            team_name=team.team_name,
            team_id=team.team_id,
            leader_name=leader.name,
            leader_phone=leader.phone_number,
            leader_email=leader.email,
            github_link=content.github_link,
            ppt_link=content.ppt_link,
            video_link=content.video_link,
            description=content.description,
        )
        self.submission_store.append(submission)
        logger.info(f"New submission added | team_id={team.team_id} at={submission.submission_time}")
        return SubmissionResult(submission=submission, is_existing=False)

    def retrieve(self, claim: IdentityClaim) -> Submission | None:
        team = self._team(claim)
        logger.info(f"Fetching submission | team_id={team.team_id}")
        return self.submission_store.find_by_team_id(team.team_id)
