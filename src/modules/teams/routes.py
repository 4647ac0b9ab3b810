from fastapi import APIRouter
from fastapi_derive_responses import AutoDeriveResponsesAPIRoute

from src.api.dependencies import TeamDirectoryDep, VerifyTokenDep
from src.exceptions import NotFoundException
from src.logging_ import logger
from src.modules.teams.schemas import TeamRegistrationResponse

router = APIRouter(prefix="/users", tags=["Teams"], route_class=AutoDeriveResponsesAPIRoute)


@router.get("/about")
def get_team_registration(claim: VerifyTokenDep, team_directory: TeamDirectoryDep) -> TeamRegistrationResponse:
    """Get the team registration of the logged-in leader."""
    logger.info(f"Fetching team registration | leader_id={claim.subject_id}")

    team = team_directory.find_by_leader_id(claim.subject_id)
    if team is None:
        raise NotFoundException("team registration")

    return TeamRegistrationResponse(
        message="Team registration retrieved successfully",
        data={"id": team.id, **team.data},
    )
