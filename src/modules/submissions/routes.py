from fastapi import APIRouter, Response, status
from fastapi_derive_responses import AutoDeriveResponsesAPIRoute

from src.api.dependencies import SubmissionServiceDep, VerifyTokenDep
from src.modules.submissions.schemas import GetSubmissionResponse, SubmitRequest, SubmitResponse
from src.modules.submissions.validation import validate_submission_content

router = APIRouter(prefix="/users", tags=["Submissions"], route_class=AutoDeriveResponsesAPIRoute)


@router.get("/submission")
def get_submission(claim: VerifyTokenDep, service: SubmissionServiceDep) -> GetSubmissionResponse:
    """Get the submission of the leader's team, `data` is null until the team submits."""
    submission = service.retrieve(claim)
    if submission is None:
        return GetSubmissionResponse(message="No submission found for this team", data=None, has_submission=False)
    return GetSubmissionResponse(message="Submission retrieved successfully", data=submission, has_submission=True)


@router.post("/submit", status_code=status.HTTP_201_CREATED)
def submit(
    response: Response,
    claim: VerifyTokenDep,
    service: SubmissionServiceDep,
    request: SubmitRequest | None = None,
) -> SubmitResponse:
    """
    Submit the project links of the leader's team.

    A team submits once. If a submission exists, it is returned unchanged with `isExisting: true` and status 200.
    """
    content = validate_submission_content(request.model_dump(by_alias=True) if request else {})
    result = service.submit(claim, content)

    if result.is_existing:
        response.status_code = status.HTTP_200_OK
        return SubmitResponse(message="Team submission already exists", data=result.submission, is_existing=True)
    return SubmitResponse(message="Team data submitted successfully", data=result.submission, is_existing=False)
