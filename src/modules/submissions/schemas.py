from typing import Any

from pydantic import BaseModel

from src.pydantic_base import BaseSchema


class SubmissionContent(BaseSchema):
    github_link: str
    "Repository link"
    ppt_link: str
    "Slides link"
    video_link: str
    "Demo video link"
    description: str
    "Project description"


class SubmitRequest(BaseSchema):
    # any JSON type is accepted here, field rules are checked together by validate_submission_content
    github_link: Any = None
    "Repository link (http or https)"
    ppt_link: Any = None
    "Slides link (http or https)"
    video_link: Any = None
    "Demo video link (http or https)"
    description: Any = None
    "Project description, up to 5000 characters"


class Submission(BaseSchema):
    submission_time: str
    "Time of the first submission, `YYYY-MM-DD HH:mm:ss` in UTC"
    team_name: str
    "Team name"
    team_id: str
    "Team ID"
    leader_name: str
    "Leader's name"
    leader_phone: str
    "Leader's phone"
    leader_email: str
    "Leader's email"
    github_link: str
    "Repository link"
    ppt_link: str
    "Slides link"
    video_link: str
    "Demo video link"
    description: str
    "Project description"


class SubmissionResult(BaseModel):
    submission: Submission
    is_existing: bool


class SubmitResponse(BaseSchema):
    message: str
    "Message"
    data: Submission
    "Stored submission, the first one if the team had already submitted"
    is_existing: bool
    "Whether the submission existed before this request"


class GetSubmissionResponse(BaseSchema):
    message: str
    "Message"
    data: Submission | None
    "Stored submission, if any"
    has_submission: bool
    "Whether the team has submitted"
