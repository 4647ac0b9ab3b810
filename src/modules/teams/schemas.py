from typing import Any

from pydantic import BaseModel

from src.pydantic_base import BaseSchema

CONFIRMED = "confirmed"


class TeamMember(BaseSchema):
    name: str = ""
    "Full name"
    phone_number: str = ""
    "Phone number"
    email: str = ""
    "Email address"


class TeamRecord(BaseModel):
    id: str
    "Document ID in the directory"
    team_id: str
    "Team ID (the `teamId` field, or the document ID when the field is absent)"
    leader_id: str
    "Firebase Auth UID of the team leader"
    team_name: str = ""
    "Team name"
    status: str | None = None
    "Registration status: only `confirmed` teams may log in"
    members: list[TeamMember] = []
    "Team members, the leader goes first"
    data: dict[str, Any] = {}
    "Full registration document"

    @property
    def is_confirmed(self) -> bool:
        return self.status == CONFIRMED

    @property
    def leader(self) -> TeamMember | None:
        return self.members[0] if self.members else None


class TeamRegistrationResponse(BaseSchema):
    message: str
    "Message"
    data: dict[str, Any]
    "Team registration document, including its `id`"
