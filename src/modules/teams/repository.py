from typing import Any, Protocol

from src.exceptions import ExternalServiceException
from src.logging_ import logger
from src.modules.google_.service import GOOGLE_ERRORS
from src.modules.teams.schemas import TeamMember, TeamRecord
from src.storages.firestore.values import decode_fields, document_id, encode_string


class TeamDirectory(Protocol):
    def find_by_leader_id(self, leader_id: str) -> TeamRecord | None: ...


def _text(value: Any) -> str:
    # numbers (phone numbers, numeric team IDs) may be stored as integerValue
    return "" if value is None else str(value)


def team_record_from_document(document: dict[str, Any]) -> TeamRecord:
    data = decode_fields(document.get("fields", {}))
    doc_id = document_id(document)
    members = [
        TeamMember(
            name=_text(m.get("name")),
            phone_number=_text(m.get("phoneNumber")),
            email=_text(m.get("email")),
        )
        for m in data.get("members") or []
        if isinstance(m, dict)
    ]
    return TeamRecord(
        id=doc_id,
        team_id=_text(data.get("teamId")) or doc_id,
        leader_id=_text(data.get("leaderUserId")),
        team_name=_text(data.get("teamName")),
        status=_text(data.get("status")) or None,
        members=members,
        data=data,
    )


class FirestoreTeamDirectory:
    def __init__(
        self,
        firestore,
        project_id: str,
        database: str = "(default)",
        collection: str = "teamRegistrations",
    ):
        self.firestore = firestore
        self.collection = collection
        self.parent = f"projects/{project_id}/databases/{database}/documents"

    def find_by_leader_id(self, leader_id: str) -> TeamRecord | None:
        query = {
            "structuredQuery": {
                "from": [{"collectionId": self.collection}],
                "where": {
                    "fieldFilter": {
                        "field": {"fieldPath": "leaderUserId"},
                        "op": "EQUAL",
                        "value": encode_string(leader_id),
                    }
                },
                "limit": 2,
            }
        }
        try:
            rows = self.firestore.projects().databases().documents().runQuery(parent=self.parent, body=query).execute()
        except GOOGLE_ERRORS as e:
            logger.error(f"Firestore query failed | leader_id={leader_id} error={e}")
            raise ExternalServiceException("Team directory", str(e))

        documents = [row["document"] for row in rows or [] if "document" in row]
        if not documents:
            return None
        if len(documents) > 1:
            logger.warning(f"Several team registrations for one leader, using the first | leader_id={leader_id}")
        return team_record_from_document(documents[0])
