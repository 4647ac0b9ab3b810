from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from src.exceptions import ValidationFailedException
from src.modules.submissions.constants import (
    ALLOWED_URL_SCHEMES,
    LINK_FIELDS,
    MAX_DESCRIPTION_LENGTH,
    MAX_URL_LENGTH,
)
from src.modules.submissions.schemas import SubmissionContent


def sanitize_string(value: Any, max_length: int = 10000) -> str:
    """Trim, cut to `max_length` and drop angle brackets."""
    if not isinstance(value, str):
        return ""
    return value.strip()[:max_length].replace("<", "").replace(">", "")


def _link_errors(field: str, value: Any) -> list[str]:
    if not isinstance(value, str) or not value.strip():
        return [f"{field} is required and must be a non-empty string"]
    trimmed = value.strip()
    if len(trimmed) > MAX_URL_LENGTH:
        return [f"{field} must be less than {MAX_URL_LENGTH} characters"]
    try:
        url = urlparse(trimmed)
    except ValueError:
        return [f"{field} must be a valid URL"]
    if not url.scheme or not url.netloc:
        return [f"{field} must be a valid URL"]
    if url.scheme.lower() not in ALLOWED_URL_SCHEMES:
        return [f"{field} must use http or https protocol"]
    return []


def _description_errors(value: Any) -> list[str]:
    if not isinstance(value, str) or not value.strip():
        return ["description is required and must be a non-empty string"]
    if len(value.strip()) > MAX_DESCRIPTION_LENGTH:
        return [f"description must be less than {MAX_DESCRIPTION_LENGTH} characters"]
    return []


def validate_submission_content(raw: Mapping[str, Any]) -> SubmissionContent:
    """
    Validate every field of a submission and return the sanitized content.

    Problems are collected across all fields and raised together, so a client gets the full list at once.
    Keys are the camelCase names used on the wire.
    """
    errors: list[str] = []
    for field in LINK_FIELDS:
        errors.extend(_link_errors(field, raw.get(field)))
    errors.extend(_description_errors(raw.get("description")))

    if errors:
        raise ValidationFailedException(errors)

    return SubmissionContent(
        github_link=sanitize_string(raw["githubLink"], MAX_URL_LENGTH),
        ppt_link=sanitize_string(raw["pptLink"], MAX_URL_LENGTH),
        video_link=sanitize_string(raw["videoLink"], MAX_URL_LENGTH),
        description=sanitize_string(raw["description"], MAX_DESCRIPTION_LENGTH),
    )
