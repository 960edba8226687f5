"""Validation of inbound page and export requests."""

from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .errors import InvalidInputError
from .models import DEFAULT_PAGE_SIZE, GITHUB_MAX_PAGE_SIZE


class _SubjectRequest(BaseModel):
    subject: str

    @field_validator("subject", mode="before")
    @classmethod
    def strip_subject(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("subject_required", "Username is required")
        return v.strip()


class StarredQuery(_SubjectRequest):
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=GITHUB_MAX_PAGE_SIZE)


class ExportRequest(_SubjectRequest):
    format: Literal["json", "csv"] = "json"
    scope: Literal["all", "current"] = "all"
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=GITHUB_MAX_PAGE_SIZE)


def _first_issue(e: ValidationError) -> str:
    issue = e.errors()[0]
    field = ".".join(str(part) for part in issue["loc"])
    if issue["type"] == "subject_required" or not field:
        return issue["msg"]
    return f"{field}: {issue['msg']}"


def validate_starred_query(**values) -> StarredQuery:
    """Build a StarredQuery, raising InvalidInputError on the first issue."""
    try:
        return StarredQuery(**values)
    except ValidationError as e:
        raise InvalidInputError(_first_issue(e)) from e


def validate_export_request(**values) -> ExportRequest:
    """Build an ExportRequest, raising InvalidInputError on the first issue."""
    try:
        return ExportRequest(**values)
    except ValidationError as e:
        raise InvalidInputError(_first_issue(e)) from e
