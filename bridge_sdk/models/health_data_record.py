"""
Health data record model.
Parsed health data the upload validation service associates with an upload.
"""
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class UserSharingScope(str, Enum):
    """How broadly a participant has agreed to share their data."""
    NO_SHARING = "no_sharing"
    SPONSORS_AND_PARTNERS = "sponsors_and_partners"
    ALL_QUALIFIED_RESEARCHERS = "all_qualified_researchers"


class HealthDataRecord(BaseModel):
    """
    Immutable health data record, populated from camelCase JSON.

    Every field is optional; the SDK passes records through without validating them.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore"
    )

    id: Optional[str] = None
    upload_id: Optional[str] = None
    study_id: Optional[str] = None
    schema_id: Optional[str] = None
    schema_revision: Optional[int] = None
    created_on: Optional[datetime] = None
    upload_date: Optional[date] = None
    user_sharing_scope: Optional[UserSharingScope] = None
    user_external_id: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    metadata: Optional[dict[str, Any]] = None
    version: Optional[int] = None

    @field_validator('user_sharing_scope', mode='before')
    @classmethod
    def normalize_sharing_scope(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    def __hash__(self):
        # data and metadata are unhashable dicts; equal records still hash equal without them
        return hash((
            self.id,
            self.upload_id,
            self.study_id,
            self.schema_id,
            self.schema_revision,
            self.created_on,
            self.upload_date,
            self.user_sharing_scope,
            self.user_external_id,
            self.version
        ))

    def __str__(self):
        return (
            f"HealthDataRecord[id={self.id}, uploadId={self.upload_id}, "
            f"schemaId={self.schema_id}, schemaRevision={self.schema_revision}]"
        )
