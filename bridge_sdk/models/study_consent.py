"""
Study consent model.
A versioned consent document belonging to a study subpopulation.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StudyConsent(BaseModel):
    """Immutable study consent. Equality and hashing use every field."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore"
    )

    subpopulation_guid: Optional[str] = None
    created_on: Optional[datetime] = None
    active: bool = False
    document_content: Optional[str] = None
    storage_path: Optional[str] = None
    
    def __repr__(self):
        return f"StudyConsent(subpopulation_guid={self.subpopulation_guid}, created_on={self.created_on}, active={self.active})"
