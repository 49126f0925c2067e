"""
Data Transfer Objects for upload validation responses.
Maps the service's camelCase JSON onto the validated domain model.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from bridge_sdk.models.health_data_record import HealthDataRecord
from bridge_sdk.models.upload_validation_status import UploadStatus, UploadValidationStatus


class UploadValidationStatusPayload(BaseModel):
    """
    Wire schema for an upload validation status.

    Fields are optional here so that missing values reach the builder,
    which reports them with its own messages.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(default=None, description="Upload ID")
    message_list: Optional[list[Optional[str]]] = Field(
        default=None, alias="messageList", description="Validation messages"
    )
    status: Optional[UploadStatus] = Field(default=None, description="Upload status")
    record: Optional[HealthDataRecord] = Field(default=None, description="Associated health data record")

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    def to_domain(self) -> UploadValidationStatus:
        """
        Convert payload to a validated UploadValidationStatus.
        
        Raises:
            InvalidEntityException: If the payload fails builder validation
        """
        return (
            UploadValidationStatus.builder()
            .with_id(self.id)
            .with_message_list(self.message_list)
            .with_status(self.status)
            .with_record(self.record)
            .build()
        )

    @classmethod
    def from_domain(cls, upload_validation_status: UploadValidationStatus) -> "UploadValidationStatusPayload":
        """Create payload from an UploadValidationStatus."""
        return cls(
            id=upload_validation_status.id,
            message_list=list(upload_validation_status.message_list),
            status=upload_validation_status.status,
            record=upload_validation_status.record
        )
