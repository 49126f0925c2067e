"""
Shared test fixtures and utilities.
"""
import pytest
from datetime import date, datetime, timezone
from bridge_sdk.models.health_data_record import HealthDataRecord, UserSharingScope


@pytest.fixture
def health_record():
    """Health data record as the validation service would attach it."""
    return HealthDataRecord(
        id="record-123",
        upload_id="upload123",
        study_id="api-study",
        schema_id="walking-activity",
        schema_revision=2,
        created_on=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        upload_date=date(2024, 1, 1),
        user_sharing_scope=UserSharingScope.SPONSORS_AND_PARTNERS,
        data={"steps": 1200, "distance": 850.5},
        metadata={"appVersion": "1.4"}
    )


@pytest.fixture
def status_response():
    """Raw JSON object for a failed validation, as returned by the upload status endpoint."""
    return {
        "id": "upload123",
        "messageList": ["bad checksum", "no matching schema"],
        "status": "validation_failed",
        "record": {
            "id": "record-123",
            "uploadId": "upload123",
            "schemaId": "walking-activity",
            "schemaRevision": 2,
            "createdOn": "2024-01-01T12:00:00+00:00",
            "uploadDate": "2024-01-01",
            "userSharingScope": "sponsors_and_partners",
            "data": {"steps": 1200},
            "type": "HealthDataRecord"
        },
        "type": "UploadValidationStatus"
    }
