"""
Upload Status Service for response handling.
Turns upload validation responses into validated domain models and back.
"""
import json
from typing import Any, Mapping, Union
import structlog
from pydantic import ValidationError
from bridge_sdk.core.exceptions import InvalidEntityException
from bridge_sdk.models.dto.upload_dto import UploadValidationStatusPayload
from bridge_sdk.models.upload_validation_status import UploadValidationStatus

logger = structlog.get_logger(__name__)


class UploadStatusService:
    """Service for decoding and encoding upload validation statuses."""

    def parse_response(self, body: Union[str, bytes, Mapping[str, Any]]) -> UploadValidationStatus:
        """
        Decode an upload validation status response body.

        Args:
            body: JSON text, UTF-8 bytes, or an already-parsed JSON object

        Returns:
            Validated UploadValidationStatus

        Raises:
            InvalidEntityException: If the body is malformed or fails validation
        """
        data = self._load_json(body)

        try:
            payload = UploadValidationStatusPayload.model_validate(data)
        except ValidationError as e:
            logger.warning("upload_status_rejected", reason="schema", errors=e.error_count())
            raise InvalidEntityException(f"Invalid upload validation status response: {str(e)}") from e

        try:
            upload_validation_status = payload.to_domain()
        except InvalidEntityException as e:
            logger.warning("upload_status_rejected", reason="validation", upload_id=payload.id, error=e.message)
            raise

        logger.debug(
            "upload_status_parsed",
            upload_id=upload_validation_status.id,
            status=upload_validation_status.status.name,
            messages=len(upload_validation_status.message_list)
        )
        return upload_validation_status

    def to_response(self, upload_validation_status: UploadValidationStatus) -> dict:
        """
        Encode an UploadValidationStatus as a JSON-ready dict with camelCase keys.

        Args:
            upload_validation_status: Status to encode

        Returns:
            dict: JSON-compatible representation
        """
        payload = UploadValidationStatusPayload.from_domain(upload_validation_status)
        return payload.model_dump(by_alias=True, mode="json")

    def _load_json(self, body: Union[str, bytes, Mapping[str, Any]]) -> Mapping[str, Any]:
        """Parse raw JSON text or bytes into a JSON object."""
        if isinstance(body, Mapping):
            return body

        try:
            if isinstance(body, bytes):
                body = body.decode('utf-8')
            data = json.loads(body)
        except UnicodeDecodeError as e:
            raise InvalidEntityException("Response body must be valid UTF-8") from e
        except (TypeError, ValueError) as e:
            logger.warning("upload_status_rejected", reason="malformed_json")
            raise InvalidEntityException(f"Malformed upload validation status response: {str(e)}") from e

        if not isinstance(data, dict):
            raise InvalidEntityException("Upload validation status response must be a JSON object")

        return data
