"""
Upload Validation Status domain model.
Represents the status of a server-side upload validation job and its messages.
"""
from enum import Enum
from typing import Iterable, Optional, Tuple
from bridge_sdk.core.exceptions import InvalidEntityException
from bridge_sdk.models.health_data_record import HealthDataRecord


class UploadStatus(str, Enum):
    """Upload status, such as requested, validation in progress, validation failed, or succeeded."""
    REQUESTED = "requested"
    VALIDATION_IN_PROGRESS = "validation_in_progress"
    VALIDATION_FAILED = "validation_failed"
    SUCCEEDED = "succeeded"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def is_terminal(self) -> bool:
        """True once the server has finished validating the upload."""
        return self in (UploadStatus.VALIDATION_FAILED, UploadStatus.SUCCEEDED)


class UploadValidationStatus:
    """
    Immutable upload validation status.

    Do not call the constructor directly; use UploadValidationStatus.builder()
    or UploadValidationStatus.create(), which validate the fields first.
    """

    __slots__ = ('_id', '_message_list', '_status', '_record')

    _HASH_PRIME = 31

    def __init__(
        self,
        id: str,
        message_list: Tuple[str, ...],
        status: UploadStatus,
        record: Optional[HealthDataRecord] = None
    ):
        self._id = id
        self._message_list = message_list
        self._status = status
        self._record = record

    @property
    def id(self) -> str:
        """Unique upload ID, as generated by the request upload API. Always non-blank."""
        return self._id

    @property
    def message_list(self) -> Tuple[str, ...]:
        """
        Validation messages, generally error messages.

        A single upload can fail validation in several ways (unencrypted, uncompressed,
        matching none of the study's schemas), and the server returns every message.
        Never None, possibly empty; each entry is a non-blank string.
        """
        return self._message_list

    @property
    def status(self) -> UploadStatus:
        return self._status

    @property
    def record(self) -> Optional[HealthDataRecord]:
        return self._record

    @classmethod
    def builder(cls) -> "UploadValidationStatusBuilder":
        """Get a new, empty builder."""
        return UploadValidationStatusBuilder()

    @classmethod
    def create(
        cls,
        id: str,
        message_list: Iterable[str],
        status: UploadStatus,
        record: Optional[HealthDataRecord] = None
    ) -> "UploadValidationStatus":
        """
        Build and validate an UploadValidationStatus in one call.

        Raises:
            InvalidEntityException: If any field is invalid
        """
        return (
            UploadValidationStatusBuilder()
            .with_id(id)
            .with_message_list(message_list)
            .with_status(status)
            .with_record(record)
            .build()
        )

    def to_builder(self) -> "UploadValidationStatusBuilder":
        """Get a builder pre-populated with this status's fields."""
        return (
            UploadValidationStatusBuilder()
            .with_id(self._id)
            .with_message_list(self._message_list)
            .with_status(self._status)
            .with_record(self._record)
        )

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, UploadValidationStatus):
            return NotImplemented
        return (
            self._id == other._id
            and self._message_list == other._message_list
            and self._status == other._status
            and self._record == other._record
        )

    def __hash__(self):
        result = 1
        for value in (self._id, self._message_list, self._status, self._record):
            result = self._HASH_PRIME * result + hash(value)
        return result

    def __str__(self):
        messages = '", "'.join(self._message_list)
        return (
            f'UploadValidationStatus[id={self._id}, status={self._status.name}, '
            f'messageList=["{messages}"], healthRecord={self._record}]'
        )

    def __repr__(self):
        return (
            f"UploadValidationStatus(id={self._id}, status={self._status.name}, "
            f"messages={len(self._message_list)})"
        )


class UploadValidationStatusBuilder:
    """Builder for UploadValidationStatus. Not thread-safe."""

    def __init__(self):
        self.id: Optional[str] = None
        self.message_list: Optional[Iterable[str]] = None
        self.status: Optional[UploadStatus] = None
        self.record: Optional[HealthDataRecord] = None

    def with_id(self, id: Optional[str]) -> "UploadValidationStatusBuilder":
        self.id = id
        return self

    def with_message_list(self, message_list: Optional[Iterable[str]]) -> "UploadValidationStatusBuilder":
        self.message_list = message_list
        return self

    def with_messages(self, *messages: str) -> "UploadValidationStatusBuilder":
        self.message_list = tuple(messages)
        return self

    def with_status(self, status: Optional[UploadStatus]) -> "UploadValidationStatusBuilder":
        self.status = status
        return self

    def with_record(self, record: Optional[HealthDataRecord]) -> "UploadValidationStatusBuilder":
        self.record = record
        return self

    def build(self) -> UploadValidationStatus:
        """
        Build and validate an UploadValidationStatus.

        id must be non-blank, message_list must be non-None and contain only
        non-blank strings, and status must be non-None. The record is not validated.

        Returns:
            A validated UploadValidationStatus

        Raises:
            InvalidEntityException: If called with invalid fields
        """
        if _is_blank(self.id):
            raise InvalidEntityException("id cannot be blank")
        if self.message_list is None:
            raise InvalidEntityException("messageList cannot be null")
        if self.status is None:
            raise InvalidEntityException("status cannot be null")
        try:
            status = UploadStatus(self.status)
        except ValueError as e:
            raise InvalidEntityException(f"status {self.status!r} is not a valid upload status") from e

        # a bare string would otherwise be split into one message per character
        if isinstance(self.message_list, (str, bytes)):
            raise InvalidEntityException("messageList must be a sequence of strings")
        try:
            message_list_copy = tuple(self.message_list)
        except TypeError as e:
            raise InvalidEntityException("messageList must be a sequence of strings") from e

        for i, message in enumerate(message_list_copy):
            if _is_blank(message):
                raise InvalidEntityException(f"messageList[{i}] is blank")

        return UploadValidationStatus(self.id, message_list_copy, status, self.record)


def _is_blank(value) -> bool:
    """True for None, non-strings, and empty or whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()
