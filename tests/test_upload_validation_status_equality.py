"""
Equality and hashing contract tests for UploadValidationStatus.
"""
import pytest
from bridge_sdk.models.health_data_record import HealthDataRecord
from bridge_sdk.models.upload_validation_status import UploadStatus, UploadValidationStatus


def make_status(**overrides):
    fields = {
        "id": "upload123",
        "message_list": ["bad checksum", "unencrypted"],
        "status": UploadStatus.VALIDATION_FAILED,
        "record": HealthDataRecord(id="record-123", schema_id="walking-activity", data={"steps": 1})
    }
    fields.update(overrides)
    return UploadValidationStatus.create(**fields)


VARIANTS = [
    pytest.param({"id": "upload456"}, id="id"),
    pytest.param({"message_list": ["bad checksum"]}, id="message-removed"),
    pytest.param({"message_list": ["unencrypted", "bad checksum"]}, id="message-order"),
    pytest.param({"message_list": ["bad checksum", "uncompressed"]}, id="message-changed"),
    pytest.param({"status": UploadStatus.SUCCEEDED}, id="status"),
    pytest.param({"record": None}, id="record-removed"),
    pytest.param({"record": HealthDataRecord(id="record-456", schema_id="walking-activity", data={"steps": 1})}, id="record-id"),
    pytest.param({"record": HealthDataRecord(id="record-123", schema_id="walking-activity", data={"steps": 2})}, id="record-data"),
]


class TestUploadValidationStatusEquality:
    """Test structural equality and hash consistency."""

    def test_equal_fields_are_equal(self):
        first = make_status()
        second = make_status()

        assert first is not second
        assert first == second
        assert hash(first) == hash(second)

    def test_reflexive(self):
        status = make_status()
        assert status == status

    def test_symmetric(self):
        first, second = make_status(), make_status()
        assert (first == second) == (second == first)

    def test_transitive(self):
        first, second, third = make_status(), make_status(), make_status()
        assert first == second
        assert second == third
        assert first == third

    @pytest.mark.parametrize("overrides", VARIANTS)
    def test_changing_one_field_breaks_equality(self, overrides):
        original = make_status()
        changed = make_status(**overrides)

        assert original != changed
        assert changed != original

    def test_message_list_type_does_not_matter(self):
        assert make_status(message_list=["bad checksum", "unencrypted"]) == make_status(message_list=("bad checksum", "unencrypted"))

    def test_not_equal_to_other_types(self):
        status = make_status()

        assert status != "upload123"
        assert status != None  # noqa: E711
        assert (status == object()) is False

    def test_hash_depends_on_field_position(self):
        """Swapping values between id and messages yields a different hash."""
        first = make_status(id="a", message_list=["b"], record=None)
        second = make_status(id="b", message_list=["a"], record=None)

        assert first != second
        assert hash(first) != hash(second)

    def test_usable_as_set_member(self):
        statuses = {make_status(), make_status(), make_status(status=UploadStatus.SUCCEEDED)}
        assert len(statuses) == 2
