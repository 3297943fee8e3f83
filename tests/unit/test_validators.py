"""ObjectId validation helpers."""

import pytest

from app.shared.core.exceptions import InvalidIdError
from app.shared.utils.validators import ValidationResult, require_object_id, validate_object_id

pytestmark = pytest.mark.unit


class TestValidateObjectId:
    """validate_object_id / require_object_id"""

    def test_valid_id(self) -> None:
        result = validate_object_id("65f0000000000000000000ff")
        assert result.is_valid is True
        assert result.errors == []

    @pytest.mark.parametrize("value, error", [
        ("", "ID is required"),
        ("not-an-id", "Invalid ID format"),
        ("65f0000000000000000000fz", "Invalid ID format"),
    ])
    def test_invalid_id(self, value, error) -> None:
        result = validate_object_id(value)
        assert result.is_valid is False
        assert result.errors == [error]

    def test_add_error_marks_invalid(self) -> None:
        result = ValidationResult(True)
        result.add_error("ID is required")
        assert (result.is_valid, result.errors) == (False, ["ID is required"])
        assert vars(result) == {"is_valid": False, "errors": ["ID is required"]}

    def test_require_object_id_raises_with_message(self) -> None:
        with pytest.raises(InvalidIdError) as exc_info:
            require_object_id("xyz", "Invalid medicine ID format")
        assert exc_info.value.message == "Invalid medicine ID format"
        assert exc_info.value.details == {"id": "xyz"}
