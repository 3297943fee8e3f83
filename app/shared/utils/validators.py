# 📄 File: app/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# This file contains checkers that make sure identifiers sent to the app are well formed
# before we go looking for them in the database.
# 🧪 Purpose (Technical Summary):
# Reusable validation helpers returning ValidationResult objects, plus a raising variant for
# MongoDB ObjectId path parameters used by every module.
# 🔗 Dependencies:
# bson (ObjectId), typing, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Marketplace and plant advisor handlers (path id validation)

from typing import List

from bson import ObjectId

from app.shared.core.exceptions import InvalidIdError


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False


def validate_object_id(value: str) -> ValidationResult:
    """
    Validate MongoDB ObjectId format (24 hex characters)

    Args:
        value: Identifier string to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not value or not isinstance(value, str):
        result.add_error("ID is required")
        return result

    if not ObjectId.is_valid(value):
        result.add_error("Invalid ID format")

    return result


def require_object_id(value: str, message: str = "Invalid ID format") -> str:
    """
    Return the id unchanged, or raise if it is not a valid ObjectId.

    Raises:
        InvalidIdError: If value is not a 24-character hex string
    """
    if not validate_object_id(value).is_valid:
        raise InvalidIdError(message, resource_id=value)
    return value

