"""Tests for form validation schemas."""

import pytest
from pydantic import BaseModel, Field

from feedhub.client.schemas import feed_schema, login_schema, register_schema
from feedhub.exceptions import FieldValidationError
from feedhub.schemas.auth import UserLogin
from feedhub.validation import Invalid, Valid, ValidationSchema, field_errors, field_path


def test_login_valid():
    """Test valid credentials parse into the request model."""
    result = login_schema.check({"email": "ada@example.com", "password": "analytical"})

    assert isinstance(result, Valid)
    assert isinstance(result.value, UserLogin)
    assert result.value.email == "ada@example.com"


def test_login_invalid_email():
    """Test a malformed email gets the format message."""
    result = login_schema.check({"email": "not-an-email", "password": "analytical"})

    assert isinstance(result, Invalid)
    assert result.errors == {"email": "Invalid email format."}


def test_login_short_password():
    """Test a five character password fails the minimum length rule."""
    result = login_schema.check({"email": "ada@example.com", "password": "12345"})

    assert isinstance(result, Invalid)
    assert result.errors == {"password": "Minimum 6 characters."}


def test_login_collects_every_violation():
    """Test all failing fields are reported in one pass."""
    result = login_schema.check({"email": "nope", "password": "123"})

    assert result.errors == {
        "email": "Invalid email format.",
        "password": "Minimum 6 characters.",
    }


@pytest.mark.parametrize("data", [{}, {"email": "", "password": ""}, {"email": None, "password": None}])
def test_login_required(data):
    """Test missing, empty and null values get the required message."""
    result = login_schema.check(data)

    assert result.errors == {
        "email": "Email is required.",
        "password": "Password is required.",
    }


def test_register_requires_name():
    """Test registration needs a display name."""
    result = register_schema.check({"name": "", "email": "ada@example.com", "password": "secret1"})
    assert result.errors == {"name": "Name is required."}


def test_feed_empty_name():
    """Test feed creation blocks an empty name."""
    result = feed_schema.check({"name": "", "url": "https://example.com/rss"})
    assert result.errors == {"name": "Name is required."}


def test_feed_invalid_url():
    """Test feed creation rejects non-URLs."""
    result = feed_schema.check({"name": "Feed", "url": "example dot com"})
    assert result.errors == {"url": "Invalid URL format."}


def test_feed_defaults():
    """Test active defaults on and public defaults off."""
    result = feed_schema.check({"name": "Feed", "url": "https://example.com/rss"})

    assert isinstance(result, Valid)
    assert result.value.is_active is True
    assert result.value.is_public is False


def test_validate_raises_with_field_map():
    """Test the raising form carries the same error map."""
    with pytest.raises(FieldValidationError) as exc_info:
        login_schema.validate({"email": "nope", "password": "analytical"})

    assert exc_info.value.errors == {"email": "Invalid email format."}


def test_validate_returns_model():
    """Test the raising form returns the parsed model on success."""
    value = login_schema.validate({"email": "ada@example.com", "password": "analytical"})
    assert value.password == "analytical"


def test_schema_without_messages_uses_pydantic_text():
    """Test fields without a message table fall back to pydantic's message."""
    schema = ValidationSchema(UserLogin)
    result = schema.check({"email": "ada@example.com"})
    assert result.errors == {"password": "Field required"}


def test_field_path():
    """Test error locations join into dotted paths."""
    assert field_path(("email",)) == "email"
    assert field_path(("items", 0, "name")) == "items.0.name"
    assert field_path(()) == "__root__"


def test_fields_named_like_request_locations():
    """Test form fields called `path` or `body` keep their own names."""

    class Upload(BaseModel):
        path: str = Field(..., min_length=1)
        body: str = Field(..., min_length=1)

    schema = ValidationSchema(
        Upload,
        messages={"path": {"required": "Path is required."}, "body": {"required": "Body is required."}},
    )

    result = schema.check({"path": "", "body": ""})

    assert result.errors == {"path": "Path is required.", "body": "Body is required."}


def test_field_errors_first_message_wins():
    """Test a field reports only its first error."""
    errors = [
        {"loc": ("email",), "type": "value_error", "msg": "first"},
        {"loc": ("email",), "type": "string_too_long", "msg": "second"},
        {"loc": ("name",), "type": "missing", "msg": "Field required"},
    ]
    assert field_errors(errors) == {"email": "first", "name": "Field required"}
