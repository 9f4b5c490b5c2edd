"""Validation schemas for client-side forms."""

from feedhub.schemas.auth import UserLogin, UserRegister
from feedhub.schemas.feed import FeedCreate
from feedhub.validation import ValidationSchema

EMAIL_RULES = {
    "required": "Email is required.",
    "invalid": "Invalid email format.",
}

PASSWORD_RULES = {
    "required": "Password is required.",
    "string_too_short": "Minimum 6 characters.",
    "string_too_long": "Maximum 128 characters.",
}

login_schema = ValidationSchema(
    UserLogin,
    messages={
        "email": EMAIL_RULES,
        "password": PASSWORD_RULES,
    },
)

register_schema = ValidationSchema(
    UserRegister,
    messages={
        "name": {"required": "Name is required.", "string_too_long": "Maximum 255 characters."},
        "email": EMAIL_RULES,
        "password": PASSWORD_RULES,
    },
)

feed_schema = ValidationSchema(
    FeedCreate,
    messages={
        "name": {"required": "Name is required.", "string_too_long": "Maximum 255 characters."},
        "url": {"required": "URL is required.", "invalid": "Invalid URL format."},
        "is_active": {"invalid": "Must be true or false."},
        "is_public": {"invalid": "Must be true or false."},
    },
)
