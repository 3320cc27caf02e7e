"""API errors and validation helpers."""

from app.errors import InvalidInput, validate_post_id as _validate_post_id


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_post_id(post_id) -> int:
    """Coerce a raw post id (form values arrive as strings) to a positive int."""
    try:
        value = int(post_id)
    except (TypeError, ValueError):
        raise ValidationError("Invalid Post ID") from None
    try:
        return _validate_post_id(value)
    except InvalidInput:
        raise ValidationError("Invalid Post ID") from None
