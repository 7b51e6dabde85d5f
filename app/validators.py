from app.errors import ValidationError
from app.models import USERNAME_MAX_LENGTH


def comment_field_errors(username: str | None, text: str | None) -> list[str]:
    """
    Return one message per invalid field; an empty list means the pair is
    acceptable.  Only missing or zero-length values count as empty;
    whitespace is ordinary content.
    """
    errors: list[str] = []
    if not username:
        errors.append("username must not be empty")
    elif len(username) > USERNAME_MAX_LENGTH:
        errors.append(f"username must be at most {USERNAME_MAX_LENGTH} characters")
    if not text:
        errors.append("text must not be empty")
    return errors


def ensure_valid_comment(username: str | None, text: str | None) -> None:
    """Raise ``ValidationError`` if :func:`comment_field_errors` reports anything."""
    errors = comment_field_errors(username, text)
    if errors:
        raise ValidationError(errors)
