from giveback.config import settings
from giveback.exceptions import InvalidContentError


def validate_description(description: str | None, kind: str = "Request") -> str:
    """Reject blank descriptions and ones over the configured length."""
    if not description or not description.strip():
        raise InvalidContentError(
            f"{kind} content must be at least one character long.",
            InvalidContentError.EMPTY,
        )
    if len(description) > settings.max_description_chars:
        raise InvalidContentError(
            f"{kind} content must be no more than {settings.max_description_chars} characters.",
            InvalidContentError.TOO_LONG,
        )
    return description
