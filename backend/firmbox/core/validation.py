"""Field Validation — required-field checks run before any provider call.

Invariants:
    - A field is missing when absent, None, or empty after stripping whitespace
    - Raises InvalidArgumentError listing every missing field (wire names)
    - Pure: no IO, no logging
"""

from collections.abc import Iterable, Mapping

from firmbox.core.domain_types import RequestField
from firmbox.core.errors import ErrorContext, InvalidArgumentError


def is_blank(value: object) -> bool:
    """True for None, non-strings and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def find_missing(
    fields: Mapping[str, object], required: Iterable[RequestField],
) -> list[str]:
    return [f.value for f in required if is_blank(fields.get(f.value))]


def require_fields(
    fields: Mapping[str, object],
    required: Iterable[RequestField],
    message: str,
    context: ErrorContext | None = None,
) -> None:
    """Raise InvalidArgumentError(message) if any required field is blank."""
    missing = find_missing(fields, required)
    if missing:
        raise InvalidArgumentError(message, missing_fields=missing, context=context)
