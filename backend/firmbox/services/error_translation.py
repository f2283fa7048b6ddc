"""Error Translation — the one place handler failures become user-visible errors.

Invariants:
    - InvalidArgumentError passes through unchanged (raised before any provider call)
    - Every other Exception becomes exactly one InternalError with the fixed message
    - The original cause is logged server-side and never copied into the message
    - CancelledError (BaseException) passes through uncaught

Design Decisions:
    - Context manager over a decorator: handlers keep their own signatures and
      the guarded region is visible at the call site
"""

import logging
from contextlib import contextmanager

from firmbox.core.errors import (
    ErrorContext,
    InternalError,
    InvalidArgumentError,
    ModelProviderError,
)

logger = logging.getLogger(__name__)


@contextmanager
def translate_failures(failure_message: str, context: ErrorContext):
    """Re-signal anything but InvalidArgumentError as InternalError(failure_message)."""
    try:
        yield
    except InvalidArgumentError as e:
        logger.info(
            f"Rejected {context.endpoint}: {e.message}",
            extra={
                "endpoint": context.endpoint,
                "error_code": e.code.value,
                "missing_fields": e.missing_fields,
            },
        )
        raise
    except ModelProviderError as e:
        logger.error(
            f"Error in {context.endpoint}: {e.message}",
            extra={
                "endpoint": context.endpoint,
                "error_code": e.code.value,
                "api_error_type": e.api_error_type,
            },
        )
        raise InternalError(failure_message, context=context) from e
    except Exception as e:
        logger.error(
            f"Unexpected error in {context.endpoint}: {e}",
            exc_info=True,
            extra={"endpoint": context.endpoint},
        )
        raise InternalError(failure_message, context=context) from e
