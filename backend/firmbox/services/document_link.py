"""Document Link Service — generatePDF handler.

Invariants:
    - Requires businessIdea and companyName; other fields accepted and ignored
    - No provider call, no file rendering, no storage write
    - Failures go through the same translation routine as generation handlers
"""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from firmbox.core.document_link import build_pdf_url
from firmbox.core.domain_types import FunctionName, Locale, RequestField
from firmbox.core.endpoints import PDF_REQUIRED
from firmbox.core.errors import ErrorContext
from firmbox.core.language_strings import MessageKey, get_message
from firmbox.core.validation import require_fields
from firmbox.services.error_translation import translate_failures


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentLinkService:
    """Fabricates the placeholder URL of the finished business-plan PDF."""

    def __init__(
        self,
        base_url: str,
        locale: Locale = Locale.PL,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.base_url = base_url
        self.locale = locale
        self.clock = clock

    def generate_pdf(self, fields: Mapping[str, object]) -> dict[str, str]:
        context = ErrorContext(endpoint=FunctionName.PDF.value)
        with translate_failures(
            get_message(MessageKey.PDF_FAILED, self.locale), context,
        ):
            require_fields(
                fields, PDF_REQUIRED,
                get_message(MessageKey.MISSING_REQUIRED_DATA, self.locale),
                context,
            )
            url = build_pdf_url(
                self.base_url,
                fields[RequestField.COMPANY_NAME.value],
                self.clock(),
            )
        return {"pdfUrl": url}
