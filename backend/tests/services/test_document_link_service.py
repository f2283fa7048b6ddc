"""Document Link Service tests — generatePDF handler."""

import re
from datetime import datetime, timezone

import pytest

from firmbox.core.domain_types import Locale
from firmbox.core.errors import InternalError, InvalidArgumentError
from firmbox.services.document_link import DocumentLinkService

_BASE = "https://storage.googleapis.com/firmbox-pdfs"


def test_generate_pdf_returns_placeholder_url():
    service = DocumentLinkService(_BASE)
    result = service.generate_pdf({"businessIdea": "Coffee app", "companyName": "Brew Co"})
    assert re.fullmatch(
        r"https://storage\.googleapis\.com/firmbox-pdfs/Brew-Co-biznesplan-\d+\.pdf",
        result["pdfUrl"],
    )
    assert list(result) == ["pdfUrl"]


def test_generate_pdf_uses_clock():
    moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
    service = DocumentLinkService(_BASE, clock=lambda: moment)
    result = service.generate_pdf({
        "businessIdeaId": "abc", "businessIdea": "X", "companyName": "Y",
        "competitorAnalysis": "A", "businessPlan": "B", "marketingPlan": "M",
    })
    assert result == {"pdfUrl": f"{_BASE}/Y-biznesplan-1735689600000.pdf"}


@pytest.mark.parametrize(
    "fields",
    [{}, {"businessIdea": "X"}, {"companyName": "Y"}, {"businessIdea": "", "companyName": "Y"}],
)
def test_generate_pdf_requires_idea_and_name(fields):
    service = DocumentLinkService(_BASE, locale=Locale.PL)
    with pytest.raises(InvalidArgumentError) as exc_info:
        service.generate_pdf(fields)
    assert exc_info.value.message == "Brak wymaganych danych"


def test_generate_pdf_clock_failure_becomes_internal():
    def broken_clock():
        raise OSError("clock unavailable")

    service = DocumentLinkService(_BASE, locale=Locale.PL, clock=broken_clock)
    with pytest.raises(InternalError) as exc_info:
        service.generate_pdf({"businessIdea": "X", "companyName": "Y"})
    assert exc_info.value.message == "Błąd generowania PDF"
