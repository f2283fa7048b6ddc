"""Document Link — builds the placeholder URL of a business-plan PDF.

Invariants:
    - Pure: the timestamp is passed in, never read from the clock here
    - Company name is stripped, then every run of whitespace becomes a single hyphen
    - Everything else outside the unreserved URL set is percent-encoded (UTF-8),
      so the slug is always one path segment
    - Shape: <base_url>/<slug>-biznesplan-<epoch millis>.pdf

Design Decisions:
    - No file is rendered and nothing is written to storage; the URL only has
      the shape the web app expects for a future real document
"""

import re
from datetime import datetime
from urllib.parse import quote

_WHITESPACE_RUN = re.compile(r"\s+")
_DOCUMENT_SUFFIX = "biznesplan"


def slugify_company_name(company_name: str) -> str:
    hyphenated = _WHITESPACE_RUN.sub("-", company_name.strip())
    return quote(hyphenated, safe="-")


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp()) * 1000 + moment.microsecond // 1000


def build_pdf_url(base_url: str, company_name: str, moment: datetime) -> str:
    """Return the placeholder PDF URL for company_name at moment."""
    slug = slugify_company_name(company_name)
    return f"{base_url.rstrip('/')}/{slug}-{_DOCUMENT_SUFFIX}-{epoch_millis(moment)}.pdf"
