"""Language Strings — centralized locale-specific user-facing messages.

Invariants:
    - All strings are pure data (no IO, no computation beyond lookup)
    - Every MessageKey has an entry for every Locale
    - Failure messages are fixed: they never embed request data or error causes

Design Decisions:
    - Keyed by (MessageKey, Locale) dicts over gettext catalogs: two locales, a dozen strings
"""

from enum import Enum

from firmbox.core.domain_types import Locale


class MessageKey(str, Enum):
    """Identifiers for every user-facing message."""
    MISSING_BUSINESS_IDEA = "missing_business_idea"
    MISSING_REQUIRED_DATA = "missing_required_data"
    IDEA_FAILED = "idea_failed"
    COMPANY_NAME_FAILED = "company_name_failed"
    COMPETITOR_ANALYSIS_FAILED = "competitor_analysis_failed"
    BUSINESS_PLAN_FAILED = "business_plan_failed"
    MARKETING_PLAN_FAILED = "marketing_plan_failed"
    PDF_FAILED = "pdf_failed"


_MESSAGES: dict[MessageKey, dict[Locale, str]] = {
    MessageKey.MISSING_BUSINESS_IDEA: {
        Locale.EN: "Missing business idea",
        Locale.PL: "Brak pomysłu na biznes",
    },
    MessageKey.MISSING_REQUIRED_DATA: {
        Locale.EN: "Missing required data",
        Locale.PL: "Brak wymaganych danych",
    },
    MessageKey.IDEA_FAILED: {
        Locale.EN: "Failed to generate a business idea",
        Locale.PL: "Błąd generowania pomysłu na biznes",
    },
    MessageKey.COMPANY_NAME_FAILED: {
        Locale.EN: "Failed to generate a company name",
        Locale.PL: "Błąd generowania nazwy firmy",
    },
    MessageKey.COMPETITOR_ANALYSIS_FAILED: {
        Locale.EN: "Failed to generate the competitor analysis",
        Locale.PL: "Błąd generowania analizy konkurencji",
    },
    MessageKey.BUSINESS_PLAN_FAILED: {
        Locale.EN: "Failed to generate the business plan",
        Locale.PL: "Błąd generowania biznesplanu",
    },
    MessageKey.MARKETING_PLAN_FAILED: {
        Locale.EN: "Failed to generate the marketing plan",
        Locale.PL: "Błąd generowania planu marketingowego",
    },
    MessageKey.PDF_FAILED: {
        Locale.EN: "Failed to generate the PDF",
        Locale.PL: "Błąd generowania PDF",
    },
}


def get_message(key: MessageKey, locale: Locale) -> str:
    """Return the message for key in locale, falling back to English."""
    entries = _MESSAGES[key]
    return entries.get(locale, entries[Locale.EN])
