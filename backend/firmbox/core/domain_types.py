"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Every generation endpoint is a FunctionName member — no raw string matching
    - Request field names are the camelCase keys of the wire payload
    - All valid states encoded as Enums

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Field names kept camelCase: they are the public contract used by the web app
"""

from enum import Enum


class Locale(str, Enum):
    """Languages for prompts and user-facing error messages."""
    EN = "en"
    PL = "pl"


class FunctionName(str, Enum):
    """Remotely invocable functions — values are the public route names."""
    BUSINESS_IDEA = "generateBusinessIdea"
    COMPANY_NAME = "generateCompanyName"
    COMPETITOR_ANALYSIS = "generateCompetitorAnalysis"
    BUSINESS_PLAN = "generateBusinessPlan"
    MARKETING_PLAN = "generateMarketingPlan"
    PDF = "generatePDF"


class RequestField(str, Enum):
    """Named string fields a caller may send in a payload."""
    BUSINESS_IDEA_ID = "businessIdeaId"
    BUSINESS_IDEA = "businessIdea"
    COMPANY_NAME = "companyName"
    COMPETITOR_ANALYSIS = "competitorAnalysis"
    BUSINESS_PLAN = "businessPlan"
    MARKETING_PLAN = "marketingPlan"


class ErrorStatus(str, Enum):
    """The two user-visible error kinds, in callable wire form."""
    INVALID_ARGUMENT = "invalid-argument"
    INTERNAL = "internal"

    @property
    def canonical(self) -> str:
        """Upper-snake form used in the error envelope's ``status`` field."""
        return self.value.upper().replace("-", "_")
