"""Endpoint Catalog — immutable per-endpoint generation parameters.

Invariants:
    - One EndpointSpec per generation function (generatePDF is not a generation endpoint)
    - Specs are frozen: never mutated after import
    - Required fields are checked in declaration order

Design Decisions:
    - Explicit dict mapping over decorators/auto-discovery (no convention-over-config)
    - Token budget and temperature live beside the output field so one table
      describes the whole public surface of a handler
"""

from dataclasses import dataclass

from firmbox.core.domain_types import FunctionName, RequestField
from firmbox.core.language_strings import MessageKey


@dataclass(frozen=True)
class EndpointSpec:
    """Everything a generation handler needs besides the payload."""
    function: FunctionName
    output_field: str
    max_tokens: int
    temperature: float
    failure_message: MessageKey
    required: tuple[RequestField, ...] = ()
    missing_message: MessageKey = MessageKey.MISSING_REQUIRED_DATA
    strip_output: bool = False


ENDPOINTS: dict[FunctionName, EndpointSpec] = {
    FunctionName.BUSINESS_IDEA: EndpointSpec(
        function=FunctionName.BUSINESS_IDEA,
        output_field="idea",
        max_tokens=150,
        temperature=0.8,
        failure_message=MessageKey.IDEA_FAILED,
    ),
    FunctionName.COMPANY_NAME: EndpointSpec(
        function=FunctionName.COMPANY_NAME,
        output_field="companyName",
        max_tokens=30,
        temperature=0.9,
        failure_message=MessageKey.COMPANY_NAME_FAILED,
        required=(RequestField.BUSINESS_IDEA,),
        missing_message=MessageKey.MISSING_BUSINESS_IDEA,
        strip_output=True,
    ),
    FunctionName.COMPETITOR_ANALYSIS: EndpointSpec(
        function=FunctionName.COMPETITOR_ANALYSIS,
        output_field="analysis",
        max_tokens=1000,
        temperature=0.7,
        failure_message=MessageKey.COMPETITOR_ANALYSIS_FAILED,
        required=(RequestField.BUSINESS_IDEA, RequestField.COMPANY_NAME),
    ),
    FunctionName.BUSINESS_PLAN: EndpointSpec(
        function=FunctionName.BUSINESS_PLAN,
        output_field="businessPlan",
        max_tokens=1500,
        temperature=0.6,
        failure_message=MessageKey.BUSINESS_PLAN_FAILED,
        required=(RequestField.BUSINESS_IDEA, RequestField.COMPANY_NAME),
    ),
    FunctionName.MARKETING_PLAN: EndpointSpec(
        function=FunctionName.MARKETING_PLAN,
        output_field="marketingPlan",
        max_tokens=1200,
        temperature=0.7,
        failure_message=MessageKey.MARKETING_PLAN_FAILED,
        required=(RequestField.BUSINESS_IDEA, RequestField.COMPANY_NAME),
    ),
}

# generatePDF shares the validation rule of the chained endpoints
PDF_REQUIRED: tuple[RequestField, ...] = (
    RequestField.BUSINESS_IDEA, RequestField.COMPANY_NAME,
)


def get_endpoint(function: FunctionName) -> EndpointSpec:
    return ENDPOINTS[function]
