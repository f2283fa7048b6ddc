"""Callable Envelope Schemas — {"data": ...} in, {"result": ...} out.

Invariants:
    - Payload fields are untyped: any JSON value is accepted for any field
    - Only camelCase wire keys are read; unknown keys (snake_case included) are ignored
    - "data": null and a missing "data" both mean an empty payload
    - to_fields() yields wire (camelCase) keys

Design Decisions:
    - snake_case attributes with camelCase aliases: Python naming inside, web app naming on the wire
    - Type checks live in core/validation, not in Pydantic: a field an endpoint never reads
      must not fail the call, and a non-string required field must produce the
      endpoint's own invalid-argument message, not a generic validation error
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerationPayload(BaseModel):
    """Named fields accumulated by the caller across the pipeline."""
    model_config = ConfigDict(extra="ignore")

    business_idea_id: Any = Field(None, alias="businessIdeaId")
    business_idea: Any = Field(None, alias="businessIdea")
    company_name: Any = Field(None, alias="companyName")
    competitor_analysis: Any = Field(None, alias="competitorAnalysis")
    business_plan: Any = Field(None, alias="businessPlan")
    marketing_plan: Any = Field(None, alias="marketingPlan")


class CallableRequest(BaseModel):
    """Callable function request envelope."""
    data: GenerationPayload | None = None

    def to_fields(self) -> dict[str, Any]:
        payload = self.data or GenerationPayload.model_validate({})
        return payload.model_dump(by_alias=True)


class CallableResponse(BaseModel):
    """Callable function success envelope."""
    result: dict[str, str]
