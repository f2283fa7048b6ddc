"""Callable Functions — the six remotely invocable endpoints.

Invariants:
    - Each route takes the callable envelope {"data": {...}} and answers {"result": {...}}
    - Routes contain no business logic: they delegate to GenerationService / DocumentLinkService
    - Errors propagate as FirmboxError and are rendered by the global handlers

Design Decisions:
    - One explicit route per function (no loop registration): the route table is
      readable as the public API
"""

from fastapi import APIRouter, Depends

from firmbox.api.deps import get_document_link_service, get_generation_service
from firmbox.core.domain_types import FunctionName
from firmbox.schemas.callable import CallableRequest, CallableResponse
from firmbox.services.document_link import DocumentLinkService
from firmbox.services.generation import GenerationService

router = APIRouter(prefix="/api/v1/functions", tags=["functions"])


def _fields(body: CallableRequest | None) -> dict[str, object]:
    return (body or CallableRequest()).to_fields()


async def _generate(
    service: GenerationService,
    function: FunctionName,
    body: CallableRequest | None,
) -> CallableResponse:
    result = await service.generate(function, _fields(body))
    return CallableResponse(result=result)


@router.post("/generateBusinessIdea", response_model=CallableResponse)
async def generate_business_idea(
    body: CallableRequest | None = None,
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, FunctionName.BUSINESS_IDEA, body)


@router.post("/generateCompanyName", response_model=CallableResponse)
async def generate_company_name(
    body: CallableRequest | None = None,
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, FunctionName.COMPANY_NAME, body)


@router.post("/generateCompetitorAnalysis", response_model=CallableResponse)
async def generate_competitor_analysis(
    body: CallableRequest | None = None,
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, FunctionName.COMPETITOR_ANALYSIS, body)


@router.post("/generateBusinessPlan", response_model=CallableResponse)
async def generate_business_plan(
    body: CallableRequest | None = None,
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, FunctionName.BUSINESS_PLAN, body)


@router.post("/generateMarketingPlan", response_model=CallableResponse)
async def generate_marketing_plan(
    body: CallableRequest | None = None,
    service: GenerationService = Depends(get_generation_service),
):
    return await _generate(service, FunctionName.MARKETING_PLAN, body)


@router.post("/generatePDF", response_model=CallableResponse)
async def generate_pdf(
    body: CallableRequest | None = None,
    service: DocumentLinkService = Depends(get_document_link_service),
):
    """Placeholder: returns a well-formed URL, no document is produced."""
    return CallableResponse(result=service.generate_pdf(_fields(body)))
