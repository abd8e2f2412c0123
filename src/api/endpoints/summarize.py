from typing import Optional

from fastapi import APIRouter, Depends

from ...services.summary_service import SummaryService
from ...utils.validation_utils import require_text
from ..dependencies import get_summary_service
from ..schemas import ErrorResponse, SummarizeRequest, SummarizeResponse

router = APIRouter()


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def summarize(
    request: Optional[SummarizeRequest] = None,
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummarizeResponse:
    """Short Hindi summary, each sentence followed by its Hebrew translation"""
    request = request or SummarizeRequest()
    text = require_text(request.text, "text")
    result = await summary_service.summarize(text, request.level)
    return SummarizeResponse(result=result)
