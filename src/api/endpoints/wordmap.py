from typing import Optional

from fastapi import APIRouter, Depends

from ...services.wordmap_service import WordMapService
from ...utils.validation_utils import require_text
from ..dependencies import get_wordmap_service
from ..schemas import ErrorResponse, WordMapRequest, WordMapResponse

router = APIRouter()


@router.post(
    "/wordmap",
    response_model=WordMapResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def wordmap(
    request: Optional[WordMapRequest] = None,
    wordmap_service: WordMapService = Depends(get_wordmap_service),
) -> WordMapResponse:
    """Hebrew gloss for every word of a Hindi sentence, in sentence order"""
    request = request or WordMapRequest()
    sentence = require_text(request.sentence, "sentence")
    words = await wordmap_service.map_words(sentence)
    return WordMapResponse(words=words)
