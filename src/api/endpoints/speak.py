from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ...config import Settings, get_settings
from ...services.speech_service import MP3_CONTENT_TYPE, SpeechService
from ...utils.ssml import build_ssml
from ...utils.validation_utils import require_text
from ..dependencies import get_speech_service
from ..schemas import ErrorResponse, SpeakRequest

router = APIRouter()


@router.post(
    "/speak",
    response_class=Response,
    responses={
        200: {"content": {MP3_CONTENT_TYPE: {}}, "description": "MP3 audio"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def speak(
    request: Optional[SpeakRequest] = None,
    speech_service: SpeechService = Depends(get_speech_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    request = request or SpeakRequest()
    text = require_text(request.text, "text")
    ssml = build_ssml(
        text,
        rate_percent=request.rate,
        pause_ms=request.pause_ms,
        voice=settings.azure_speech_voice,
        language=settings.azure_speech_language,
    )

    audio = await speech_service.synthesize(ssml)
    return Response(
        content=audio,
        media_type=MP3_CONTENT_TYPE,
        headers={"Content-Length": str(len(audio))},
    )
