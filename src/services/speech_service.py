import asyncio
from typing import Any, Dict, Optional

import azure.cognitiveservices.speech as speechsdk
import structlog

from ..core.exceptions import ProviderError

logger = structlog.get_logger(__name__)

MP3_CONTENT_TYPE = "audio/mpeg"


class SpeechService:
    """Azure neural text-to-speech, SSML in, MP3 bytes out."""

    def __init__(
        self,
        speech_key: Optional[str],
        speech_region: Optional[str],
        voice_name: str = "hi-IN-SwaraNeural",
        output_format: Any = None,
    ):
        self.speech_key = speech_key
        self.speech_region = speech_region
        self.voice_name = voice_name
        self.output_format = output_format or speechsdk.SpeechSynthesisOutputFormat.Audio16Khz32KBitRateMonoMp3

    def _create_synthesizer(self) -> speechsdk.SpeechSynthesizer:
        speech_config = speechsdk.SpeechConfig(subscription=self.speech_key, region=self.speech_region)
        speech_config.speech_synthesis_voice_name = self.voice_name
        speech_config.set_speech_synthesis_output_format(self.output_format)
        # audio_config=None keeps the audio in memory instead of playing it
        return speechsdk.SpeechSynthesizer(speech_config=speech_config, audio_config=None)

    async def synthesize(self, ssml: str) -> bytes:
        try:
            synthesizer = self._create_synthesizer()
        except Exception as e:
            logger.error("Failed to set up speech synthesizer", error=str(e))
            raise ProviderError("Speech setup error", details=str(e)) from e

        def synthesize_sync():
            return synthesizer.speak_ssml_async(ssml).get()

        loop = asyncio.get_event_loop()
        try:
            result = await loop.run_in_executor(None, synthesize_sync)
        except Exception as e:
            logger.error("Speech synthesis failed", error=str(e))
            raise ProviderError("Speech error", details=str(e)) from e

        if result.reason != speechsdk.ResultReason.SynthesizingAudioCompleted:
            details = self._incomplete_details(result)
            logger.warning("Speech synthesis not completed", **details)
            raise ProviderError("Speech not completed", details=details)

        audio = bytes(result.audio_data)
        logger.info("Speech synthesis completed", audio_bytes=len(audio), voice=self.voice_name)
        return audio

    @staticmethod
    def _incomplete_details(result) -> Dict[str, Any]:
        details: Dict[str, Any] = {"reason": str(result.reason)}
        cancellation = getattr(result, "cancellation_details", None)
        if cancellation is not None:
            details["cancellation_reason"] = str(cancellation.reason)
            if cancellation.error_details:
                details["error_details"] = cancellation.error_details
        return details
