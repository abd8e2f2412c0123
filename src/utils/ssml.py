"""
SSML assembly for Hindi speech synthesis.

The input text is spoken word by word: words are XML-escaped and joined either
by a plain space or, when a pause is requested, by an explicit ``<break/>``.
"""

from typing import Any

from .string_utils import split_words
from .validation_utils import clamp, coerce_number

SSML_NAMESPACE = "http://www.w3.org/2001/10/synthesis"

DEFAULT_RATE = 100
MIN_RATE, MAX_RATE = 60, 140
DEFAULT_PAUSE_MS = 0
MIN_PAUSE_MS, MAX_PAUSE_MS = 0, 2000

# Upper bound (inclusive) of each prosody tier, checked in order.
PROSODY_TIERS = (
    (80, "x-slow"),
    (95, "slow"),
    (110, "medium"),
    (125, "fast"),
)
FASTEST_TIER = "x-fast"

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    escaped = str(text)
    for char, entity in _XML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def clamp_rate(rate_percent: Any) -> float:
    return clamp(coerce_number(rate_percent, DEFAULT_RATE), MIN_RATE, MAX_RATE)


def clamp_pause(pause_ms: Any) -> float:
    return clamp(coerce_number(pause_ms, DEFAULT_PAUSE_MS), MIN_PAUSE_MS, MAX_PAUSE_MS)


def rate_to_prosody(rate_percent: Any) -> str:
    rate = clamp_rate(rate_percent)
    for upper_bound, tier in PROSODY_TIERS:
        if rate <= upper_bound:
            return tier
    return FASTEST_TIER


def build_ssml(
    text: str,
    rate_percent: Any = DEFAULT_RATE,
    pause_ms: Any = DEFAULT_PAUSE_MS,
    voice: str = "hi-IN-SwaraNeural",
    language: str = "hi-IN",
) -> str:
    prosody = rate_to_prosody(rate_percent)
    pause = clamp_pause(pause_ms)

    joiner = f'<break time="{pause}ms"/>' if pause > 0 else " "
    body = joiner.join(escape_xml(word) for word in split_words(text))

    return (
        f'<speak version="1.0" xml:lang="{language}" xmlns="{SSML_NAMESPACE}">\n'
        f'  <voice name="{voice}">\n'
        f'    <prosody rate="{prosody}">\n'
        f"      {body}\n"
        f"    </prosody>\n"
        f"  </voice>\n"
        f"</speak>"
    )
