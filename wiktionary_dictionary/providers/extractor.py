"""
Response extraction for MyMemory-style payloads.

Turns a parsed API response into:
- an ordered list of unique translation variants (shortest first)
- an ordered list of context examples (best quality first)

Payload shape:
    {
        "responseStatus": 200,
        "responseDetails": "",
        "responseData": {"translatedText": "onion"},
        "matches": [
            {"segment": "лук", "translation": "bow", "quality": "74",
             "usage-count": 2, "subject": "All"},
            ...
        ]
    }
"""

import re
from typing import List, Dict, Any

from wiktionary_dictionary.logger import get_logger
from wiktionary_dictionary.models import ContextExample
from wiktionary_dictionary.providers.exceptions import TranslationError

logger = get_logger(__name__)

SUCCESS_STATUS = 200

# Matches with a known quality below this are dropped
MIN_CONTEXT_QUALITY = 50
MAX_CONTEXT_QUALITY = 100

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_int(value: Any) -> int:
    """
    Leniently parse an integer field.

    Examples:
        >>> parse_int("74")
        74
        >>> parse_int("74.5")
        74
        >>> parse_int(None)
        0
        >>> parse_int("n/a")
        0
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return 0


def _matches(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the match records of a payload, skipping anything malformed."""
    matches = payload.get('matches')
    if not isinstance(matches, list):
        return []
    return [m for m in matches if isinstance(m, dict)]


def validate_payload(payload: Any) -> None:
    """
    Check that a payload is a successful API response.

    Raises:
        TranslationError: If the payload is not a mapping or its status is not success
    """
    if not isinstance(payload, dict):
        raise TranslationError("Invalid API response", code="invalid_response")

    status = payload.get('responseStatus')
    if status != SUCCESS_STATUS:
        raise TranslationError(
            f"API error: {payload.get('responseDetails')}",
            code="api_error",
            details={"status": status}
        )


def extract_variants(payload: Dict[str, Any]) -> List[str]:
    """
    Extract unique translation variants.

    The main translation comes first, then alternatives from matches that
    differ from every earlier candidate ignoring case. The result is sorted
    by length (stable), so the base form of an ambiguous word tends to
    lead: ["bow", "onion", "leek"].
    """
    variants = []

    response_data = payload.get('responseData')
    if isinstance(response_data, dict):
        main_translation = response_data.get('translatedText')
        if isinstance(main_translation, str) and main_translation.strip():
            variants.append(main_translation.strip())

    for match in _matches(payload):
        translation = match.get('translation')
        if not isinstance(translation, str):
            continue

        translation = translation.strip()
        if not translation:
            continue

        lowered = translation.lower()
        if not any(v.lower() == lowered for v in variants):
            variants.append(translation)

    # Exact dedup keeps first occurrence
    unique = list(dict.fromkeys(variants))
    return sorted(unique, key=len)


def extract_contexts(payload: Dict[str, Any]) -> List[ContextExample]:
    """Extract context examples, dropping low-quality matches."""
    contexts = []

    for match in _matches(payload):
        segment = match.get('segment')
        translation = match.get('translation')
        if segment is None or translation is None:
            continue

        # Quality 0 means the provider did not report one
        quality = parse_int(match.get('quality'))
        if 0 < quality < MIN_CONTEXT_QUALITY:
            continue

        contexts.append(ContextExample(
            source=segment,
            target=translation,
            quality=min(max(quality, 0), MAX_CONTEXT_QUALITY),
            usage_count=max(parse_int(match.get('usage-count')), 0),
            subject=match.get('subject'),
        ))

    logger.debug(f"Extracted {len(contexts)} contexts from {len(_matches(payload))} matches")

    return sort_contexts(contexts)


def sort_contexts(contexts: List[ContextExample]) -> List[ContextExample]:
    """Sort contexts by quality, then usage count, both descending."""
    return sorted(contexts, key=lambda c: (-c.quality, -c.usage_count))
