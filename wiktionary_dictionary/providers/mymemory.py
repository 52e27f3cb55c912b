"""
MyMemory API provider.

API Documentation: https://mymemory.translated.net/doc/spec.php

Request:  GET {base_url}/get?q=<word>&langpair=<src>|<tgt>
Response: see providers/extractor.py for the payload shape.
"""

from typing import Any, Dict, Optional

from wiktionary_dictionary import language_codes as lc
from wiktionary_dictionary.client import HttpClient
from wiktionary_dictionary.config import get_provider_config
from wiktionary_dictionary.logger import get_logger
from wiktionary_dictionary.models import TranslationResult, validate_request
from wiktionary_dictionary.providers.base import Provider
from wiktionary_dictionary.providers.exceptions import TranslationError
from wiktionary_dictionary.providers.extractor import (
    extract_contexts,
    extract_variants,
    validate_payload,
)

logger = get_logger(__name__)

BASE_URL = "https://api.mymemory.translated.net"


class MymemoryProvider(Provider):
    """Translation variants and contexts from the MyMemory translation memory."""

    name = "mymemory"
    display_name = "MyMemory"

    def __init__(self, client: Optional[HttpClient] = None, base_url: Optional[str] = None):
        super().__init__(client)
        if base_url is None:
            base_url = get_provider_config(self.name).get('base_url', BASE_URL)
        self.base_url = base_url.rstrip('/')

    def translate(self, word: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Translate a word and return multiple variants.

        Args:
            word: The word to translate
            source_lang: Source language name or code (e.g., "russian", "ru")
            target_lang: Target language name or code (e.g., "english")

        Returns:
            TranslationResult with variants and contexts, or ok=False with an error
        """
        try:
            error = validate_request(word, source_lang, target_lang)
            if error:
                return self.error_response(error)

            source_code = lc.normalize_language_code(source_lang)
            target_code = lc.normalize_language_code(target_lang)

            if not source_code:
                return self.error_response(f"Unsupported source language: {source_lang}")
            if not target_code:
                return self.error_response(f"Unsupported target language: {target_lang}")

            url = f"{self.base_url}/get"
            params = {
                'q': word,
                'langpair': f"{source_code}|{target_code}",
            }

            logger.debug(f"Calling {self.label} API: {params['langpair']} for '{word}'")
            response = self.client.get_request(url, params)

            if not response.get('ok'):
                logger.warning(f"{self.label} request failed: {response.get('error')}")
                return self.error_response(
                    f"API request failed: {response.get('error')}",
                    details=response.get('details'),
                )

            return self._parse_translation_response(response.get('data'), word, source_lang, target_lang)

        except TranslationError as e:
            logger.warning(f"{self.label} returned an unusable response: {e}")
            return self.error_response(str(e))
        except Exception as e:
            logger.error(f"{self.label} translation failed: {e}")
            return self.error_response(f"Unexpected error: {e}")

    def _parse_translation_response(
        self,
        data: Any,
        word: str,
        source_lang: str,
        target_lang: str
    ) -> TranslationResult:
        """Validate the payload and extract variants and contexts from it."""
        validate_payload(data)
        payload: Dict[str, Any] = data

        variants = extract_variants(payload)
        contexts = extract_contexts(payload)

        logger.info(f"{self.label} returned {len(variants)} variants for '{word}'")

        return TranslationResult(
            ok=True,
            word=word,
            source_lang=source_lang,
            target_lang=target_lang,
            variants=variants,
            contexts=contexts,
            providers_used=[self.name],
            raw_response=payload,
        )
