"""
Translation Service Module

Coordinates the translation providers:
- Input validation before any provider is called
- Fallback chain over providers in configured order (first success wins)
- Single-provider calls and merging of several results

For the provider implementations, see providers/.
"""

from typing import List, Optional, Sequence

from wiktionary_dictionary.client import HttpClient
from wiktionary_dictionary.config import load_config
from wiktionary_dictionary.logger import get_logger
from wiktionary_dictionary.models import TranslationResult, validate_request
from wiktionary_dictionary.providers import DEFAULT_PROVIDERS, PROVIDERS, provider_name
from wiktionary_dictionary.providers.extractor import sort_contexts

logger = get_logger(__name__)

SERVICE_NAME = "wiktionary_dictionary"


def providers_from_config(config: Optional[dict] = None) -> List[type]:
    """
    Resolve the configured provider chain to provider classes.

    Unknown names are skipped with a warning. An empty result falls back
    to DEFAULT_PROVIDERS.
    """
    if config is None:
        config = load_config()

    providers = []
    for name in config.get('providers', []):
        provider_class = PROVIDERS.get(str(name).lower())
        if provider_class is None:
            logger.warning(f"Unknown provider '{name}' in configuration, skipping")
            continue
        providers.append(provider_class)

    return providers or list(DEFAULT_PROVIDERS)


class TranslationService:
    """Translation service with a provider fallback chain."""

    def __init__(self, providers: Optional[Sequence[type]] = None, client: Optional[HttpClient] = None):
        config = load_config()
        self.providers = list(providers) if providers is not None else providers_from_config(config)
        self.client = client or HttpClient.from_config(config)
        logger.debug(f"Initialized translation service with providers: {self.available_providers()}")

    def get_translation_variants(self, word: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Get translation variants for a word, trying each provider in order.

        Args:
            word: The word to translate
            source_lang: Source language (e.g., "russian")
            target_lang: Target language (e.g., "english")

        Returns:
            The first successful provider result, decorated with providers_tried
            and total_providers, or ok=False with error "All providers failed"
        """
        error = validate_request(word, source_lang, target_lang)
        if error:
            return self._error_response(error)

        providers_tried = []
        last_error = None

        for provider_class in self.providers:
            name = provider_name(provider_class)
            try:
                provider = provider_class(client=self.client)
                result = provider.translate(word, source_lang, target_lang)
                ok = result.ok

                providers_tried.append(name)

                if ok:
                    result.providers_tried = providers_tried
                    result.total_providers = len(self.providers)
                    return result

                last_error = result.error
                logger.warning(f"Provider '{name}' failed: {last_error}")

            except Exception as e:
                providers_tried.append(f"{name}_error")
                last_error = f"{provider_class.__name__}: {e}"
                logger.error(f"Provider '{name}' raised: {e}")

        return TranslationResult(
            ok=False,
            error="All providers failed",
            last_error=last_error,
            providers_tried=providers_tried,
            total_providers=len(self.providers),
            word=word,
            source_lang=source_lang,
            target_lang=target_lang,
        )

    translate = get_translation_variants

    def available_providers(self) -> List[str]:
        """Get the names of the configured providers."""
        return [provider_name(p) for p in self.providers]

    def is_provider_available(self, name: str) -> bool:
        """Check if a provider is configured (case-insensitive)."""
        if not isinstance(name, str):
            return False
        return name.lower() in self.available_providers()

    def translate_with_provider(
        self,
        name: str,
        word: str,
        source_lang: str,
        target_lang: str
    ) -> TranslationResult:
        """
        Translate using one named provider only.

        Args:
            name: Name of the provider to use (case-insensitive)
            word: The word to translate
            source_lang: Source language
            target_lang: Target language
        """
        if not isinstance(name, str) or not name.strip():
            return self._error_response("Provider name cannot be empty")

        name = name.strip()
        provider_class = next(
            (p for p in self.providers if provider_name(p) == name.lower()),
            None
        )
        if provider_class is None:
            return self._error_response(f"Provider '{name}' not found")

        try:
            provider = provider_class(client=self.client)
            result = provider.translate(word, source_lang, target_lang)
            result.providers_tried = [name.lower()]
            result.total_providers = 1
        except Exception as e:
            logger.error(f"Provider '{name}' raised: {e}")
            return self._error_response(f"Provider error: {e}")

        return result

    def merge_results(self, results: Sequence[TranslationResult]) -> Optional[TranslationResult]:
        """
        Merge results from several providers.

        Variants are deduplicated and re-sorted by length; contexts are
        deduplicated by (source, target) and re-sorted by quality and usage.
        If nothing succeeded the first input is returned unchanged.
        """
        successful = [r for r in results if r.ok]
        if not successful:
            return results[0] if results else None

        merged_variants = []
        merged_contexts = []
        providers_used = []

        for result in successful:
            merged_variants.extend(result.variants or [])
            merged_contexts.extend(result.contexts or [])
            providers_used.extend(result.providers_used or [])

        seen_pairs = set()
        unique_contexts = []
        for context in merged_contexts:
            pair = (context.source, context.target)
            if pair in seen_pairs:
                continue
            seen_pairs.add(pair)
            unique_contexts.append(context)

        first = successful[0]
        return TranslationResult(
            ok=True,
            word=first.word,
            source_lang=first.source_lang,
            target_lang=first.target_lang,
            variants=sorted(dict.fromkeys(merged_variants), key=len),
            contexts=sort_contexts(unique_contexts),
            providers_used=list(dict.fromkeys(providers_used)),
            merged_from=len(successful),
        )

    @staticmethod
    def _error_response(message: str) -> TranslationResult:
        return TranslationResult.failure(message, service=SERVICE_NAME)
