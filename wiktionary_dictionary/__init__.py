"""
Wiktionary Dictionary

Translation variants for ambiguous words, with usage contexts:

    from wiktionary_dictionary import translate

    result = translate("лук", "russian", "english")
    if result.ok:
        print(result.variants)  # ['bow', 'onion', ...]
"""

__version__ = "0.1.0"

from wiktionary_dictionary.models import ContextExample, TranslationResult
from wiktionary_dictionary.service import TranslationService


def get_translation_variants(word: str, source_lang: str, target_lang: str) -> TranslationResult:
    """Translate a word with the default provider chain."""
    service = TranslationService()
    return service.get_translation_variants(word, source_lang, target_lang)


translate = get_translation_variants

__all__ = [
    '__version__',
    'ContextExample',
    'TranslationResult',
    'TranslationService',
    'get_translation_variants',
    'translate',
]
