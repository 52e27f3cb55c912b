"""
Language name mappings and utilities.

Every provider works with ISO 639-1 two-letter codes (en, ru, zh). Users
type language names ("russian"), ISO 639-2 codes ("rus") or nicknames
("mandarin"); normalize_language_code() turns all of those into the
two-letter code.

Lookup order:
1. Input is already a supported two-letter code
2. Input is a canonical language name
3. Input is an alias of a canonical language name
"""

from types import MappingProxyType
from typing import Optional, Dict, List

# Canonical language names -> ISO 639-1 codes
# Source: https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes
LANGUAGE_CODES = MappingProxyType({
    # Major languages
    'english': 'en',
    'spanish': 'es',
    'french': 'fr',
    'german': 'de',
    'italian': 'it',
    'portuguese': 'pt',
    'russian': 'ru',
    'chinese': 'zh',
    'japanese': 'ja',
    'korean': 'ko',
    'arabic': 'ar',
    'hindi': 'hi',

    # European languages
    'dutch': 'nl',
    'swedish': 'sv',
    'norwegian': 'no',
    'danish': 'da',
    'finnish': 'fi',
    'polish': 'pl',
    'czech': 'cs',
    'slovak': 'sk',
    'hungarian': 'hu',
    'romanian': 'ro',
    'bulgarian': 'bg',
    'croatian': 'hr',
    'serbian': 'sr',
    'slovenian': 'sl',
    'estonian': 'et',
    'latvian': 'lv',
    'lithuanian': 'lt',
    'greek': 'el',
    'turkish': 'tr',

    # Other languages
    'hebrew': 'he',
    'thai': 'th',
    'vietnamese': 'vi',
    'indonesian': 'id',
    'malay': 'ms',
    'filipino': 'tl',
    'ukrainian': 'uk',
    'belarusian': 'be',
    'persian': 'fa',
    'urdu': 'ur',
    'bengali': 'bn',
    'tamil': 'ta',
    'telugu': 'te',
    'marathi': 'mr',
    'gujarati': 'gu',
    'kannada': 'kn',
    'malayalam': 'ml',
    'punjabi': 'pa',
    'nepali': 'ne',
    'sinhala': 'si',
    'burmese': 'my',
    'khmer': 'km',
    'lao': 'lo',
    'georgian': 'ka',
    'armenian': 'hy',
    'azerbaijani': 'az',
    'kazakh': 'kk',
    'kyrgyz': 'ky',
    'tajik': 'tg',
    'turkmen': 'tk',
    'uzbek': 'uz',
    'mongolian': 'mn',
    'tibetan': 'bo',
    'swahili': 'sw',
    'amharic': 'am',
    'yoruba': 'yo',
    'igbo': 'ig',
    'hausa': 'ha',
    'zulu': 'zu',
    'afrikaans': 'af',
    'xhosa': 'xh',
    'somali': 'so',
    'malagasy': 'mg',
    'esperanto': 'eo',
    'latin': 'la',
})

# Alternative names, ISO 639-2 codes and nicknames -> canonical names
LANGUAGE_ALIASES = MappingProxyType({
    # English variants
    'en': 'english',
    'eng': 'english',

    # Spanish variants
    'es': 'spanish',
    'spa': 'spanish',
    'castilian': 'spanish',

    # French variants
    'fr': 'french',
    'fra': 'french',
    'fre': 'french',

    # German variants
    'de': 'german',
    'deu': 'german',
    'ger': 'german',
    'deutsch': 'german',

    # Russian variants
    'ru': 'russian',
    'rus': 'russian',

    # Chinese variants
    'zh': 'chinese',
    'chi': 'chinese',
    'zho': 'chinese',
    'mandarin': 'chinese',
    'simplified chinese': 'chinese',
    'traditional chinese': 'chinese',

    # Portuguese variants
    'pt': 'portuguese',
    'por': 'portuguese',
    'brazilian': 'portuguese',
    'brazilian portuguese': 'portuguese',

    # Italian variants
    'it': 'italian',
    'ita': 'italian',

    # Japanese variants
    'ja': 'japanese',
    'jpn': 'japanese',

    # Korean variants
    'ko': 'korean',
    'kor': 'korean',

    # Arabic variants
    'ar': 'arabic',
    'ara': 'arabic',

    # Dutch variants
    'nl': 'dutch',
    'nld': 'dutch',
    'flemish': 'dutch',
})

# Reverse mapping: code -> canonical name
CODE_TO_NAME = MappingProxyType({code: name for name, code in LANGUAGE_CODES.items()})


def _clean(language: Optional[str]) -> Optional[str]:
    """Trim and lowercase input, or None if there is nothing to look up."""
    if not isinstance(language, str) or not language.strip():
        return None
    return language.strip().lower()


def normalize_language_code(language: Optional[str]) -> Optional[str]:
    """
    Normalize a language name, alias or code to an ISO 639-1 code.

    Args:
        language: Language name or code (case and surrounding whitespace ignored)

    Returns:
        Two-letter language code or None if not supported

    Examples:
        >>> normalize_language_code('Russian')
        'ru'
        >>> normalize_language_code(' rus ')
        'ru'
        >>> normalize_language_code('mandarin')
        'zh'
        >>> normalize_language_code('klingon')
    """
    value = _clean(language)
    if value is None:
        return None

    if value in CODE_TO_NAME:
        return value

    if value in LANGUAGE_CODES:
        return LANGUAGE_CODES[value]

    canonical_name = LANGUAGE_ALIASES.get(value)
    if canonical_name:
        return LANGUAGE_CODES.get(canonical_name)

    return None


def canonical_language_name(language: Optional[str]) -> Optional[str]:
    """
    Get the canonical language name from a code, name or alias.

    Examples:
        >>> canonical_language_name('ru')
        'russian'
        >>> canonical_language_name('Castilian')
        'spanish'
    """
    value = _clean(language)
    if value is None:
        return None

    if value in LANGUAGE_CODES:
        return value

    if value in CODE_TO_NAME:
        return CODE_TO_NAME[value]

    return LANGUAGE_ALIASES.get(value)


def is_supported_language(language: Optional[str]) -> bool:
    """Check if a language name, alias or code is supported."""
    return normalize_language_code(language) is not None


def get_supported_languages() -> List[str]:
    """Get all supported canonical language names, sorted."""
    return sorted(LANGUAGE_CODES.keys())


def get_supported_language_codes() -> List[str]:
    """Get all supported language codes, sorted and deduplicated."""
    return sorted(set(LANGUAGE_CODES.values()))


def get_language_pairs() -> Dict[str, str]:
    """
    Get all language names with their codes.

    Returns:
        Dict mapping canonical name to code (a copy)
    """
    return dict(LANGUAGE_CODES)
