"""
Provider base class.

A provider wraps one external translation API behind a uniform
``translate(word, source_lang, target_lang) -> TranslationResult`` call.
Subclasses register themselves under their ``name`` when defined, in
definition order.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Optional, Type

from wiktionary_dictionary.client import HttpClient
from wiktionary_dictionary.logger import get_logger
from wiktionary_dictionary.models import TranslationResult

logger = get_logger(__name__)


class Provider(ABC):
    """Abstract base class for translation providers."""

    name: ClassVar[str] = ""
    display_name: ClassVar[str] = ""

    registered: ClassVar[Dict[str, Type['Provider']]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not cls.name:
            return  # Unnamed (abstract or test) subclasses are not registered

        if cls.name in cls.registered:
            raise ValueError(f"A provider named '{cls.name}' is already registered")

        cls.registered[cls.name] = cls

    def __init__(self, client: Optional[HttpClient] = None):
        self.client = client or HttpClient.from_config()

    @abstractmethod
    def translate(self, word: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Translate a word and return its variants.

        Must never raise; every failure is reported as ok=False.
        """
        raise NotImplementedError

    @property
    def label(self) -> str:
        """Human-readable provider name for log messages."""
        return self.display_name or self.name

    def error_response(self, message: str, details: Optional[str] = None) -> TranslationResult:
        """Create a failed result tagged with this provider."""
        return TranslationResult.failure(message, provider=self.name, details=details)


def provider_name(provider_class: type) -> str:
    """Name of a provider class, falling back to its lowercased class name."""
    return getattr(provider_class, 'name', '') or provider_class.__name__.lower()
