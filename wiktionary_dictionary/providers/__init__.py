"""
Providers Module

This module provides the translation providers and their shared pieces:
- Provider: abstract base class and registry
- MymemoryProvider: MyMemory translation memory API
- Response extraction helpers
"""

from wiktionary_dictionary.providers.exceptions import TranslationError
from wiktionary_dictionary.providers.base import Provider, provider_name
from wiktionary_dictionary.providers.mymemory import MymemoryProvider

# Registered providers, keyed by name in definition order
PROVIDERS = Provider.registered

# Default provider chain - order matters (most reliable first)
DEFAULT_PROVIDERS = (MymemoryProvider,)

__all__ = [
    'TranslationError',
    'Provider',
    'provider_name',
    'MymemoryProvider',
    'PROVIDERS',
    'DEFAULT_PROVIDERS',
]
