"""
Result types shared by providers and the translation service.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, List, Dict, Any


@dataclass(frozen=True)
class ContextExample:
    """A provider-supplied example translation pair."""
    source: str
    target: str
    quality: int = 0  # 0-100, 0 means unknown
    usage_count: int = 0
    subject: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'target': self.target,
            'quality': self.quality,
            'usage_count': self.usage_count,
            'subject': self.subject,
        }


@dataclass
class TranslationResult:
    """
    Outcome of a translate call.

    Success and failure share this shape; callers branch on ``ok``.
    Failure fields (error, provider, service, details) and fan-out fields
    (providers_tried, total_providers, last_error) stay None when unused.
    """
    ok: bool
    word: Optional[str] = None
    source_lang: Optional[str] = None
    target_lang: Optional[str] = None
    variants: List[str] = field(default_factory=list)
    contexts: List[ContextExample] = field(default_factory=list)
    providers_used: List[str] = field(default_factory=list)
    error: Optional[str] = None
    provider: Optional[str] = None
    service: Optional[str] = None
    details: Optional[str] = None
    last_error: Optional[str] = None
    providers_tried: Optional[List[str]] = None
    total_providers: Optional[int] = None
    merged_from: Optional[int] = None
    raw_response: Optional[Dict[str, Any]] = field(default=None, repr=False)

    @classmethod
    def failure(cls, message: str, **kwargs) -> 'TranslationResult':
        """Build a failed result."""
        return cls(ok=False, error=message, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, omitting unset fields."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == 'contexts':
                value = [c.to_dict() for c in value]
            data[f.name] = value
        return data


def validate_request(word: Optional[str], source_lang: Optional[str], target_lang: Optional[str]) -> Optional[str]:
    """
    Check a translation request before any lookup or network call.

    Returns:
        Error message for the first empty field, or None if valid
    """
    if not isinstance(word, str) or not word.strip():
        return "Word cannot be empty"
    if not isinstance(source_lang, str) or not source_lang.strip():
        return "Source language cannot be empty"
    if not isinstance(target_lang, str) or not target_lang.strip():
        return "Target language cannot be empty"
    return None
