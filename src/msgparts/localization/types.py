"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating MessageConfig and Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleCode",
    "MessageArgs",
    "MessageVariants",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'nl-NL', 'zh-Hant-HK')."""

type MessageArgs = Mapping[str, object]
"""Arguments passed to the formatting engine (e.g., {'name': 'Ada'})."""

type MessageVariants = Mapping[LocaleCode, object]
"""One message in every locale, keyed by locale code."""
