"""Locale negotiation package.

Submodules:
    database - LocaleDatabase protocol and the Babel-backed implementation
    resolver - resolve_locale() and matcher coercion

Python 3.13+. Uses Babel for i18n.
"""

from .database import BabelLocaleDatabase, LocaleDatabase
from .resolver import coerce_matcher, resolve_locale

__all__ = [
    "BabelLocaleDatabase",
    "LocaleDatabase",
    "coerce_matcher",
    "resolve_locale",
]
