"""Locale database boundary for negotiation.

Negotiation needs exactly two read-only queries from the platform's locale
database: canonicalize a list of tags, and report which canonical tags the
running installation can actually serve. LocaleDatabase is the protocol for
those queries; BabelLocaleDatabase answers them from Babel's CLDR data.

Thread Safety:
    BabelLocaleDatabase holds no state. Babel's locale data loading is
    internally synchronized.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from babel import UnknownLocaleError, localedata

from msgparts.enums import LocaleMatcher
from msgparts.locale_utils import (
    canonicalize_locale,
    fallback_chain,
    get_babel_locale,
    normalize_locale,
    strip_extensions,
)

__all__ = ["BabelLocaleDatabase", "LocaleDatabase"]


class LocaleDatabase(Protocol):
    """Read-only locale database queried during negotiation."""

    def canonicalize(self, tags: Sequence[str]) -> list[str]:
        """Return canonical tags, de-duplicated, in first-occurrence order.

        Raises:
            InvalidLocaleTagError: If any tag is malformed
        """
        ...

    def supported_locales_of(
        self, tags: Sequence[str], matcher: LocaleMatcher
    ) -> list[str]:
        """Return the subset of ``tags`` the runtime supports, in input order."""
        ...


@dataclass(frozen=True, slots=True)
class BabelLocaleDatabase:
    """LocaleDatabase backed by Babel's CLDR locale data.

    Runtime support semantics mirror Intl.*.supportedLocalesOf():
        - LOOKUP: a tag is supported if any truncation of its extension-free
          form has locale data (RFC 4647 lookup).
        - BEST_FIT: additionally accepts tags Babel can resolve through
          alias and likely-subtag matching (e.g. ``zh-TW``).

    Returned tags keep the caller's spelling; the database only filters.

    Examples:
        >>> db = BabelLocaleDatabase()
        >>> db.canonicalize(["en-us", "EN-US", "fr"])
        ['en-US', 'fr']
        >>> db.supported_locales_of(["en-US", "xx-YY"], LocaleMatcher.LOOKUP)
        ['en-US']
    """

    def canonicalize(self, tags: Sequence[str]) -> list[str]:
        return list(dict.fromkeys(canonicalize_locale(tag) for tag in tags))

    def supported_locales_of(
        self, tags: Sequence[str], matcher: LocaleMatcher
    ) -> list[str]:
        if matcher is LocaleMatcher.LOOKUP:
            return [tag for tag in tags if self._has_lookup_data(tag)]
        return [
            tag for tag in tags if self._has_lookup_data(tag) or self._has_best_fit_data(tag)
        ]

    @staticmethod
    def _has_lookup_data(tag: str) -> bool:
        for candidate in fallback_chain(strip_extensions(tag)):
            try:
                if localedata.exists(normalize_locale(candidate)):
                    return True
            except ValueError:
                # Babel rejects identifiers that cannot name a data file
                continue
        return False

    @staticmethod
    def _has_best_fit_data(tag: str) -> bool:
        try:
            get_babel_locale(strip_extensions(tag))
        except (UnknownLocaleError, ValueError):
            return False
        return True
