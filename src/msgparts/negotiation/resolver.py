"""Locale negotiation: pick one supported locale from user preferences.

Algorithm:
    1. Canonicalize the application's supported locales and ask the locale
       database which of them the runtime can serve.
    2. If the runtime serves none of them, the first canonical supported
       locale wins.
    3. Otherwise walk the user's preferences in order. Each preference is
       stripped of -u-/-t- extensions, canonicalized, and expanded into its
       fallback chain (zh-Hant-HK, zh-Hant, zh); the first chain entry that
       the runtime serves wins.
    4. If no preference matches, the first runtime-supported locale wins.

Every call recomputes runtime support; nothing is cached between calls.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from msgparts.constants import DEFAULT_LOCALE_MATCHER
from msgparts.diagnostics import ErrorTemplate, InvalidArgumentError
from msgparts.enums import LocaleMatcher
from msgparts.locale_utils import fallback_chain, strip_extensions

from .database import BabelLocaleDatabase, LocaleDatabase

__all__ = ["coerce_matcher", "resolve_locale"]

logger = logging.getLogger(__name__)

_DEFAULT_DATABASE = BabelLocaleDatabase()


def coerce_matcher(matcher: LocaleMatcher | str) -> LocaleMatcher:
    """Convert a matcher name to LocaleMatcher.

    Accepts the enum, its value, or the Intl spelling ``"best fit"``.

    Raises:
        InvalidArgumentError: If the matcher is unknown
    """
    if isinstance(matcher, LocaleMatcher):
        return matcher
    if not isinstance(matcher, str):
        raise InvalidArgumentError(ErrorTemplate.matcher_unknown(matcher))
    try:
        return LocaleMatcher(matcher.strip().lower().replace(" ", "-"))
    except ValueError as e:
        raise InvalidArgumentError(ErrorTemplate.matcher_unknown(matcher)) from e


def _require_tags(name: str, value: object) -> Sequence[str]:
    """Validate a non-empty sequence of non-empty strings."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidArgumentError(ErrorTemplate.argument_not_sequence(name, value))
    if not value:
        raise InvalidArgumentError(ErrorTemplate.argument_empty(name))
    for index, item in enumerate(value):
        if not isinstance(item, str) or not item:
            raise InvalidArgumentError(ErrorTemplate.argument_item_invalid(name, index, item))
    return value


def resolve_locale(
    user_locales: Sequence[str],
    supported_locales: Sequence[str],
    matcher: LocaleMatcher | str = DEFAULT_LOCALE_MATCHER,
    *,
    database: LocaleDatabase | None = None,
) -> str:
    """Select the supported locale that best fits the user's preferences.

    Args:
        user_locales: Ranked user preferences, e.g. an Accept-Language list
        supported_locales: Locales the application can serve, in priority order
        matcher: Matching mode passed through to the runtime-support query
        database: Locale database (default: Babel CLDR data)

    Returns:
        One canonical tag from supported_locales

    Raises:
        InvalidArgumentError: If either sequence is empty, is not a sequence,
            or holds a non-string or empty item; or if the matcher is unknown
        InvalidLocaleTagError: If a locale tag is malformed

    Examples:
        >>> resolve_locale(["en-US"], ["en"])
        'en'
        >>> resolve_locale(["zh-Hant-HK"], ["zh", "zh-Hant"])
        'zh-Hant'
        >>> resolve_locale(["en-US"], ["fr-FR", "de-DE"])
        'fr-FR'
    """
    _require_tags("user_locales", user_locales)
    _require_tags("supported_locales", supported_locales)
    locale_matcher = coerce_matcher(matcher)
    db = database if database is not None else _DEFAULT_DATABASE

    canonical = db.canonicalize(supported_locales)
    runtime_supported = db.supported_locales_of(canonical, locale_matcher)
    if not runtime_supported:
        logger.debug(
            "No supported locale has runtime data (%s); using first: %s",
            ", ".join(canonical),
            canonical[0],
        )
        return canonical[0]

    available = frozenset(runtime_supported)
    for raw in user_locales:
        base = db.canonicalize([strip_extensions(raw)])[0]
        for candidate in fallback_chain(base):
            if candidate in available:
                logger.debug("Negotiated locale %s from preference %s", candidate, raw)
                return candidate

    logger.debug(
        "No preference in %s matched; using first runtime-supported locale %s",
        list(user_locales),
        runtime_supported[0],
    )
    return runtime_supported[0]
