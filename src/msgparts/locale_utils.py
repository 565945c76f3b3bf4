"""Locale utilities for BCP-47 tag handling.

Centralizes locale tag normalization used throughout the codebase:
case/alias canonicalization backed by Babel's CLDR alias tables,
extension stripping, fallback chains, and BCP-47 to POSIX conversion
for Babel lookups.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import os

from babel import Locale
from babel.core import get_global

from msgparts.constants import SYSTEM_FALLBACK_LOCALE
from msgparts.diagnostics import ErrorTemplate, InvalidLocaleTagError

__all__ = [
    "canonicalize_locale",
    "fallback_chain",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "strip_extensions",
    "to_bcp47",
]

# Singletons introducing extension sequences that never affect matching.
_MATCH_IGNORED_SINGLETONS: frozenset[str] = frozenset({"u", "t"})

_PRIVATE_USE_SINGLETON = "x"

# RFC 5646 grandfathered tags and their CLDR canonical replacements. These
# are matched as whole tags before subtag parsing.
_GRANDFATHERED: dict[str, str] = {
    "art-lojban": "jbo",
    "cel-gaulish": "xtg",
    "en-gb-oed": "en-GB-oxendict",
    "i-ami": "ami",
    "i-bnn": "bnn",
    "i-default": "en-x-i-default",
    "i-enochian": "und-x-i-enochian",
    "i-hak": "hak",
    "i-klingon": "tlh",
    "i-lux": "lb",
    "i-mingo": "see-x-i-mingo",
    "i-navajo": "nv",
    "i-pwn": "pwn",
    "i-tao": "tao",
    "i-tay": "tay",
    "i-tsu": "tsu",
    "no-bok": "nb",
    "no-nyn": "nn",
    "sgn-be-fr": "sfb",
    "sgn-be-nl": "vgt",
    "sgn-ch-de": "sgg",
    "zh-guoyu": "zh",
    "zh-hakka": "hak",
    "zh-min": "nan-x-zh-min",
    "zh-min-nan": "nan",
    "zh-xiang": "hsn",
}


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert POSIX locale code to BCP-47 separators (inverse of normalize_locale)."""
    return locale_code.replace("_", "-")


def strip_extensions(tag: str) -> str:
    """Remove Unicode (-u-) and transform (-t-) extension sequences.

    Extensions must follow the language/script/region/variant subtags, so
    everything from the first ``u`` or ``t`` singleton onwards is dropped.
    Singletons inside a private-use sequence (after ``x``) are left alone.

    Args:
        tag: Locale tag, hyphen or underscore separated

    Returns:
        Hyphen-separated tag without extension sequences

    Example:
        >>> strip_extensions("en-US-u-ca-gregorian")
        'en-US'
        >>> strip_extensions("en-US-u-ca-gregorian-t-m0-phonebk")
        'en-US'
        >>> strip_extensions("de-DE")
        'de-DE'
    """
    subtags = to_bcp47(tag).split("-")
    for index, subtag in enumerate(subtags):
        lowered = subtag.lower()
        if lowered == _PRIVATE_USE_SINGLETON:
            break
        if index > 0 and lowered in _MATCH_IGNORED_SINGLETONS:
            return "-".join(subtags[:index])
    return "-".join(subtags)


def fallback_chain(tag: str) -> tuple[str, ...]:
    """Build the fallback chain from most specific to least specific.

    Args:
        tag: Canonical, extension-free locale tag

    Returns:
        The tag followed by each truncation down to the language subtag

    Example:
        >>> fallback_chain("zh-Hant-HK")
        ('zh-Hant-HK', 'zh-Hant', 'zh')
    """
    subtags = tag.split("-")
    return tuple("-".join(subtags[:end]) for end in range(len(subtags), 0, -1))


def _is_language(subtag: str) -> bool:
    return subtag.isalpha() and (2 <= len(subtag) <= 3 or 5 <= len(subtag) <= 8)


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and subtag.isalpha()


def _is_region(subtag: str) -> bool:
    return (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit())


def _is_variant(subtag: str) -> bool:
    if 5 <= len(subtag) <= 8:
        return True
    return len(subtag) == 4 and subtag[0].isdigit()


def _invalid(tag: object, reason: str) -> InvalidLocaleTagError:
    return InvalidLocaleTagError(ErrorTemplate.locale_tag_invalid(tag, reason), tag=tag)


def _split_extensions(tag: str, tail: list[str]) -> list[str]:
    """Validate extension and private-use sequences, returning lower-cased subtags."""
    index = 0
    while index < len(tail):
        singleton = tail[index]
        if len(singleton) != 1:
            raise _invalid(tag, f"unexpected subtag '{singleton}'")
        index += 1
        start = index
        if singleton == _PRIVATE_USE_SINGLETON:
            if any(len(subtag) > 8 for subtag in tail[index:]):
                raise _invalid(tag, "private-use subtags are at most 8 characters")
            index = len(tail)
        else:
            while index < len(tail) and 2 <= len(tail[index]) <= 8:
                index += 1
        if index == start:
            raise _invalid(tag, f"empty '{singleton}' sequence")
    return tail


def _likely_territory(language: str, script: str | None, candidates: list[str]) -> str:
    """Pick the replacement for a split territory from the language's likely region.

    Falls back to the first candidate when the likely region is not among them.
    """
    likely = get_global("likely_subtags")
    expanded = (script and likely.get(f"{language}_{script}")) or likely.get(language)
    if expanded:
        for part in expanded.split("_")[1:]:
            if _is_region(part) and part in candidates:
                return part
    return candidates[0]


def _apply_aliases(
    language: str, script: str | None, region: str | None
) -> tuple[str, str | None, str | None]:
    """Replace deprecated codes using Babel's CLDR alias tables."""
    replacement = get_global("language_aliases").get(language)
    if replacement:
        parts = replacement.split("_")
        language = parts[0]
        for part in parts[1:]:
            if _is_script(part):
                script = script or part.title()
            elif _is_region(part):
                region = region or part.upper()
    if script is not None:
        script = get_global("script_aliases").get(script, script)
    if region is not None:
        region_alias = get_global("territory_aliases").get(region)
        if isinstance(region_alias, str):
            region = region_alias
        elif region_alias:
            region = _likely_territory(language, script, region_alias)
    return language, script, region


def canonicalize_locale(tag: str) -> str:
    """Canonicalize a BCP-47 locale tag.

    Validates tag syntax, normalizes subtag case (language lower, script
    title, region upper, variants and extensions lower) and replaces
    deprecated codes via CLDR aliases. Grandfathered tags such as
    "i-klingon" are replaced whole; a deprecated region that split into
    several successors resolves to the language's likely region. Idempotent.

    Args:
        tag: Locale tag; ``_`` is accepted as a separator

    Returns:
        Canonical hyphen-separated tag

    Raises:
        InvalidLocaleTagError: If the tag is empty or not well-formed

    Example:
        >>> canonicalize_locale("zh-hant-tw")
        'zh-Hant-TW'
        >>> canonicalize_locale("en_us")
        'en-US'
        >>> canonicalize_locale("iw-IL")
        'he-IL'
    """
    if not isinstance(tag, str) or not tag:
        raise _invalid(tag, "empty tag")

    lowered = to_bcp47(tag).lower()
    subtags = _GRANDFATHERED.get(lowered, lowered).lower().split("-")
    if any(not subtag or not subtag.isascii() or not subtag.isalnum() for subtag in subtags):
        raise _invalid(tag, "subtags must be non-empty ASCII letters or digits")

    language = subtags[0]
    if not _is_language(language):
        raise _invalid(tag, f"invalid language subtag '{language}'")

    index = 1
    script: str | None = None
    region: str | None = None
    if index < len(subtags) and _is_script(subtags[index]):
        script = subtags[index].title()
        index += 1
    if index < len(subtags) and _is_region(subtags[index]):
        region = subtags[index].upper()
        index += 1
    variants: list[str] = []
    while index < len(subtags) and _is_variant(subtags[index]):
        variants.append(subtags[index])
        index += 1
    extensions = _split_extensions(tag, subtags[index:])

    language, script, region = _apply_aliases(language, script, region)
    parts = [language]
    if script:
        parts.append(script)
    if region:
        parts.append(region)
    return "-".join([*parts, *variants, *extensions])


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    return Locale.parse(normalize_locale(locale_code))


def _strip_posix_suffixes(locale_code: str) -> str:
    """Drop POSIX encoding (.UTF-8) and modifier (@euro) suffixes."""
    return locale_code.split(".")[0].split("@")[0]


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding
    suffixes. The result uses BCP-47 separators so it can be passed
    straight to resolve_locale().

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en-US" as fallback.

    Returns:
        Detected locale code in BCP-47 format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale and system_locale not in ("C", "POSIX"):
        return to_bcp47(_strip_posix_suffixes(system_locale))

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            locale_code = _strip_posix_suffixes(value)
            if locale_code not in ("C", "POSIX", ""):
                return to_bcp47(locale_code)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return SYSTEM_FALLBACK_LOCALE
