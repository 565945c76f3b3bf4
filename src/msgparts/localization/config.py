"""Message configuration: locale table, engine options, and negotiation.

MessageConfig is the single object an application builds at startup. It
names the default locale, the per-locale engine options, and the external
formatting engine (PartsFormatter) that turns a message into spans.

Locale keys are canonicalized at construction, so "en_us" and "en-US"
refer to the same entry and negotiated locales always index the table.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol

from msgparts.constants import DEFAULT_LOCALE_MATCHER
from msgparts.diagnostics import ErrorTemplate, InvalidArgumentError
from msgparts.enums import LocaleMatcher
from msgparts.locale_utils import canonicalize_locale
from msgparts.negotiation import coerce_matcher, resolve_locale
from msgparts.spans import Span, coerce_span
from msgparts.tree import build_tree, text_content

from .types import LocaleCode

__all__ = ["MessageConfig", "PartsFormatter"]

logger = logging.getLogger(__name__)


class PartsFormatter(Protocol):
    """Formatting engine hook: (locale, message, args, options) -> spans.

    Engines may return Span dataclasses or mapping-shaped parts
    ({"type": "text", "value": ...}); mappings are converted with
    coerce_span().
    """

    def __call__(
        self,
        locale: LocaleCode,
        message: object,
        args: Mapping[str, object],
        options: Mapping[str, object],
    ) -> Sequence[Span | Mapping[str, Any]]: ...


@dataclass(frozen=True, slots=True)
class MessageConfig:
    """Immutable application locale configuration.

    Attributes:
        default_locale: Locale used when nothing else applies; always supported
        locales: Per-locale engine options, keyed by locale tag
        options: Global engine options; per-locale options override them
        formatter: Formatting engine (required for format_to_parts)
        matcher: Matcher used by resolve_locale()

    Example:
        >>> config = MessageConfig(
        ...     default_locale="en-US",
        ...     locales={"en-US": {}, "nl-NL": {"currency": "EUR"}},
        ...     options={"currency": "USD"},
        ... )
        >>> config.supported_locales
        ('en-US', 'nl-NL')
        >>> config.resolve_locale(["nl-BE", "nl"])
        'en-US'
        >>> config.options_for("nl-NL")
        {'currency': 'EUR'}
    """

    default_locale: LocaleCode
    locales: Mapping[LocaleCode, Mapping[str, object]] = field(default_factory=dict)
    options: Mapping[str, object] = field(default_factory=dict)
    formatter: PartsFormatter | None = None
    matcher: LocaleMatcher = LocaleMatcher(DEFAULT_LOCALE_MATCHER)

    def __post_init__(self) -> None:
        """Validate and canonicalize configuration at construction time.

        Raises:
            InvalidArgumentError: If default_locale is empty or locales is
                not a mapping, or the matcher is unknown
            InvalidLocaleTagError: If any locale tag is malformed
        """
        if not isinstance(self.default_locale, str) or not self.default_locale:
            raise InvalidArgumentError(
                ErrorTemplate.argument_item_invalid("default_locale", 0, self.default_locale)
            )
        if not isinstance(self.locales, Mapping):
            raise InvalidArgumentError(ErrorTemplate.argument_not_sequence("locales", self.locales))
        locales = {
            canonicalize_locale(tag): MappingProxyType(dict(options))
            for tag, options in self.locales.items()
        }
        object.__setattr__(self, "default_locale", canonicalize_locale(self.default_locale))
        object.__setattr__(self, "locales", MappingProxyType(locales))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "matcher", coerce_matcher(self.matcher))

    @property
    def supported_locales(self) -> tuple[LocaleCode, ...]:
        """Default locale followed by the configured locales, de-duplicated."""
        return tuple(dict.fromkeys([self.default_locale, *self.locales]))

    def resolve_locale(self, user_locales: Sequence[str]) -> LocaleCode:
        """Negotiate the best supported locale for ``user_locales``.

        Raises:
            InvalidArgumentError: If user_locales is empty or not a sequence
            InvalidLocaleTagError: If a user locale tag is malformed
        """
        return resolve_locale(user_locales, list(self.supported_locales), self.matcher)

    def options_for(self, locale: LocaleCode) -> dict[str, object]:
        """Return engine options for ``locale`` (global options overridden per locale).

        Raises:
            InvalidArgumentError: If the locale has no entry in ``locales``
        """
        key = canonicalize_locale(locale)
        if key not in self.locales:
            raise InvalidArgumentError(ErrorTemplate.locale_not_configured(locale))
        return {**self.options, **self.locales[key]}

    def format_to_parts(
        self,
        locale: LocaleCode,
        messages: Mapping[LocaleCode, object],
        args: Mapping[str, object] | None = None,
    ) -> list[Span]:
        """Format the ``locale`` variant of a message into spans.

        Args:
            locale: Target locale (must be configured)
            messages: Message variants keyed by locale tag
            args: Message arguments

        Returns:
            Span sequence ready for build_tree()

        Raises:
            InvalidArgumentError: If the locale is not configured, the message
                has no variant for it, or no formatter is configured
            UnhandledSpanKindError: If the engine returns an unknown part shape
        """
        options = self.options_for(locale)
        if self.formatter is None:
            raise InvalidArgumentError(ErrorTemplate.formatter_missing())
        key = canonicalize_locale(locale)
        variants = {canonicalize_locale(tag): message for tag, message in messages.items()}
        if key not in variants:
            raise InvalidArgumentError(ErrorTemplate.message_locale_missing(key))
        parts = self.formatter(key, variants[key], dict(args or {}), options)
        logger.debug("Formatted %d part(s) for locale %s", len(parts), key)
        return [coerce_span(part) if isinstance(part, Mapping) else part for part in parts]

    def format(
        self,
        locale: LocaleCode,
        messages: Mapping[LocaleCode, object],
        args: Mapping[str, object] | None = None,
    ) -> str:
        """Format the ``locale`` variant of a message as plain text.

        Markup is dropped and fallbacks appear as "[source]" placeholders.

        Raises:
            InvalidArgumentError: Same conditions as format_to_parts()
        """
        return text_content(build_tree(self.format_to_parts(locale, messages, args)))
