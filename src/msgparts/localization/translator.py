"""Translator: explicit locale and formatter context for rendering messages.

A Translator bundles a MessageConfig with one negotiated locale. UI layers
create one per request/session and pass it down explicitly instead of
reading a "current locale" from global state.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from msgparts.locale_utils import canonicalize_locale, get_system_locale
from msgparts.tree import Node, Override, build_tree, text_content

from .config import MessageConfig
from .types import LocaleCode, MessageArgs, MessageVariants

__all__ = ["Translator"]


@dataclass(frozen=True, slots=True)
class Translator:
    """Immutable (config, locale) pair producing node trees.

    Example:
        >>> translator = Translator.for_user(config, ["nl-NL", "en"])
        >>> translator.locale
        'nl-NL'
        >>> nodes = translator.translate(greeting, {"name": "Ada"}, {"b": "strong"})
    """

    config: MessageConfig
    locale: LocaleCode

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", canonicalize_locale(self.locale))

    @classmethod
    def for_user(cls, config: MessageConfig, user_locales: Sequence[str]) -> Translator:
        """Create a Translator for the locale negotiated from ``user_locales``."""
        return cls(config, config.resolve_locale(user_locales))

    @classmethod
    def for_system(cls, config: MessageConfig) -> Translator:
        """Create a Translator for the operating system's locale."""
        return cls.for_user(config, [get_system_locale()])

    def with_locale(self, locale: LocaleCode) -> Translator:
        """Return a copy bound to ``locale``."""
        return replace(self, locale=locale)

    def translate(
        self,
        messages: MessageVariants,
        args: MessageArgs | None = None,
        overrides: Mapping[str, Override] | None = None,
    ) -> list[Node]:
        """Format a message in this locale and rebuild its node tree.

        Args:
            messages: Message variants keyed by locale
            args: Message arguments
            overrides: Markup substitutes keyed by tag name

        Returns:
            Renderable nodes
        """
        spans = self.config.format_to_parts(self.locale, messages, args)
        return build_tree(spans, overrides)

    def format(self, messages: MessageVariants, args: MessageArgs | None = None) -> str:
        """Format a message in this locale as plain text."""
        return text_content(self.translate(messages, args))
