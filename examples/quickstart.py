"""Quickstart example for msgparts.

Demonstrates locale negotiation and span tree reconstruction, first with the
two pure functions and then through MessageConfig and Translator.

The "engine" below is a stand-in for a real message-formatting engine: it
turns "Hi <b>{name}</b>" templates into spans. Real engines emit the same
span shapes (or the equivalent JSON, converted with coerce_span()).

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from msgparts import (
    MessageConfig,
    Substitute,
    Translator,
    build_tree,
    render_html,
    resolve_locale,
    text_content,
)
from msgparts.enums import MarkupKind
from msgparts.spans import (
    BidiIsolationSpan,
    CompositeSpan,
    FallbackSpan,
    MarkupSpan,
    Span,
    StringSpan,
    TextSpan,
    ValueSpan,
)

_TOKEN = re.compile(r"(\{\w+\}|</?\w+>)")


def template_engine(
    locale: str,
    message: object,
    args: Mapping[str, object],
    options: Mapping[str, object],
) -> list[Span]:
    """Tiny PartsFormatter: {name} placeholders and <tag>...</tag> markup."""
    spans: list[Span] = []
    for token in _TOKEN.split(str(message)):
        if not token:
            continue
        if token.startswith("{"):
            name = token[1:-1]
            if name in args:
                spans.append(BidiIsolationSpan("\u2068"))
                spans.append(StringSpan(str(args[name]), locale=locale, source=f"${name}"))
                spans.append(BidiIsolationSpan("\u2069"))
            else:
                spans.append(FallbackSpan(f"${name}"))
        elif token.startswith("</"):
            spans.append(MarkupSpan(MarkupKind.CLOSE, token[2:-1]))
        elif token.startswith("<"):
            spans.append(MarkupSpan(MarkupKind.OPEN, token[1:-1], options.get(token[1:-1], {})))
        else:
            spans.append(TextSpan(token))
    return spans


def example_1_negotiation() -> None:
    """Example 1: Picking a locale from user preferences."""
    print("=" * 60)
    print("Example 1: Locale Negotiation")
    print("=" * 60)

    supported = ["en-US", "nl-NL", "zh-Hant"]
    for preferences in (
        ["nl-NL"],
        ["nl-BE", "en-GB"],
        ["zh-Hant-HK"],
        ["en-US-u-ca-gregory"],
        ["ja-JP"],
    ):
        print(f"{preferences!s:28} -> {resolve_locale(preferences, supported)}")
    # Output:
    # ['nl-NL']                    -> nl-NL
    # ['nl-BE', 'en-GB']           -> en-US
    # ['zh-Hant-HK']               -> zh-Hant
    # ['en-US-u-ca-gregory']       -> en-US
    # ['ja-JP']                    -> en-US


def example_2_tree() -> None:
    """Example 2: Rebuilding markup from a flat span sequence."""
    print("\n" + "=" * 60)
    print("Example 2: Span Tree Reconstruction")
    print("=" * 60)

    spans: list[Span] = [
        TextSpan("You have "),
        CompositeSpan(
            "number",
            (ValueSpan("integer", "1"), ValueSpan("group", ","), ValueSpan("integer", "204")),
        ),
        TextSpan(" "),
        MarkupSpan(MarkupKind.OPEN, "link", {"href": "/inbox"}),
        TextSpan("unread "),
        MarkupSpan(MarkupKind.OPEN, "b"),
        TextSpan("messages"),
        MarkupSpan(MarkupKind.CLOSE, "b"),
        MarkupSpan(MarkupKind.CLOSE, "link"),
    ]

    nodes = build_tree(spans, {"link": Substitute("a", {"class": "nav"}), "b": "strong"})
    print(text_content(nodes))
    print(render_html(nodes))
    # Output:
    # You have 1,204 unread messages
    # You have 1,204 <a class="nav" href="/inbox">unread <strong>messages</strong></a>


def example_3_translator() -> None:
    """Example 3: MessageConfig and an explicit Translator per request."""
    print("\n" + "=" * 60)
    print("Example 3: MessageConfig + Translator")
    print("=" * 60)

    config = MessageConfig(
        default_locale="en-US",
        locales={"en-US": {}, "nl-NL": {"link": {"hreflang": "nl"}}},
        formatter=template_engine,
    )
    greeting = {
        "en-US": "Hello <b>{name}</b>, see <link>your profile</link>.",
        "nl-NL": "Hallo <b>{name}</b>, bekijk <link>je profiel</link>.",
    }
    overrides = {"link": Substitute("a", {"href": "/profile"})}

    for preferences in (["nl-BE", "nl-NL"], ["fr-FR"]):
        translator = Translator.for_user(config, preferences)
        nodes = translator.translate(greeting, {"name": "Ada"}, overrides)
        print(f"{translator.locale}: {render_html(nodes)}")

    # A missing argument degrades to a visible placeholder instead of failing.
    nodes = Translator(config, "en-US").translate(greeting, {}, overrides)
    print(f"missing arg: {text_content(nodes)}")


if __name__ == "__main__":
    example_1_negotiation()
    example_2_tree()
    example_3_translator()
