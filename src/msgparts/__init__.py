"""msgparts - locale negotiation and message span tree reconstruction.

Two small, pure cores for internationalized UIs:
    - resolve_locale() picks one supported locale from ranked user
      preferences with BCP-47 fallback and runtime-support checks.
    - build_tree() folds a formatting engine's flat span output (text,
      values, open/close markup, composite values) into a nested node tree,
      with markup overrides and attribute merging.

Public API:
    resolve_locale - Locale negotiation
    build_tree - Span tree reconstruction
    MessageConfig - Locale table, engine options, and negotiation
    Translator - Explicit (config, locale) context producing node trees
    Substitute - Markup override carrying its own attributes
    text_content, render_html - Reference renderers

Exceptions:
    MsgPartsError - Base exception class
    InvalidArgumentError - Caller contract violations
    InvalidLocaleTagError - Malformed locale tags
    UnhandledSpanKindError - Unrecognized span shapes

Submodules:
    msgparts.spans - Span dataclasses and coerce_span()
    msgparts.tree - Nodes, builder, visitor, renderers
    msgparts.negotiation - resolve_locale() and the locale database boundary
    msgparts.localization - MessageConfig and Translator
    msgparts.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    InvalidArgumentError,
    InvalidLocaleTagError,
    MsgPartsError,
    UnhandledSpanKindError,
)
from .enums import LocaleMatcher, MarkupKind
from .localization import MessageConfig, Translator
from .negotiation import resolve_locale
from .tree import Substitute, build_tree, render_html, text_content

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("msgparts")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidArgumentError",
    "InvalidLocaleTagError",
    "LocaleMatcher",
    "MarkupKind",
    "MessageConfig",
    "MsgPartsError",
    "Substitute",
    "Translator",
    "UnhandledSpanKindError",
    "__version__",
    "build_tree",
    "render_html",
    "resolve_locale",
    "text_content",
]
