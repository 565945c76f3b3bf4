"""Shared constants for msgparts.

This module provides centralized configuration constants used across
the negotiation and tree packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for tree reconstruction and traversal
- Locale defaults: Matcher and system-locale fallbacks
- Fallback strings: Visible output for unresolved placeholders

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Locale defaults
    "DEFAULT_LOCALE_MATCHER",
    "SYSTEM_FALLBACK_LOCALE",
    # Fallback strings
    "FALLBACK_PLACEHOLDER",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: tree builder (markup and composite frames), node visitor.
# Recursion depth equals markup nesting depth, not span count, so 100 levels
# of nested markup is almost certainly malformed engine output.
MAX_DEPTH: int = 100

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Matcher passed to the runtime-support query when the caller does not choose.
DEFAULT_LOCALE_MATCHER: str = "best-fit"

# Locale reported by get_system_locale() when nothing can be detected.
SYSTEM_FALLBACK_LOCALE: str = "en-US"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Visible rendering of a placeholder the engine could not resolve.
# Format string - use .format(source=...)
FALLBACK_PLACEHOLDER: str = "[{source}]"
