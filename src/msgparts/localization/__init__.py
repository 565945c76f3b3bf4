"""Localization package: configuration and explicit translation context.

Submodules:
    types      - PEP 695 type aliases (LocaleCode, MessageArgs, MessageVariants)
    config     - MessageConfig and the PartsFormatter engine protocol
    translator - Translator (config + negotiated locale)

Python 3.13+.
"""

from msgparts.localization.config import MessageConfig, PartsFormatter
from msgparts.localization.translator import Translator
from msgparts.localization.types import LocaleCode, MessageArgs, MessageVariants

__all__ = [
    "LocaleCode",
    "MessageArgs",
    "MessageConfig",
    "MessageVariants",
    "PartsFormatter",
    "Translator",
]
