"""
BetterNames enum definitions.

Type-safe enums for encoding decisions and header policies.
"""

from enum import Enum


class EncodingDecision(str, Enum):
    """Which decoding branch was taken for a document."""
    UTF8_BOM = 'utf-8-bom'
    UTF16_LE = 'utf-16-le'
    UTF16_BE = 'utf-16-be'
    UTF32_LE = 'utf-32-le'
    UTF32_BE = 'utf-32-be'
    UTF7 = 'utf-7'
    UTF8 = 'utf-8'
    LEGACY_DOUBLE_BYTE = 'cp936'


class HeaderPolicy(str, Enum):
    """How a source's header row is interpreted."""
    CATALOG = 'catalog'
    NAMED_CATEGORY = 'named_category'
