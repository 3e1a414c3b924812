# -*- coding: utf-8 -*-
"""
CP936 (GBK) lookup tables for the legacy double-byte decoder.

SINGLE_BYTE is indexed by byte value 0x00-0xFF. Unmapped slots hold '\\0'.
DOUBLE_BYTE maps a 16-bit big-endian code (lead << 8 | trail) to one
character. Both tables are built once at import and never mutated.
"""

from types import MappingProxyType

from betternames_logger import get_logger

logger = get_logger("core.cp936_table")

UNMAPPED = "\0"
REPLACEMENT_CHAR = "\ufffd"

LEAD_BYTE_MIN = 0x81
LEAD_BYTE_MAX = 0xFE
TRAIL_BYTE_MIN = 0x40
TRAIL_BYTE_MAX = 0xFE

# CP936 puts the euro sign at 0x80; 0x81-0xFF only appear as lead bytes.
_SINGLE_BYTE_OVERRIDES = {
    0x80: "\u20ac",
}


def _build_single_byte():
    table = [UNMAPPED] * 256
    for b in range(0x80):
        table[b] = chr(b)
    for b, ch in _SINGLE_BYTE_OVERRIDES.items():
        table[b] = ch
    return tuple(table)


def _build_double_byte():
    table = {}
    for lead in range(LEAD_BYTE_MIN, LEAD_BYTE_MAX + 1):
        for trail in range(TRAIL_BYTE_MIN, TRAIL_BYTE_MAX + 1):
            if trail == 0x7F:
                continue
            try:
                ch = bytes((lead, trail)).decode("gbk")
            except UnicodeDecodeError:
                continue
            if len(ch) == 1:
                table[(lead << 8) | trail] = ch
    return MappingProxyType(table)


SINGLE_BYTE = _build_single_byte()
DOUBLE_BYTE = _build_double_byte()

logger.debug(f"CP936 tables ready: {len(DOUBLE_BYTE)} double-byte codes")


def is_lead_byte(b: int) -> bool:
    return LEAD_BYTE_MIN <= b <= LEAD_BYTE_MAX
