# -*- coding: utf-8 -*-
"""
Byte-to-text decoding for translation sources.

Decision order:
1. BOM sniff (UTF-8, UTF-32LE, UTF-16LE, UTF-16BE, UTF-32BE, UTF-7)
2. Strict UTF-8 probe
3. CP936 double-byte fallback with U+FFFD for anything unmapped

decide_and_decode() never raises on malformed input.
"""

from typing import Optional, Tuple

from betternames_config import BOM_CHAR
from betternames_enums import EncodingDecision
from betternames_logger import get_logger
from core import cp936_table
from core.row_tokenizer import split_lines
from models.document import DecodedText, RawDocument

logger = get_logger("core.byte_codec")

# Order matters: the UTF-32LE signature starts with the UTF-16LE one.
BOM_TABLE: Tuple[Tuple[bytes, EncodingDecision, str], ...] = (
    (b'\xef\xbb\xbf', EncodingDecision.UTF8_BOM, 'utf-8'),
    (b'\xff\xfe\x00\x00', EncodingDecision.UTF32_LE, 'utf-32-le'),
    (b'\xff\xfe', EncodingDecision.UTF16_LE, 'utf-16-le'),
    (b'\xfe\xff', EncodingDecision.UTF16_BE, 'utf-16-be'),
    (b'\x00\x00\xfe\xff', EncodingDecision.UTF32_BE, 'utf-32-be'),
    (b'+/v', EncodingDecision.UTF7, 'utf-7'),
)


def sniff_bom(data: bytes) -> Optional[Tuple[EncodingDecision, str]]:
    """Return (decision, codec name) for a leading BOM, or None."""
    for signature, decision, codec in BOM_TABLE:
        if data.startswith(signature):
            return decision, codec
    return None


def decode_with_bom(data: bytes, codec: str) -> str:
    """
    Decode a BOM-prefixed buffer and drop the BOM character.

    The whole buffer is decoded (UTF-7 signatures are not byte aligned), so
    the BOM comes out as U+FEFF and is removed afterwards.
    """
    text = data.decode(codec, errors='replace')
    if text.startswith(BOM_CHAR):
        text = text[1:]
    return text


def try_decode_utf8(data: bytes) -> Optional[str]:
    """Strict UTF-8 decode; None if any byte sequence is invalid."""
    try:
        return data.decode('utf-8', errors='strict')
    except UnicodeDecodeError:
        return None


def decode_legacy(data: bytes) -> str:
    """
    Decode CP936 bytes through the static lookup tables.

    - 0x00-0x7F: single-byte table (ASCII)
    - 0x80: single-byte table (euro sign), U+FFFD if unmapped
    - 0x81-0xFE: lead byte; with the next byte forms a big-endian code.
      Mapped or not, the pair is consumed and yields one character.
    - truncated lead byte or 0xFF: one U+FFFD, advance one byte
    """
    if not data:
        return ""

    single = cp936_table.SINGLE_BYTE
    double = cp936_table.DOUBLE_BYTE
    replacement = cp936_table.REPLACEMENT_CHAR
    out = []
    i = 0
    size = len(data)

    while i < size:
        b = data[i]

        if b <= 0x7F:
            ch = single[b]
            out.append(ch if ch != cp936_table.UNMAPPED else chr(b))
            i += 1
        elif b == 0x80:
            ch = single[b]
            out.append(ch if ch != cp936_table.UNMAPPED else replacement)
            i += 1
        elif cp936_table.is_lead_byte(b):
            if i + 1 < size:
                code = (b << 8) | data[i + 1]
                out.append(double.get(code, replacement))
                i += 2
            else:
                out.append(replacement)
                i += 1
        else:
            out.append(replacement)
            i += 1

    return ''.join(out)


def decide_and_decode(data: bytes, source_name: str = "") -> DecodedText:
    """
    Pick an encoding for data and decode it.

    Args:
        data: Raw file content.
        source_name: Name used in the log line (usually the file name).

    Returns:
        DecodedText with the text, its lines and the decision taken.
    """
    log_prefix = source_name or "File"

    if not data:
        return DecodedText(text="", lines=("",), encoding=EncodingDecision.UTF8, source_name=source_name)

    bom = sniff_bom(data)
    if bom is not None:
        decision, codec = bom
        logger.info(f"[Encoding] {log_prefix}: detected {decision.value} by BOM")
        text = decode_with_bom(data, codec)
        return DecodedText(text=text, lines=tuple(split_lines(text)), encoding=decision, source_name=source_name)

    text = try_decode_utf8(data)
    if text is not None:
        logger.info(f"[Encoding] {log_prefix}: detected UTF-8 (no BOM, valid UTF-8)")
        return DecodedText(text=text, lines=tuple(split_lines(text)), encoding=EncodingDecision.UTF8, source_name=source_name)

    logger.info(f"[Encoding] {log_prefix}: UTF-8 decode failed, using CP936 fallback")
    text = decode_legacy(data)
    return DecodedText(
        text=text,
        lines=tuple(split_lines(text)),
        encoding=EncodingDecision.LEGACY_DOUBLE_BYTE,
        source_name=source_name,
    )


def decode_document(document: RawDocument) -> DecodedText:
    """Decode a RawDocument, carrying its source name along."""
    return decide_and_decode(document.data, document.source_name)
