# -*- coding: utf-8 -*-
"""
Document models for the decoding stage.

RawDocument holds the bytes read from one source file; DecodedText holds
the decoded, line-split result.
"""

from dataclasses import dataclass
from typing import Tuple

from betternames_enums import EncodingDecision


@dataclass(frozen=True)
class RawDocument:
    """Immutable file content plus a logical name used in diagnostics."""
    data: bytes
    source_name: str = ""

    def __len__(self):
        return len(self.data)


@dataclass(frozen=True)
class DecodedText:
    """
    Decoded text of one document.

    Attributes:
        text: Full decoded text, BOM removed.
        lines: Logical lines (CR, LF and CRLF are equivalent separators,
            empty lines kept).
        encoding: The decoding branch that produced the text.
        source_name: Name of the originating document.
    """
    text: str
    lines: Tuple[str, ...]
    encoding: EncodingDecision
    source_name: str = ""

    @property
    def line_count(self) -> int:
        return len(self.lines)
