# -*- coding: utf-8 -*-
"""
Unit Tests for the byte codec

BOM sniffing, strict UTF-8 probing and the CP936 fallback decoder.
"""

import random

import pytest

from betternames_enums import EncodingDecision
from core import cp936_table
from core.byte_codec import decide_and_decode, decode_legacy, decode_document, sniff_bom
from models.document import RawDocument

REPLACEMENT = "\ufffd"
SAMPLE = "Key,名称,你的翻译\r\nAssets.CITY_NAME:0,城市,\"春田, 北\"\n"


class TestBomSniffing:
    """Tests for BOM detection order and decoding."""

    def test_utf8_bom_round_trip(self):
        """UTF-8 with BOM decodes back to the original string."""
        decoded = decide_and_decode(SAMPLE.encode('utf-8-sig'), "sample.csv")

        assert decoded.text == SAMPLE
        assert decoded.encoding == EncodingDecision.UTF8_BOM
        assert decoded.source_name == "sample.csv"

    def test_utf16_le(self):
        data = b'\xff\xfe' + SAMPLE.encode('utf-16-le')

        decoded = decide_and_decode(data)

        assert decoded.encoding == EncodingDecision.UTF16_LE
        assert decoded.text == SAMPLE

    def test_utf16_be(self):
        data = b'\xfe\xff' + SAMPLE.encode('utf-16-be')

        decoded = decide_and_decode(data)

        assert decoded.encoding == EncodingDecision.UTF16_BE
        assert decoded.text == SAMPLE

    def test_utf32_le_checked_before_utf16_le(self):
        """FF FE 00 00 must not be taken for a UTF-16LE BOM."""
        data = b'\xff\xfe\x00\x00' + SAMPLE.encode('utf-32-le')

        decoded = decide_and_decode(data)

        assert decoded.encoding == EncodingDecision.UTF32_LE
        assert decoded.text == SAMPLE

    def test_utf32_be(self):
        data = b'\x00\x00\xfe\xff' + SAMPLE.encode('utf-32-be')

        decoded = decide_and_decode(data)

        assert decoded.encoding == EncodingDecision.UTF32_BE
        assert decoded.text == SAMPLE

    def test_utf7(self):
        data = "\ufeffHello".encode('utf-7')
        assert data.startswith(b'+/v')

        decoded = decide_and_decode(data)

        assert decoded.encoding == EncodingDecision.UTF7
        assert decoded.text == "Hello"

    def test_no_bom(self):
        assert sniff_bom(b'abc') is None
        assert sniff_bom(b'') is None

    def test_truncated_utf16_does_not_raise(self):
        decoded = decide_and_decode(b'\xff\xfeA\x00B')

        assert decoded.encoding == EncodingDecision.UTF16_LE
        assert decoded.text.startswith("A")


class TestUtf8Probe:
    """Tests for BOM-less UTF-8."""

    def test_valid_utf8_without_bom(self):
        decoded = decide_and_decode(SAMPLE.encode('utf-8'))

        assert decoded.encoding == EncodingDecision.UTF8
        assert decoded.text == SAMPLE

    def test_plain_ascii_is_utf8(self):
        decoded = decide_and_decode(b'key,value')

        assert decoded.encoding == EncodingDecision.UTF8

    def test_empty_input(self):
        decoded = decide_and_decode(b'')

        assert decoded.text == ""
        assert decoded.lines == ("",)


class TestLegacyDecoder:
    """Tests for the CP936 fallback."""

    def test_valid_gbk_has_no_replacements(self):
        text = "你的翻译_街名,中文\r\n甲街,乙巷"
        data = text.encode('gbk')

        decoded = decide_and_decode(data)

        assert decoded.encoding == EncodingDecision.LEGACY_DOUBLE_BYTE
        assert decoded.text == text
        assert REPLACEMENT not in decoded.text

    def test_unmapped_pair_gives_one_replacement(self):
        """An unmapped lead/trail pair becomes exactly one U+FFFD."""
        data = "中".encode('gbk') + b'\x81\x30' + "文".encode('gbk')

        decoded = decide_and_decode(data)

        assert decoded.text == "中" + REPLACEMENT + "文"
        assert decoded.text.count(REPLACEMENT) == 1

    def test_two_unmapped_pairs(self):
        data = b'\x81\x30' + b'ab' + b'\x81\x31'

        assert decode_legacy(data) == REPLACEMENT + "ab" + REPLACEMENT

    def test_euro_sign_at_0x80(self):
        data = b'\x80' + "中".encode('gbk')

        assert decide_and_decode(data).text == "\u20ac中"

    def test_truncated_lead_byte(self):
        data = "中".encode('gbk') + b'\xce'

        assert decide_and_decode(data).text == "中" + REPLACEMENT

    def test_0xff_is_replaced(self):
        data = "中".encode('gbk') + b'\xff' + b'A'

        assert decide_and_decode(data).text == "中" + REPLACEMENT + "A"

    def test_ascii_passthrough(self):
        assert decode_legacy(b'\x00abc\x7f') == "\x00abc\x7f"

    def test_empty(self):
        assert decode_legacy(b'') == ""

    @pytest.mark.parametrize("seed", range(20))
    def test_garbage_always_decodes(self, seed):
        """Any byte sequence yields text; output never exceeds input length."""
        rng = random.Random(seed)
        data = bytes(rng.randrange(256) for _ in range(rng.randrange(1, 400)))

        decoded = decide_and_decode(data)

        assert isinstance(decoded.text, str)
        if decoded.encoding == EncodingDecision.LEGACY_DOUBLE_BYTE:
            assert len(decoded.text) <= len(data)


class TestTables:
    """Tests for the static CP936 tables."""

    def test_single_byte_table(self):
        assert len(cp936_table.SINGLE_BYTE) == 256
        assert cp936_table.SINGLE_BYTE[0x41] == "A"
        assert cp936_table.SINGLE_BYTE[0x80] == "\u20ac"
        assert cp936_table.SINGLE_BYTE[0xFF] == cp936_table.UNMAPPED

    def test_double_byte_lookup(self):
        assert cp936_table.DOUBLE_BYTE[0xD6D0] == "中"
        assert 0x8130 not in cp936_table.DOUBLE_BYTE

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            cp936_table.DOUBLE_BYTE[0xD6D0] = "x"
        with pytest.raises(TypeError):
            cp936_table.SINGLE_BYTE[0] = "x"


class TestDecodedText:
    """Tests for line splitting of decoded documents."""

    def test_mixed_line_endings(self):
        decoded = decide_and_decode(b'a\r\nb\rc\n\nd')

        assert decoded.lines == ("a", "b", "c", "", "d")
        assert decoded.line_count == 5

    def test_decode_document_keeps_source_name(self):
        decoded = decode_document(RawDocument(b'x,y', "城市名.csv"))

        assert decoded.source_name == "城市名.csv"
        assert decoded.lines == ("x,y",)
