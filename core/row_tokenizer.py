# -*- coding: utf-8 -*-
"""
Delimiter-tolerant, quote-aware CSV line tokenizer.

Each line picks its own delimiter (tab or comma), so files pasted from a
spreadsheet and files saved as CSV can be mixed freely. Unbalanced quotes
never raise; the line simply ends with quote mode still open.
"""

import re
from typing import List, Optional

QUOTE = '"'
COMMA = ','
TAB = '\t'

_LINE_BREAK_REGEX = re.compile(r'\r\n|\r|\n')


def split_lines(text: str) -> List[str]:
    """
    Split text into logical lines on CRLF, CR or LF.

    Empty lines are preserved, so "a\\n\\nb" gives ['a', '', 'b'] and a
    trailing line break yields a final empty line.
    """
    return _LINE_BREAK_REGEX.split(text)


def detect_delimiter(line: str) -> str:
    """
    Pick the delimiter of a single line.

    Counts commas and tabs outside quotes. Tab wins when at least one tab
    is present and tabs are not outnumbered by commas.
    """
    comma_count = 0
    tab_count = 0
    in_quotes = False

    for ch in line:
        if ch == QUOTE:
            in_quotes = not in_quotes
        elif not in_quotes:
            if ch == COMMA:
                comma_count += 1
            elif ch == TAB:
                tab_count += 1

    if tab_count > 0 and tab_count >= comma_count:
        return TAB
    return COMMA


def split_line(line: str, delimiter: Optional[str] = None) -> List[str]:
    """
    Split one line into fields.

    Args:
        line: A single logical line (no line breaks).
        delimiter: Force a delimiter; auto-detected per line when None.

    Returns:
        List of field strings. Always at least one field, even for an
        empty line.
    """
    if delimiter is None:
        delimiter = detect_delimiter(line)

    fields = []
    current = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        ch = line[i]

        if ch == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                # Escaped quote
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append(''.join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append(''.join(current))
    return fields


def tokenize(lines) -> List[List[str]]:
    """Split every line of an iterable of lines into rows."""
    return [split_line(line) for line in lines]
