#!/usr/bin/env python
# vim:fileencoding=utf8

# Copyright (c) 2014 Florian Brucker
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Character tables and character level helpers.

Suffix literals are compared letter by letter through the explicit
``FOLD`` table instead of ``str.lower``. This keeps accented pairs
under control and makes unknown scripts fail every comparison, so they
pass through the stemmers untouched.
"""

__all__ = ['APOSTROPHES', 'FOLD', 'fold', 'full_width_to_narrow', 'narrow',
           'is_apostrophe', 'remove_possessive_suffix', 'translate']


APOSTROPHES = frozenset("'\u0092´’")


def _build_fold_table():
    table = {}
    for code in range(ord('A'), ord('Z') + 1):
        table[chr(code)] = chr(code + 32)
    # Latin-1 capitals, skipping the multiplication sign
    for code in range(0xC0, 0xDF):
        if code != 0xD7:
            table[chr(code)] = chr(code + 32)
    # Cyrillic capitals and the Ѐ..Џ block
    for code in range(0x410, 0x430):
        table[chr(code)] = chr(code + 32)
    for code in range(0x400, 0x410):
        table[chr(code)] = chr(code + 80)
    return table

FOLD = _build_fold_table()


def fold(ch):
    """
    Return the lower case variant of a single character.
    """
    return FOLD.get(ch, ch)


_FULL_WIDTH_SPECIALS = {
    65509: 165,
    65506: 172,
    65507: 175,
    65508: 166,
}

def full_width_to_narrow(ch):
    """
    Map a full-width character to its narrow counterpart.

    Full-width ASCII (U+FF01 to U+FF5E) and the full-width currency and
    sign characters are folded; everything else is returned unchanged.
    """
    code = ord(ch)
    if code < 65000:
        return ch
    if 65281 <= code <= 65374:
        return chr(code - 65248)
    if 65504 <= code <= 65505:
        return chr(code - 65342)
    if code in _FULL_WIDTH_SPECIALS:
        return chr(_FULL_WIDTH_SPECIALS[code])
    return ch


def narrow(text):
    """
    Apply ``full_width_to_narrow`` to every character of ``text``.
    """
    return ''.join(full_width_to_narrow(ch) for ch in text)


def is_apostrophe(ch):
    return ch in APOSTROPHES


def remove_possessive_suffix(text):
    """
    Strip a trailing possessive ``'s`` and any trailing apostrophes.
    """
    if len(text) >= 2 and is_apostrophe(text[-2]) and text[-1] in 'sS':
        text = text[:-2]
    while text and is_apostrophe(text[-1]):
        text = text[:-1]
    return text


def translate(text, mapping):
    """
    Replace characters of ``text`` according to ``mapping``.

    ``mapping`` maps lower case characters to their replacements. Upper
    case variants (as given by ``FOLD``) are mapped to the upper case
    variant of the replacement.
    """
    chars = []
    for ch in text:
        lower = fold(ch)
        if lower in mapping:
            replacement = mapping[lower]
            chars.append(replacement if lower == ch else replacement.upper())
        else:
            chars.append(ch)
    return ''.join(chars)


#
# ACCENT TABLES
#

GERMAN_UMLAUTS = {'ä': 'a', 'ö': 'o', 'ü': 'u'}

DUTCH_UMLAUTS = {
    'ä': 'a', 'ë': 'e', 'ï': 'i', 'ö': 'o',
    'ü': 'u',
}

ACUTES = {
    'á': 'a', 'é': 'e', 'í': 'i', 'ó': 'o',
    'ú': 'u',
}

ITALIAN_ACUTES_TO_GRAVES = {
    'á': 'à', 'é': 'è', 'í': 'ì',
    'ó': 'ò', 'ú': 'ù',
}
