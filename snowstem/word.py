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
The mutable word buffer shared by all stemming steps.
"""

from snowstem.chars import fold


__all__ = ['Word']


_DIAERESIS = {'e': 'ë', 'i': 'ï', 'E': 'Ë', 'I': 'Ï'}


class Word(object):
    """
    A word being stemmed.

    The characters are kept in a list so that suffixes can be removed
    and replaced in place. ``frozen`` is a parallel list of flags: a
    frozen position holds a letter that has been hashed (for example an
    English ``y`` acting as a consonant). Frozen positions are never
    vowels and only match suffix literals that spell the letter in
    upper case, which is the Snowball convention for hashed letters.

    A split diaeresis is kept as a frozen empty slot in front of its
    plain letter. The slot holds no character, so nothing in the input
    can be mistaken for it, and it never shows up in ``str(word)``.
    """

    def __init__(self, text):
        self.chars = list(text)
        self.frozen = [False] * len(self.chars)

    def __len__(self):
        return len(self.chars)

    def __str__(self):
        return ''.join(self.chars)

    def __repr__(self):
        text = ''.join(ch or '_' for ch in self.chars)
        marks = ''.join('^' if f else ' ' for f in self.frozen)
        return 'Word(%r, %r)' % (text, marks)

    def char(self, i):
        """
        Return the folded character at ``i``.

        Negative indices count from the end. An empty string is returned
        for positions outside of the word.
        """
        if i < 0:
            i += len(self.chars)
        if 0 <= i < len(self.chars):
            return fold(self.chars[i])
        return ''

    def is_frozen(self, i):
        if i < 0:
            i += len(self.chars)
        return 0 <= i < len(self.chars) and self.frozen[i]

    def is_vowel(self, i, vowels):
        """
        Check if position ``i`` holds an unfrozen vowel.
        """
        if i < 0:
            i += len(self.chars)
        if not 0 <= i < len(self.chars) or self.frozen[i]:
            return False
        return fold(self.chars[i]) in vowels

    def is_one_of(self, i, chars):
        """
        Check if position ``i`` holds an unfrozen letter from ``chars``.
        """
        if self.is_frozen(i):
            return False
        ch = self.char(i)
        return ch != '' and ch in chars

    def matches_at(self, pos, literal):
        """
        Check if ``literal`` occurs at position ``pos``.

        Lower case letters of ``literal`` match unfrozen letters, upper
        case letters match frozen ones.
        """
        if pos < 0 or pos + len(literal) > len(self.chars):
            return False
        for offset, expected in enumerate(literal):
            i = pos + offset
            if expected.islower() or not expected.isalpha():
                if self.frozen[i] or fold(self.chars[i]) != expected:
                    return False
            elif not self.frozen[i] or fold(self.chars[i]) != expected.lower():
                return False
        return True

    def endswith(self, literal):
        return self.matches_at(len(self.chars) - len(literal), literal)

    def startswith(self, literal):
        return self.matches_at(0, literal)

    def freeze(self, i):
        self.frozen[i] = True

    def thaw(self, i):
        self.frozen[i] = False

    def replace(self, start, end, literal):
        """
        Replace the characters between ``start`` and ``end``.

        Upper case letters in ``literal`` are inserted as frozen lower
        case letters.
        """
        chars = [ch.lower() if ch.isupper() else ch for ch in literal]
        flags = [ch.isupper() for ch in literal]
        self.chars[start:end] = chars
        self.frozen[start:end] = flags

    def splice(self, start, end, text):
        """
        Replace the characters between ``start`` and ``end`` by ``text``
        as it is, without hashing any letters.
        """
        self.chars[start:end] = list(text)
        self.frozen[start:end] = [False] * len(text)

    def truncate(self, length):
        del self.chars[length:]
        del self.frozen[length:]

    def delete(self, i):
        del self.chars[i]
        del self.frozen[i]

    def set_char(self, i, ch):
        """
        Overwrite the character at ``i`` and thaw the position.
        """
        self.chars[i] = ch
        self.frozen[i] = False

    def insert_placeholder(self, i):
        self.chars.insert(i, '')
        self.frozen.insert(i, True)

    def is_placeholder(self, i):
        if i < 0:
            i += len(self.chars)
        return (0 <= i < len(self.chars) and self.frozen[i] and
                self.chars[i] == '')

    def unhash(self):
        """
        Thaw all positions and recompose split diaereses.

        A placeholder whose letter has been removed is dropped.
        """
        chars = []
        pending = False
        for ch, frozen in zip(self.chars, self.frozen):
            if frozen and ch == '':
                pending = True
                continue
            if pending:
                ch = _DIAERESIS.get(ch, ch)
                pending = False
            chars.append(ch)
        self.chars = chars
        self.frozen = [False] * len(chars)
