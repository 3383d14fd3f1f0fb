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
Region finders.

Suffix rules only fire inside regions at the end of a word. A region is
given by the offset at which it starts; a region starting at the length
of the word is empty.
"""

import collections


__all__ = ['Regions', 'find_r1', 'find_r2', 'find_romance_rv',
           'find_french_rv', 'find_russian_rv', 'recompute_regions']


Regions = collections.namedtuple('Regions', 'r1 r2 rv')


def find_r1(word, vowels, start=0):
    """
    Find the region after the first non-vowel following a vowel.

    The scan starts at ``start``. Returns the length of the word if no
    such non-vowel exists.
    """
    n = len(word)
    for i in range(start, n - 1):
        if word.is_vowel(i, vowels) and not word.is_vowel(i + 1, vowels):
            return i + 2
    return n


def find_r2(word, vowels, r1):
    """
    Find R2, the R1 of R1.

    ``r1`` must be the unclamped result of ``find_r1``.
    """
    return find_r1(word, vowels, r1)


def _next_vowel(word, vowels, start):
    for i in range(start, len(word)):
        if word.is_vowel(i, vowels):
            return i + 1
    return len(word)


def _next_non_vowel(word, vowels, start):
    for i in range(start, len(word)):
        if not word.is_vowel(i, vowels):
            return i + 1
    return len(word)


def find_romance_rv(word, vowels):
    """
    RV as used by Spanish, Portuguese and Italian.

    If the second letter is a consonant, RV is the region after the next
    following vowel. If the first two letters are vowels, RV is the
    region after the next consonant. Otherwise (consonant followed by a
    vowel) RV is the region after the third letter.
    """
    n = len(word)
    if n < 2:
        return n
    if not word.is_vowel(1, vowels):
        return _next_vowel(word, vowels, 2)
    if word.is_vowel(0, vowels):
        return _next_non_vowel(word, vowels, 2)
    return 3 if n >= 3 else n


def find_french_rv(word, vowels):
    n = len(word)
    if n < 2:
        return n
    for prefix in ('par', 'col', 'tap'):
        if word.startswith(prefix):
            return 3
    if word.is_vowel(0, vowels) and word.is_vowel(1, vowels):
        return min(3, n)
    return _next_vowel(word, vowels, 1)


def find_russian_rv(word, vowels):
    return _next_vowel(word, vowels, 0)


def recompute_regions(word, finder):
    """
    Re-derive all regions of ``word`` after it has been changed.

    ``finder`` is a callable that maps a word to its ``Regions``. The
    results are clamped to the length of the word.
    """
    n = len(word)
    r1, r2, rv = finder(word)
    regions = Regions(min(r1, n), min(max(r1, r2), n), min(rv, n))
    assert 0 <= regions.r1 <= regions.r2 <= n
    return regions
