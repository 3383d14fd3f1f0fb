#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``snowstem.regions``.
"""

from snowstem.regions import (Regions, find_french_rv, find_r1, find_r2,
                              find_romance_rv, find_russian_rv,
                              recompute_regions)
from snowstem.word import Word


ENGLISH = 'aeiouy'
SPANISH = 'aeiouáéíóúü'
FRENCH = 'aeiouyâàëéêèïîôûù'
RUSSIAN = 'аеиоуыэюя'


def regions(text, vowels=ENGLISH):
    word = Word(text)
    r1 = find_r1(word, vowels)
    return r1, find_r2(word, vowels, r1)

def test_r1_r2():
    assert regions('beautiful') == (5, 7)
    assert regions('beauty') == (5, 6)
    assert regions('beau') == (4, 4)
    assert regions('animadversion') == (2, 4)
    assert regions('sprinkled') == (5, 9)
    assert regions('eucharist') == (3, 6)
    assert regions('') == (0, 0)

def test_frozen_letters_are_consonants():
    word = Word('sayings')
    assert find_r1(word, ENGLISH) == 5
    word.freeze(2)
    assert find_r1(word, ENGLISH) == 3

def test_romance_rv():
    def rv(text):
        return find_romance_rv(Word(text), SPANISH)
    assert rv('macho') == 3
    assert rv('oliva') == 3
    assert rv('trabajo') == 3
    assert rv('áureo') == 3
    assert rv('al') == 2
    assert rv('a') == 1

def test_french_rv():
    def rv(text):
        return find_french_rv(Word(text), FRENCH)
    assert rv('aimer') == 3
    assert rv('adorer') == 3
    assert rv('voler') == 2
    assert rv('tapis') == 3
    assert rv('parade') == 3
    assert rv('colère') == 3
    assert rv('ai') == 2
    assert rv('brr') == 3

def test_russian_rv():
    def rv(text):
        return find_russian_rv(Word(text), RUSSIAN)
    assert rv('книги') == 3
    assert rv('елка') == 1
    assert rv('вскрр') == 5

def test_recompute_regions():
    word = Word('sing')

    def finder(w):
        return Regions(10, 3, 2)

    result = recompute_regions(word, finder)
    assert result == Regions(4, 4, 2)
    assert result.r1 <= result.r2 <= len(word)
