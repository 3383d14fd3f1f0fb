#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``snowstem.word``.
"""

from snowstem.word import Word


def test_char():
    w = Word('Yes')
    assert len(w) == 3
    assert w.char(0) == 'y'
    assert w.char(-1) == 's'
    assert w.char(3) == ''
    assert w.char(-4) == ''
    assert str(w) == 'Yes'

def test_is_vowel():
    w = Word('cry')
    assert w.is_vowel(2, 'aeiouy')
    assert not w.is_vowel(1, 'aeiouy')
    assert not w.is_vowel(3, 'aeiouy')
    w.freeze(2)
    assert not w.is_vowel(2, 'aeiouy')
    assert not w.is_one_of(2, 'y')
    w.thaw(2)
    assert w.is_one_of(2, 'y')

def test_matches_at():
    w = Word('CAT')
    assert w.matches_at(0, 'cat')
    assert w.matches_at(1, 'at')
    assert not w.matches_at(2, 'at')
    assert not w.matches_at(-1, 'xcat')
    assert w.endswith('t')
    assert w.startswith('ca')

def test_matches_frozen():
    w = Word('say')
    w.freeze(2)
    assert w.endswith('aY')
    assert not w.endswith('ay')
    w = Word("o'clock")
    assert w.startswith("o'")

def test_replace():
    w = Word('happy')
    w.replace(4, 5, 'Ie')
    assert str(w) == 'happie'
    assert w.frozen == [False] * 4 + [True, False]

def test_splice():
    w = Word('straße')
    w.splice(4, 5, 'ss')
    assert str(w) == 'strasse'
    assert w.frozen == [False] * 7
    w = Word('x')
    w.freeze(0)
    w.splice(0, 1, 'AB')
    assert w.chars == ['A', 'B']
    assert w.frozen == [False, False]

def test_truncate_and_delete():
    w = Word('running')
    w.freeze(6)
    w.truncate(4)
    assert str(w) == 'runn'
    assert w.frozen == [False] * 4
    w.delete(3)
    assert str(w) == 'run'
    w.truncate(10)
    assert str(w) == 'run'

def test_set_char():
    w = Word('cry')
    w.freeze(2)
    w.set_char(2, 'i')
    assert str(w) == 'cri'
    assert not w.is_frozen(2)

def test_unhash():
    w = Word('noel')
    w.freeze(0)
    w.insert_placeholder(2)
    assert str(w) == 'noel'
    assert len(w) == 5
    assert w.is_placeholder(2)
    assert not w.is_vowel(2, 'aeiou')
    assert w.char(2) == ''
    w.unhash()
    assert str(w) == 'noël'
    assert w.frozen == [False] * 4

    w = Word('NOIL')
    w.insert_placeholder(2)
    w.unhash()
    assert str(w) == 'NOÏL'

    # A placeholder without its letter is dropped
    w = Word('noi')
    w.insert_placeholder(2)
    w.truncate(3)
    w.unhash()
    assert str(w) == 'no'

def test_placeholder_is_not_in_band():
    # A combining diaeresis from the input is an ordinary character
    w = Word('noe\u0308l')
    w.freeze(3)
    assert not w.is_placeholder(3)
    w.unhash()
    assert str(w) == 'noe\u0308l'

    w = Word('mais')
    w.insert_placeholder(2)
    assert w.is_placeholder(-3)
    assert not w.is_placeholder(-2)
    assert not w.matches_at(2, 'I')
    assert repr(w) == "Word('ma_is', '  ^  ')"
