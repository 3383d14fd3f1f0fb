#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``snowstem.chars``.
"""

from snowstem.chars import (ACUTES, GERMAN_UMLAUTS, fold,
                            full_width_to_narrow, is_apostrophe, narrow,
                            remove_possessive_suffix, translate)


def test_fold():
    assert fold('A') == 'a'
    assert fold('z') == 'z'
    assert fold('É') == 'é'
    assert fold('Ø') == 'ø'
    # Multiplication sign and sharp s have no lower case partner
    assert fold('×') == '×'
    assert fold('ß') == 'ß'
    assert fold('Ж') == 'ж'
    assert fold('Ё') == 'ё'
    # Unknown scripts are left alone
    assert fold('Ā') == 'Ā'
    assert fold('Ω') == 'Ω'

def test_full_width_to_narrow():
    assert full_width_to_narrow('Ａ') == 'A'
    assert full_width_to_narrow('ｚ') == 'z'
    assert full_width_to_narrow('！') == '!'
    assert full_width_to_narrow(chr(0xFFE0)) == chr(0xA2)
    assert full_width_to_narrow(chr(0xFFE5)) == '¥'
    assert full_width_to_narrow(chr(0xFFE2)) == chr(0xAC)
    assert full_width_to_narrow('a') == 'a'
    assert full_width_to_narrow(chr(0xFFFD)) == chr(0xFFFD)
    assert narrow('ｒｕｎ') == 'run'

def test_apostrophes():
    for ch in "'\u0092´’":
        assert is_apostrophe(ch)
    assert not is_apostrophe('"')
    assert not is_apostrophe('`')

def test_remove_possessive_suffix():
    assert remove_possessive_suffix("dog's") == 'dog'
    assert remove_possessive_suffix("DOG'S") == 'DOG'
    assert remove_possessive_suffix('dog’s') == 'dog'
    assert remove_possessive_suffix("dogs'") == 'dogs'
    assert remove_possessive_suffix("dogs''") == 'dogs'
    assert remove_possessive_suffix("'''") == ''
    assert remove_possessive_suffix('dogs') == 'dogs'
    assert remove_possessive_suffix('') == ''

def test_translate():
    assert translate('canción', ACUTES) == 'cancion'
    assert translate('ÉTÉ', ACUTES) == 'ETE'
    assert translate('Déjà', ACUTES) == 'Dejà'
    assert translate('Höhle', GERMAN_UMLAUTS) == 'Hohle'
    assert translate('ÜBER', GERMAN_UMLAUTS) == 'UBER'
    assert translate('', ACUTES) == ''
