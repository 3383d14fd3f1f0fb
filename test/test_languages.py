#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for the stemmers of the individual languages.
"""

import glob
import os.path

import pytest

from snowstem import Language, get_stemmer
from snowstem.test import test_file as check_file
from snowstem.word import Word


_module_dir = os.path.dirname(__file__)
_data_dir = os.path.join(_module_dir, 'data')


def assert_stems(stemmer, cases):
    """
    Test that a stemmer maps words to the expected stems.

    ``stemmer`` is a stemmer instance, a ``Language`` member or the
    name of a language. ``cases`` is a sequence of tuples, each
    consisting of the input word and the expected stem.
    """
    if not callable(stemmer):
        stemmer = get_stemmer(stemmer)
    for word, expected in cases:
        result = stemmer(word)
        assert result == expected, (
            'Wrong output for "%s": Expected "%s", got "%s".' % (
            word, expected, result))


#######################################################################
# SINGLE LANGUAGES                                                    #
#######################################################################

def test_danish():
    assert_stems(Language.DANISH, (
        ('ramningen', 'ramning'),
        ('kærlighed', 'kær'),
        ('hestene', 'hest'),
        ('dags', 'dag'),
        ('venlig', 'ven'),
        ('vigtigst', 'vigt'),
        ('kraftløst', 'kraftløs'),
        ('tossen', 'tos'),
        ('at', 'at'),
    ))

def test_danish_r1_floor():
    stemmer = get_stemmer('danish')
    assert stemmer.find_regions(Word('ramningen')).r1 == 3
    assert stemmer.find_regions(Word('arbejde')).r1 == 3

def test_dutch():
    assert_stems(Language.DUTCH, (
        ('lichamelijk', 'licham'),
        ('kinderen', 'kinder'),
        ('mogelijkheden', 'mogelijk'),
        ('boeken', 'boek'),
        ('katten', 'kat'),
        ('appels', 'appel'),
        ('wandeling', 'wandel'),
        ('kaas', 'kas'),
    ))

def test_english():
    assert_stems(Language.ENGLISH, (
        ('caresses', 'caress'),
        ('ponies', 'poni'),
        ('running', 'run'),
        ('Running', 'Run'),
        ('hopping', 'hop'),
        ('hoped', 'hope'),
        ('cry', 'cri'),
        ('say', 'say'),
        ('documentation', 'document'),
        ('documenting', 'document'),
        ('generously', 'generous'),
        ('fluently', 'fluentli'),
        ('relational', 'relat'),
        ('hopefulness', 'hope'),
        ('adoption', 'adopt'),
        ('agreed', 'agre'),
        ('vying', 'vie'),
        ('arsenal', 'arsenal'),
        ("dog's", 'dog'),
        ('skies', 'sky'),
        ('news', 'news'),
        ('at', 'at'),
    ))

def test_english_eed_kept_only_in_whole_words():
    assert_stems(Language.ENGLISH, (
        ('succeed', 'succeed'),
        ('proceed', 'proceed'),
        ('exceeds', 'exceed'),
        ('proceeding', 'proceed'),
        ('oversucceed', 'oversucce'),
    ))

def test_english_ing_kept():
    assert_stems(Language.ENGLISH, (
        ('inning', 'inning'),
        ('innings', 'inning'),
        ('outing', 'outing'),
        ('canning', 'canning'),
        ('herring', 'herring'),
        ('evening', 'evening'),
        ('earring', 'earring'),
    ))

def test_finnish():
    assert_stems(Language.FINNISH, (
        ('taloissa', 'talo'),
        ('kalliossa', 'kalio'),
        ('talokin', 'talo'),
        ('taloni', 'talo'),
        ('talot', 'talo'),
        ('perhettä', 'perh'),
    ))

def test_finnish_illative_and_genitive():
    assert_stems(Language.FINNISH, (
        # Same vowel around the h
        ('taloihin', 'talo'),
        # Long vowel in front of "seen" and of a genitive n
        ('vapaaseen', 'vapa'),
        ('taloon', 'talo'),
        # "ie" in front of a genitive n
        ('kasvien', 'kasv'),
    ))

def test_french():
    assert_stems(Language.FRENCH, (
        ('continuellement', 'continuel'),
        ('chevaux', 'cheval'),
        ('parlais', 'parl'),
        ("l'avion", 'avion'),
    ))

def test_french_e_before_verb_ending():
    assert_stems(Language.FRENCH, (
        ('mangeais', 'mang'),
        ('changeais', 'chang'),
        ('partageais', 'partag'),
        ('songeait', 'song'),
        ('mangeant', 'mang'),
    ))

def test_french_kept_ais_and_oux():
    assert_stems(Language.FRENCH, (
        ('mauvais', 'mauvais'),
        ('déplais', 'déplais'),
        ('balais', 'balais'),
        ('genoux', 'genou'),
        ('doux', 'doux'),
    ))

def test_french_diaeresis():
    assert_stems(Language.FRENCH, (
        ('naïve', 'naïv'),
        ('maïs', 'maï'),
    ))

def test_german():
    assert_stems(Language.GERMAN, (
        ('häuser', 'haus'),
        ('haeuser', 'haus'),
        ('straße', 'strass'),
        ('kleinem', 'klein'),
        ('system', 'system'),
        ('kleinste', 'klein'),
        ('gabst', 'gabst'),
        ('hauses', 'haus'),
        ('kinds', 'kind'),
        ('autos', 'autos'),
        ('kenntnisse', 'kenntnis'),
        ('freundlichkeit', 'freundlich'),
        ('bedeutung', 'bedeut'),
        ('schönheit', 'schonheit'),
    ))

def test_german_without_transliteration():
    stemmer = get_stemmer('german', transliterate_umlauts=False)
    assert_stems(stemmer, (
        ('häuser', 'haus'),
        ('haeuser', 'haeus'),
    ))
    assert 'transliterate_umlauts=False' in repr(stemmer)

def test_italian():
    assert_stems(Language.ITALIAN, (
        ('abbandonata', 'abbandon'),
        ('divano', 'divan'),
        ('parlandogli', 'parl'),
        ('mangiarlo', 'mang'),
        ('amiche', 'amic'),
        ('nazione', 'nazion'),
        ('abitazione', 'abit'),
        ('attività', 'attiv'),
    ))

def test_norwegian():
    assert_stems(Language.NORWEGIAN, (
        ('bilene', 'bil'),
        ('bilens', 'bil'),
        ('leverte', 'lever'),
        ('hardt', 'hard'),
        ('kjærlig', 'kjær'),
    ))

def test_norwegian_ers():
    assert_stems(Language.NORWEGIAN, (
        ('selskapers', 'selskap'),
        ('givers', 'giv'),
        ('lærers', 'lær'),
        ('kappers', 'kappers'),
    ))

def test_portuguese():
    assert_stems(Language.PORTUGUESE, (
        ('cantando', 'cant'),
        ('nação', 'naçã'),
        ('nações', 'naçõ'),
        ('cantarei', 'cant'),
        ('amigos', 'amig'),
        ('pague', 'pag'),
    ))

def test_russian():
    assert_stems(Language.RUSSIAN, (
        ('беспрестанно', 'беспреста'),
        ('книги', 'книг'),
        ('ёлка', 'елк'),
        ('красивый', 'красив'),
        ('сделав', 'сдела'),
        ('нежность', 'нежност'),
    ))

def test_spanish():
    assert_stems(Language.SPANISH, (
        ('chicas', 'chic'),
        ('cantando', 'cant'),
        ('comiéndolo', 'com'),
        ('construyendo', 'constru'),
        ('lleguen', 'lleg'),
        ('rápidamente', 'rapid'),
        ('canción', 'cancion'),
        ('sí', 'si'),
    ))

def test_spanish_accents_removed_last():
    # "aréis" and "ó" are only suffixes while they carry their accent
    assert_stems(Language.SPANISH, (
        ('cantaréis', 'cant'),
        ('cantó', 'cant'),
    ))

def test_swedish():
    assert_stems(Language.SWEDISH, (
        ('klokheten', 'klok'),
        ('jackor', 'jack'),
        ('flickorna', 'flick'),
        ('kraftfullt', 'kraftfull'),
    ))

def test_swedish_et_endings():
    assert_stems(Language.SWEDISH, (
        ('taket', 'tak'),
        ('takets', 'tak'),
        ('paket', 'paket'),
        # Only the s goes when the et-ending is not valid
        ('pakets', 'paket'),
    ))



#######################################################################
# PROPERTIES OF ALL STEMMERS                                          #
#######################################################################

@pytest.mark.parametrize('language', [lang for lang in Language
                                      if lang is not Language.NONE])
def test_common_properties(language):
    stemmer = get_stemmer(language)
    assert stemmer.language is language
    for word in ('', ' ', '\t'):
        assert stemmer(word) == word
    # Unknown scripts pass through
    assert stemmer('日本語') == '日本語'
    words = ['running', 'nationalities', 'häuser', 'continuellement',
             'книги', 'abbandonata']
    first = [stemmer(w) for w in words]
    assert [stemmer(w) for w in reversed(words)] == first[::-1]
    for word, stem in zip(words, first):
        assert len(stem) <= len(word) + 2


#######################################################################
# WORD LIST FIXTURES                                                  #
#######################################################################

@pytest.mark.slow
@pytest.mark.parametrize('voc_filename', sorted(
        glob.glob(os.path.join(_data_dir, '*_voc.txt'))))
def test_fixtures(voc_filename):
    language = os.path.basename(voc_filename)[:-len('_voc.txt')]
    output_filename = voc_filename[:-len('_voc.txt')] + '_output.txt'
    passed, failed = check_file(voc_filename, output_filename, language)
    assert passed > 0
    assert failed == 0
