#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for the suffix tables and the stemmer template.
"""

import pytest

from snowstem.grammar import compile_rules
from snowstem.regions import Regions
from snowstem.stemmer import (Language, NoOpStemmer, StemState, Stemmer,
                              registry)
from snowstem.word import Word


RULES = compile_rules("""
define v 'aeiou'

define in_r1 as among in R1 (
    'ing' (delete)
    'g' (<- 'X')
)

define anywhere as among (
    'ing' (R2 delete)
    'ng' (delete)
)

define checked as among (
    'ers' (vowel_before delete)
    's' (delete)
)
""")


class ToyStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v

    def run_steps(self, state):
        state.apply('checked')
        state.apply('in_r1')

    def vowel_before(self, state, start):
        return state.is_vowel(start - 1)


def make_state(text):
    state = StemState(ToyStemmer(), Word(text))
    state.mark_regions()
    return state

def test_initial_regions():
    state = StemState(ToyStemmer(), Word('singing'))
    assert state.regions == Regions(7, 7, 7)
    assert not state.marked
    state.word.truncate(4)
    state.update_regions()
    assert state.regions == Regions(7, 7, 7)
    state.mark_regions()
    assert state.regions == Regions(3, 4, 4)

def test_table_in_region_falls_through():
    state = make_state('singing')
    assert state.regions == Regions(3, 6, 7)
    assert state.apply('in_r1')
    assert str(state.word) == 'sing'
    assert state.regions == Regions(3, 4, 4)
    # "ing" now starts before R1, so "g" is used
    assert state.apply('in_r1')
    assert str(state.word) == 'sinx'
    assert state.word.is_frozen(-1)
    assert state.ends('X')

def test_table_without_region_does_not_fall_through():
    state = make_state('singing')
    assert not state.apply('anywhere')
    assert str(state.word) == 'singing'
    state = make_state('sang')
    assert state.apply('anywhere')
    assert str(state.word) == 'sa'

def test_routine_call():
    state = make_state('powers')
    assert not state.apply('checked')
    assert str(state.word) == 'powers'
    state = make_state('soers')
    assert state.apply('checked')
    assert str(state.word) == 'so'

def test_state_queries():
    state = make_state('Singing')
    assert len(state) == 7
    assert state.char(0) == 's'
    assert state.is_vowel(1)
    assert not state.is_vowel(0)
    assert state.is_one_of(-1, 'gh')
    assert state.ends('ing')
    assert state.in_region('r2', 6)
    assert not state.in_region('r2', 5)
    assert state.ends_in('r1', 'ing')
    assert not state.ends_in('r2', 'ing')

def test_state_changes():
    state = make_state('singing')
    assert not state.delete_suffix('ing', 'r2')
    assert state.replace_suffix('ing', 'er', 'r1')
    assert str(state.word) == 'singer'
    assert state.regions == Regions(3, 6, 6)
    assert state.delete_suffix('r')
    assert state.chop(2)
    assert str(state.word) == 'sin'
    assert state.regions.r1 <= state.regions.r2 <= len(state)
    assert state.delete_from(1)
    assert str(state.word) == 's'
    assert state.regions == Regions(1, 1, 1)

def test_stem():
    stemmer = ToyStemmer()
    assert stemmer.stem('singing') == 'sing'
    assert stemmer('Soers') == 'So'
    assert stemmer.stem('at') == 'at'
    assert stemmer.stem('') == ''
    assert stemmer.stem('  ') == '  '
    assert stemmer.stem("song's") == 'sonx'
    assert repr(stemmer) == 'ToyStemmer()'
    assert stemmer.language is Language.NONE

def test_unknown_options():
    with pytest.raises(TypeError):
        ToyStemmer(foo=True)

def test_noop_stemmer():
    stemmer = NoOpStemmer()
    assert stemmer.stem('Running') == 'Running'
    assert registry[Language.NONE] is NoOpStemmer
