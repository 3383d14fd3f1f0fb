#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for the rule notation.
"""

import importlib
import warnings

from pyparsing import ParseException
import pytest

import snowstem.grammar
from snowstem.grammar import compile_rules, parse_string
from snowstem.rules import (Alternatives, Delete, RegionCheck, Replace,
                            RoutineCall, RuleError, Sequence, SuffixTable,
                            TableCall, Try)


def test_groupings():
    rules = compile_rules("""
        define v 'aeiou'
        define vy v + 'y'
        define c 'bcdy' - vy + 'x'
    """)
    assert rules.v == frozenset('aeiou')
    assert rules.vy == frozenset('aeiouy')
    assert rules.c == frozenset('bcdx')
    assert 'vy' in rules

def test_table():
    rules = compile_rules("""
        define t as among in R1 (
            'ing' 'ed' (delete)
            'ies' (<- 'Y')
        )
    """)
    table = rules.t
    assert isinstance(table, SuffixTable)
    assert table is rules['t']
    assert len(table) == 3
    # Longest first, ties in declaration order
    assert [c[0] for c in table.candidates] == ['ing', 'ies', 'ed']
    assert isinstance(table.region, RegionCheck)
    assert table.region.attr == 'r1'

def test_actions():
    tables, groupings = parse_string("""
        define other as among (
            'x' ()
        )
        define t as among (
            'a' (R2 delete)
            'b' (R1 <- 'e' or fail)
            'c' (check try other)
            'd' (delete (other or check))
        )
    """)
    assert groupings == {}
    entries = tables['t'].entries
    assert repr(entries[0].action) == '(R2 delete)'
    assert isinstance(entries[0].action, Sequence)
    assert isinstance(entries[0].action.actions[1], Delete)
    assert isinstance(entries[1].action, Alternatives)
    assert repr(entries[1].action) == "(R1 <- 'e' or fail)"
    assert isinstance(entries[1].action.options[0].actions[1], Replace)
    check, attempt = entries[2].action.actions
    assert isinstance(check, RoutineCall)
    assert isinstance(attempt, Try)
    assert isinstance(attempt.action, TableCall)
    assert tables['t'].routines() == ['check', 'check']
    assert tables['t'].tables() == ['other', 'other']

def test_comments():
    rules = compile_rules("""
        // A grouping
        define v 'aeiou' /* vowels */
        define t as among (
            'x' (delete) // delete it
        )
    """)
    assert 'v' in rules
    assert 't' in rules

def test_syntax_errors():
    with pytest.raises(ParseException):
        compile_rules("define t as among ( 'x' (delete) ")
    with pytest.raises(ParseException):
        compile_rules("define t as among ( 'x (delete) )")
    with pytest.raises(ParseException):
        compile_rules("define t as among ( 'x' (undefined_table_or 'y') )")

def test_rule_errors():
    with pytest.raises(RuleError):
        compile_rules("define t as among in R3 ( 'x' (delete) )")
    with pytest.raises(RuleError):
        compile_rules("define v 'a'\ndefine v 'b'")
    with pytest.raises(RuleError):
        compile_rules("""
            define t as among ( 'x' (delete) )
            define t as among ( 'y' (delete) )
        """)

def test_unknown_routine():
    rules = compile_rules("define t as among ( 'x' (no_such_routine) )")

    class Routines(object):
        def known(self, state, start):
            return True

    with pytest.raises(RuleError):
        rules.check_routines(Routines)

def test_missing_attributes():
    rules = compile_rules("define v 'a'")
    with pytest.raises(AttributeError):
        rules.nope
    with pytest.raises(KeyError):
        rules['nope']

def test_no_pyparsing_deprecation_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        importlib.reload(snowstem.grammar)
        snowstem.grammar.compile_rules("""
            define v 'aeiou' // vowels
            define t as among in R1 ( 'ed' (R1 delete) )
        """)
    assert not [w for w in caught
                if issubclass(w.category, DeprecationWarning)]
