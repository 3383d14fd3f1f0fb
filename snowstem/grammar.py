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
Grammar and parser for the rule notation.

The notation is a small subset of Snowball. A rule file consists of
grouping and table definitions::

    define v 'aeiouy'
    define v_wxy v + 'wxY'

    define step_2 as among in R1 (
        'tional' (<- 'tion')
        'li' (valid_li delete)
    )

Each table entry is a list of suffix literals followed by actions in
parentheses. An action is a region check (``R1``, ``R2``, ``RV``),
``delete``, a replacement (``<- 'literal'``), ``try`` followed by an
action, a reference to a previously defined table or the name of a
stemmer routine. ``fail`` makes the entry fail. Actions are separated
by ``or`` into alternatives.
"""

import functools
import inspect
import threading

from pyparsing import (Forward, Group, Keyword, MatchFirst, OneOrMore,
                       Opt, ParseException, ParserElement, StringEnd,
                       Suppress, Token, Word, ZeroOrMore, alphanums, alphas,
                       c_style_comment, dbl_slash_comment, one_of)

from snowstem.rules import (REGIONS, Delete, Entry, Fail, RegionCheck,
                            Replace, RoutineCall, RuleError, RuleSet,
                            Sequence, SuffixTable, TableCall, Try, simplify)
from snowstem.utils import add_line_numbers


__all__ = ['parse_string', 'compile_rules']


# Grammar elements are in all-caps.


ParserElement.enable_packrat()


#
# PARSER STATE
#

state = threading.local()

def reset():
    """
    Reset internal parser state.
    """
    state.groupings = {}   # Defined groupings
    state.tables = {}      # Defined tables


#
# UTILITY FUNCTIONS
#

def parse_action(f):
    """
    Decorator for pyparsing parse actions to ease debugging.

    pyparsing passes ``(string, location, tokens)`` to a parse action
    and falls back to fewer arguments if the call raises a
    ``TypeError``. That fallback hides ``TypeError`` exceptions raised
    inside the action itself.

    This decorator inspects the number of arguments the decorated
    function takes and always calls it with ``tokens`` first, followed
    by ``location`` and ``string`` as far as required.
    """
    num_args = len(inspect.getfullargspec(f).args)
    if num_args > 3:
        raise ValueError('Input function must take at most 3 parameters.')

    @functools.wraps(f)
    def action(*args):
        return f(*args[:-(num_args + 1):-1])

    return action


LPAREN = Suppress('(')
RPAREN = Suppress(')')


#
# KEYWORDS
#

keywords = []

def make_keyword(s):
    kw = Keyword(s)
    globals()[s.upper()] = kw
    keywords.append(kw)
    return kw

for _s in 'define as among in delete try or fail'.split():
    make_keyword(_s)

KEYWORD = MatchFirst(keywords)


#
# NAMES
#

NAME = ~KEYWORD + Word(alphas, alphanums + '_')
NAME.set_parse_action(parse_action(lambda t: t[0]))


#
# REFERENCES
#

reference_chars = set(alphanums + '_')

class Reference(Token):
    """
    A reference to a previously defined grouping or table.

    This class works like pyparsing's ``Or`` in combination with
    ``Keyword``. However, the candidates are looked up in the parser
    state when matching, so definitions made during parsing are taken
    into account.
    """

    def __init__(self, kind):
        """
        Constructor.

        ``kind`` is the name of the parser state attribute holding the
        candidates (``'groupings'`` or ``'tables'``).
        """
        super(Reference, self).__init__()
        self.kind = kind

    def __str__(self):
        return 'Reference(%s)' % self.kind

    def parseImpl(self, instring, loc, do_actions=True):
        candidates = sorted(getattr(state, self.kind), key=len, reverse=True)
        for candidate in candidates:
            if instring.startswith(candidate, loc):
                n = len(candidate)
                if (len(instring) == loc + n or instring[loc + n] not in
                        reference_chars):
                    return loc + n, candidate
        raise ParseException(instring, loc, 'Expected one of ' +
                             ', '.join(candidates), self)

GROUPING_REF = Reference('groupings')
TABLE_REF = Reference('tables')


#
# STRINGS
#

class StringLiteral(Token):
    """
    A string literal in single quotes.
    """

    def __init__(self):
        super(StringLiteral, self).__init__()

    def __str__(self):
        return 'StringLiteral'

    def parseImpl(self, instring, loc, do_actions=True):
        if loc >= len(instring) or instring[loc] != "'":
            raise ParseException(instring, loc, 'Expected "\'".', self)
        try:
            end = instring.index("'", loc + 1)
        except ValueError:
            raise ParseException(instring, loc, 'Runaway string literal.',
                                 self)
        return end + 1, instring[loc + 1:end]

STR_LITERAL = StringLiteral()


#
# ACTIONS
#

ALTERNATIVES = Forward()

@parse_action
def region_action(tokens):
    return RegionCheck(tokens[0])

@parse_action
def sequence_action(tokens):
    return Sequence(tokens)

@parse_action
def alternatives_action(tokens):
    return simplify(list(tokens))

REGION = MatchFirst([Keyword(r) for r in REGIONS]).set_parse_action(
        region_action)
ACT_DELETE = Suppress(DELETE).set_parse_action(parse_action(lambda: Delete()))
ACT_FAIL = Suppress(FAIL).set_parse_action(parse_action(lambda: Fail()))
ACT_REPLACE = (Suppress('<-') + STR_LITERAL).set_parse_action(
        parse_action(lambda t: Replace(t[0])))
ACT_TABLE = TABLE_REF.copy().set_parse_action(
        parse_action(lambda t: TableCall(t[0])))
ACT_ROUTINE = NAME.copy().add_parse_action(
        parse_action(lambda t: RoutineCall(t[0])))
ACT_GROUP = LPAREN + ALTERNATIVES + RPAREN

ACTION = Forward()
ACT_TRY = (Suppress(TRY) + ACTION).set_parse_action(
        parse_action(lambda t: Try(t[0])))
ACTION << (ACT_TRY | ACT_DELETE | ACT_FAIL | ACT_REPLACE | ACT_GROUP |
           REGION | ACT_TABLE | ACT_ROUTINE)

SEQUENCE = ZeroOrMore(ACTION).set_parse_action(sequence_action)
ALTERNATIVES << (SEQUENCE + ZeroOrMore(Suppress(OR) + SEQUENCE))
ALTERNATIVES.set_parse_action(alternatives_action)


#
# TABLES
#

@parse_action
def entry_action(tokens):
    literals, action = tokens
    return Entry(literals, action)

@parse_action
def table_def_action(tokens):
    name = tokens[0]
    region = tokens[1]
    entries = tokens[2:]
    if name in state.tables or name in state.groupings:
        raise RuleError('"%s" is defined twice.' % name)
    table = SuffixTable(name, entries, region)
    state.tables[name] = table
    return table

ENTRY = (Group(OneOrMore(STR_LITERAL)) + LPAREN + ALTERNATIVES +
         RPAREN).set_parse_action(entry_action)
TABLE_DEF = (Suppress(DEFINE) + NAME + Suppress(AS) + Suppress(AMONG) +
             Opt(Suppress(IN) + NAME, default=None) + LPAREN +
             OneOrMore(ENTRY) + RPAREN)
TABLE_DEF.set_parse_action(table_def_action)


#
# GROUPINGS
#

@parse_action
def grouping_def_action(tokens):
    tokens = list(reversed(tokens))
    name = tokens.pop()
    if name in state.tables or name in state.groupings:
        raise RuleError('"%s" is defined twice.' % name)
    chars = set(tokens.pop())
    while tokens:
        op = tokens.pop()
        operand = tokens.pop()
        if op == '+':
            chars |= operand
        else:
            chars -= operand
    grouping = frozenset(chars)
    state.groupings[name] = grouping
    return []

GROUPING_ATOM = (GROUPING_REF.copy().set_parse_action(
                     parse_action(lambda t: state.groupings[t[0]])) |
                 STR_LITERAL.copy().set_parse_action(
                     parse_action(lambda t: frozenset(t[0]))))
GROUPING_DEF = (Suppress(DEFINE) + NAME + GROUPING_ATOM +
                ZeroOrMore(one_of('+ -') + GROUPING_ATOM))
GROUPING_DEF.set_parse_action(grouping_def_action)


#
# PROGRAM
#

PROGRAM = ZeroOrMore(TABLE_DEF | GROUPING_DEF) + StringEnd()
PROGRAM.ignore(c_style_comment | dbl_slash_comment)


#
# PUBLIC INTERFACE
#

def parse_string(s):
    """
    Parse a string containing rule notation.

    Returns a tuple ``(tables, groupings)`` of dicts mapping names to
    ``SuffixTable`` instances and grouping character sets.
    """
    reset()
    try:
        PROGRAM.parse_string(s)
    except ParseException as e:
        e.msg = '%s\n\n%s' % (e.msg, add_line_numbers(s))
        raise
    return dict(state.tables), dict(state.groupings)


def compile_rules(code):
    """
    Compile rule notation into a ``RuleSet``.
    """
    tables, groupings = parse_string(code)
    return RuleSet(tables, groupings)
