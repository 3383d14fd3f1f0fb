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
Compiled rule objects.

The rule notation (see ``snowstem.grammar``) is compiled into the
objects defined here. A ``SuffixTable`` is a list of entries, each
entry pairs one or more suffix literals with an action. Actions are
callables taking the ``StemState`` and the offset at which the matched
suffix starts. They return ``True`` on success.
"""

import logging


__all__ = ['RuleError', 'RegionCheck', 'Delete', 'Replace', 'RoutineCall',
           'TableCall', 'Fail', 'Try', 'Sequence', 'Alternatives', 'Entry',
           'SuffixTable', 'RuleSet']


logger = logging.getLogger(__name__)


REGIONS = ('R1', 'R2', 'RV')


class RuleError(Exception):
    """
    Raised for rules that cannot be used, for example because they
    refer to an unknown region or routine.
    """


#
# ACTIONS
#

class Action(object):

    def __call__(self, state, start):
        raise NotImplementedError()

    def routines(self):
        """
        Names of the stemmer routines called by this action.
        """
        return []

    def tables(self):
        return []


class RegionCheck(Action):
    """
    Succeeds if the suffix starts inside a region.
    """

    def __init__(self, region):
        if region not in REGIONS:
            raise RuleError('Unknown region "%s".' % region)
        self.region = region
        self.attr = region.lower()

    def __call__(self, state, start):
        return start >= getattr(state, self.attr)

    def __repr__(self):
        return self.region


class Delete(Action):

    def __call__(self, state, start):
        return state.delete_from(start)

    def __repr__(self):
        return 'delete'


class Replace(Action):
    """
    Replace the suffix by a literal.

    Upper case letters of the literal are inserted as hashed letters.
    """

    def __init__(self, literal):
        self.literal = literal

    def __call__(self, state, start):
        return state.replace_from(start, self.literal)

    def __repr__(self):
        return "<- '%s'" % self.literal


class RoutineCall(Action):
    """
    Call a method of the stemmer.

    The method is called with the state and the suffix start and must
    return a boolean.
    """

    def __init__(self, name):
        self.name = name

    def __call__(self, state, start):
        return bool(getattr(state.stemmer, self.name)(state, start))

    def routines(self):
        return [self.name]

    def __repr__(self):
        return self.name


class TableCall(Action):
    """
    Apply another table to the current end of the word.
    """

    def __init__(self, name):
        self.name = name

    def __call__(self, state, start):
        return state.rules[self.name].apply(state)

    def tables(self):
        return [self.name]

    def __repr__(self):
        return self.name


class Fail(Action):
    """
    Always fails.
    """

    def __call__(self, state, start):
        return False

    def __repr__(self):
        return 'fail'


class Try(Action):
    """
    Run an action and succeed regardless of its outcome.
    """

    def __init__(self, action):
        self.action = action

    def __call__(self, state, start):
        self.action(state, start)
        return True

    def routines(self):
        return self.action.routines()

    def tables(self):
        return self.action.tables()

    def __repr__(self):
        return 'try %r' % self.action


class Sequence(Action):
    """
    Run actions from left to right until one of them fails.

    The empty sequence succeeds.
    """

    def __init__(self, actions):
        self.actions = list(actions)

    def __call__(self, state, start):
        for action in self.actions:
            if not action(state, start):
                return False
        return True

    def routines(self):
        return [name for a in self.actions for name in a.routines()]

    def tables(self):
        return [name for a in self.actions for name in a.tables()]

    def __repr__(self):
        return '(%s)' % ' '.join(repr(a) for a in self.actions)


class Alternatives(Action):
    """
    Try several sequences in order until one succeeds.
    """

    def __init__(self, options):
        self.options = list(options)

    def __call__(self, state, start):
        for option in self.options:
            if option(state, start):
                return True
        return False

    def routines(self):
        return [name for o in self.options for name in o.routines()]

    def tables(self):
        return [name for o in self.options for name in o.tables()]

    def __repr__(self):
        return '(%s)' % ' or '.join(repr(o)[1:-1] for o in self.options)


def simplify(options):
    """
    Collapse a list of sequences into a single action.
    """
    if len(options) == 1:
        return options[0]
    return Alternatives(options)


#
# TABLES
#

class Entry(object):

    def __init__(self, literals, action):
        self.literals = list(literals)
        self.action = action

    def __repr__(self):
        return '%s %r' % (' '.join("'%s'" % s for s in self.literals),
                          self.action)


class SuffixTable(object):
    """
    An ordered set of suffixes with their actions.

    Suffixes are tried by decreasing length. If the table has a region
    then only suffixes starting inside that region are considered, so a
    long suffix reaching out of the region gives way to a shorter one.
    Without a region the longest matching suffix is selected whether
    its action succeeds or not.
    """

    def __init__(self, name, entries, region=None):
        self.name = name
        self.entries = list(entries)
        self.region = RegionCheck(region) if region else None
        candidates = [(literal, entry) for entry in self.entries
                      for literal in entry.literals]
        # Stable, so equally long suffixes keep their declaration order
        candidates.sort(key=lambda c: len(c[0]), reverse=True)
        self.candidates = candidates

    def find(self, state):
        """
        Find the matching suffix.

        Returns a tuple ``(literal, entry, start)`` or ``None``.
        """
        word = state.word
        for literal, entry in self.candidates:
            start = len(word) - len(literal)
            if self.region and not self.region(state, start):
                continue
            if word.endswith(literal):
                return literal, entry, start
        return None

    def apply(self, state):
        """
        Apply the table to the end of the word.

        Returns ``True`` if a suffix was found and its action succeeded.
        """
        match = self.find(state)
        if match is None:
            return False
        literal, entry, start = match
        result = entry.action(state, start)
        logger.debug('%s: %r matched %r, %s', self.name, str(state.word),
                     literal, 'ok' if result else 'failed')
        return result

    def routines(self):
        return [name for e in self.entries for name in e.action.routines()]

    def tables(self):
        return [name for e in self.entries for name in e.action.tables()]

    def __len__(self):
        return len(self.candidates)

    def __repr__(self):
        return 'SuffixTable(%r, %d suffixes)' % (self.name, len(self))


class RuleSet(object):
    """
    The tables and groupings compiled from a rule notation string.

    Tables and groupings are available via item and attribute access.
    """

    def __init__(self, tables, groupings):
        self.tables = dict(tables)
        self.groupings = dict(groupings)

    def __getitem__(self, name):
        try:
            return self.tables[name]
        except KeyError:
            return self.groupings[name]

    def __getattr__(self, name):
        if name.startswith('_') or name in ('tables', 'groupings'):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __contains__(self, name):
        return name in self.tables or name in self.groupings

    def check_routines(self, cls):
        """
        Make sure that ``cls`` provides every routine the tables call.
        """
        for table in self.tables.values():
            for name in table.routines():
                if not callable(getattr(cls, name, None)):
                    raise RuleError('Table "%s" calls unknown routine "%s".'
                                    % (table.name, name))
