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
Stemmer base class, per-call state and the stemmer registry.
"""

import enum
import logging

from snowstem.chars import narrow, remove_possessive_suffix
from snowstem.regions import Regions, find_r1, find_r2, recompute_regions
from snowstem.word import Word


__all__ = ['Language', 'StemState', 'Stemmer', 'NoOpStemmer', 'register',
           'registry']


logger = logging.getLogger(__name__)


class Language(enum.Enum):
    NONE = 'none'
    DANISH = 'danish'
    DUTCH = 'dutch'
    ENGLISH = 'english'
    FINNISH = 'finnish'
    FRENCH = 'french'
    GERMAN = 'german'
    ITALIAN = 'italian'
    NORWEGIAN = 'norwegian'
    PORTUGUESE = 'portuguese'
    RUSSIAN = 'russian'
    SPANISH = 'spanish'
    SWEDISH = 'swedish'


class StemState(object):
    """
    Everything that changes while a single word is stemmed.

    A fresh state is created for every call of ``Stemmer.stem``. Steps
    may store their own flags as attributes.

    Until ``mark_regions`` has been called all regions are empty and
    changes to the word do not update them.
    """

    def __init__(self, stemmer, word):
        self.stemmer = stemmer
        self.rules = stemmer.rules
        self.vowels = stemmer.vowels
        self.word = word
        n = len(word)
        self.regions = Regions(n, n, n)
        self.marked = False

    @property
    def r1(self):
        return self.regions.r1

    @property
    def r2(self):
        return self.regions.r2

    @property
    def rv(self):
        return self.regions.rv

    def mark_regions(self):
        self.marked = True
        self.update_regions()

    def update_regions(self):
        if self.marked:
            self.regions = recompute_regions(self.word,
                                             self.stemmer.find_regions)

    #
    # Queries
    #

    def __len__(self):
        return len(self.word)

    def char(self, i):
        return self.word.char(i)

    def is_vowel(self, i):
        return self.word.is_vowel(i, self.vowels)

    def is_one_of(self, i, chars):
        return self.word.is_one_of(i, chars)

    def ends(self, literal):
        return self.word.endswith(literal)

    def in_region(self, region, start):
        return start >= getattr(self, region)

    def ends_in(self, region, literal):
        """
        Check if the word ends with ``literal`` and the suffix lies in
        ``region`` (``'r1'``, ``'r2'`` or ``'rv'``).
        """
        return (self.word.endswith(literal) and
                self.in_region(region, len(self.word) - len(literal)))

    #
    # Changes
    #

    def delete_from(self, start):
        self.word.truncate(start)
        self.update_regions()
        return True

    def replace_from(self, start, literal):
        self.word.replace(start, len(self.word), literal)
        self.update_regions()
        return True

    def delete_suffix(self, literal, region=None):
        """
        Delete ``literal`` from the end of the word.

        If ``region`` is given the suffix must lie inside it. Returns
        whether the suffix was deleted.
        """
        if region is None:
            found = self.word.endswith(literal)
        else:
            found = self.ends_in(region, literal)
        if found:
            return self.delete_from(len(self.word) - len(literal))
        return False

    def replace_suffix(self, literal, replacement, region=None):
        if region is None:
            found = self.word.endswith(literal)
        else:
            found = self.ends_in(region, literal)
        if found:
            return self.replace_from(len(self.word) - len(literal),
                                     replacement)
        return False

    def chop(self, n=1):
        """
        Remove the last ``n`` characters.
        """
        return self.delete_from(len(self.word) - n)

    def apply(self, table):
        """
        Apply the table named ``table``.
        """
        return self.rules[table].apply(self)


class Stemmer(object):
    """
    Base class for stemmers.

    ``stem`` is a template method: subclasses provide the rules, the
    vowel grouping and the hooks called on the way.
    """

    language = Language.NONE
    rules = None
    vowels = frozenset()
    min_length = 3
    r1_floor = 0

    def __init__(self, **options):
        if options:
            raise TypeError('Unknown options for %s: %s' % (
                type(self).__name__, ', '.join(sorted(options))))

    def __call__(self, text):
        return self.stem(text)

    def __repr__(self):
        return '%s()' % type(self).__name__

    def stem(self, text):
        """
        Return the stem of ``text``.
        """
        if not text.strip():
            return text
        original = text
        text = remove_possessive_suffix(narrow(text))
        text = self.prepare(text)
        if len(text) < self.min_length:
            return self.short_word(text)
        special = self.exception(text)
        if special is not None:
            logger.debug('%s: %r is an exception', self.language.value, text)
            return special
        state = StemState(self, Word(text))
        self.prelude(state)
        state.mark_regions()
        logger.debug('%s: %r has regions %r', self.language.value,
                     str(state.word), state.regions)
        self.run_steps(state)
        self.postlude(state)
        result = str(state.word)
        logger.debug('%s: %r -> %r', self.language.value, original, result)
        return result

    def prepare(self, text):
        """
        Hook for changes to the text before the length check.
        """
        return text

    def short_word(self, text):
        """
        Hook for words shorter than ``min_length``.
        """
        return text

    def exception(self, text):
        """
        Hook for words with a fixed stem.

        Returns the stem or ``None`` if the word is stemmed normally.
        """
        return None

    def prelude(self, state):
        """
        Hook for changes before the regions are marked, like hashing.
        """

    def find_regions(self, word):
        """
        Compute the regions of ``word``.

        The default computes R1 and R2 and applies ``r1_floor``. RV is
        the end of the word.
        """
        r1 = find_r1(word, self.vowels)
        r2 = find_r2(word, self.vowels, r1)
        return Regions(max(r1, self.r1_floor), r2, len(word))

    def run_steps(self, state):
        raise NotImplementedError()

    def postlude(self, state):
        state.word.unhash()


class NoOpStemmer(Stemmer):
    """
    A stemmer that returns every word unchanged.
    """

    def stem(self, text):
        return text


registry = {}

def register(language):
    """
    Class decorator registering a stemmer for ``language``.

    Makes sure that all routines called by the stemmer's rules exist.
    """
    def decorator(cls):
        cls.language = language
        if cls.rules is not None:
            cls.rules.check_routines(cls)
        registry[language] = cls
        return cls
    return decorator

register(Language.NONE)(NoOpStemmer)
