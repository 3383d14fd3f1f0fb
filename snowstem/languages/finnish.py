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
Finnish stemmer.

Particles, possessive suffixes and case endings are removed in turn.
Whether a case ending was removed decides between the removal of an i
or j plural and that of a t plural.
"""

from snowstem.grammar import compile_rules
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyäö'
define v2 'aeiouäö'
define aei 'aäei'
define c 'bcdfghjklmnpqrstvwxz'
define particle_end v + 'nt'

define particle as among in R1 (
    'kin' 'kaan' 'kään' 'ko' 'kö' 'han' 'hän' 'pa' 'pä'
        (after_particle_end delete)
    'sti' (R2 delete)
)

define kse as among (
    'kse' (<- 'ksi')
)

define possessive as among in R1 (
    'si' (not_after_k delete)
    'ni' (delete try kse)
    'nsa' 'nsä' 'mme' 'nne' (delete)
    'an' 'än' (after_case_ending delete)
    'en' (after_lle_or_ine delete)
)

define case_ending as among in R1 (
    // Illative
    'han' 'hen' 'hin' 'hon' 'hän' 'hön'
        (same_vowel_around_h delete ending_removed)
    'siin' 'den' 'tten' (vi_before delete ending_removed or genitive_n)
    'seen' (long_before delete ending_removed or genitive_n)
    'n' (genitive_n)
    // Partitive
    'a' 'ä' (cv_before delete ending_removed)
    'tta' 'ttä' (after_e delete ending_removed)
    'ta' 'tä' 'ssa' 'ssä' 'sta' 'stä' 'lla' 'llä' 'lta' 'ltä' 'lle'
    'na' 'nä' 'ksi' 'ine' (delete ending_removed)
)

define other_endings as among in R2 (
    'mpi' 'mpa' 'mpä' 'mmi' 'mma' 'mmä' (not_after_po delete)
    'impi' 'impa' 'impä' 'immi' 'imma' 'immä' 'eja' 'ejä' (delete)
)

define i_plural as among in R1 (
    'i' 'j' (delete)
)

define t_plural_mma as among in R2 (
    'imma' (delete)
    'mma' (not_after_po delete)
)

define t_plural as among in R1 (
    't' (after_vowel delete try t_plural_mma)
)
""")


# Case endings which may carry a possessive "an" or "än", without
# their final vowel
CASE_STEMS = ('t', 'n', 'ss', 'st', 'll', 'lt')


@register(Language.FINNISH)
class FinnishStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    min_length = 2

    def run_steps(self, state):
        state.ending_removed = False
        state.apply('particle')
        state.apply('possessive')
        state.apply('case_ending')
        state.apply('other_endings')
        if state.ending_removed:
            state.apply('i_plural')
        else:
            state.apply('t_plural')
        self.tidy(state)

    def long_vowel(self, state, end):
        """
        Check if the two letters in front of ``end`` are the same vowel.
        """
        return (end >= 2 and state.is_one_of(end - 1, self.rules.v2) and
                state.char(end - 1) == state.char(end - 2))

    #
    # Steps
    #

    def tidy(self, state):
        rules = self.rules
        n = len(state)
        if n - 2 >= state.r1 and self.long_vowel(state, n):
            state.chop()
        n = len(state)
        if n - 2 >= state.r1 and state.is_one_of(n - 1, rules.aei) and \
                state.is_one_of(n - 2, rules.c):
            state.chop()
        if state.ends_in('r1', 'oj') or state.ends_in('r1', 'uj'):
            state.chop()
        if state.ends_in('r1', 'jo'):
            state.chop()
        self.undouble_consonant(state)

    def undouble_consonant(self, state):
        i = len(state) - 1
        while i >= 0 and state.is_vowel(i):
            i -= 1
        if i >= 1 and state.is_one_of(i, self.rules.c) and \
                state.char(i) == state.char(i - 1):
            state.word.delete(i)
            state.update_regions()
            return True
        return False

    #
    # Routines called from the rules
    #

    def after_particle_end(self, state, start):
        return state.is_one_of(start - 1, self.rules.particle_end)

    def not_after_k(self, state, start):
        return not state.is_one_of(start - 1, 'k')

    def after_case_ending(self, state, start):
        vowel = state.char(start)
        word = state.word
        for stem in CASE_STEMS:
            ending = stem + vowel
            if word.matches_at(start - len(ending), ending):
                return True
        return False

    def after_lle_or_ine(self, state, start):
        word = state.word
        return (word.matches_at(start - 3, 'lle') or
                word.matches_at(start - 3, 'ine'))

    def same_vowel_around_h(self, state, start):
        return start > 0 and state.char(start - 1) == state.char(start + 1)

    def vi_before(self, state, start):
        return (state.is_one_of(start - 1, 'i') and
                state.is_one_of(start - 2, self.rules.v2))

    def long_before(self, state, start):
        return self.long_vowel(state, start)

    def genitive_n(self, state, start):
        """
        Delete a final n together with the second letter of a preceding
        long vowel or the e of a preceding ie.
        """
        state.chop()
        if self.long_vowel(state, len(state)) or state.ends_in('r1', 'ie'):
            state.chop()
        state.ending_removed = True
        return True

    def cv_before(self, state, start):
        return (state.is_vowel(start - 1) and
                state.is_one_of(start - 2, self.rules.c))

    def after_e(self, state, start):
        return state.is_one_of(start - 1, 'e')

    def after_vowel(self, state, start):
        return state.is_vowel(start - 1)

    def not_after_po(self, state, start):
        return not state.word.matches_at(start - 2, 'po')

    def ending_removed(self, state, start):
        state.ending_removed = True
        return True
