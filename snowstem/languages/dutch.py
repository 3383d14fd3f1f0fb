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
Dutch stemmer.
"""

from snowstem.chars import ACUTES, DUTCH_UMLAUTS, translate
from snowstem.grammar import compile_rules
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyè'

define step_1 as among (
    'heden' (R1 <- 'heid')
    'en' 'ene' (R1 valid_en_ending delete undouble_kdt)
    's' 'se' (R1 valid_s_ending delete)
)

define ig_suffix as among in R2 (
    'ig' (not_after_e delete)
)

define step_3b as among (
    'end' 'ing' (R2 delete (ig_suffix or undouble_kdt))
    'ig' (R2 not_after_e delete)
    'lijk' (R2 delete try e_ending)
    'baar' (R2 delete)
    'bar' (R2 e_found delete)
)
""")


@register(Language.DUTCH)
class DutchStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    r1_floor = 3

    def prepare(self, text):
        return translate(translate(text, DUTCH_UMLAUTS), ACUTES)

    def prelude(self, state):
        """
        Hash an initial y, y after a vowel and i between vowels.
        """
        word = state.word
        v = self.vowels
        for i in range(len(word)):
            ch = word.char(i)
            if ch == 'y' and (i == 0 or word.is_vowel(i - 1, v)):
                word.freeze(i)
            elif ch == 'i' and i > 0 and word.is_vowel(i - 1, v) and \
                    word.is_vowel(i + 1, v):
                word.freeze(i)

    def run_steps(self, state):
        state.e_found = False
        state.apply('step_1')
        self.e_ending(state)
        self.heid_ending(state)
        state.apply('step_3b')
        self.undouble_vowel(state)

    #
    # Steps
    #

    def heid_ending(self, state):
        if not state.ends_in('r2', 'heid') or state.char(-5) == 'c':
            return False
        state.chop(4)
        if state.ends_in('r1', 'en') and self.valid_en_ending(
                state, len(state) - 2):
            state.chop(2)
            self.undouble_kdt(state)
        return True

    def undouble_vowel(self, state):
        """
        Undouble the vowel in a final non-vowel, double vowel, non-vowel
        sequence (``kaas`` becomes ``kas``).
        """
        n = len(state)
        if n < 4 or state.is_vowel(n - 4) or state.is_vowel(n - 1):
            return False
        word = state.word
        if word.is_frozen(n - 1) and word.char(n - 1) == 'i':
            return False
        if state.is_one_of(n - 2, 'aeou') and \
                state.char(n - 2) == state.char(n - 3):
            word.delete(n - 2)
            state.update_regions()
            return True
        return False

    #
    # Routines called from the rules
    #

    def valid_en_ending(self, state, start):
        return (start > 0 and not state.is_vowel(start - 1) and
                not state.word.matches_at(start - 3, 'gem'))

    def valid_s_ending(self, state, start):
        return (start > 0 and not state.is_vowel(start - 1) and
                state.char(start - 1) != 'j')

    def undouble_kdt(self, state, start=None):
        if len(state) >= 2 and state.is_one_of(-1, 'kdt') and \
                state.char(-1) == state.char(-2):
            state.chop()
        return True

    def not_after_e(self, state, start):
        return not state.is_one_of(start - 1, 'e')

    def e_ending(self, state, start=None):
        """
        Delete a final e in R1 after a non-vowel.
        """
        state.e_found = False
        n = len(state)
        if n < 2 or not state.ends_in('r1', 'e') or state.is_vowel(n - 2):
            return False
        state.chop()
        self.undouble_kdt(state)
        state.e_found = True
        return True

    def e_found(self, state, start):
        return state.e_found
