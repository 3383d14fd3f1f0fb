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
Norwegian (Bokmål) stemmer.
"""

from snowstem.grammar import compile_rules
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyæåø'
define s_ending 'bcdfghjlmnoptvyz'

define main_suffix as among in R1 (
    'a' 'e' 'ede' 'ande' 'ende' 'ane' 'ene' 'hetene' 'en' 'heten' 'ar'
    'er' 'heter' 'as' 'es' 'edes' 'endes' 'enes' 'hetenes' 'ens'
    'hetens' 'ets' 'et' 'het' 'ast' (delete)
    'ers' (ers_ending delete)
    's' (valid_s_ending delete)
    'erte' 'ert' (<- 'er')
)

define consonant_pair as among in R1 (
    'dt' 'vt' (chop_last)
)

define other_suffix as among in R1 (
    'leg' 'eleg' 'ig' 'eig' 'lig' 'elig' 'els' 'lov' 'elov' 'slov'
    'hetslov' (delete)
)
""")


# Stems in front of "ers" which make it a suffix
ERS_DELETE = ('skap', 'giv', 'hav')

# Stems in front of "ers" which keep it
ERS_KEEP = ('ind', 'kap', 'ast', 'øst', 'amm', 'omm', 'lt', 'kk', 'nk',
            'pp', 'v')


@register(Language.NORWEGIAN)
class NorwegianStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    r1_floor = 3

    def run_steps(self, state):
        if state.r1 >= len(state):
            return
        state.apply('main_suffix')
        state.apply('consonant_pair')
        state.apply('other_suffix')

    #
    # Routines called from the rules
    #

    def ers_ending(self, state, start):
        word = state.word
        for stem in ERS_DELETE:
            if word.matches_at(start - len(stem), stem):
                return True
        for stem in ERS_KEEP:
            if word.matches_at(start - len(stem), stem):
                return False
        return True

    def valid_s_ending(self, state, start):
        i = start - 1
        if state.is_one_of(i, self.rules.s_ending):
            return True
        if i < 1:
            return False
        if state.char(i) == 'k':
            return not state.is_vowel(i - 1)
        if state.char(i) == 'r':
            return state.char(i - 1) != 'e'
        return False

    def chop_last(self, state, start):
        return state.chop()
