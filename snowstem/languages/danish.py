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
Danish stemmer.
"""

from snowstem.grammar import compile_rules
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyæåø'
define s_ending 'abcdfghjklmnoprtvyzå'

define main_suffix as among in R1 (
    'hed' 'ethed' 'ered' 'e' 'erede' 'ende' 'erende' 'ene' 'erne' 'ere'
    'en' 'heden' 'eren' 'er' 'heder' 'erer' 'heds' 'es' 'endes'
    'erendes' 'enes' 'ernes' 'eres' 'ens' 'hedens' 'erens' 'ers' 'ets'
    'erets' 'et' 'eret' (delete)
    's' (valid_s_ending delete)
)

define consonant_pair as among in R1 (
    'gd' 'dt' 'gt' 'kt' (chop_last)
)

define other_suffix as among in R1 (
    'ig' 'lig' 'elig' 'els' (delete try consonant_pair)
    'løst' (<- 'løs')
)
""")


@register(Language.DANISH)
class DanishStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    r1_floor = 3

    def run_steps(self, state):
        if state.r1 >= len(state):
            return
        state.apply('main_suffix')
        state.apply('consonant_pair')
        if state.ends('igst'):
            state.chop(2)
        state.apply('other_suffix')
        self.undouble(state)

    def undouble(self, state):
        """
        Remove the last letter of a final double non-vowel in R1.
        """
        n = len(state)
        if n >= 2 and n - 1 >= state.r1 and not state.is_vowel(n - 1) and \
                state.char(-1) == state.char(-2):
            return state.chop()
        return False

    #
    # Routines called from the rules
    #

    def valid_s_ending(self, state, start):
        return state.is_one_of(start - 1, self.rules.s_ending)

    def chop_last(self, state, start):
        return state.chop()
