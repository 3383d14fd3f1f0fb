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
Swedish stemmer.
"""

from snowstem.grammar import compile_rules
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyäåö'
define s_ending 'bcdfghjklmnoprtvy'

define main_suffix as among in R1 (
    'a' 'arna' 'erna' 'heterna' 'orna' 'ad' 'e' 'ade' 'ande' 'arne'
    'are' 'aste' 'en' 'anden' 'aren' 'heten' 'ern' 'ar' 'er' 'heter'
    'or' 'as' 'arnas' 'ernas' 'ornas' 'es' 'ades' 'andes' 'ens' 'arens'
    'hetens' 'erns' 'at' 'andet' 'het' 'ast' (delete)
    'et' (et_condition delete)
    // Without a valid et-ending only the s goes
    'ets' (et_condition delete or chop_last)
    's' (valid_s_ending delete)
)

define consonant_pair as among in R1 (
    'dd' 'gd' 'nn' 'dt' 'gt' 'kt' 'tt' (chop_last)
)

define other_suffix as among in R1 (
    'fullt' (chop_last)
    'öst' (after_iklnprtuv chop_last)
    'lig' 'els' 'ig' (delete)
)
""")


# Stems in front of "et" which keep it
ET_KEEP = ('h', 'iet', 'uit', 'fab', 'cit', 'dit', 'alit', 'ilit', 'mit',
           'nit', 'pit', 'rit', 'sit', 'tit', 'ivit', 'kvit', 'xit', 'kom',
           'rak', 'pak', 'stak')


@register(Language.SWEDISH)
class SwedishStemmer(Stemmer):

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

    def et_condition(self, state, start):
        """
        A valid et-ending follows at least one letter, a vowel and a
        non-vowel, and none of the stems in ``ET_KEEP``.
        """
        if start < 3:
            return False
        if not state.is_vowel(start - 2) or state.is_vowel(start - 1):
            return False
        word = state.word
        return not any(word.matches_at(start - len(stem), stem)
                       for stem in ET_KEEP)

    def valid_s_ending(self, state, start):
        return state.is_one_of(start - 1, self.rules.s_ending)

    def after_iklnprtuv(self, state, start):
        return state.is_one_of(start - 1, 'iklnprtuv')

    def chop_last(self, state, start):
        return state.chop()
