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
German stemmer.

Umlauts written as ae, oe and ue are turned into ä, ö and ü before
stemming unless the stemmer is created with
``transliterate_umlauts=False``.
"""

from snowstem.chars import GERMAN_UMLAUTS, translate
from snowstem.grammar import compile_rules
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyäöü'
define s_ending 'bdfghklmnrt'
define st_ending s_ending - 'r'

define step_1 as among in R1 (
    'em' (not_after_syst delete)
    'ern' 'er' (delete)
    'e' 'en' 'es' (delete drop_niss_s)
    's' (after_s_ending delete)
)

define step_2 as among in R1 (
    'en' 'er' 'est' (delete)
    'st' (after_st_ending delete)
)

define step_3_er_en as among in R1 (
    'er' 'en' (delete)
)

define step_3_lich_ig as among in R2 (
    'lich' 'ig' (delete)
)

define step_3_ig as among in R2 (
    'ig' (not_after_e delete)
)

define step_3 as among (
    'end' 'ung' (R2 delete try step_3_ig)
    'ig' 'ik' 'isch' (R2 not_after_e delete)
    'lich' 'heit' (R2 delete try step_3_er_en)
    'keit' (R2 delete try step_3_lich_ig)
)
""")


@register(Language.GERMAN)
class GermanStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    min_length = 2
    r1_floor = 3

    def __init__(self, transliterate_umlauts=True, **options):
        super(GermanStemmer, self).__init__(**options)
        self.transliterate_umlauts = transliterate_umlauts

    def __repr__(self):
        return 'GermanStemmer(transliterate_umlauts=%r)' % (
            self.transliterate_umlauts)

    def short_word(self, text):
        return translate(text, GERMAN_UMLAUTS)

    def prelude(self, state):
        word = state.word
        v = self.vowels
        for i in range(1, len(word) - 1):
            if word.char(i) in ('u', 'y') and word.is_vowel(i - 1, v) and \
                    word.is_vowel(i + 1, v):
                word.freeze(i)
        i = 0
        while i < len(word):
            if word.char(i) == 'ß':
                word.splice(i, i + 1, 'ss')
            elif self.transliterate_umlauts and not word.is_frozen(i) and \
                    word.char(i + 1) == 'e' and not word.is_frozen(i + 1):
                self.transliterate(word, i)
            i += 1

    def transliterate(self, word, i):
        ch = word.char(i)
        if ch == 'u' and i > 0 and word.char(i - 1) == 'q':
            return
        umlaut = {'a': 'ä', 'o': 'ö', 'u': 'ü'}.get(ch)
        if umlaut is not None:
            if word.chars[i].isupper():
                umlaut = umlaut.upper()
            word.splice(i, i + 2, umlaut)

    def run_steps(self, state):
        if state.r1 >= len(state):
            return
        state.apply('step_1')
        state.apply('step_2')
        state.apply('step_3')

    def postlude(self, state):
        word = state.word
        word.unhash()
        word.splice(0, len(word), translate(str(word), GERMAN_UMLAUTS))

    #
    # Routines called from the rules
    #

    def not_after_syst(self, state, start):
        return not state.word.matches_at(start - 4, 'syst')

    def drop_niss_s(self, state, start):
        if state.ends('niss'):
            state.chop()
        return True

    def after_s_ending(self, state, start):
        return state.is_one_of(start - 1, self.rules.s_ending)

    def after_st_ending(self, state, start):
        return start >= 4 and state.is_one_of(start - 1,
                                              self.rules.st_ending)

    def not_after_e(self, state, start):
        return not state.is_one_of(start - 1, 'e')
