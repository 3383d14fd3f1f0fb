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
Portuguese stemmer.

The nasal vowels ã and õ are written as a~ and o~ while the word is
stemmed.
"""

from snowstem.grammar import compile_rules
from snowstem.regions import Regions, find_r1, find_r2, find_romance_rv
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouáéíóúâêô'

define at as among in R2 (
    'at' (delete)
)

define amente_ending as among (
    'iv' (R2 delete try at)
    'os' 'ic' 'ad' (R2 delete)
)

define mente_ending as among (
    'ante' 'avel' 'ível' (R2 delete)
)

define idade_ending as among (
    'abil' 'ic' 'iv' (R2 delete)
)

define standard_suffix as among (
    'eza' 'ezas' 'ico' 'ica' 'icos' 'icas' 'ismo' 'ismos' 'ável' 'ível'
    'ista' 'istas' 'oso' 'osa' 'osos' 'osas' 'amento' 'amentos' 'imento'
    'imentos' 'adora' 'ador' 'aça~o' 'adoras' 'adores' 'aço~es' 'ante'
    'antes' 'ância' (R2 delete)
    'logia' 'logias' (R2 <- 'log')
    'uça~o' 'uço~es' (R2 <- 'u')
    'ência' 'ências' (R2 <- 'ente')
    'amente' (R1 delete try amente_ending)
    'mente' (R2 delete try mente_ending)
    'idade' 'idades' (R2 delete try idade_ending)
    'iva' 'ivo' 'ivas' 'ivos' (R2 delete try at)
    'ira' 'iras' (RV after_e <- 'ir')
)

define verb_suffix as among in RV (
    'ada' 'ida' 'ia' 'aria' 'eria' 'iria' 'ará' 'ara' 'erá' 'era' 'irá'
    'ava' 'asse' 'esse' 'isse' 'aste' 'este' 'iste' 'ei' 'arei' 'erei'
    'irei' 'am' 'iam' 'ariam' 'eriam' 'iriam' 'aram' 'eram' 'iram'
    'avam' 'em' 'arem' 'erem' 'irem' 'assem' 'essem' 'issem' 'ado' 'ido'
    'ando' 'endo' 'indo' 'ara~o' 'era~o' 'ira~o' 'ar' 'er' 'ir' 'as'
    'adas' 'idas' 'ias' 'arias' 'erias' 'irias' 'arás' 'aras' 'erás'
    'eras' 'irás' 'avas' 'es' 'ardes' 'erdes' 'irdes' 'ares' 'eres'
    'ires' 'asses' 'esses' 'isses' 'astes' 'estes' 'istes' 'is' 'ais'
    'eis' 'íeis' 'aríeis' 'eríeis' 'iríeis' 'áreis' 'areis' 'éreis'
    'ereis' 'íreis' 'ireis' 'ásseis' 'ésseis' 'ísseis' 'áveis' 'ados'
    'idos' 'ámos' 'amos' 'íamos' 'aríamos' 'eríamos' 'iríamos' 'áramos'
    'éramos' 'íramos' 'ávamos' 'emos' 'aremos' 'eremos' 'iremos'
    'ássemos' 'êssemos' 'íssemos' 'imos' 'armos' 'ermos' 'irmos' 'eu'
    'iu' 'ou' 'ira' 'iras' (delete)
)

define i_after_c as among (
    'i' (after_c RV delete)
)

define residual_suffix as among (
    'os' 'a' 'i' 'o' 'á' 'í' 'ó' (RV delete)
)

define softened_vowel as among (
    'u' (after_g RV delete)
    'i' (after_c RV delete)
)

define residual_form as among (
    'e' 'é' 'ê' (RV delete try softened_vowel)
    'ç' (<- 'c')
)
""")


NASALS = {'ã': 'a~', 'õ': 'o~', 'Ã': 'A~', 'Õ': 'O~'}


@register(Language.PORTUGUESE)
class PortugueseStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v

    def prelude(self, state):
        word = state.word
        text = ''.join(NASALS.get(ch, ch) for ch in word.chars)
        word.splice(0, len(word), text)

    def find_regions(self, word):
        r1 = find_r1(word, self.vowels)
        r2 = find_r2(word, self.vowels, r1)
        return Regions(r1, r2, find_romance_rv(word, self.vowels))

    def run_steps(self, state):
        if state.apply('standard_suffix') or state.apply('verb_suffix'):
            state.apply('i_after_c')
        else:
            state.apply('residual_suffix')
        state.apply('residual_form')

    def postlude(self, state):
        word = state.word
        word.unhash()
        text = str(word)
        for nasal, spelled in NASALS.items():
            text = text.replace(spelled, nasal)
        word.splice(0, len(word), text)

    #
    # Routines called from the rules
    #

    def after_e(self, state, start):
        return state.is_one_of(start - 1, 'e')

    def after_c(self, state, start):
        return state.is_one_of(start - 1, 'c')

    def after_g(self, state, start):
        return state.is_one_of(start - 1, 'g')
