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
Russian stemmer.

All suffixes are removed from RV, the region after the first vowel.
"""

from snowstem.chars import translate
from snowstem.grammar import compile_rules
from snowstem.regions import Regions, find_r1, find_r2, find_russian_rv
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'аеиоуыэюя'

define perfective_gerund as among in RV (
    'в' 'вши' 'вшись' (after_a_or_ya delete)
    'ив' 'ивши' 'ившись' 'ыв' 'ывши' 'ывшись' (delete)
)

define reflexive as among in RV (
    'ся' 'сь' (delete)
)

define participle as among in RV (
    'ем' 'нн' 'вш' 'ющ' 'щ' (after_a_or_ya delete)
    'ивш' 'ывш' 'ующ' (delete)
)

define adjectival as among in RV (
    'ее' 'ие' 'ые' 'ое' 'ими' 'ыми' 'ей' 'ий' 'ый' 'ой' 'ем' 'им' 'ым'
    'ом' 'его' 'ого' 'ему' 'ому' 'их' 'ых' 'ую' 'юю' 'ая' 'яя' 'ою' 'ею'
        (delete try participle)
)

define verb as among in RV (
    'ла' 'на' 'ете' 'йте' 'ли' 'й' 'л' 'ем' 'н' 'ло' 'но' 'ет' 'ют' 'ны'
    'ть' 'ешь' 'нно' (after_a_or_ya delete)
    'ила' 'ыла' 'ена' 'ейте' 'уйте' 'ите' 'или' 'ыли' 'ей' 'уй' 'ил'
    'ыл' 'им' 'ым' 'ен' 'ило' 'ыло' 'ено' 'ят' 'ует' 'уют' 'ит' 'ыт'
    'ены' 'ить' 'ыть' 'ишь' 'ую' 'ю' (delete)
)

define noun as among in RV (
    'а' 'ев' 'ов' 'ие' 'ье' 'е' 'иями' 'ями' 'ами' 'еи' 'ии' 'и' 'ией'
    'ей' 'ой' 'ий' 'й' 'иям' 'ям' 'ием' 'ем' 'ам' 'ом' 'о' 'у' 'ах' 'иях'
    'ях' 'ы' 'ь' 'ию' 'ью' 'ю' 'ия' 'ья' 'я' (delete)
)

define derivational as among in RV (
    'ост' 'ость' (R2 delete)
)

define double_n as among in RV (
    'нн' (chop_last)
)

define tidy_up as among in RV (
    'ейш' 'ейше' (delete try double_n)
    'нн' (chop_last)
    'ь' (delete)
)
""")


@register(Language.RUSSIAN)
class RussianStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    min_length = 2

    def prepare(self, text):
        return translate(text, {'ё': 'е'})

    def find_regions(self, word):
        r1 = find_r1(word, self.vowels)
        r2 = find_r2(word, self.vowels, r1)
        return Regions(r1, r2, find_russian_rv(word, self.vowels))

    def run_steps(self, state):
        if not state.apply('perfective_gerund'):
            state.apply('reflexive')
            if not state.apply('adjectival'):
                if not state.apply('verb'):
                    state.apply('noun')
        state.delete_suffix('и', 'rv')
        state.apply('derivational')
        state.apply('tidy_up')

    #
    # Routines called from the rules
    #

    def after_a_or_ya(self, state, start):
        return start - 1 >= state.rv and state.is_one_of(start - 1, 'ая')

    def chop_last(self, state, start):
        return state.chop()
