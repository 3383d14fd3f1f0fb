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
Italian stemmer.
"""

from snowstem.chars import ITALIAN_ACUTES_TO_GRAVES, fold, translate
from snowstem.grammar import compile_rules
from snowstem.regions import Regions, find_r1, find_r2, find_romance_rv
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouàèìòù'
define aeio 'aeioàèìò'

define attached_pronoun as among (
    'ci' 'gli' 'la' 'le' 'li' 'lo' 'mi' 'ne' 'si' 'ti' 'vi'
    'sene' 'gliela' 'gliele' 'glieli' 'glielo' 'gliene'
    'mela' 'mele' 'meli' 'melo' 'mene'
    'tela' 'tele' 'teli' 'telo' 'tene'
    'cela' 'cele' 'celi' 'celo' 'cene'
    'vela' 'vele' 'veli' 'velo' 'vene'
        (after_gerund delete or after_infinitive <- 'e')
)

define ic as among in R2 (
    'ic' (delete)
)

define at as among in R2 (
    'at' (delete)
)

define at_ic as among in R2 (
    'at' (delete try ic)
)

define amente_ending as among (
    'iv' (R2 delete try at)
    'os' 'ic' 'abil' (R2 delete)
)

define ita_ending as among (
    'abil' 'ic' 'iv' (R2 delete)
)

define standard_suffix as among (
    'anza' 'anze' 'ico' 'ici' 'ica' 'ice' 'iche' 'ichi' 'ismo' 'ismi'
    'abile' 'abili' 'ibile' 'ibili' 'ista' 'iste' 'isti' 'istà' 'istè'
    'istì' 'oso' 'osi' 'osa' 'ose' 'mente' 'atrice' 'atrici' 'ante'
    'anti' (R2 delete)
    'azione' 'azioni' 'atore' 'atori' (R2 delete try ic)
    'logia' 'logie' (R2 <- 'log')
    'uzione' 'uzioni' 'usione' 'usioni' (R2 <- 'u')
    'enza' 'enze' (R2 <- 'ente')
    'amento' 'amenti' 'imento' 'imenti' (RV delete)
    'amente' (R1 delete try amente_ending)
    'ità' (R2 delete try ita_ending)
    'ivo' 'ivi' 'iva' 'ive' (R2 delete try at_ic)
)

define verb_suffix as among in RV (
    'ammo' 'ando' 'ano' 'are' 'arono' 'asse' 'assero' 'assi' 'assimo'
    'ata' 'ate' 'ati' 'ato' 'ava' 'avamo' 'avano' 'avate' 'avi' 'avo'
    'emmo' 'enda' 'ende' 'endi' 'endo' 'erà' 'erai' 'eranno' 'ere'
    'erebbe' 'erebbero' 'erei' 'eremmo' 'eremo' 'ereste' 'eresti'
    'erete' 'erò' 'erono' 'essero' 'ete' 'eva' 'evamo' 'evano' 'evate'
    'evi' 'evo' 'yamo' 'iamo' 'immo' 'irà' 'irai' 'iranno' 'ire'
    'irebbe' 'irebbero' 'irei' 'iremmo' 'iremo' 'ireste' 'iresti'
    'irete' 'irò' 'irono' 'isca' 'iscano' 'isce' 'isci' 'isco' 'iscono'
    'issero' 'ita' 'ite' 'iti' 'ito' 'iva' 'ivamo' 'ivano' 'ivate' 'ivi'
    'ivo' 'ono' 'uta' 'ute' 'uti' 'uto' 'ar' 'ir' (delete)
)
""")


# Words with a fixed stem, by their lower case form
EXCEPTIONS = {
    'divano': 'divan',
}


@register(Language.ITALIAN)
class ItalianStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v

    def prepare(self, text):
        return translate(text, ITALIAN_ACUTES_TO_GRAVES)

    def exception(self, text):
        stem = EXCEPTIONS.get(''.join(fold(ch) for ch in text))
        if stem is not None:
            return text[:len(stem)]
        return None

    def prelude(self, state):
        """
        Hash u after q and u or i between vowels.
        """
        word = state.word
        v = self.vowels
        for i in range(1, len(word)):
            ch = word.char(i)
            if ch == 'u' and word.char(i - 1) == 'q':
                word.freeze(i)
            elif ch in ('u', 'i') and word.is_vowel(i - 1, v) and \
                    word.is_vowel(i + 1, v):
                word.freeze(i)

    def find_regions(self, word):
        r1 = find_r1(word, self.vowels)
        r2 = find_r2(word, self.vowels, r1)
        return Regions(r1, r2, find_romance_rv(word, self.vowels))

    def run_steps(self, state):
        state.apply('attached_pronoun')
        if not state.apply('standard_suffix'):
            state.apply('verb_suffix')
        self.vowel_suffix(state)

    def vowel_suffix(self, state):
        """
        Remove a final vowel in RV and an i in front of it, then turn a
        final ch or gh in RV into c or g.
        """
        if state.in_region('rv', len(state) - 1) and \
                state.is_one_of(-1, self.rules.aeio):
            state.chop()
            if state.in_region('rv', len(state) - 1) and state.ends('i'):
                state.chop()
        if state.ends_in('rv', 'ch') or state.ends_in('rv', 'gh'):
            state.chop()

    #
    # Routines called from the rules
    #

    def after_gerund(self, state, start):
        if start - 4 < state.rv:
            return False
        word = state.word
        return (word.matches_at(start - 4, 'ando') or
                word.matches_at(start - 4, 'endo'))

    def after_infinitive(self, state, start):
        return (start - 2 >= state.rv and
                state.is_one_of(start - 2, 'aei') and
                state.is_one_of(start - 1, 'r'))
