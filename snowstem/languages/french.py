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
French stemmer.
"""

from snowstem.chars import fold, is_apostrophe
from snowstem.grammar import compile_rules
from snowstem.regions import Regions, find_french_rv, find_r1, find_r2
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouyâàëéêèïîôûù'
define keep_with_s 'aiouès'

// Endings after a removed derivational suffix

define ic as among (
    'ic' (R2 delete or <- 'iqU')
)

define at as among (
    'at' (R2 delete)
)

define at_ic as among (
    'at' (R2 delete try ic)
)

define ement_ending as among (
    'iv' (R2 delete try at)
    'eus' (R2 delete or R1 <- 'eux')
    'abl' 'iqU' (R2 delete)
    'ièr' 'Ièr' (RV <- 'i')
)

define ite_ending as among (
    'abil' (R2 delete or <- 'abl')
    'ic' (R2 delete or <- 'iqU')
    'iv' (R2 delete)
)

define standard_suffix as among (
    'ance' 'iqUe' 'isme' 'able' 'iste' 'eux'
    'ances' 'iqUes' 'ismes' 'ables' 'istes' (R2 delete)
    'atrice' 'ateur' 'ation'
    'atrices' 'ateurs' 'ations' (R2 delete try ic)
    'logie' 'logies' (R2 <- 'log')
    'usion' 'ution' 'usions' 'utions' (R2 <- 'u')
    'ence' 'ences' (R2 <- 'ent')
    'ement' 'ements' (RV delete try ement_ending)
    'ité' 'ités' (R2 delete try ite_ending)
    'if' 'ive' 'ifs' 'ives' (R2 delete try at_ic)
    'eaux' (<- 'eau')
    'aux' (R1 <- 'al')
    'oux' (after_bhjlnp <- 'ou')
    'euse' 'euses' (R2 delete or R1 <- 'eux')
    'issement' 'issements' (R1 non_vowel_before delete)
    // The verb suffixes get a chance after these
    'amment' (RV <- 'ant' fail)
    'emment' (RV <- 'ent' fail)
    'ment' 'ments' (vowel_before_in_rv delete fail)
)

define i_verb_suffix as among in RV (
    'îmes' 'ît' 'îtes' 'i' 'ie' 'ies' 'ir' 'ira' 'irai' 'iraIent'
    'irais' 'irait' 'iras' 'irent' 'irez' 'iriez' 'irions' 'irons'
    'iront' 'is' 'issaIent' 'issais' 'issait' 'issant' 'issante'
    'issantes' 'issants' 'isse' 'issent' 'isses' 'issez' 'issiez'
    'issions' 'issons' 'it' (i_verb_stem delete)
)

define e_in_rv as among in RV (
    'e' (delete)
)

define verb_suffix as among in RV (
    'ions' (R2 delete)
    'é' 'ée' 'ées' 'és' 'èrent' 'er' 'era' 'erai' 'eraIent' 'erais'
    'erait' 'eras' 'erez' 'eriez' 'erions' 'erons' 'eront' 'ez'
    'iez' (delete)
    'âmes' 'ât' 'âtes' 'a' 'ai' 'aIent' 'ait' 'ant' 'ante' 'antes'
    'ants' 'as' 'asse' 'assent' 'asses' 'assiez'
    'assions' (delete try e_in_rv)
    'ais' 'aise' 'aises' (ais_stem delete try e_in_rv)
)

define residual_suffix as among in RV (
    'ion' (R2 s_or_t_in_rv delete)
    'ier' 'ière' 'Ier' 'Ière' (<- 'i')
    'e' (delete)
)

define undouble as among (
    'enn' 'onn' 'ett' 'ell' 'eill' (chop_last)
)
""")


ELISIONS = 'cdjlmnst'

# Stems that keep a following "ais"
AIS_KEEP = ('auv', 'épl')


@register(Language.FRENCH)
class FrenchStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    min_length = 2

    def prepare(self, text):
        if len(text) > 2 and is_apostrophe(text[1]) and \
                fold(text[0]) in ELISIONS:
            text = text[2:]
        elif len(text) > 3 and is_apostrophe(text[2]) and \
                fold(text[0]) + fold(text[1]) == 'qu':
            text = text[3:]
        if text and is_apostrophe(text[0]):
            text = text[1:]
        return text

    def prelude(self, state):
        """
        Hash letters that do not act as vowels.

        u and i between vowels, y next to a vowel and u after q are
        frozen. ë and ï are split into a placeholder and the plain
        letter.
        """
        word = state.word
        v = self.vowels
        i = 0
        while i < len(word):
            ch = word.char(i)
            after_vowel = word.is_vowel(i - 1, v) if i > 0 else False
            before_vowel = word.is_vowel(i + 1, v)
            if after_vowel and ch in ('u', 'i') and before_vowel:
                word.freeze(i)
            elif after_vowel and ch == 'y':
                word.freeze(i)
            elif ch in ('ë', 'ï'):
                plain = 'e' if ch == 'ë' else 'i'
                if word.chars[i] != ch:
                    plain = plain.upper()
                word.set_char(i, plain)
                word.insert_placeholder(i)
                i += 1
            elif ch == 'y' and before_vowel:
                word.freeze(i)
            elif ch == 'u' and i > 0 and word.char(i - 1) == 'q':
                word.freeze(i)
            i += 1

    def find_regions(self, word):
        r1 = find_r1(word, self.vowels)
        r2 = find_r2(word, self.vowels, r1)
        return Regions(r1, r2, find_french_rv(word, self.vowels))

    def run_steps(self, state):
        length = len(state)
        if not state.apply('standard_suffix'):
            if not state.apply('i_verb_suffix'):
                state.apply('verb_suffix')
        if len(state) != length:
            self.tidy_ending(state)
        else:
            self.residual_suffix(state)
        state.apply('undouble')
        self.unaccent(state)

    #
    # Routines called from the rules
    #

    def after_bhjlnp(self, state, start):
        return state.is_one_of(start - 1, 'bhjlnp')

    def non_vowel_before(self, state, start):
        return start > 0 and not state.is_vowel(start - 1)

    def vowel_before_in_rv(self, state, start):
        return start - 1 >= state.rv and state.is_vowel(start - 1)

    def i_verb_stem(self, state, start):
        i = start - 1
        return (i >= state.rv and not state.is_vowel(i) and
                not state.word.is_placeholder(i))

    def ais_stem(self, state, start):
        word = state.word
        for ending in AIS_KEEP:
            if word.matches_at(start - len(ending), ending):
                return False
        if start == 3 and word.matches_at(1, 'al'):
            return False
        return True

    def s_or_t_in_rv(self, state, start):
        return start - 1 >= state.rv and state.is_one_of(start - 1, 'st')

    def chop_last(self, state, start):
        return state.chop()

    #
    # Steps
    #

    def tidy_ending(self, state):
        word = state.word
        if word.is_frozen(-1) and word.char(-1) == 'y':
            word.set_char(len(word) - 1, 'i')
        elif word.char(-1) == 'ç':
            word.set_char(len(word) - 1, 'c')
        state.update_regions()

    def residual_suffix(self, state):
        word = state.word
        n = len(word)
        if n >= 2 and state.ends('s'):
            hashed_i = (n >= 3 and word.char(-2) == 'i' and
                        word.is_placeholder(-3))
            if hashed_i or not state.is_one_of(n - 2,
                                               self.rules.keep_with_s):
                state.chop()
        return state.apply('residual_suffix')

    def unaccent(self, state):
        """
        Replace é or è by e if only non-vowels follow.
        """
        word = state.word
        i = len(word) - 1
        while i >= 0 and not state.is_vowel(i):
            i -= 1
        if i < 0 or i == len(word) - 1:
            return False
        if word.is_one_of(i, 'éè'):
            word.set_char(i, 'e')
            state.update_regions()
            return True
        return False
