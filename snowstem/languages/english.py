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
English stemmer (Porter2).
"""

from snowstem.chars import fold, is_apostrophe
from snowstem.grammar import compile_rules
from snowstem.regions import Regions, find_r1, find_r2
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouy'
define double 'bdfgmnprt'
define valid_li 'cdeghkmnrt'

define step_1a as among (
    'sses' (<- 'ss')
    'ied' 'ies' (ie_or_i)
    's' (vowel_before_previous delete)
    'us' 'ss' ()
)

define step_1b as among (
    'eed' 'eedly' (R1 eed_ending)
    'ed' 'edly' 'ingly' (vowel_before delete repair)
    'ing' (vowel_before ing_ending)
)

define step_2 as among (
    'tional' (R1 <- 'tion')
    'enci' (R1 <- 'ence')
    'anci' (R1 <- 'ance')
    'abli' (R1 <- 'able')
    'entli' (R1 <- 'ent')
    'izer' 'ization' (R1 <- 'ize')
    'ational' 'ation' 'ator' (R1 <- 'ate')
    'alism' 'aliti' 'alli' (R1 <- 'al')
    'fulness' (R1 <- 'ful')
    'ousli' 'ousness' (R1 <- 'ous')
    'iveness' 'iviti' (R1 <- 'ive')
    'biliti' 'bli' (R1 <- 'ble')
    'ogist' (R1 <- 'og')
    'ogi' (R1 preceded_by_l <- 'og')
    'fulli' (R1 <- 'ful')
    'lessli' (R1 <- 'less')
    'li' (R1 valid_li_ending delete)
)

define step_3 as among (
    'tional' (R1 <- 'tion')
    'ational' (R1 <- 'ate')
    'alize' (R1 <- 'al')
    'icate' 'iciti' 'ical' (R1 <- 'ic')
    'ful' 'ness' (R1 delete)
    'ative' (R2 delete)
)

define step_4 as among (
    'al' 'ance' 'ence' 'er' 'ic' 'able' 'ible' 'ant' 'ement' 'ment' 'ent'
    'ism' 'ate' 'iti' 'ous' 'ive' 'ize' (R2 delete)
    'ion' (R2 preceded_by_s_or_t delete)
)
""")


# Words stemmed to a fixed form
EXCEPTIONS = {
    'skis': 'ski',
    'skies': 'sky',
    'dying': 'die',
    'lying': 'lie',
    'tying': 'tie',
    'idly': 'idl',
    'gently': 'gentl',
    'ugly': 'ugli',
    'early': 'earli',
    'only': 'onli',
    'singly': 'singl',
}

# Words left alone
INVARIANTS = frozenset(['sky', 'news', 'howe', 'atlas', 'cosmos', 'bias',
                        'andes'])

# Words whose R1 starts after the given prefix
R1_PREFIXES = ('gener', 'commun', 'arsen', 'past', 'univers', 'later',
               'emerg', 'organ')

ING_KEEP = {
    6: ('inn', 'out'),
    7: ('cann', 'herr', 'even', 'earr'),
}

# Whole words that keep their "eed"
EED_KEEP = ('proc', 'exc', 'succ')


@register(Language.ENGLISH)
class EnglishStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v
    min_length = 3

    def prepare(self, text):
        while text and is_apostrophe(text[0]):
            text = text[1:]
        return text

    def exception(self, text):
        key = ''.join(fold(ch) for ch in text)
        if key in INVARIANTS:
            return text
        return EXCEPTIONS.get(key)

    def prelude(self, state):
        word = state.word
        if word.char(0) == 'y':
            word.freeze(0)
        for i in range(1, len(word)):
            if word.char(i) == 'y' and word.is_vowel(i - 1, self.vowels):
                word.freeze(i)

    def find_regions(self, word):
        for prefix in R1_PREFIXES:
            if word.startswith(prefix):
                r1 = len(prefix)
                break
        else:
            r1 = find_r1(word, self.vowels)
        return Regions(r1, find_r2(word, self.vowels, r1), len(word))

    def run_steps(self, state):
        if not any(state.is_vowel(i) for i in range(len(state))):
            return
        state.apply('step_1a')
        state.apply('step_1b')
        self.step_1c(state)
        state.apply('step_2')
        state.apply('step_3')
        state.apply('step_4')
        self.step_5(state)

    #
    # Routines called from the rules
    #

    def ie_or_i(self, state, start):
        return state.replace_from(start, 'i' if start > 1 else 'ie')

    def vowel_before(self, state, start):
        return any(state.is_vowel(i) for i in range(start))

    def vowel_before_previous(self, state, start):
        return any(state.is_vowel(i) for i in range(start - 1))

    def preceded_by_l(self, state, start):
        return state.is_one_of(start - 1, 'l')

    def preceded_by_s_or_t(self, state, start):
        return state.is_one_of(start - 1, 'st')

    def valid_li_ending(self, state, start):
        return state.is_one_of(start - 1, self.rules.valid_li)

    def eed_ending(self, state, start):
        if any(start == len(stem) and state.word.startswith(stem)
               for stem in EED_KEEP):
            return True
        return state.replace_from(start, 'ee')

    def ing_ending(self, state, start):
        word = state.word
        n = len(word)
        if n == 5 and word.char(1) == 'y' and not state.is_vowel(0):
            return state.replace_from(1, 'ie')
        for prefix in ING_KEEP.get(n, ()):
            if word.startswith(prefix):
                return True
        state.delete_from(start)
        return self.repair(state, start)

    def repair(self, state, start):
        """
        Fix up the end of the word after "ed" or "ing" was removed.
        """
        word = state.word
        n = len(word)
        if state.ends('at') or state.ends('bl') or state.ends('iz'):
            return state.replace_from(n, 'e')
        if (n > 3 or (n == 3 and word.char(0) not in 'aeo')) and \
                word.char(-1) == word.char(-2) and \
                state.is_one_of(-1, self.rules.double) and \
                state.is_one_of(-2, self.rules.double):
            return state.chop()
        if word.char(-1) != word.char(-2) and self.is_short_word(state):
            return state.replace_from(n, 'e')
        return True

    #
    # Steps
    #

    def step_1c(self, state):
        word = state.word
        n = len(word)
        if n > 2 and word.char(-1) == 'y' and not state.is_vowel(n - 2):
            word.set_char(n - 1, 'I' if word.chars[-1].isupper() else 'i')
            state.update_regions()
            return True
        return False

    def step_5(self, state):
        word = state.word
        n = len(word)
        if state.ends('e'):
            if state.in_region('r2', n - 1):
                return state.chop()
            if state.in_region('r1', n - 1) and \
                    not self.ends_with_short_syllable(state, n - 1):
                return state.chop()
            return False
        if state.ends_in('r2', 'l') and state.ends('ll'):
            return state.chop()
        return False

    def ends_with_short_syllable(self, state, length):
        """
        Check if the first ``length`` letters end with a short syllable.

        A short syllable is a vowel followed by a non-vowel other than
        w, x or a hashed Y and preceded by a non-vowel, or a vowel at the
        beginning of the word followed by a non-vowel. "past" also
        counts as a short syllable.
        """
        word = state.word
        if length == 2:
            return state.is_vowel(0) and not state.is_vowel(1)
        if length == 4 and word.startswith('past'):
            return True
        if length < 2:
            return False
        last = length - 2
        if not state.is_vowel(last) or last == 0:
            return False
        if any(state.is_vowel(i) for i in range(last + 1, length)):
            return False
        following = last + 1
        return (not word.is_frozen(following) and
                word.char(following) not in 'wx' and
                not state.is_vowel(last - 1))

    def is_short_word(self, state):
        n = len(state.word)
        return self.ends_with_short_syllable(state, n) and state.r1 == n
