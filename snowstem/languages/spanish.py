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
Spanish stemmer.

Acute accents are part of many suffixes, so they are only removed once
all suffix rules have run.
"""

from snowstem.chars import ACUTES, translate
from snowstem.grammar import compile_rules
from snowstem.regions import Regions, find_r1, find_r2, find_romance_rv
from snowstem.stemmer import Language, Stemmer, register


RULES = compile_rules("""
define v 'aeiouáéíóúü'

define attached_pronoun as among (
    'me' 'se' 'sela' 'selo' 'selas' 'selos' 'la' 'le' 'lo' 'las' 'les'
    'los' 'nos' (verb_before_pronoun)
)

define ic as among in R2 (
    'ic' (delete)
)

define at as among in R2 (
    'at' (delete)
)

define amente_ending as among (
    'iv' (R2 delete try at)
    'os' 'ic' 'ad' (R2 delete)
)

define mente_ending as among (
    'ante' 'able' 'ible' (R2 delete)
)

define idad_ending as among (
    'abil' 'ic' 'iv' (R2 delete)
)

define standard_suffix as among (
    'anza' 'anzas' 'ico' 'ica' 'icos' 'icas' 'ismo' 'ismos' 'able'
    'ables' 'ible' 'ibles' 'ista' 'istas' 'oso' 'osa' 'osos' 'osas'
    'amiento' 'amientos' 'imiento' 'imientos' (R2 delete)
    'adora' 'ador' 'ación' 'adoras' 'adores' 'aciones' 'ante' 'antes'
    'ancia' 'ancias' (R2 delete try ic)
    'logía' 'logías' (R2 <- 'log')
    'ución' 'uciones' (R2 <- 'u')
    'encia' 'encias' (R2 <- 'ente')
    'amente' (R1 delete try amente_ending)
    'mente' (R2 delete try mente_ending)
    'idad' 'idades' (R2 delete try idad_ending)
    'iva' 'ivo' 'ivas' 'ivos' (R2 delete try at)
)

define y_verb_suffix as among in RV (
    'ya' 'ye' 'yan' 'yen' 'yeron' 'yendo' 'yo' 'yó' 'yas' 'yes' 'yais'
    'yamos' (after_u delete)
)

define verb_suffix as among in RV (
    'en' 'es' 'éis' 'emos' (with_u_after_g or delete)
    'arían' 'arías' 'arán' 'arás' 'aríais' 'aría' 'aréis' 'aríamos'
    'aremos' 'ará' 'aré' 'erían' 'erías' 'erán' 'erás' 'eríais' 'ería'
    'eréis' 'eríamos' 'eremos' 'erá' 'eré' 'irían' 'irías' 'irán' 'irás'
    'iríais' 'iría' 'iréis' 'iríamos' 'iremos' 'irá' 'iré' 'aba' 'ada'
    'ida' 'ía' 'ara' 'iera' 'ad' 'ed' 'id' 'ase' 'iese' 'aste' 'iste'
    'an' 'aban' 'ían' 'aran' 'ieran' 'asen' 'iesen' 'aron' 'ieron' 'ado'
    'ido' 'ando' 'iendo' 'ió' 'ar' 'er' 'ir' 'as' 'abas' 'adas' 'idas'
    'ías' 'aras' 'ieras' 'ases' 'ieses' 'ís' 'áis' 'abais' 'íais'
    'arais' 'ierais' 'aseis' 'ieseis' 'asteis' 'isteis' 'ados' 'idos'
    'amos' 'ábamos' 'íamos' 'imos' 'áramos' 'iéramos' 'iésemos'
    'ásemos' (delete)
)

define u_after_g as among in RV (
    'u' (after_g delete)
)

define residual_suffix as among (
    'os' 'a' 'o' 'á' 'í' 'ó' (RV delete)
    'e' 'é' (RV delete try u_after_g)
)
""")


# Verb forms that may carry an attached pronoun, longest first
PRONOUN_HOSTS = ('iéndo', 'iendo', 'yendo', 'ándo', 'ando', 'ár', 'ér',
                 'ír', 'ar', 'er', 'ir')


@register(Language.SPANISH)
class SpanishStemmer(Stemmer):

    rules = RULES
    vowels = RULES.v

    def short_word(self, text):
        return translate(text, ACUTES)

    def find_regions(self, word):
        r1 = find_r1(word, self.vowels)
        r2 = find_r2(word, self.vowels, r1)
        return Regions(r1, r2, find_romance_rv(word, self.vowels))

    def run_steps(self, state):
        state.apply('attached_pronoun')
        if not (state.apply('standard_suffix') or
                state.apply('y_verb_suffix')):
            state.apply('verb_suffix')
        state.apply('residual_suffix')

    def postlude(self, state):
        word = state.word
        word.unhash()
        word.splice(0, len(word), translate(str(word), ACUTES))

    #
    # Routines called from the rules
    #

    def verb_before_pronoun(self, state, start):
        """
        Remove a pronoun attached to a gerund or an infinitive in RV.

        An accent on the verb form, which is only written because of
        the pronoun, is removed as well.
        """
        word = state.word
        for host in PRONOUN_HOSTS:
            pos = start - len(host)
            if word.matches_at(pos, host):
                break
        else:
            return False
        if pos < state.rv:
            return False
        if host == 'yendo' and not state.is_one_of(pos - 1, 'u'):
            return False
        word.truncate(start)
        plain = translate(''.join(word.chars[pos:]), ACUTES)
        word.splice(pos, start, plain)
        state.update_regions()
        return True

    def after_u(self, state, start):
        return state.is_one_of(start - 1, 'u')

    def after_g(self, state, start):
        return state.is_one_of(start - 1, 'g')

    def with_u_after_g(self, state, start):
        if state.is_one_of(start - 1, 'u') and state.is_one_of(start - 2, 'g'):
            return state.delete_from(start - 1)
        return False
