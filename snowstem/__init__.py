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
Snowball suffix-stripping stemmers for twelve languages.
"""

from snowstem.stemmer import Language, NoOpStemmer, Stemmer, registry
import snowstem.languages


__version__ = '0.1.0'

__all__ = ['Language', 'LANGUAGES', 'Stemmer', 'NoOpStemmer', 'get_stemmer',
           'stem']


# Names of the languages with a real stemmer
LANGUAGES = tuple(sorted(lang.value for lang in registry
                         if lang is not Language.NONE))


def _to_language(language):
    if isinstance(language, Language):
        return language
    try:
        return Language(str(language).strip().lower())
    except ValueError:
        raise ValueError('Unknown language "%s". Supported languages are: '
                         '%s.' % (language, ', '.join(LANGUAGES)))


def get_stemmer(language, **options):
    """
    Create a stemmer.

    ``language`` is a ``Language`` member or a language name like
    ``'english'`` (case is ignored). Additional keyword arguments are
    passed on to the stemmer; ``TypeError`` is raised for options the
    stemmer does not know.
    """
    return registry[_to_language(language)](**options)


_stemmers = {}

def stem(word, language):
    """
    Return the stem of ``word`` using the default stemmer for
    ``language``.
    """
    language = _to_language(language)
    stemmer = _stemmers.get(language)
    if stemmer is None:
        stemmer = _stemmers[language] = get_stemmer(language)
    return stemmer.stem(word)
