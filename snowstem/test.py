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
Module and script for checking stemmers against word lists.
"""

import codecs
import logging
import sys

from snowstem import get_stemmer
from snowstem.chars import is_apostrophe
from snowstem.utils import safe_divide


__all__ = ['test_file', 'test_words', 'clean_expected']


logger = logging.getLogger(__name__)


# Expected value marking a garbage line of a word list
GARBAGE = '0x0e00'


def clean_expected(word, expected):
    """
    Normalize a pair of input word and expected stem.

    Returns ``None`` if the pair is to be skipped.
    """
    if expected == GARBAGE or (len(expected) == 1 and
                               is_apostrophe(expected)):
        return None
    if word and is_apostrophe(word[0]):
        word = word[1:]
    if expected and is_apostrophe(expected[0]):
        expected = expected[1:]
    if len(expected) >= 2 and is_apostrophe(expected[-2]) and \
            expected[-1] in 'sS':
        expected = expected[:-2]
    elif expected and is_apostrophe(expected[-1]):
        expected = expected[:-1]
    return word, expected


def test_words(stemmer, tests):
    """
    Check a stemmer against pairs of words and expected stems.

    ``tests`` is an iterable of ``(word, expected)`` tuples. Mismatches
    are logged. Returns a tuple ``(passed, failed)``.
    """
    passed = 0
    failed = 0
    for word, expected in tests:
        pair = clean_expected(word, expected)
        if pair is None:
            continue
        word, expected = pair
        result = stemmer(word)
        if result == expected:
            passed += 1
        else:
            failed += 1
            logger.warning("%r: Expected %r, got %r.", word, expected, result)
    logger.info('%d passed, %d failed (%d%% passed).', passed, failed,
                safe_divide(100 * passed, passed + failed))
    return passed, failed


def test_file(voc_filename, output_filename, language, **options):
    """
    Check the stemmer for ``language`` using test cases from files.

    ``voc_filename`` contains one word per line and ``output_filename``
    the expected stems in the same order. Both files are read as UTF-8.
    """
    with codecs.open(voc_filename, 'r', 'utf8') as f:
        words = f.read().splitlines()
    with codecs.open(output_filename, 'r', 'utf8') as f:
        expected = f.read().splitlines()
    if len(words) != len(expected):
        logger.warning('%s has %d lines but %s has %d.', voc_filename,
                       len(words), output_filename, len(expected))
    stemmer = get_stemmer(language, **options)
    return test_words(stemmer, zip(words, expected))


if __name__ == '__main__':

    if len(sys.argv) != 4:
        sys.stderr.write('Syntax: %s LANGUAGE VOCFILE OUTPUTFILE\n'
                         % sys.argv[0])
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format='%(message)s')
    passed, failed = test_file(sys.argv[2], sys.argv[3], sys.argv[1])
    sys.exit(1 if failed else 0)
