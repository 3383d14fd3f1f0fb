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

import argparse
import logging
import sys

from snowstem import LANGUAGES, get_stemmer


def main(argv=None):
    parser = argparse.ArgumentParser(
            description='Stem words, one word per line')
    parser.add_argument('infile', help='Input file (default STDIN)',
            nargs='?', type=argparse.FileType('r', encoding='utf8'),
            default=sys.stdin)
    parser.add_argument('outfile', help='Output file (default STDOUT)',
            nargs='?', type=argparse.FileType('w', encoding='utf8'),
            default=sys.stdout)
    parser.add_argument('-l', '--language', default='english',
            help='Language of the words (default english)')
    parser.add_argument('--no-transliterate-umlauts', dest='transliterate',
            action='store_false',
            help='German: do not read ae, oe and ue as umlauts')
    parser.add_argument('--list', action='store_true',
            help='List the supported languages and exit')
    parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Log the stemming steps (repeat for more detail)')
    args = parser.parse_args(argv)

    if args.list:
        args.outfile.write('\n'.join(LANGUAGES) + '\n')
        args.outfile.flush()
        return 0

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level,
                        format='%(name)s %(levelname)s: %(message)s')

    options = {}
    if not args.transliterate:
        options['transliterate_umlauts'] = False
    try:
        stemmer = get_stemmer(args.language, **options)
    except (ValueError, TypeError) as e:
        parser.error(str(e))

    for line in args.infile:
        args.outfile.write(stemmer(line.rstrip('\r\n')) + '\n')
    args.outfile.flush()
    return 0

if __name__ == '__main__':
    sys.exit(main())
