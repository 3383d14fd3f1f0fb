#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for the public interface, the command line and the word list
harness.
"""

import logging
import threading

import pytest

import snowstem
from snowstem import LANGUAGES, Language, get_stemmer, stem
from snowstem.__main__ import main
from snowstem.languages.english import EnglishStemmer
from snowstem.languages.german import GermanStemmer
from snowstem.stemmer import NoOpStemmer
from snowstem.test import clean_expected, test_file as check_file
from snowstem.test import test_words as check_words


#######################################################################
# PUBLIC INTERFACE                                                    #
#######################################################################

def test_languages():
    assert len(LANGUAGES) == 12
    assert 'english' in LANGUAGES
    assert 'none' not in LANGUAGES
    assert list(LANGUAGES) == sorted(LANGUAGES)

def test_get_stemmer():
    assert isinstance(get_stemmer('english'), EnglishStemmer)
    assert isinstance(get_stemmer(' English '), EnglishStemmer)
    assert isinstance(get_stemmer(Language.ENGLISH), EnglishStemmer)
    assert isinstance(get_stemmer('none'), NoOpStemmer)
    stemmer = get_stemmer('german', transliterate_umlauts=False)
    assert isinstance(stemmer, GermanStemmer)
    assert not stemmer.transliterate_umlauts

def test_get_stemmer_errors():
    with pytest.raises(ValueError):
        get_stemmer('klingon')
    with pytest.raises(ValueError):
        stem('word', 'klingon')
    with pytest.raises(TypeError):
        get_stemmer('english', transliterate_umlauts=False)

def test_stem():
    assert stem('running', 'english') == 'run'
    assert stem('running', Language.ENGLISH) == 'run'
    assert stem('running', 'none') == 'running'
    assert stem('', 'english') == ''
    assert stem('  ', 'french') == '  '
    # Full-width letters are folded first
    assert stem('ｒｕｎｎｉｎｇ', 'english') == 'run'

def test_short_words():
    assert stem('at', 'english') == 'at'
    assert stem('a', 'russian') == 'a'
    assert stem('é', 'spanish') == 'e'

def test_version():
    assert snowstem.__version__

def test_threads():
    stemmer = get_stemmer('english')
    words = ['running', 'documentation', 'ponies', 'generously'] * 50
    expected = [stemmer(w) for w in words]
    results = {}

    def work(n):
        results[n] = [stemmer(w) for w in words]

    threads = [threading.Thread(target=work, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(results[n] == expected for n in range(4))


#######################################################################
# COMMAND LINE                                                        #
#######################################################################

def test_cli(tmp_path):
    infile = tmp_path / 'words.txt'
    outfile = tmp_path / 'stems.txt'
    infile.write_text('running\nponies\n\ncaresses\n', encoding='utf8')
    assert main([str(infile), str(outfile)]) == 0
    assert outfile.read_text(encoding='utf8') == 'run\nponi\n\ncaress\n'

def test_cli_options(tmp_path):
    infile = tmp_path / 'words.txt'
    outfile = tmp_path / 'stems.txt'
    infile.write_text('haeuser\n', encoding='utf8')
    main(['-l', 'german', str(infile), str(outfile)])
    assert outfile.read_text(encoding='utf8') == 'haus\n'
    main(['--language', 'GERMAN', '--no-transliterate-umlauts',
          str(infile), str(outfile)])
    assert outfile.read_text(encoding='utf8') == 'haeus\n'

def test_cli_list(capsys):
    assert main(['--list']) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == list(LANGUAGES)

def test_cli_errors(tmp_path, capsys):
    infile = tmp_path / 'words.txt'
    infile.write_text('running\n', encoding='utf8')
    with pytest.raises(SystemExit):
        main(['-l', 'klingon', str(infile)])
    assert 'klingon' in capsys.readouterr().err
    with pytest.raises(SystemExit):
        main(['-l', 'english', '--no-transliterate-umlauts', str(infile)])


#######################################################################
# WORD LIST HARNESS                                                   #
#######################################################################

def test_clean_expected():
    assert clean_expected('dog', 'dog') == ('dog', 'dog')
    assert clean_expected('x', "'") is None
    assert clean_expected('x', '’') is None
    assert clean_expected('x', '0x0e00') is None
    assert clean_expected("'tis", "'tis") == ('tis', 'tis')
    assert clean_expected("dog's", "dog's") == ("dog's", 'dog')
    assert clean_expected("dogs'", "dogs'") == ("dogs'", 'dogs')

def test_check_words(caplog):
    stemmer = get_stemmer('english')
    with caplog.at_level(logging.INFO, logger='snowstem.test'):
        passed, failed = check_words(stemmer, [
            ('running', 'run'),
            ('ponies', 'pony'),
            ('x', '0x0e00'),
        ])
    assert (passed, failed) == (1, 1)
    assert "'ponies': Expected 'pony', got 'poni'." in caplog.text
    assert '1 passed, 1 failed (50% passed).' in caplog.text

def test_check_file(tmp_path):
    voc = tmp_path / 'voc.txt'
    output = tmp_path / 'output.txt'
    voc.write_text('häuser\nstraße\n', encoding='utf8')
    output.write_text('haus\nstrass\n', encoding='utf8')
    assert check_file(str(voc), str(output), 'german') == (2, 0)
    assert check_file(str(voc), str(output), Language.GERMAN,
                      transliterate_umlauts=False) == (2, 0)
