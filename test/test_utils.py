#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``snowstem.utils``.
"""

from snowstem.utils import add_line_numbers, safe_divide, safe_modulus


def test_safe_divide():
    assert safe_divide(7, 2) == 3
    assert safe_divide(7.0, 2) == 3.5
    assert safe_divide(1, 0) == 0
    assert safe_divide(1.5, 0) == 0

def test_safe_modulus():
    assert safe_modulus(7, 3) == 1
    assert safe_modulus(7, 0) == 0

def test_add_line_numbers():
    assert add_line_numbers('a\nb') == '1  a\n2  b'
    text = '\n'.join('x' * 10)
    assert add_line_numbers(text).splitlines()[0] == ' 1  x'
    assert add_line_numbers('a', margin=': ') == '1: a'
    assert add_line_numbers('') == ''
