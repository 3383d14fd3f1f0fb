#!/usr/bin/env python
# vim:fileencoding=utf8

def pytest_configure(config):
    config.addinivalue_line('markers',
                            'slow: sweeps over the word list fixtures')
