""" Doctests for kivy-life """

import doctest
import os
import unittest

import mock

MODULES_WITH_DOCTESTS = [
    "kivy_life.gol",
    "kivy_life.utils",
    "kivy_life.render",
    "kivy_life.cli",
    "kivy_life.bindings",
    "kivy_life.widgets",
]

def load_tests(loader, tests, ignore):
    for name in MODULES_WITH_DOCTESTS:
        tests.addTests(doctest.DocTestSuite(name))
    return tests

if __name__ == "__main__":
    # Kivy hijacks the argv unless told not to
    os.environ["KIVY_NO_ARGS"] = "1"

    with mock.patch("kivy.base.EventLoopBase.ensure_window"):
        unittest.main()
