"""Perform code tests.

This package contains all tests which verify the proper working of the
sexagesimal code.  These tests can also be used to verify if the
package was installed correctly.  Simply call the :func:`run_tests`
function.

"""
from unittest import defaultTestLoader, TestSuite, TextTestRunner
import os


def run_tests(verbosity=1):
    """Collect and run all tests of the installed package

    The tests are imported as part of the package, so the installed
    code is tested and not a copy in the current directory.

    :param verbosity: verbosity of the test runner output.
    :return: `unittest.TextTestResult` object containing the test results.

    """
    test_path = os.path.dirname(__file__)
    top_level = os.path.dirname(os.path.dirname(test_path))
    package_tests = defaultTestLoader.discover(start_dir=test_path,
                                               top_level_dir=top_level)
    test_suite = TestSuite(tests=package_tests)
    return TextTestRunner(verbosity=verbosity).run(test_suite)
