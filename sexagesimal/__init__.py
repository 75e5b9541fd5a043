"""Sexagesimal formatting of equatorial coordinates

Convert right ascension and declination between decimal degrees and
sexagesimal hours/degrees, minutes and seconds, and print them in the
fixed layout used for official IAU names.

The following packages and modules are included:

:mod:`~sexagesimal.coordinates`
    split coordinates into sexagesimal parts

:mod:`~sexagesimal.exceptions`
    exceptions raised for mismatched arguments

:mod:`~sexagesimal.formatting`
    format coordinates as sexagesimal strings

:mod:`~sexagesimal.tests`
    code tests

:mod:`~sexagesimal.transformations`
    transformations between different angle notations

:mod:`~sexagesimal.utils`
    commonly used functions

"""

from . import coordinates, exceptions, formatting, tests, transformations, utils
from .coordinates import radec
from .exceptions import DimensionMismatch
from .formatting import adstring
from .tests import run_tests
from .transformations.angles import cirrange
from .transformations.base import sixty, ten

__all__ = [
    'DimensionMismatch',
    'adstring',
    'cirrange',
    'coordinates',
    'exceptions',
    'formatting',
    'radec',
    'run_tests',
    'sixty',
    'ten',
    'tests',
    'transformations',
    'utils',
]
