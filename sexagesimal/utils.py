"""Utilities

The module contains some commonly used functions.

"""
from numpy import absolute, isfinite, ndim, round, spacing, trunc, where

from .exceptions import DimensionMismatch


def is_sequence(value):
    """Check if a value is a sequence or array rather than a single number

    Strings are not considered sequences of values.

    """
    if isinstance(value, (str, bytes)):
        return False
    return ndim(value) > 0


def check_same_length(ra, dec):
    """Check if two coordinate arguments can be paired elementwise

    :param ra,dec: coordinate arguments, both either numbers or
                   sequences.
    :return: True if both are sequences, False if both are numbers.

    """
    ra_sequence = is_sequence(ra)
    dec_sequence = is_sequence(dec)
    if ra_sequence != dec_sequence:
        raise DimensionMismatch('Can not pair a sequence with a single '
                                'coordinate value.')
    if ra_sequence and len(ra) != len(dec):
        raise DimensionMismatch('Number of right ascensions (%d) must equal '
                                'number of declinations (%d).' %
                                (len(ra), len(dec)))
    return ra_sequence


def is_finite(value):
    """Check if a single value is a finite number"""

    return bool(isfinite(value))


def round_to_precision(value, precision):
    """Round value to a number of decimals

    Uses numpy rounding, halfway values are rounded to the nearest
    even value of the last decimal.

    """
    return round(value, precision)


def truncate_to_precision(value, precision):
    """Truncate value towards zero at a number of decimals

    Values that are a few floating point steps below a decimal of the
    precision are taken to be that decimal, e.g. 0.29 * 100 gives
    28.999999999999996 and is truncated to 0.29, not 0.28.

    """
    scale = 10. ** precision
    scaled = value * scale
    nearest = round(scaled)
    close = absolute(scaled - nearest) <= 4 * spacing(absolute(scaled))
    return where(close, nearest, trunc(scaled)) / scale
