"""Format equatorial coordinates as sexagesimal strings

Right ascension and declination given in decimal degrees are
converted to sexagesimal and printed in the fixed layout used for
official IAU names, e.g. ' 02 01 35.9  -01 13 48'.

The declination seconds are printed with `precision` decimals, the
right ascension seconds always get one decimal more, since an hour is
fifteen times larger than a degree.  With `truncate` the last printed
digit is truncated instead of rounded, as required when forming IAU
names (see http://vizier.u-strasbg.fr/Dic/iau-spec.htx).

A rounding carry is not propagated to the minutes, so a seconds value
of 59.96 printed with one decimal shows as 60.0.

"""
import logging

from numpy import modf

from .coordinates import radec
from .exceptions import DimensionMismatch
from .transformations.base import sixty
from .utils import check_same_length, is_finite, is_sequence, round_to_precision, truncate_to_precision

logger = logging.getLogger('sexagesimal.formatting')

#: Default number of decimals for the declination seconds when both
#: coordinates are printed.
DEFAULT_PRECISION = 0

#: Default number of decimals when only the declination is printed.
DEFAULT_DEC_PRECISION = 1


def adstring(ra, dec=None, precision=None, truncate=False):
    """Return right ascension and declination as sexagesimal string(s)

    The function can be called in different ways:

    - ``adstring(ra, dec)``: two numbers, returns a string.
    - ``adstring((ra, dec))``: one 2-element sequence, returns a
      string.
    - ``adstring(dec)``: one number, only the declination is printed.
      In this case `precision` defaults to 1.
    - ``adstring(ra_list, dec_list)``: two sequences of the same
      length, returns a list of strings.
    - ``adstring(None, dec)``: explicitly no right ascension, only the
      declination is printed.

    Examples::

        adstring(30.4, -1.23, truncate=True)
        ' 02 01 35.9  -01 13 48'

        adstring([30.4, -15.63], [-1.23, 48.41], precision=1)
        [' 02 01 36.00  -01 13 48.0', '-22 57 28.80  +48 24 36.0']

    :param ra: right ascension in decimal degrees, it is converted to
               hours before printing.  May also be a (ra, dec) pair or
               a sequence of right ascensions.
    :param dec: declination in decimal degrees, or a sequence of
                declinations.
    :param precision: number of decimals of the declination seconds,
                      the right ascension seconds get one more.
                      Negative values are treated as 0.  If None the
                      default for the call shape is used.
    :param truncate: if True the last printed digit is truncated
                     instead of rounded.
    :return: formatted string, or list of strings for sequence input.

    """
    if dec is None:
        if is_sequence(ra):
            return adstring_pair(ra, precision=precision, truncate=truncate)
        return adstring_dec(ra, precision=precision, truncate=truncate)

    if precision is None:
        precision = DEFAULT_PRECISION

    if ra is None:
        if is_sequence(dec):
            logger.debug('Formatting %d declinations.', len(dec))
            return [format_coordinates(None, dec_i, precision, truncate)
                    for dec_i in dec]
        return format_coordinates(None, dec, precision, truncate)

    if check_same_length(ra, dec):
        logger.debug('Formatting %d coordinates.', len(ra))
        return [format_coordinates(ra_i, dec_i, precision, truncate)
                for ra_i, dec_i in zip(ra, dec)]

    return format_coordinates(ra, dec, precision, truncate)


def adstring_dec(dec, precision=None, truncate=False):
    """Format only a declination, precision defaults to 1 decimal"""

    if precision is None:
        precision = DEFAULT_DEC_PRECISION
    return format_coordinates(None, dec, precision, truncate)


def adstring_pair(coordinates, precision=None, truncate=False):
    """Format a (ra, dec) pair

    :param coordinates: sequence with exactly two values, right
                        ascension and declination in decimal degrees.

    """
    if len(coordinates) != 2:
        raise DimensionMismatch('Provide a 2-element (ra, dec) sequence, '
                                'got %d elements.' % len(coordinates))
    if precision is None:
        precision = DEFAULT_PRECISION
    ra, dec = coordinates
    return format_coordinates(ra, dec, precision, truncate)


def format_coordinates(ra, dec, precision, truncate):
    """Format a single coordinate

    All other call shapes reduce to this function.

    :param ra: right ascension in decimal degrees, or None to only
               print the declination.
    :param dec: declination in decimal degrees.
    :param precision: number of decimals of the declination seconds.
    :param truncate: truncate instead of round the last digit.
    :return: the formatted string.

    """
    precision = max(int(precision), 0)

    if not is_finite(dec) or (ra is not None and not is_finite(ra)):
        raise ValueError('Coordinates must be finite numbers, got ra=%r, '
                         'dec=%r.' % (ra, dec))

    if ra is None:
        dec_deg, dec_min, dec_sec = sixty(dec)
        ra_string = ''
    else:
        ra_hr, ra_min, ra_sec, dec_deg, dec_min, dec_sec = radec(ra, dec)
        # A positive right ascension gets a blank instead of a '+'
        ra_sign = ' ' if ra >= 0 else '-'
        ra_string = '%s%02d %02d %s  ' % (
            ra_sign, abs(ra_hr), ra_min,
            format_seconds(ra_sec, precision + 1, truncate))

    dec_sign = '+' if dec >= 0 else '-'
    dec_string = '%s%02d %02d %s' % (
        dec_sign, abs(dec_deg), dec_min,
        format_seconds(dec_sec, precision, truncate))

    return ra_string + dec_string


def format_seconds(seconds, precision, truncate=False):
    """Format the seconds part of a sexagesimal value

    The integer part is padded with zeros to two digits, followed by
    a decimal point and exactly `precision` decimals.  No decimal point
    is printed if `precision` is 0.

    :param seconds: non-negative seconds value.
    :param precision: number of decimals.
    :param truncate: truncate instead of round to the precision.
    :return: the formatted seconds, e.g. '05.30'.

    """
    if truncate:
        seconds = truncate_to_precision(seconds, precision)
    else:
        seconds = round_to_precision(seconds, precision)

    fractional, integral = modf(seconds)
    seconds_string = '%02d' % int(integral)
    if precision == 0:
        return seconds_string

    decimals = int(round_to_precision(fractional * 10 ** precision, 0))
    return '%s.%0*d' % (seconds_string, precision, decimals)
