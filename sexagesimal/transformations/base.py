"""Perform base conversions

Currently supports conversion between base 10 (decimal) and
base 60 (sexagesimal).

Only the first sexagesimal part carries the sign, the minutes and
seconds are magnitudes, e.g. -111d36m12s is (-111, 36, 12).  This is
also how the parts are printed in coordinate strings.

"""
from numpy import absolute, asarray, copysign, trunc


def sixty(decimal):
    """Convert decimal hours or degrees to sexagesimal, leading sign.

    The sign is only carried by the first part, so a negative value
    smaller than one gives a negative zero: sixty(-0.5) is
    (-0.0, 30.0, 0.0).  Minutes are truncated, seconds keep the
    remaining fraction.

    The value is scaled to minutes and seconds before the parts are
    subtracted, so that e.g. 1.23 gives exactly 48 seconds instead of
    47.99999999999991.

    :param decimal: decimal number(s) to be converted to sexagesimal.
    :return: tuple of floats (hours, minutes, seconds) or
             (degrees, arcminutes, arcseconds).

    """
    decimal = asarray(decimal, dtype=float)
    total_seconds = absolute(3600. * decimal)
    total_minutes = absolute(60. * decimal)
    integral = trunc(absolute(decimal))
    minutes = trunc(total_minutes - 60. * integral)
    seconds = total_seconds - 3600. * integral - 60. * minutes
    return copysign(integral, decimal), minutes, seconds


def ten(hd, minutes=0., seconds=0.):
    """Convert sexagesimal with leading sign to decimal.

    Inverse of :func:`sixty`.  The sign of the result is taken from
    the first part, minutes and seconds are used as magnitudes.

    :param hd: hours or degrees, carries the sign.
    :param minutes: minutes or arcminutes.
    :param seconds: seconds or arcseconds.
    :return: decimal hours or degrees.

    """
    magnitude = absolute(hd) + absolute(minutes) / 60. + absolute(seconds) / 3600.
    return copysign(magnitude, hd)
