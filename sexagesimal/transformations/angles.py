""" Perform various angle related transformations

    Bring angles into a canonical range and convert degrees to
    decimal hours.

"""
from numpy import mod


def cirrange(angle, max=360.):
    """Reduce an angle to the range [0, max)

    The modulo is floored, so negative angles are wrapped upwards,
    e.g. -15 degrees becomes 345 degrees.  Tiny negative angles, for
    which the modulo rounds up to `max`, give 0.

    :param angle: angle, scalar or array.
    :param max: upper limit of the range, e.g. 24 for hours.
    :return: angle in the range [0, max).

    """
    result = mod(angle, max)
    return result - max * (result >= max)


def degrees_to_hours(angle):
    """Converts degrees to decimal hours

    :param angle: angle in degrees
    :return: angle in decimal hours

    """
    return angle / 15.
