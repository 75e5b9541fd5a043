"""Split equatorial coordinates into sexagesimal parts

Right ascension is converted to sexagesimal hours and declination to
sexagesimal degrees.  The functions work on single coordinates and
elementwise on sequences or arrays of coordinates.

"""
import logging

from numpy import asarray

from .transformations.angles import cirrange, degrees_to_hours
from .transformations.base import sixty
from .utils import check_same_length

logger = logging.getLogger('sexagesimal.coordinates')


def radec(ra, dec, hours=False):
    """Convert right ascension and declination from decimal to sexagesimal

    Position of Sirius in the sky is (ra, dec) = (6.7525, -16.7161),
    with right ascension expressed in hours.  Its sexagesimal
    representation, radec(6.7525, -16.7161, hours=True), is
    (6, 45, 9, -16, 42, 57.96).

    :param ra: decimal right ascension in degrees, or in hours if
               `hours` is True.  Is brought into the range [0, 360)
               degrees or [0, 24) hours.
    :param dec: declination in decimal degrees.
    :param hours: if True `ra` is given in hours instead of degrees.
    :return: tuple (ra_hours, ra_minutes, ra_seconds, dec_degrees,
             dec_minutes, dec_seconds).  For sequence input each part
             is an array with the same length as the input.  Only the
             hours and degrees carry a sign.

    """
    if check_same_length(ra, dec):
        logger.debug('Converting %d coordinates to sexagesimal.', len(ra))
        ra = asarray(ra, dtype=float)
        dec = asarray(dec, dtype=float)

    if hours:
        ra_hours = cirrange(ra, max=24.)
    else:
        ra_hours = degrees_to_hours(cirrange(ra))

    ra_hr, ra_min, ra_sec = sixty(ra_hours)
    dec_deg, dec_min, dec_sec = sixty(dec)

    return ra_hr, ra_min, ra_sec, dec_deg, dec_min, dec_sec
