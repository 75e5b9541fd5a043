"""Exceptions raised by the coordinate conversions"""


class DimensionMismatch(ValueError):

    """Paired coordinate arguments do not have matching lengths

    Raised when right ascension and declination sequences differ in
    length, when a sequence is paired with a single value, or when a
    coordinate pair does not contain exactly two values.

    """
