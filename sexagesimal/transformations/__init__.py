"""Convert angles between notations.

Easy transformations between different systems.

:mod:`~sexagesimal.transformations.angles`
    normalisation of angles into a range and conversion of degrees
    to hours

:mod:`~sexagesimal.transformations.base`
    conversion between decimal and sexagesimal


"""
from . import angles, base

__all__ = ['angles',
           'base']
