"""
Coordinate helpers shared by tensor layers.
"""

from ._coordinates import coordinates, normalize_coords, product

__all__ = [
    coordinates.__name__,
    normalize_coords.__name__,
    product.__name__,
]
