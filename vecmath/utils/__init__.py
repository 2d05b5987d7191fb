# This file marks vecmath.utils as a Python package.

from .helpers import (
    ieee_div,
    acos_or_nan,
    approximately_equal,
)

__all__ = [
    "ieee_div",
    "acos_or_nan",
    "approximately_equal",
]
