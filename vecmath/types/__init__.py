# Main __init__.py for the types sub-package

from .enums import LogLevel, Precision
from .vector import Vector3

__all__ = [
    "Vector3", "Precision", "LogLevel",
]
