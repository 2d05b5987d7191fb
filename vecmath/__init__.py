"""3D vector value type with scalar and vector-wise arithmetic, products and
structured-data serialization."""
import logging

from .types import Vector3, Precision, LogLevel
from .settings import Settings, configure_logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector3",
    "Precision",
    "LogLevel",
    "Settings",
    "configure_logging",
    "__version__",
]
