from enum import Enum, IntEnum

class LogLevel(IntEnum): NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4

class Precision(Enum):
    """Width of each component when a vector is packed to bytes."""
    SINGLE = 'f' # 4 bytes per component
    DOUBLE = 'd' # 8 bytes per component

    @property
    def struct_format(self) -> str:
        """Little-endian struct format for the three components."""
        return '<' + self.value * 3

    @property
    def packed_size(self) -> int:
        return 12 if self is Precision.SINGLE else 24
