import base64
import enum

from vecmath.types import Vector3

VECTOR3_KEYS = ("x", "y", "z")

class OSDType(enum.Enum):
    UNKNOWN = 0
    BOOLEAN = 1
    INTEGER = 2
    REAL = 3
    STRING = 4
    BINARY = 5
    MAP = 6
    ARRAY = 7

class OSD:
    """Base class for OSD (Object Structured Data) elements."""
    def __init__(self, type: OSDType = OSDType.UNKNOWN):
        self.osd_type: OSDType = type # Named to avoid shadowing type()

    def as_boolean(self) -> bool:
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to Boolean")

    def as_integer(self) -> int:
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to Integer")

    def as_real(self) -> float:
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to Real")

    def as_string(self) -> str:
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to String")

    def as_binary(self) -> bytes:
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to Binary")

    def as_vector3(self) -> Vector3:
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to Vector3")

    def as_python_object(self):
        """Converts the OSD element to a native Python object."""
        if self.osd_type == OSDType.UNKNOWN: return None
        if self.osd_type == OSDType.BOOLEAN: return self.as_boolean()
        if self.osd_type == OSDType.INTEGER: return self.as_integer()
        if self.osd_type == OSDType.REAL: return self.as_real()
        if self.osd_type == OSDType.STRING: return self.as_string()
        if self.osd_type == OSDType.BINARY: return self.as_binary()
        # MAP and ARRAY override this.
        raise TypeError(f"Cannot convert OSDType {self.osd_type} to a simple Python object directly.")

    def __eq__(self, other):
        return type(other) is OSD and other.osd_type == self.osd_type

    def __str__(self) -> str:
        return f"OSD(Type: {self.osd_type})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} type={self.osd_type}>"

class OSDBoolean(OSD):
    def __init__(self, value: bool):
        OSD.__init__(self, OSDType.BOOLEAN)
        self.value: bool = bool(value)

    def as_boolean(self) -> bool: return self.value
    def as_integer(self) -> int: return int(self.value)
    def as_string(self) -> str: return "true" if self.value else "false"
    def __str__(self) -> str: return self.as_string()
    def __repr__(self) -> str: return f"OSDBoolean({self.value})"
    def __eq__(self, other): return isinstance(other, OSDBoolean) and self.value == other.value

class OSDInteger(OSD):
    def __init__(self, value: int):
        OSD.__init__(self, OSDType.INTEGER)
        self.value: int = int(value)

    def as_boolean(self) -> bool: return self.value != 0
    def as_integer(self) -> int: return self.value
    def as_real(self) -> float: return float(self.value)
    def as_string(self) -> str: return str(self.value)
    def __str__(self) -> str: return self.as_string()
    def __repr__(self) -> str: return f"OSDInteger({self.value})"
    def __eq__(self, other): return isinstance(other, OSDInteger) and self.value == other.value

class OSDReal(OSD):
    def __init__(self, value: float):
        OSD.__init__(self, OSDType.REAL)
        self.value: float = float(value)

    def as_integer(self) -> int: return int(self.value)
    def as_real(self) -> float: return self.value
    def as_string(self) -> str: return repr(self.value) # repr round-trips every double
    def __str__(self) -> str: return self.as_string()
    def __repr__(self) -> str: return f"OSDReal({self.value})"
    def __eq__(self, other): return isinstance(other, OSDReal) and self.value == other.value

class OSDString(OSD):
    def __init__(self, value: str):
        OSD.__init__(self, OSDType.STRING)
        self.value: str = str(value)

    def as_string(self) -> str: return self.value
    def __str__(self) -> str: return self.value
    def __repr__(self) -> str: return f"OSDString('{self.value}')"
    def __eq__(self, other): return isinstance(other, OSDString) and self.value == other.value

class OSDBinary(OSD):
    def __init__(self, value: bytes):
        OSD.__init__(self, OSDType.BINARY)
        if not isinstance(value, bytes):
            raise TypeError("OSDBinary value must be bytes.")
        self.value: bytes = value

    def as_binary(self) -> bytes: return self.value
    def as_string(self) -> str: return base64.b64encode(self.value).decode('ascii')
    def __str__(self) -> str: return self.as_string()
    def __repr__(self) -> str: return f"OSDBinary(len={len(self.value)})"
    def __eq__(self, other): return isinstance(other, OSDBinary) and self.value == other.value

class OSDMap(OSD, dict):
    def __init__(self, initial_dict: dict | None = None):
        OSD.__init__(self, OSDType.MAP)
        dict.__init__(self)
        if initial_dict:
            for key, value in initial_dict.items():
                if not isinstance(key, str):
                    raise TypeError("OSDMap keys must be strings.")
                self[key] = python_to_osd(value)

    def as_python_object(self) -> dict:
        """Converts the OSDMap to a native Python dictionary."""
        return {key: value.as_python_object() for key, value in self.items()}

    def as_vector3(self) -> Vector3:
        """Reads a vector from the "x", "y" and "z" entries."""
        missing = [key for key in VECTOR3_KEYS if key not in self]
        if missing:
            raise ValueError(f"OSDMap is missing Vector3 field(s): {', '.join(missing)}")
        return Vector3(*(self[key].as_real() for key in VECTOR3_KEYS))

    __eq__ = dict.__eq__
    __hash__ = None

    def __str__(self) -> str:
        return repr(self.as_python_object())
    def __repr__(self) -> str: return f"OSDMap({len(self)} items)"

class OSDArray(OSD, list):
    def __init__(self, initial_list: list | None = None):
        OSD.__init__(self, OSDType.ARRAY)
        list.__init__(self)
        if initial_list:
            for item in initial_list:
                self.append(python_to_osd(item))

    def as_python_object(self) -> list:
        """Converts the OSDArray to a native Python list."""
        return [item.as_python_object() for item in self]

    def as_vector3(self) -> Vector3:
        """Reads a vector from a three element [x, y, z] array."""
        if len(self) != 3:
            raise ValueError(f"Vector3 needs an OSDArray of 3 elements, got {len(self)}.")
        return Vector3(self[0].as_real(), self[1].as_real(), self[2].as_real())

    __eq__ = list.__eq__
    __hash__ = None

    def __str__(self) -> str:
        return repr(self.as_python_object())
    def __repr__(self) -> str: return f"OSDArray({len(self)} items)"

# Used by the OSDMap/OSDArray constructors
def python_to_osd(data) -> OSD:
    """Converts a Python native type (or a Vector3) to its OSD equivalent."""
    if isinstance(data, OSD): return data
    if isinstance(data, bool): return OSDBoolean(data)
    if isinstance(data, int): return OSDInteger(data)
    if isinstance(data, float): return OSDReal(data)
    if isinstance(data, str): return OSDString(data)
    if isinstance(data, bytes): return OSDBinary(data)
    if isinstance(data, Vector3):
        return OSDMap({key: OSDReal(value) for key, value in zip(VECTOR3_KEYS, data)})
    if isinstance(data, dict):
        return OSDMap(data)
    if isinstance(data, (list, tuple)):
        return OSDArray(list(data))
    if data is None: # <undef /> in LLSD
        return OSD()
    raise TypeError(f"Cannot automatically convert Python type {type(data)} to OSD.")
