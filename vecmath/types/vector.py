import math
import numbers
import struct
import dataclasses
from typing import Generic, Iterator, TypeVar

from vecmath.settings import Settings
from vecmath.types.enums import Precision
from vecmath.utils.helpers import ieee_div, acos_or_nan, approximately_equal

R = TypeVar("R", bound=numbers.Real)


@dataclasses.dataclass(slots=True, order=True)
class Vector3(Generic[R]):
    """
    A 3D vector with x, y and z components.

    Components may be any real number type (float by default). Every
    transformation comes in two forms: a pure one returning a new vector and
    an ``inplace_`` one that mutates the receiver and returns it, so in-place
    calls can be chained::

        v = Vector3.new(1.5, 1.5, 1.5)
        v.inplace_scalar_add(1.5).inplace_scalar_mul(2.0)

    Equality, ordering (x, then y, then z) and hashing are componentwise. A
    vector used as a dict key or set member must not be mutated in place.

    Compound assignment (``+=``, ``-=``, ``*=``, ``/=``) also mutates in place,
    so every other name bound to the same vector sees the change::

        b = a
        a += 1.0    # b changed too; use a = a + 1.0 or a.copy() to avoid it
    """
    x: R = 0.0
    y: R = 0.0
    z: R = 0.0

    # --- Construction ---

    @classmethod
    def origin(cls) -> "Vector3":
        """Returns the zero vector (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def new(cls, x: R, y: R, z: R) -> "Vector3":
        """Returns a vector with the given components. Values are not validated."""
        return cls(x, y, z)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    # --- Axis projection ---

    def x_axis(self) -> "Vector3":
        """Returns the x part of this vector, (x, 0, 0)."""
        return Vector3(self.x, 0.0, 0.0)

    def y_axis(self) -> "Vector3":
        """Returns the y part of this vector, (0, y, 0)."""
        return Vector3(0.0, self.y, 0.0)

    def z_axis(self) -> "Vector3":
        """Returns the z part of this vector, (0, 0, z)."""
        return Vector3(0.0, 0.0, self.z)

    # --- Dunder basics ---

    def __str__(self) -> str:
        p = Settings.STR_PRECISION
        return f"<{float(self.x):.{p}f}, {float(self.y):.{p}f}, {float(self.z):.{p}f}>"

    def __repr__(self) -> str:
        return f"Vector3(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[R]:
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def approx_equals(self, other: "Vector3", tolerance: float | None = None) -> bool:
        """Componentwise comparison within a tolerance (Settings.APPROX_TOLERANCE by default)."""
        if tolerance is None:
            tolerance = Settings.APPROX_TOLERANCE
        return approximately_equal(self.x, other.x, tolerance) and \
               approximately_equal(self.y, other.y, tolerance) and \
               approximately_equal(self.z, other.z, tolerance)

    # --- Unary operations ---

    def inplace_invert(self) -> "Vector3":
        """Flips the sign of every component in place."""
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def invert(self) -> "Vector3":
        return self.copy().inplace_invert()

    def squared_magnitude(self):
        """Returns x² + y² + z². Cheaper than magnitude() for comparisons."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Returns the Euclidean length of the vector."""
        return math.sqrt(self.squared_magnitude())

    def inplace_normalize(self) -> "Vector3":
        """
        Scales the vector to unit length in place.

        A vector whose magnitude is not positive (the zero vector, or one with
        a nan component) is left untouched rather than divided by zero.
        """
        mag = self.magnitude()
        if mag > 0:
            self.x = self.x / mag
            self.y = self.y / mag
            self.z = self.z / mag
        return self

    def normalize(self) -> "Vector3":
        return self.copy().inplace_normalize()

    # --- Scalar operations ---

    def inplace_scalar_add(self, scalar: R) -> "Vector3":
        self.x = self.x + scalar
        self.y = self.y + scalar
        self.z = self.z + scalar
        return self

    def inplace_scalar_sub(self, scalar: R) -> "Vector3":
        return self.inplace_scalar_add(-scalar)

    def inplace_scalar_mul(self, scalar: R) -> "Vector3":
        self.x = self.x * scalar
        self.y = self.y * scalar
        self.z = self.z * scalar
        return self

    def inplace_scalar_div(self, scalar: R) -> "Vector3":
        """Divides every component by scalar. A zero scalar gives inf/nan components."""
        self.x = ieee_div(self.x, scalar)
        self.y = ieee_div(self.y, scalar)
        self.z = ieee_div(self.z, scalar)
        return self

    def scalar_add(self, scalar: R) -> "Vector3":
        return self.copy().inplace_scalar_add(scalar)

    def scalar_sub(self, scalar: R) -> "Vector3":
        return self.copy().inplace_scalar_sub(scalar)

    def scalar_mul(self, scalar: R) -> "Vector3":
        return self.copy().inplace_scalar_mul(scalar)

    def scalar_div(self, scalar: R) -> "Vector3":
        return self.copy().inplace_scalar_div(scalar)

    # --- Vector-wise operations ---

    def inplace_vector_add(self, other: "Vector3") -> "Vector3":
        self.x = self.x + other.x
        self.y = self.y + other.y
        self.z = self.z + other.z
        return self

    def inplace_vector_sub(self, other: "Vector3") -> "Vector3":
        self.x = self.x - other.x
        self.y = self.y - other.y
        self.z = self.z - other.z
        return self

    def inplace_vector_mul(self, other: "Vector3") -> "Vector3":
        self.x = self.x * other.x
        self.y = self.y * other.y
        self.z = self.z * other.z
        return self

    def inplace_vector_div(self, other: "Vector3") -> "Vector3":
        """Divides componentwise. A zero component in other gives inf/nan."""
        self.x = ieee_div(self.x, other.x)
        self.y = ieee_div(self.y, other.y)
        self.z = ieee_div(self.z, other.z)
        return self

    def vector_add(self, other: "Vector3") -> "Vector3":
        return self.copy().inplace_vector_add(other)

    def vector_sub(self, other: "Vector3") -> "Vector3":
        return self.copy().inplace_vector_sub(other)

    def vector_mul(self, other: "Vector3") -> "Vector3":
        return self.copy().inplace_vector_mul(other)

    def vector_div(self, other: "Vector3") -> "Vector3":
        return self.copy().inplace_vector_div(other)

    # --- Products ---

    def dot_product(self, other: "Vector3"):
        """Calculates the dot product with another Vector3."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross_product(self, other: "Vector3") -> "Vector3":
        """Calculates the right-handed cross product with another Vector3."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def theta(self, other: "Vector3") -> float:
        """
        Returns the angle in radians between this vector and other.

        The cosine is not clamped. Rounding can push it just past +/-1 for
        (anti)parallel vectors, and a nan component makes it nan; both give nan.
        A zero vector is left unnormalized, so its dot product is 0 and the
        result is pi/2.
        """
        return acos_or_nan(self.normalize().dot_product(other.normalize()))

    # --- Operators ---

    def __neg__(self) -> "Vector3":
        return self.invert()

    def __add__(self, other):
        if isinstance(other, Vector3):
            return self.vector_add(other)
        if isinstance(other, numbers.Real):
            return self.scalar_add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3):
            return self.vector_sub(other)
        if isinstance(other, numbers.Real):
            return self.scalar_sub(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return self.vector_mul(other)
        if isinstance(other, numbers.Real):
            return self.scalar_mul(other)
        return NotImplemented

    def __rmul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scalar_mul(scalar)

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return self.vector_div(other)
        if isinstance(other, numbers.Real):
            return self.scalar_div(other)
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, Vector3):
            return self.inplace_vector_add(other)
        if isinstance(other, numbers.Real):
            return self.inplace_scalar_add(other)
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, Vector3):
            return self.inplace_vector_sub(other)
        if isinstance(other, numbers.Real):
            return self.inplace_scalar_sub(other)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Vector3):
            return self.inplace_vector_mul(other)
        if isinstance(other, numbers.Real):
            return self.inplace_scalar_mul(other)
        return NotImplemented

    def __itruediv__(self, other):
        if isinstance(other, Vector3):
            return self.inplace_vector_div(other)
        if isinstance(other, numbers.Real):
            return self.inplace_scalar_div(other)
        return NotImplemented

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Returns {"x": ..., "y": ..., "z": ...} in field order."""
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Vector3":
        return cls(data["x"], data["y"], data["z"])

    def to_bytes(self, precision: Precision | None = None) -> bytes:
        """Packs the vector little-endian: 24 bytes for DOUBLE, 12 for SINGLE."""
        if precision is None:
            precision = Settings.DEFAULT_PRECISION
        return struct.pack(precision.struct_format, float(self.x), float(self.y), float(self.z))

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0, precision: Precision | None = None) -> "Vector3":
        """Unpacks a vector written by to_bytes, starting at offset."""
        if precision is None:
            precision = Settings.DEFAULT_PRECISION
        if offset < 0:
            raise ValueError(f"Vector3 offset must not be negative, got {offset}.")
        if len(data) - offset < precision.packed_size:
            raise ValueError(f"Not enough bytes to unpack Vector3. Need {precision.packed_size}.")
        x, y, z = struct.unpack_from(precision.struct_format, data, offset)
        return cls(x, y, z)
