# core/vector.py
import math
import numbers
import numpy as np


class Vector3:
    """
    A 3D vector of doubles supporting arithmetic, dot and cross products,
    and normalization. Every operator returns a new Vector3; operands are
    never modified, and instances are read-only after construction.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)

    def __setattr__(self, name, value):
        raise AttributeError(f"Vector3 is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Vector3 is immutable; cannot delete {name!r}")

    def _combine(self, other, op):
        if isinstance(other, Vector3):
            return Vector3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, numbers.Real):
            return Vector3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other) -> "Vector3":
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other) -> "Vector3":
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other) -> "Vector3":
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other) -> "Vector3":
        return self._combine(other, lambda a, b: b - a)

    def __mul__(self, other) -> "Vector3":
        # Scalar or element-wise
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other) -> "Vector3":
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other) -> "Vector3":
        if isinstance(other, Vector3):
            return _ieee_divide(tuple(self), tuple(other))
        if isinstance(other, numbers.Real):
            return _ieee_divide(tuple(self), other)
        return NotImplemented

    def __rtruediv__(self, other) -> "Vector3":
        if isinstance(other, numbers.Real):
            return _ieee_divide(other, tuple(self))
        return NotImplemented

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __pos__(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the vector divided by its own length. A zero vector is not
        special-cased: the result has NaN components.
        """
        return self / self.length()

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return " ".join(_format_component(c) for c in self)


# A position rather than a direction; structurally identical.
Point = Vector3

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)


def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def unit_vector(v: Vector3) -> Vector3:
    return v.normalize()


def _ieee_divide(numerator, denominator) -> Vector3:
    """
    Component-wise division with IEEE-754 semantics, so that dividing by
    zero gives inf/nan instead of raising ZeroDivisionError.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        quotient = np.divide(np.asarray(numerator, dtype=np.float64),
                             np.asarray(denominator, dtype=np.float64))
    return Vector3(*quotient.tolist())


def _format_component(value) -> str:
    """
    Plain decimal notation with the shortest round-trip digits, never an
    exponent: 255.0 prints as 255 and 1e-07 as 0.0000001.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        return np.format_float_positional(value, trim="-")
    return str(value)
