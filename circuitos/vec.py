"""Small vector and quaternion types for motion processing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(slots=True)
class Vec3:
    """Three-component vector, also addressable as r/g/b or pitch/yaw/roll."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _FIELDS = ("x", "y", "z")

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        if not 0 <= index <= 2:
            raise IndexError(f"Vec3 index {index} out of range")
        return getattr(self, self._FIELDS[index])

    def __setitem__(self, index: int, value: float) -> None:
        if not 0 <= index <= 2:
            raise IndexError(f"Vec3 index {index} out of range")
        setattr(self, self._FIELDS[index], value)

    def _combine(self, other, op) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other: Vec3 | Number) -> Vec3:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Vec3 | Number) -> Vec3:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Vec3 | Number) -> Vec3:
        """Scalar product, or component-wise product with another vector."""
        return self._combine(other, lambda a, b: a * b)

    __radd__ = __add__
    __rmul__ = __mul__

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.x * other.z - self.z * other.x,
            self.x * other.y - self.y * other.x,
        )

    def angle_cos(self, other: Vec3) -> float:
        """Cosine of the angle between the two vectors."""
        return self.dot(other) / (self.length() * other.length())

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value: float) -> None:
        self.x = value

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value: float) -> None:
        self.y = value

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value: float) -> None:
        self.z = value

    @property
    def pitch(self) -> float:
        return self.x

    @pitch.setter
    def pitch(self, value: float) -> None:
        self.x = value

    @property
    def yaw(self) -> float:
        return self.y

    @yaw.setter
    def yaw(self, value: float) -> None:
        self.y = value

    @property
    def roll(self) -> float:
        return self.z

    @roll.setter
    def roll(self, value: float) -> None:
        self.z = value


@dataclass(slots=True)
class Vec4:
    """Four-component vector, also addressable as r/g/b/a."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _FIELDS = ("x", "y", "z", "w")

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __getitem__(self, index: int) -> float:
        if not 0 <= index <= 3:
            raise IndexError(f"Vec4 index {index} out of range")
        return getattr(self, self._FIELDS[index])

    def __setitem__(self, index: int, value: float) -> None:
        if not 0 <= index <= 3:
            raise IndexError(f"Vec4 index {index} out of range")
        setattr(self, self._FIELDS[index], value)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w


def _asin(value: float) -> float:
    return math.asin(value) if -1.0 <= value <= 1.0 else math.nan


@dataclass(slots=True)
class Quat:
    """Quaternion with the scalar part first."""

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_euler(cls, euler: Vec3) -> Quat:
        """Build a rotation from pitch/yaw/roll angles in radians."""
        cy = math.cos(euler.yaw * 0.5)
        sy = math.sin(euler.yaw * 0.5)
        cp = math.cos(euler.pitch * 0.5)
        sp = math.sin(euler.pitch * 0.5)
        cr = math.cos(euler.roll * 0.5)
        sr = math.sin(euler.roll * 0.5)
        return cls(
            cr * cp * cy + sr * sp * sy,
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
        )

    def inverse(self) -> Quat:
        return Quat(self.w, -self.x, -self.y, -self.z)

    def euler(self) -> Vec3:
        """Return pitch/yaw/roll angles in radians."""
        q0, q1, q2, q3 = self.w, self.x, self.y, self.z
        result = Vec3()
        result.pitch = -math.atan2(
            2.0 * (q0 * q1 + q2 * q3), q0 * q0 - q1 * q1 - q2 * q2 + q3 * q3
        )
        result.yaw = math.atan2(
            2.0 * (q1 * q2 + q0 * q3), q0 * q0 + q1 * q1 - q2 * q2 - q3 * q3
        )
        result.roll = -_asin(2.0 * (q1 * q3 - q0 * q2))
        return result

    def rotate(self, point: Vec3) -> Vec3:
        q = Vec3(self.x, self.y, self.z)
        p = Vec3(point.x, point.y, point.z)
        return (
            p * float(self.w ** 2)
            + q.cross(p) * self.w
            + q * p.dot(q)
            + q.cross(p) * self.w
            + q.cross(q.cross(p))
        )