from __future__ import annotations
from typing import Union, Sequence

import numpy as np

from .errors import InvalidInputError, as_vector3
from .types import ECEFPoint, ENUPoint


class RigidTransform4:
    """
    Immutable 4x4 homogeneous transform from ECEF into the Y-up local frame.

    The matrix is stored row-major and acts on column vectors:
    ``[x', y', z', 1] = M @ [x, y, z, 1]``. Renderers that store matrices
    column-major (three.js ``Matrix4.elements``, glTF node matrices) need
    :meth:`elements_column_major`, not ``matrix.ravel()``.

    A transform describes one origin. If the origin changes, build a new one;
    reusing an old transform for a new origin places content in the wrong frame.

    Attributes:
        matrix (np.ndarray): Read-only (4, 4) float64 array.
    """
    __slots__ = ("_m",)

    def __init__(self, rotation: np.ndarray, translation: Sequence[float] = (0.0, 0.0, 0.0)):
        """
        Builds the transform from a rotation block and a translation column.

        Args:
            rotation (np.ndarray): (3, 3) rotation matrix.
            translation (Sequence[float], optional): Translation applied after the
                rotation. Defaults to no translation.
        """
        r = np.asarray(rotation, dtype=float)
        if r.shape != (3, 3) or not np.all(np.isfinite(r)):
            raise InvalidInputError(f"rotation must be a finite (3, 3) array, got shape {r.shape}")
        m = np.eye(4)
        m[:3, :3] = r
        m[:3, 3] = as_vector3(translation, "translation")
        m.flags.writeable = False
        self._m = m

    @property
    def matrix(self) -> np.ndarray:
        """Read-only (4, 4) homogeneous matrix, row-major."""
        return self._m

    @property
    def rotation(self) -> np.ndarray:
        """Read-only view of the (3, 3) rotation block."""
        return self._m[:3, :3]

    @property
    def translation(self) -> np.ndarray:
        """Read-only view of the translation column."""
        return self._m[:3, 3]

    def elements_column_major(self) -> list[float]:
        """
        Returns the 16 matrix entries in column-major order.

        Returns:
            list[float]: Entries suitable for ``THREE.Matrix4.fromArray``.
        """
        return self._m.T.ravel().tolist()

    def apply(self, point: Union[ECEFPoint, Sequence[float], np.ndarray]) -> ENUPoint:
        """
        Transforms a single ECEF position (or ECEF offset, for a rotation-only
        transform) into the Y-up local frame.

        Args:
            point (Union[ECEFPoint, Sequence[float], np.ndarray]): ECEF point or 3-vector.

        Returns:
            ENUPoint: Local (east, up, south) coordinate.
        """
        v = point.as_array() if isinstance(point, ECEFPoint) else as_vector3(point, "point")
        return ENUPoint.from_array(self.rotation @ v + self.translation)

    def __matmul__(self, other):
        """Multiplies the 4x4 matrix with a numpy array of homogeneous column vectors."""
        if isinstance(other, np.ndarray):
            return self._m @ other
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, RigidTransform4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self._m.tobytes())

    def __repr__(self) -> str:
        return f"RigidTransform4({self._m.tolist()!r})"
