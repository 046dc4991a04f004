"""Square matrices for affine transforms.

Matrices are stored as numpy float64 arrays. Determinants and inverses use
cofactor expansion rather than elimination: the sizes involved never exceed
4x4, so the O(n!) recursion stays cheap and the arithmetic stays simple.

Multiplying a 4x4 matrix by a `Point` uses the homogeneous coordinate w = 1
(translation applies); multiplying by a `Vector` uses w = 0 (translation does
not apply).

Example:
    >>> from whitted.core.matrix import Matrix, IDENTITY
    >>> from whitted.core.tuples import Point
    >>> m = Matrix([[1, 0, 0, 5], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
    >>> m @ Point(1.0, 2.0, 3.0)
    Point(x=6.0, y=2.0, z=3.0)
    >>> m @ m.inverse() == IDENTITY
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EPSILON, Point, Vector


class NonInvertibleMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class Matrix:
    """A square matrix of size up to 4.

    Attributes:
        size: Number of rows (and columns).
    """

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        """Create a matrix from nested rows.

        Args:
            rows: Row-major values, as nested sequences or a 2-D numpy array.

        Raises:
            ValueError: If the input is not a square matrix of size 1 to 4.
        """
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        if not 1 <= data.shape[0] <= 4:
            raise ValueError(f"Matrix size must be between 1 and 4, got {data.shape[0]}")
        self._data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Create an identity matrix of the given size."""
        return cls(np.identity(size, dtype=np.float64))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get a copy of the underlying array."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.isclose(other)

    __hash__ = None  # type: ignore[assignment]

    def isclose(self, other: Matrix, tol: float = EPSILON) -> bool:
        """Check elementwise closeness with an explicit tolerance."""
        if self.size != other.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) < tol))

    # =========================================================================
    # Multiplication
    # =========================================================================

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Point) -> Point: ...

    @overload
    def __matmul__(self, other: Vector) -> Vector: ...

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(
                    f"Cannot multiply matrices of size {self.size} and {other.size}"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Point):
            x, y, z, _ = self._homogeneous(other, 1.0)
            return Point(x, y, z)
        if isinstance(other, Vector):
            x, y, z, _ = self._homogeneous(other, 0.0)
            return Vector(x, y, z)
        return NotImplemented

    def _homogeneous(self, t: Point | Vector, w: float) -> list[float]:
        if self.size != 4:
            raise ValueError(f"Only 4x4 matrices transform tuples, got size {self.size}")
        return (self._data @ np.array((t.x, t.y, t.z, w))).tolist()

    # =========================================================================
    # Transpose, Determinant and Inverse
    # =========================================================================

    def transpose(self) -> Matrix:
        """Swap rows and columns."""
        return Matrix(self._data.T)

    def submatrix(self, row: int, column: int) -> Matrix:
        """Remove one row and one column.

        Args:
            row: Index of the row to drop.
            column: Index of the column to drop.

        Returns:
            A matrix one size smaller.
        """
        reduced = np.delete(np.delete(self._data, row, axis=0), column, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, column: int) -> float:
        """Determinant of the submatrix at (row, column)."""
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        """Minor at (row, column), negated when row + column is odd."""
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        d = self._data
        if self.size == 1:
            return float(d[0, 0])
        if self.size == 2:
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(
            float(d[0, column]) * self.cofactor(0, column)
            for column in range(self.size)
        )

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert the matrix using the adjugate (cofactor) method.

        Returns:
            The inverse, with inverse[c][r] = cofactor(r, c) / determinant.

        Raises:
            NonInvertibleMatrixError: If the determinant is zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise NonInvertibleMatrixError(f"Matrix is not invertible: {self!r}")
        n = self.size
        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for column in range(n):
                result[column, row] = self.cofactor(row, column) / det
        return Matrix(result)


IDENTITY = Matrix.identity(4)
