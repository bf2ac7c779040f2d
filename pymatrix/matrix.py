import operator
import sys

import numpy as np


class MatrixError(Exception):
    pass


class AllocationError(MatrixError, MemoryError):
    pass


class ShapeError(MatrixError, ValueError):
    pass


def _check_dims(width, height):
    for name, dim in (("width", width), ("height", height)):
        if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)):
            raise ShapeError(f"Matrix {name} must be an integer but got {dim!r}!")
        if dim < 0:
            raise ShapeError(f"Matrix {name} must be positive but got {dim}!")


class Matrix:
    """A two-dimensional, immutably-sized matrix of doubles.

    The elements are kept in a flat, row-major buffer, so element (y, x)
    lives at index y * width + x. The buffer should never be touched
    directly; use get() and set() instead.
    """

    def __init__(self, width, height, elems):
        self._elems = _as_buffer(width, height, elems, copy=False)
        self._width = int(width)
        self._height = int(height)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def shape(self):
        return (self._height, self._width)

    def get(self, y, x):
        """Value at row y and column x.

        Out of bounds access is not an error and simply returns 0.0.
        Indices must be integers.
        """
        y, x = operator.index(y), operator.index(x)
        if 0 <= y < self._height and 0 <= x < self._width:
            return float(self._elems[y * self._width + x])
        return 0.0

    def set(self, y, x, val):
        """Set the value at row y and column x.

        Returns True on success and False if (y, x) lies outside of the
        matrix. In the latter case the matrix is left unchanged.
        """
        y, x = operator.index(y), operator.index(x)
        if not (0 <= y < self._height and 0 <= x < self._width):
            return False
        self._elems[y * self._width + x] = val
        return True

    def release(self):
        self._elems = None

    def to_array(self):
        return np.array(self._elems, dtype=np.float64).reshape(self.shape)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return check_eq_size(self, other) and np.array_equal(
            self._elems, other._elems
        )

    __hash__ = None

    def __repr__(self):
        return f"Matrix(width={self._width}, height={self._height})"

    def __str__(self):
        return format_matrix(self)


def create_empty(width, height):
    """Zeroed matrix of the given size."""
    _check_dims(width, height)
    if width == 0 or height == 0:
        raise AllocationError(f"Can't allocate a {width}x{height} matrix!")
    # numpy reports sizes beyond its address space as ValueError
    try:
        elems = np.zeros(width * height, dtype=np.float64)
    except (MemoryError, ValueError, OverflowError) as err:
        raise AllocationError(
            f"Allocation of a {width}x{height} matrix failed!"
        ) from err
    return Matrix(width, height, elems)


def _as_buffer(width, height, elems, copy):
    _check_dims(width, height)
    if width == 0 or height == 0:
        raise ShapeError(f"Can't create a {width}x{height} matrix!")
    if elems is None:
        raise ShapeError("No elements given!")
    try:
        if copy:
            buf = np.array(elems, dtype=np.float64)
        else:
            buf = np.asarray(elems, dtype=np.float64)
    except MemoryError as err:
        raise AllocationError(
            f"Allocation of a {width}x{height} matrix failed!"
        ) from err
    except (TypeError, ValueError) as err:
        raise ShapeError(f"Invalid matrix elements: {err}") from err
    if buf.ndim != 1:
        raise ShapeError(f"Expected a flat buffer but got shape {buf.shape}!")
    if buf.size != width * height:
        raise ShapeError(
            f"A {width}x{height} matrix needs {width * height} elements "
            f"but {buf.size} were given!"
        )
    return buf


def create_filled(width, height, elems):
    """Matrix built around an existing buffer of width * height elements.

    A 1d float64 numpy array is adopted as is, without copying, so the
    matrix takes over the buffer. Use create_copied() if the caller wants
    to keep using its own buffer.
    """
    return Matrix(width, height, elems)


def create_copied(width, height, elems):
    """Like create_filled(), but the matrix always gets its own copy."""
    return Matrix(width, height, _as_buffer(width, height, elems, copy=True))


def create_from_rows(rows):
    rows = [list(row) for row in rows]
    if not rows or not rows[0]:
        raise ShapeError("Can't create a matrix without rows or columns!")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ShapeError(
                f"Row {i} has {len(row)} elements, expected {width}!"
            )
    flat = [val for row in rows for val in row]
    return create_copied(width, len(rows), flat)


def clone(mat):
    if mat is None:
        raise ShapeError("Can't clone a missing matrix!")
    new = create_empty(mat.width, mat.height)
    new._elems[:] = mat._elems
    return new


def release(mat):
    mat.release()


def check_eq_size(mat1, mat2):
    return mat1.width == mat2.width and mat1.height == mat2.height


def format_matrix(mat, fmt="{:f}"):
    if mat is None:
        return "NULL"

    lines = list()
    for y in range(mat.height):
        vals = [fmt.format(mat.get(y, x)) for x in range(mat.width)]
        lines.append("|" + " | ".join(vals) + "|")
    return "\n".join(lines)


def print_matrix(mat, file=None, fmt="{:f}"):
    if file is None:
        file = sys.stdout
    print(format_matrix(mat, fmt=fmt), file=file)
