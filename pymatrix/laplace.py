import logging

import numpy as np

from pymatrix.matrix import ShapeError, create_filled


logger = logging.getLogger("pymatrix")
log_funcs = {
    "debug": logger.debug,
    "info": logger.info,
    "warning": logger.warning,
}

# Cofactor expansion scales with n!, so anything above this gets slow.
LAPLACE_WARN_SIZE = 10


def log(message, level="info"):
    log_funcs[level](message)


def _check_square(mat):
    if mat is None:
        raise ShapeError("Can't calculate the determinant of a missing matrix!")
    if mat.width != mat.height:
        raise ShapeError(
            "The determinant is undefined for non-square matrices, "
            f"got a {mat.width}x{mat.height} matrix!"
        )


def determinant(mat):
    """Determinant by recursive cofactor (Laplace) expansion.

    Instead of building a minor for every recursion step, the columns
    that were already expanded are marked in a boolean mask and skipped.
    The mask belongs to this call only and is handed down the recursion,
    so several determinants may be calculated at the same time.
    """
    _check_square(mat)

    size = mat.width
    log(f"Laplace expansion of a {size}x{size} matrix", "debug")
    if size > LAPLACE_WARN_SIZE:
        log(
            f"Laplace expansion of a {size}x{size} matrix is O(n!) and "
            "may take very long!",
            "warning",
        )
    excluded = np.zeros(size, dtype=bool)
    return _laplace(mat, 0, excluded, 1.0)


def _laplace(mat, row, excluded, mul):
    """mul times the determinant of the sub-matrix made up by the rows
    row, row+1, ... and all columns not marked in excluded."""
    get = mat.get
    # Remaining columns, left to right
    cols = np.flatnonzero(~excluded).tolist()
    size = mat.height - row

    if size == 0:
        return 0.0
    elif size == 1:
        return mul * get(row, cols[0])
    elif size == 2:
        c0, c1 = cols
        a, b = get(row, c0), get(row, c1)
        c, d = get(row + 1, c0), get(row + 1, c1)
        return mul * (a * d - b * c)
    elif size == 3:
        c0, c1, c2 = cols
        a, b, c = get(row, c0), get(row, c1), get(row, c2)
        d, e, f = get(row + 1, c0), get(row + 1, c1), get(row + 1, c2)
        g, h, i = get(row + 2, c0), get(row + 2, c1), get(row + 2, c2)
        return mul * (a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g))

    det = 0.0
    sign = 1.0
    for x in cols:
        excluded[x] = True
        try:
            det += sign * _laplace(mat, row + 1, excluded, mul * get(row, x))
        finally:
            excluded[x] = False
        sign = -sign
    return det


def _minor(mat, col):
    """New matrix without the first row and the given column."""
    arr = mat.to_array()
    #                        columns left of col, columns right of col
    minor = np.concatenate((arr[1:, :col], arr[1:, col + 1 :]), axis=1)
    return create_filled(mat.width - 1, mat.height - 1, minor.flatten())


def _laplace_naive(mat):
    size = mat.width
    if size == 1:
        return mat.get(0, 0)
    elif size == 2:
        a, b, c, d = mat.to_array().flatten()
        return a * d - b * c

    det = 0.0
    for x in range(size):
        det += (-1) ** x * mat.get(0, x) * _laplace_naive(_minor(mat, x))
    return det


def determinant_naive(mat):
    """Determinant by cofactor expansion along the first row.

    Every recursion step allocates a new minor matrix.
    """
    _check_square(mat)
    return float(_laplace_naive(mat))
