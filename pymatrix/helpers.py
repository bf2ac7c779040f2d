import numpy as np

from pymatrix.matrix import create_empty, create_filled


def get_dummy_mat(width, height, seed=None, low=-9, high=10):
    """Dummy matrix of random, integer-valued entries.

    Integer values keep sums and products exact, so results can be
    compared without tolerances.
    """
    if seed is not None:
        np.random.seed(seed)

    elems = np.random.randint(low, high, size=width * height).astype(np.float64)
    return create_filled(width, height, elems)


def diag(values):
    n = len(values)
    mat = create_empty(n, n)
    for i, val in enumerate(values):
        mat.set(i, i, val)
    return mat
