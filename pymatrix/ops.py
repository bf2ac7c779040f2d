import numba

from pymatrix.matrix import ShapeError, check_eq_size, create_empty


def _check_operands(*mats):
    if any(mat is None for mat in mats):
        raise ShapeError("Missing operand!")


def _elementwise(mat1, mat2, func):
    _check_operands(mat1, mat2)
    if not check_eq_size(mat1, mat2):
        raise ShapeError(
            f"Shapes {mat1.shape} and {mat2.shape} don't match!"
        )

    w, h = mat1.width, mat1.height
    result = create_empty(w, h)
    for y in range(h):
        for x in range(w):
            result.set(y, x, func(mat1.get(y, x), mat2.get(y, x)))
    return result


def add(mat1, mat2):
    """Elementwise sum of two equally sized matrices."""
    return _elementwise(mat1, mat2, lambda a, b: a + b)


def sub(mat1, mat2):
    """Elementwise difference of two equally sized matrices."""
    return _elementwise(mat1, mat2, lambda a, b: a - b)


def scalar_mul(mat, scalar):
    _check_operands(mat)

    w, h = mat.width, mat.height
    result = create_empty(w, h)
    for y in range(h):
        for x in range(w):
            result.set(y, x, mat.get(y, x) * scalar)
    return result


def _check_mul(mat1, mat2):
    _check_operands(mat1, mat2)
    if mat1.width != mat2.height:
        raise ShapeError(
            f"Can't multiply a {mat1.width}x{mat1.height} matrix with a "
            f"{mat2.width}x{mat2.height} matrix!"
        )


def mul(mat1, mat2):
    """Matrix product.

    Explicit loops.

    result[y, x] = sum_i mat1[y, i] * mat2[i, x]

    The result has the height of mat1 and the width of mat2.
    """
    _check_mul(mat1, mat2)

    result = create_empty(mat2.width, mat1.height)
    for y in range(result.height):
        for x in range(result.width):
            num = 0.0
            for i in range(mat1.width):
                num += mat1.get(y, i) * mat2.get(i, x)
            result.set(y, x, num)
    return result


@numba.jit(nopython=True)
def _mul_kernel(a, b, out):
    rows, inner = a.shape
    cols = b.shape[1]
    for y in range(rows):
        for x in range(cols):
            num = 0.0
            for i in range(inner):
                num += a[y, i] * b[i, x]
            out[y, x] = num
    return out


def mul_jit(mat1, mat2):
    """Matrix product, same contract as mul().

    Works on the raw buffers with a compiled kernel instead of going
    through get()/set() for every element.
    """
    _check_mul(mat1, mat2)

    result = create_empty(mat2.width, mat1.height)
    a = mat1._elems.reshape(mat1.shape)
    b = mat2._elems.reshape(mat2.shape)
    _mul_kernel(a, b, result._elems.reshape(result.shape))
    return result


def identity(n):
    result = create_empty(n, n)
    for i in range(n):
        result.set(i, i, 1.0)
    return result
