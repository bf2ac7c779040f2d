import numpy as np
import pytest

from pymatrix.helpers import get_dummy_mat
from pymatrix.matrix import ShapeError, create_empty, create_from_rows
from pymatrix.ops import add, identity, mul, mul_jit, scalar_mul, sub


def test_add_sub():
    a = create_from_rows([[1, 2, 3], [4, 5, 6]])
    b = create_from_rows([[6, 5, 4], [3, 2, 1]])

    np.testing.assert_allclose(add(a, b).to_array(), np.full((2, 3), 7.0))
    np.testing.assert_allclose(
        sub(a, b).to_array(), [[-5, -3, -1], [1, 3, 5]]
    )


def test_add_then_sub():
    a = get_dummy_mat(4, 3, seed=20180325)
    b = get_dummy_mat(4, 3)
    assert sub(add(a, b), b) == a


def test_inputs_untouched():
    a = get_dummy_mat(3, 3, seed=1)
    b = get_dummy_mat(3, 3)
    a_arr = a.to_array()
    b_arr = b.to_array()
    for func in (add, sub, mul, mul_jit):
        res = func(a, b)
        assert res is not a and res is not b
    scalar_mul(a, 3.0)
    np.testing.assert_array_equal(a.to_array(), a_arr)
    np.testing.assert_array_equal(b.to_array(), b_arr)


@pytest.mark.parametrize("func", [add, sub])
def test_elementwise_shape_mismatch(func):
    with pytest.raises(ShapeError):
        func(create_empty(2, 3), create_empty(3, 2))


@pytest.mark.parametrize("func", [add, sub, mul, mul_jit])
def test_missing_operand(func):
    mat = create_empty(2, 2)
    with pytest.raises(ShapeError):
        func(mat, None)
    with pytest.raises(ShapeError):
        func(None, mat)


def test_scalar_mul():
    a = get_dummy_mat(3, 4, seed=20180325)
    assert scalar_mul(a, 1.0) == a
    assert scalar_mul(a, 0.0) == create_empty(3, 4)
    np.testing.assert_allclose(scalar_mul(a, -2.5).to_array(), -2.5 * a.to_array())

    with pytest.raises(ShapeError):
        scalar_mul(None, 2.0)


def test_mul():
    # 2 rows, 3 columns times 3 rows, 2 columns
    a = create_from_rows([[1, 2, 3], [4, 5, 6]])
    b = create_from_rows([[7, 8], [9, 10], [11, 12]])
    res = mul(a, b)
    assert (res.width, res.height) == (2, 2)
    np.testing.assert_allclose(res.to_array(), [[58, 64], [139, 154]])


def test_mul_result_shape():
    a = get_dummy_mat(3, 5, seed=20180325)
    b = get_dummy_mat(4, 3)
    res = mul(a, b)
    assert res.height == a.height
    assert res.width == b.width
    np.testing.assert_allclose(res.to_array(), a.to_array() @ b.to_array())


def test_mul_shape_mismatch():
    a = create_empty(3, 2)
    b = create_empty(3, 2)
    with pytest.raises(ShapeError):
        mul(a, b)
    with pytest.raises(ShapeError):
        mul_jit(a, b)


def test_mul_identity():
    a = get_dummy_mat(3, 4, seed=20180325)
    assert mul(identity(4), a) == a
    assert mul(a, identity(3)) == a


def test_mul_associative():
    np.random.seed(20180325)
    a = get_dummy_mat(3, 2)
    b = get_dummy_mat(4, 3)
    c = get_dummy_mat(2, 4)
    left = mul(mul(a, b), c)
    right = mul(a, mul(b, c))
    np.testing.assert_allclose(left.to_array(), right.to_array())


@pytest.mark.parametrize("width, inner, height", [(1, 1, 1), (2, 3, 4), (5, 5, 5)])
def test_mul_jit(width, inner, height):
    a = get_dummy_mat(inner, height, seed=20180325)
    b = get_dummy_mat(width, inner)
    ref = mul(a, b)
    res = mul_jit(a, b)
    assert (res.width, res.height) == (ref.width, ref.height)
    np.testing.assert_allclose(res.to_array(), ref.to_array())
