from pymatrix.matrix import ShapeError, create_empty


def _remap(mat, swap, new_pos):
    """Copy every element of mat into a new matrix at new_pos(y, x).

    If swap is True the new matrix has width and height exchanged.
    """
    if mat is None:
        raise ShapeError("Missing matrix!")

    if swap:
        result = create_empty(mat.height, mat.width)
    else:
        result = create_empty(mat.width, mat.height)

    for y in range(mat.height):
        for x in range(mat.width):
            new_y, new_x = new_pos(result, y, x)
            result.set(new_y, new_x, mat.get(y, x))
    return result


def transpose(mat):
    return _remap(mat, True, lambda res, y, x: (x, y))


def rotate_right_90(mat):
    """Rotate by 90 degrees clockwise."""
    return _remap(mat, True, lambda res, y, x: (x, (res.width - 1) - y))


def rotate_left_90(mat):
    """Rotate by 90 degrees counterclockwise."""
    return _remap(mat, True, lambda res, y, x: ((res.height - 1) - x, y))


def rotate_180(mat):
    """Equivalent to rotating right (or left) twice."""
    return _remap(
        mat, False, lambda res, y, x: ((res.height - 1) - y, (res.width - 1) - x)
    )


def flip_horizontal(mat):
    """Mirror the columns, the first column becomes the last."""
    return _remap(mat, False, lambda res, y, x: (y, (res.width - 1) - x))


def flip_vertical(mat):
    """Mirror the rows, the first row becomes the last."""
    return _remap(mat, False, lambda res, y, x: ((res.height - 1) - y, x))
