import logging
import sys

logger = logging.getLogger("pymatrix")
logger.setLevel(logging.DEBUG)
handler = logging.FileHandler("pymatrix.log", mode="w", delay=True)
formatter = logging.Formatter("%(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)

stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setLevel(logging.INFO)
stdout_formatter = logging.Formatter("%(message)s")
stdout_handler.setFormatter(stdout_formatter)
logger.addHandler(stdout_handler)

from pymatrix.matrix import (
    Matrix,
    MatrixError,
    AllocationError,
    ShapeError,
    create_empty,
    create_filled,
    create_copied,
    create_from_rows,
    clone,
    release,
    check_eq_size,
    format_matrix,
    print_matrix,
)
from pymatrix.ops import add, sub, scalar_mul, mul, mul_jit, identity
from pymatrix.transforms import (
    transpose,
    rotate_right_90,
    rotate_left_90,
    rotate_180,
    flip_horizontal,
    flip_vertical,
)
from pymatrix.laplace import determinant, determinant_naive
