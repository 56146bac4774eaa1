import numpy as np
import pytest
from numpy.testing import assert_array_equal

from faml import (
    cube_double,
    cube_float,
    cube_int,
    cube_long,
    cube_uint,
    cube_ulong,
    square_double,
    square_float,
    square_int,
    square_long,
    square_uint,
    square_ulong,
)
from faml.utils.constants import INT64_MAX, INT64_MIN, UINT32_MAX, UINT64_MAX


class TestSquare:
    @pytest.mark.parametrize(
        "function, dtype",
        [
            (square_float, np.float32),
            (square_double, np.float64),
            (square_int, np.int32),
            (square_uint, np.uint32),
            (square_long, np.int64),
            (square_ulong, np.uint64),
        ],
    )
    def test_small_values_and_dtype(self, function, dtype):
        result = function(7)
        assert result.dtype == dtype
        assert result == 49

    def test_float_rounds_in_declared_width(self):
        x = np.linspace(-3.0, 3.0, 257).astype(np.float32)
        result = square_float(x)
        assert result.dtype == np.float32
        assert_array_equal(result, x * x)

    def test_int_wraps(self):
        # 46341**2 = 2147488281 lies just past INT32_MAX
        assert square_int(46341) == -2147479015
        assert square_int(-46340) == 2147395600

    def test_unsigned_wraps_modulo_width(self):
        assert square_uint(2**16) == 0
        assert square_ulong(2**32) == 0
        assert square_ulong(2**32 - 1) == 2**64 - 2**33 + 1

    def test_largest_values_square_to_one(self):
        # (2**n - 1)**2 = 2**2n - 2**(n+1) + 1, which is 1 modulo 2**n
        assert square_uint(UINT32_MAX) == 1
        assert square_ulong(UINT64_MAX) == 1
        assert square_long(INT64_MAX) == 1

    def test_long_array(self):
        x = np.arange(-1000, 1000, dtype=np.int64)
        assert_array_equal(square_long(x), x * x)


class TestCube:
    def test_signed_cubes_keep_sign(self):
        assert cube_int(-3) == -27
        assert cube_long(-(2**20)) == -(2**60)

    def test_float_evaluates_left_to_right(self):
        x = np.linspace(-2.0, 2.0, 129).astype(np.float32)
        result = cube_float(x)
        assert result.dtype == np.float32
        assert_array_equal(result, (x * x) * x)

    def test_double(self):
        assert cube_double(1.5) == 3.375
        assert isinstance(cube_double(2.0), np.float64)

    def test_wraparound(self):
        assert cube_long(2**21) == INT64_MIN
        assert cube_uint(2**11) == 0
        assert cube_ulong(2**22) == 0
        assert cube_int(1291) == 1291**3 - 2**32
