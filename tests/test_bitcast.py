import numpy as np
from numpy.testing import assert_array_equal

from faml.utils import (
    bits_to_double,
    bits_to_float,
    double_to_bits,
    double_to_ubits,
    float_to_bits,
    float_to_ubits,
    scalar_or_array,
)


def test_known_patterns():
    assert float_to_bits(1.0) == 0x3F800000
    assert float_to_bits(-2.0) == np.int32(-0x40000000)
    assert float_to_ubits(-2.0) == 0xC0000000
    assert double_to_bits(1.0) == 0x3FF0000000000000
    assert double_to_ubits(-0.0) == 2**63


def test_views_preserve_every_bit():
    patterns = np.arange(0, 2**32, 2**20 + 7, dtype=np.uint64).astype(np.uint32)
    assert_array_equal(float_to_ubits(bits_to_float(patterns)), patterns)


def test_signed_and_wide_patterns_narrow_to_low_bits():
    assert bits_to_float(np.int32(0x3F800000)) == 1.0
    assert bits_to_float(np.int64(0x1_3F800000)) == 1.0
    assert bits_to_double(np.int64(-(2**63))).view(np.uint64) == 2**63


def test_scalar_or_array():
    assert isinstance(scalar_or_array(np.asarray(1.5)), np.float64)
    array = np.arange(3)
    assert scalar_or_array(array) is array
    assert scalar_or_array(np.float32(2.0)) == 2.0
