import pytest

from edcurve.edwards import CompressedEdwardsY
from edcurve.scalar import BASEPOINT_ORDER
from edcurve.table import EdwardsBasepointTable

BASEPOINT_COMPRESSED = CompressedEdwardsY(bytes([0x58]) + bytes([0x66]) * 31)
BASE2_CMPRSSD = CompressedEdwardsY(
    bytes.fromhex("c9a3f86aae465f0e56513864510f3997561fa2c9e85ea21dc2292309f3cd6022")
)
A_SCALAR = int.from_bytes(
    bytes.fromhex("1a0e978a90f6622d3747023f8ad8264da758aa1b88e040d1589e7b7f2376ef09"),
    "little",
)
A_TIMES_BASEPOINT = CompressedEdwardsY(
    bytes.fromhex("ea27e26053df1b5956f14d5dec3c34c384a269b74cc3803ea8e2e7c9425e40a5")
)


@pytest.fixture(scope="module")
def basepoint():
    point = BASEPOINT_COMPRESSED.decompress()
    assert point is not None
    return point


@pytest.fixture(scope="module")
def table(basepoint):
    return EdwardsBasepointTable.create(basepoint)


def test_basepoint_function_correct(table):
    assert table.basepoint().compress() == BASEPOINT_COMPRESSED


def test_mult_one_vs_basepoint(table):
    assert table.mul(1).compress() == BASEPOINT_COMPRESSED


def test_mult_two_vs_basepoint2(table):
    assert (table * 2).compress() == BASE2_CMPRSSD


def test_mult_vs_known_value(table):
    assert table.mul(A_SCALAR).compress() == A_TIMES_BASEPOINT
    assert (A_SCALAR * table).compress() == A_TIMES_BASEPOINT


def test_mult_by_basepoint_order(table):
    assert (table * BASEPOINT_ORDER).is_identity()


def test_precomputed_vs_variable_base(table, basepoint):
    assert table.mul(A_SCALAR).compress() == (basepoint * A_SCALAR).compress()


def test_mult_zero_is_identity(table):
    assert table.mul(0).is_identity()


def test_scalar_out_of_range_rejected(table):
    with pytest.raises(ValueError):
        table.mul(1 << 255)


def test_table_for_other_basepoint(basepoint):
    other = basepoint * 7
    other_table = EdwardsBasepointTable.create(other)
    assert other_table.basepoint() == other
    assert other_table.mul(3) == basepoint * 21


def test_bad_rows_rejected():
    with pytest.raises(ValueError):
        EdwardsBasepointTable([])