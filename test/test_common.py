import pytest
from rollcrc.common import (
    CrcParams, InvalidParametersError, RollCrcError, validate_value,
    validate_width
)


# -----------------------------------------------------------------------------

def test_defaults():
    p = CrcParams(16, 0x1021)
    assert p.as_tuple() == (16, 0x1021, 0, 0, False)


def test_from_tuple():
    t = (32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True)
    assert CrcParams.from_tuple(t).as_tuple() == t


def test_from_short_tuple():
    with pytest.raises(InvalidParametersError):
        CrcParams.from_tuple((8, 0x07))  # type: ignore[arg-type]


def test_frozen():
    p = CrcParams(8, 0x07)
    with pytest.raises(AttributeError):
        p.bits = 16  # type: ignore[misc]


def test_hashable():
    assert len({CrcParams(8, 0x07), CrcParams(8, 0x07)}) == 1


def test_repr():
    assert repr(CrcParams(16, 0x1021, 0x1D0F)) == (
        "CrcParams(bits=16, polynomial=0x1021, init_value=0x1d0f, "
        "final_xor_value=0x0000, reflected=False)"
    )


# -----------------------------------------------------------------------------

@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_valid_width(bits):
    validate_width(bits)


@pytest.mark.parametrize("bits", [0, 1, 7, 12, 24, 128, -8, 16.0, True, '16'])
def test_invalid_width(bits):
    with pytest.raises(InvalidParametersError):
        validate_width(bits)


def test_value_must_fit():
    validate_value('init_value', 0xFF, 8)
    with pytest.raises(InvalidParametersError, match='init_value'):
        validate_value('init_value', 0x100, 8)


def test_error_hierarchy():
    assert issubclass(InvalidParametersError, RollCrcError)
    assert issubclass(InvalidParametersError, ValueError)
