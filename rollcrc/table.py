import logging
from functools import cache
from rollcrc.binary import hi_bit, mask, reflect, register_shift
from rollcrc.common import (
    validate_reflected, validate_value, validate_width
)


logger = logging.getLogger(__name__)


# One entry per byte value, each as wide as the CRC register.
LookupTable = tuple[int, ...]


# -----------------------------------------------------------------------------

def build_table(bits: int, polynomial: int, reflected: bool) -> LookupTable:
    validate_width(bits)
    validate_value('polynomial', polynomial, bits)
    validate_reflected(reflected)
    return _build_table(bits, polynomial, reflected)


@cache
def _build_table(bits: int, polynomial: int, reflected: bool) -> LookupTable:
    # The cache only ever stores the finished tuple: concurrent first calls
    # may build the same table twice but never see a partial one.
    logger.debug("Building %d-bit %s table for polynomial %#x",
                  bits, 'reflected' if reflected else 'normal', polynomial)
    if reflected:
        return _reflected_table(bits, polynomial)
    return _normal_table(bits, polynomial)


def _normal_table(bits: int, polynomial: int) -> LookupTable:
    """
    Divide every byte, aligned to the top of the register, by the polynomial.

    >>> hex(_normal_table(8, 0x07)[1])
    '0x7'
    >>> hex(_normal_table(16, 0x1021)[1])
    '0x1021'
    """
    top = hi_bit(bits)
    shift = register_shift(bits)
    t = []
    for divident in range(256):
        value = divident << shift
        for _ in range(8):
            if value & top:
                value = (value << 1) ^ polynomial
            else:
                value <<= 1
        t.append(value & mask(bits))
    return tuple(t)


def _reflected_table(bits: int, polynomial: int) -> LookupTable:
    """
    Same division as _normal_table, run LSB-first with the polynomial
    reversed.

    >>> hex(_reflected_table(32, 0x04C11DB7)[1])
    '0x77073096'
    """
    rpoly = reflect(polynomial, bits)
    t = []
    for divident in range(256):
        value = divident
        for _ in range(8):
            if value & 1:
                value = (value >> 1) ^ rpoly
            else:
                value >>= 1
        t.append(value & mask(bits))
    return tuple(t)
