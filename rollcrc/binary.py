from typing import Literal


# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> bin(mask(0))
    '0b0'
    >>> bin(mask(1))
    '0b1'
    >>> hex(mask(16))
    '0xffff'
    """
    return (1 << n) - 1


def hi_bit(n: int) -> int:
    """
    >>> bin(hi_bit(8))
    '0b10000000'
    >>> hex(hi_bit(32))
    '0x80000000'
    """
    return 1 << (n - 1)


def register_shift(n: int) -> int:
    "Distance between the top byte of an n-bit register and its low byte."
    return n - 8


# -----------------------------------------------------------------------------

def reflect(x: int, n: int) -> int:
    """
    Reverse the order of the n low bits of x.

    >>> bin(reflect(0b0001, 4))
    '0b1000'
    >>> bin(reflect(0b1101, 4))
    '0b1011'
    >>> hex(reflect(0x04C11DB7, 32))
    '0xedb88320'
    """
    assert 0 <= x <= mask(n)
    r = 0
    for i in range(n):
        if x & (1 << i):
            r |= 1 << (n - 1 - i)
    return r


def fits(x: int, n: int) -> bool:
    "Return True if x is a non-negative integer of at most n bits."
    return 0 <= x <= mask(n)


def to_bytes(x: int, n: int, byteorder: Literal['big', 'little']) -> bytes:
    """
    >>> to_bytes(0xE5CC, 16, 'big')
    b'\\xe5\\xcc'
    >>> to_bytes(0x0F13, 16, 'little')
    b'\\x13\\x0f'
    """
    return x.to_bytes(n // 8, byteorder=byteorder)
