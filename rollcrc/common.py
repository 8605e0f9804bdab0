from dataclasses import dataclass
from rollcrc.binary import fits


# -----------------------------------------------------------------------------

WIDTHS = (8, 16, 32, 64)

# The bytes conventionally used to publish an algorithm's check value.
CHECK_INPUT = b'123456789'


# -----------------------------------------------------------------------------

class RollCrcError(Exception):
    pass


class InvalidParametersError(RollCrcError, ValueError):
    pass


class InvalidByteError(RollCrcError, ValueError):
    pass


class UnknownPresetError(RollCrcError, KeyError):
    pass


# -----------------------------------------------------------------------------

def validate_width(bits: int):
    if isinstance(bits, bool) or not isinstance(bits, int) \
            or bits not in WIDTHS:
        raise InvalidParametersError(
            f"Unsupported width: {bits!r}, expected one of {WIDTHS}"
        )


def validate_value(name: str, x: int, bits: int):
    if isinstance(x, bool) or not isinstance(x, int):
        raise InvalidParametersError(f"{name} must be an integer: {x!r}")
    if not fits(x, bits):
        raise InvalidParametersError(
            f"{name} does not fit in {bits} bits: {x:#x}"
        )


def validate_reflected(reflected: bool):
    if not isinstance(reflected, bool):
        raise InvalidParametersError(
            f"reflected must be a bool: {reflected!r}"
        )


@dataclass(frozen=True)
class CrcParams:
    """
    The five values that define a CRC algorithm.

    init_value is the starting value of the register, so for reflected
    algorithms it is in LSB-first order.
    """
    bits: int
    polynomial: int
    init_value: int = 0
    final_xor_value: int = 0
    reflected: bool = False

    def __post_init__(self):
        validate_width(self.bits)
        validate_value('polynomial', self.polynomial, self.bits)
        validate_value('init_value', self.init_value, self.bits)
        validate_value('final_xor_value', self.final_xor_value, self.bits)
        validate_reflected(self.reflected)

    @classmethod
    def from_tuple(cls, t: tuple[int, int, int, int, bool]) -> 'CrcParams':
        if len(t) != 5:
            raise InvalidParametersError(
                f"Expected (bits, polynomial, init_value, final_xor_value, "
                f"reflected), got {t!r}"
            )
        return cls(*t)

    def as_tuple(self) -> tuple[int, int, int, int, bool]:
        return (self.bits, self.polynomial, self.init_value,
                self.final_xor_value, self.reflected)

    def __repr__(self):
        digits = self.bits // 4
        return ("CrcParams("
                f"bits={self.bits}, "
                f"polynomial={self.polynomial:#0{digits + 2}x}, "
                f"init_value={self.init_value:#0{digits + 2}x}, "
                f"final_xor_value={self.final_xor_value:#0{digits + 2}x}, "
                f"reflected={self.reflected}"
                ")")
