from dataclasses import dataclass, field
from functools import cached_property
from typing import Callable, Iterable, Optional
from rollcrc.binary import fits, register_shift, to_bytes
from rollcrc.binary import mask as width_mask
from rollcrc.common import (
    CrcParams, InvalidByteError, InvalidParametersError, validate_value
)
from rollcrc.presets import lookup
from rollcrc.table import LookupTable, build_table


Data = bytes | bytearray | memoryview | str | Iterable[int]

# (table, mask, shift, crc, data) -> crc
Reducer = Callable[[LookupTable, int, int, int, bytes], int]


# -----------------------------------------------------------------------------

def _reduce_8(t: LookupTable, m: int, s: int, crc: int, bs: bytes) -> int:
    # At 8 bits the normal and reflected rules collapse to the same lookup.
    for b in bs:
        crc = t[crc ^ b]
    return crc


def _reduce_normal(t: LookupTable, m: int, s: int, crc: int,
                   bs: bytes) -> int:
    for b in bs:
        crc = ((crc << 8) ^ t[((crc >> s) ^ b) & 0xFF]) & m
    return crc


def _reduce_reflected(t: LookupTable, m: int, s: int, crc: int,
                      bs: bytes) -> int:
    for b in bs:
        crc = ((crc >> 8) ^ t[(crc ^ b) & 0xFF]) & m
    return crc


def select_reducer(bits: int, reflected: bool) -> Reducer:
    match (bits, reflected):
        case (8, _):
            return _reduce_8
        case (_, False):
            return _reduce_normal
        case _:
            return _reduce_reflected


# -----------------------------------------------------------------------------

def as_bytes(data: Data) -> bytes | bytearray:
    """
    Accept the byte containers callers commonly hold. Values outside 0..255
    are rejected rather than masked.

    >>> as_bytes([0x31, 0x32])
    b'12'
    >>> as_bytes('123')
    b'123'
    """
    match data:
        case bytes() | bytearray():
            return data
        case memoryview():
            return data.tobytes()
        case str():
            try:
                return data.encode('ascii')
            except UnicodeEncodeError as e:
                raise InvalidByteError(
                    f"Non-ASCII character at position {e.start}: "
                    f"{data[e.start]!r}"
                ) from e
        case int():
            raise TypeError(f"Expected a sequence of bytes, got {data!r}")

    xs = list(data)
    for i, b in enumerate(xs):
        if isinstance(b, bool) or not isinstance(b, int) or not 0 <= b <= 255:
            raise InvalidByteError(f"Byte at position {i} out of range: {b!r}")
    return bytes(xs)


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CrcEngine:
    params: CrcParams
    table: LookupTable = field(init=False, repr=False, compare=False)
    mask: int = field(init=False, repr=False)
    shift: int = field(init=False, repr=False)
    _reduce: Reducer = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # The table always comes from the params, never from the caller.
        object.__setattr__(self, 'table',
                           build_table(self.bits, self.params.polynomial,
                                       self.reflected))
        object.__setattr__(self, 'mask', width_mask(self.bits))
        object.__setattr__(self, 'shift', register_shift(self.bits))
        object.__setattr__(self, '_reduce',
                           select_reducer(self.bits, self.reflected))

    @property
    def bits(self) -> int:
        return self.params.bits

    @property
    def init_value(self) -> int:
        return self.params.init_value

    @property
    def final_xor_value(self) -> int:
        return self.params.final_xor_value

    @property
    def reflected(self) -> bool:
        return self.params.reflected

    def update(self, crc: int, data: Data) -> int:
        "Fold data into the register value crc, without the final XOR."
        validate_value('crc', crc, self.bits)
        return self._reduce(self.table, self.mask, self.shift, crc,
                            as_bytes(data))

    def finalize(self, crc: int) -> int:
        return crc ^ self.final_xor_value

    def compute(self, data: Data) -> int:
        return self.finalize(self.update(self.init_value, data))

    def __call__(self, data: Data) -> int:
        return self.compute(data)

    def trailer(self, crc: int) -> bytes:
        """
        The bytes of crc in the order this engine's register consumes them,
        ready to be appended to the payload they were computed over.
        """
        if not fits(crc, self.bits):
            raise InvalidParametersError(
                f"CRC does not fit in {self.bits} bits: {crc:#x}"
            )
        return to_bytes(crc, self.bits,
                        'little' if self.reflected else 'big')

    @cached_property
    def residue(self) -> int:
        "What compute() returns over any payload followed by its trailer."
        return self.compute(self.trailer(self.compute(b'')))

    def check(self, data: Data) -> bool:
        "Return True if data is a payload followed by its own trailer."
        return self.compute(data) == self.residue


# -----------------------------------------------------------------------------

def make_engine(
        algorithm: int | str | CrcParams | tuple[int, int, int, int, bool],
        polynomial: Optional[int] = None,
        init_value: int = 0,
        final_xor_value: int = 0,
        reflected: bool = False
) -> CrcEngine:
    """
    Build a ready to use engine from a width plus parameters, a CrcParams,
    a 5-tuple or the name of a preset.

    >>> hex(make_engine('CRC16_AUG_CCITT')(b'123456789'))
    '0xe5cc'
    >>> hex(make_engine(16, 0x1234, 0, 0, True)(b'123456789'))
    '0xf13'
    """
    extra = (polynomial, init_value, final_xor_value, reflected)
    if not isinstance(algorithm, int) and extra != (None, 0, 0, False):
        raise InvalidParametersError(
            f"Parameters only go with a width, not with {algorithm!r}"
        )

    match algorithm:
        case CrcParams():
            params = algorithm
        case str():
            params = lookup(algorithm)
        case tuple():
            params = CrcParams.from_tuple(algorithm)
        case int():
            if polynomial is None:
                raise InvalidParametersError("polynomial is required")
            params = CrcParams(algorithm, polynomial, init_value,
                               final_xor_value, reflected)
        case _:
            raise TypeError(f"Cannot make a CRC engine from {algorithm!r}")

    return CrcEngine(params)


def compute(engine: CrcEngine, data: Data) -> int:
    return engine.compute(data)


def check(engine: CrcEngine, data: Data) -> bool:
    return engine.check(data)


def trailer(engine: CrcEngine, crc: int) -> bytes:
    return engine.trailer(crc)
