import logging
import sys
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter, \
    ArgumentTypeError, Namespace
from pathlib import Path

from rollcrc.common import CrcParams, UnknownPresetError
from rollcrc.engine import CrcEngine, make_engine
from rollcrc.presets import Preset, lookup
from rollcrc.utils import parse_bool, parse_int


# -----------------------------------------------------------------------------

ACTION_LIST = 'list'
ACTION_COMPUTE = 'compute'
ACTION_CHECK = 'check'
ACTION_TABLE = 'table'

DEFAULT_PRESET = 'CRC32'

LOG_FORMAT = '%(asctime)s,%(name)s,%(message)s'


# -----------------------------------------------------------------------------

def parse_preset(s: str) -> CrcParams:
    try:
        return lookup(s)
    except UnknownPresetError:
        raise ArgumentTypeError(f"unknown preset: {s}") from None


def parse_params(s: str) -> CrcParams:
    "BITS,POLY,INIT,XOROUT,REFLECTED, e.g. 16,0x1021,0xFFFF,0,false"
    xs = s.split(',')

    if len(xs) != 5:
        raise ArgumentTypeError(f"expected 5 comma separated values: {s!r}")

    try:
        bits, polynomial, init_value, final_xor_value = map(parse_int, xs[:4])
        return CrcParams(bits, polynomial, init_value, final_xor_value,
                         parse_bool(xs[4]))
    except ValueError as e:
        raise ArgumentTypeError(str(e)) from e


def hex_digits(bits: int) -> int:
    return bits // 4


def format_crc(crc: int, bits: int) -> str:
    return f"0x{crc:0{hex_digits(bits)}X}"


def read_input(args: Namespace) -> bytes:
    if args.string is not None:
        return args.string.encode('utf-8')
    if args.infile is None or str(args.infile) == '-':
        return sys.stdin.buffer.read()
    return args.infile.read_bytes()


# -----------------------------------------------------------------------------

def cmd_list():
    for preset in Preset:
        p = preset.params
        print(f"{preset.name:<20} {preset.title:<26} "
              f"bits={p.bits:<2} "
              f"poly={format_crc(p.polynomial, p.bits)} "
              f"init={format_crc(p.init_value, p.bits)} "
              f"xorout={format_crc(p.final_xor_value, p.bits)} "
              f"reflected={str(p.reflected).lower()} "
              f"check={format_crc(preset.check, p.bits)}")


def cmd_compute(engine: CrcEngine, data: bytes):
    print(format_crc(engine.compute(data), engine.bits))


def cmd_check(engine: CrcEngine, data: bytes) -> int:
    ok = engine.check(data)
    print('OK' if ok else 'FAILED')
    return 0 if ok else 1


def cmd_table(engine: CrcEngine, columns: int):
    digits = hex_digits(engine.bits)
    for i in range(0, len(engine.table), columns):
        print(' '.join(f"{x:0{digits}X}"
                       for x in engine.table[i:i+columns]))


# -----------------------------------------------------------------------------

def add_algorithm_arguments(parser: ArgumentParser):
    algorithm = parser.add_mutually_exclusive_group()

    algorithm.add_argument(
        '-p', '--preset',
        type=parse_preset,
        default=DEFAULT_PRESET,
        help="Name of a predefined algorithm, see the list action.",
        metavar='NAME'
    )

    algorithm.add_argument(
        '--params',
        type=parse_params,
        help=(
            "Explicit algorithm parameters. INIT is the initial value of "
            "the register, LSB-first for reflected algorithms."
        ),
        metavar='BITS,POLY,INIT,XOROUT,REFLECTED'
    )


def add_input_arguments(parser: ArgumentParser):
    parser.add_argument(
        'infile',
        type=Path,
        nargs='?',
        help="Input file, '-' or nothing to read stdin."
    )

    parser.add_argument(
        '-s', '--string',
        help="Use the UTF-8 bytes of STRING instead of reading a file."
    )


def make_argument_parser():
    parser = ArgumentParser(prog='rollcrc',
                            formatter_class=ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Enable debug logging."
    )

    # -------------------------------------------------------------------------

    action = parser.add_subparsers(
        title='action',
        dest='action',
        required=True
    )

    # -------------------------------------------------------------------------

    action.add_parser(
        ACTION_LIST,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    # -------------------------------------------------------------------------

    compute = action.add_parser(
        ACTION_COMPUTE,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    add_algorithm_arguments(compute)
    add_input_arguments(compute)

    # -------------------------------------------------------------------------

    check = action.add_parser(
        ACTION_CHECK,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    add_algorithm_arguments(check)
    add_input_arguments(check)

    # -------------------------------------------------------------------------

    table = action.add_parser(
        ACTION_TABLE,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    add_algorithm_arguments(table)

    table.add_argument(
        '-c', '--columns',
        type=int,
        default=8,
        help="Table entries per line.",
        metavar='N'
    )

    # -------------------------------------------------------------------------

    return parser


def main(argv=None) -> int:
    parser = make_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )

    if args.action == ACTION_LIST:
        cmd_list()
        return 0

    engine = make_engine(args.params or args.preset)

    if args.action == ACTION_TABLE:
        if args.columns < 1:
            parser.error("columns must be greater than zero")
        cmd_table(engine, args.columns)
        return 0

    try:
        data = read_input(args)
    except OSError as e:
        parser.error(f"Cannot read input: {e}")

    if args.action == ACTION_CHECK:
        return cmd_check(engine, data)

    cmd_compute(engine, data)
    return 0


# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
