from dataclasses import dataclass
from enum import Enum
from rollcrc.common import CrcParams, UnknownPresetError
from rollcrc.utils import normalize_name


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Algorithm:
    name: str
    params: CrcParams
    check: int  # CRC of CHECK_INPUT
    aliases: tuple[str, ...] = ()


def _a(name: str, bits: int, polynomial: int, init_value: int,
       final_xor_value: int, reflected: bool, check: int,
       *aliases: str) -> Algorithm:
    params = CrcParams(bits, polynomial, init_value, final_xor_value,
                       reflected)
    return Algorithm(name, params, check, aliases)


# -----------------------------------------------------------------------------

# Names follow the RevEng catalogue. Reflected algorithms carry init_value in
# register (LSB-first) order: RIELLO, TMS37157 and CRC-A list 0xB2AA, 0x89EC
# and 0xC6C6 in the catalogue.

class Preset(Enum):
    CRC8 = _a(
        'CRC-8/SMBUS', 8, 0x07, 0x00, 0x00, False, 0xF4, 'CRC-8')
    CRC8_SAE_J1850 = _a(
        'CRC-8/SAE-J1850', 8, 0x1D, 0xFF, 0xFF, False, 0x4B)
    CRC8_SAE_J1850_ZERO = _a(
        'CRC-8/GSM-A', 8, 0x1D, 0x00, 0x00, False, 0x37)
    CRC8_8H2F = _a(
        'CRC-8/AUTOSAR', 8, 0x2F, 0xFF, 0xFF, False, 0xDF)
    CRC8_BLUETOOTH = _a(
        'CRC-8/BLUETOOTH', 8, 0xA7, 0x00, 0x00, True, 0x26)
    CRC8_CDMA2000 = _a(
        'CRC-8/CDMA2000', 8, 0x9B, 0xFF, 0x00, False, 0xDA)
    CRC8_DARC = _a(
        'CRC-8/DARC', 8, 0x39, 0x00, 0x00, True, 0x15)
    CRC8_DVB_S2 = _a(
        'CRC-8/DVB-S2', 8, 0xD5, 0x00, 0x00, False, 0xBC)
    CRC8_EBU = _a(
        'CRC-8/TECH-3250', 8, 0x1D, 0xFF, 0x00, True, 0x97,
        'CRC-8/AES')
    CRC8_GSM_B = _a(
        'CRC-8/GSM-B', 8, 0x49, 0x00, 0xFF, False, 0x94)
    CRC8_HITAG = _a(
        'CRC-8/HITAG', 8, 0x1D, 0xFF, 0x00, False, 0xB4)
    CRC8_ICODE = _a(
        'CRC-8/I-CODE', 8, 0x1D, 0xFD, 0x00, False, 0x7E)
    CRC8_ITU = _a(
        'CRC-8/I-432-1', 8, 0x07, 0x00, 0x55, False, 0xA1)
    CRC8_LTE = _a(
        'CRC-8/LTE', 8, 0x9B, 0x00, 0x00, False, 0xEA)
    CRC8_MAXIM = _a(
        'CRC-8/MAXIM-DOW', 8, 0x31, 0x00, 0x00, True, 0xA1,
        'DOW-CRC')
    CRC8_MIFARE_MAD = _a(
        'CRC-8/MIFARE-MAD', 8, 0x1D, 0xC7, 0x00, False, 0x99)
    CRC8_OPENSAFETY = _a(
        'CRC-8/OPENSAFETY', 8, 0x2F, 0x00, 0x00, False, 0x3E)
    CRC8_ROHC = _a(
        'CRC-8/ROHC', 8, 0x07, 0xFF, 0x00, True, 0xD0)
    CRC8_SENSIRION = _a(
        'CRC-8/NRSC-5', 8, 0x31, 0xFF, 0x00, False, 0xF7)
    CRC8_WCDMA = _a(
        'CRC-8/WCDMA', 8, 0x9B, 0x00, 0x00, True, 0x25)

    CRC16_A = _a(
        'CRC-16/ISO-IEC-14443-3-A', 16, 0x1021, 0x6363, 0x0000, True, 0xBF05,
        'CRC-A')
    CRC16_ARC = _a(
        'CRC-16/ARC', 16, 0x8005, 0x0000, 0x0000, True, 0xBB3D,
        'ARC', 'CRC-16', 'CRC-16/LHA', 'CRC-IBM')
    CRC16_AUG_CCITT = _a(
        'CRC-16/SPI-FUJITSU', 16, 0x1021, 0x1D0F, 0x0000, False, 0xE5CC)
    CRC16_BUYPASS = _a(
        'CRC-16/UMTS', 16, 0x8005, 0x0000, 0x0000, False, 0xFEE8,
        'CRC-16/VERIFONE')
    CRC16_CCITT_FALSE = _a(
        'CRC-16/IBM-3740', 16, 0x1021, 0xFFFF, 0x0000, False, 0x29B1,
        'CRC-16/AUTOSAR')
    CRC16_CDMA2000 = _a(
        'CRC-16/CDMA2000', 16, 0xC867, 0xFFFF, 0x0000, False, 0x4C06)
    CRC16_CMS = _a(
        'CRC-16/CMS', 16, 0x8005, 0xFFFF, 0x0000, False, 0xAEE7)
    CRC16_DDS_110 = _a(
        'CRC-16/DDS-110', 16, 0x8005, 0x800D, 0x0000, False, 0x9ECF)
    CRC16_DECT_R = _a(
        'CRC-16/DECT-R', 16, 0x0589, 0x0000, 0x0001, False, 0x007E,
        'R-CRC-16')
    CRC16_DECT_X = _a(
        'CRC-16/DECT-X', 16, 0x0589, 0x0000, 0x0000, False, 0x007F,
        'X-CRC-16')
    CRC16_DNP = _a(
        'CRC-16/DNP', 16, 0x3D65, 0x0000, 0xFFFF, True, 0xEA82)
    CRC16_EN_13757 = _a(
        'CRC-16/EN-13757', 16, 0x3D65, 0x0000, 0xFFFF, False, 0xC2B7)
    CRC16_GENIBUS = _a(
        'CRC-16/GENIBUS', 16, 0x1021, 0xFFFF, 0xFFFF, False, 0xD64E,
        'CRC-16/DARC', 'CRC-16/EPC', 'CRC-16/EPC-C1G2', 'CRC-16/I-CODE')
    CRC16_GSM = _a(
        'CRC-16/GSM', 16, 0x1021, 0x0000, 0xFFFF, False, 0xCE3C)
    CRC16_KERMIT = _a(
        'CRC-16/KERMIT', 16, 0x1021, 0x0000, 0x0000, True, 0x2189,
        'CRC-16/BLUETOOTH', 'CRC-16/CCITT', 'CRC-16/CCITT-TRUE',
        'CRC-16/V-41-LSB', 'CRC-CCITT', 'KERMIT')
    CRC16_LJ1200 = _a(
        'CRC-16/LJ1200', 16, 0x6F63, 0x0000, 0x0000, False, 0xBDF4)
    CRC16_M17 = _a(
        'CRC-16/M17', 16, 0x5935, 0xFFFF, 0x0000, False, 0x772B)
    CRC16_MAXIM = _a(
        'CRC-16/MAXIM-DOW', 16, 0x8005, 0x0000, 0xFFFF, True, 0x44C2)
    CRC16_MCRF4XX = _a(
        'CRC-16/MCRF4XX', 16, 0x1021, 0xFFFF, 0x0000, True, 0x6F91)
    CRC16_MODBUS = _a(
        'CRC-16/MODBUS', 16, 0x8005, 0xFFFF, 0x0000, True, 0x4B37,
        'MODBUS')
    CRC16_NRSC_5 = _a(
        'CRC-16/NRSC-5', 16, 0x080B, 0xFFFF, 0x0000, True, 0xA066)
    CRC16_OPENSAFETY_A = _a(
        'CRC-16/OPENSAFETY-A', 16, 0x5935, 0x0000, 0x0000, False, 0x5D38)
    CRC16_OPENSAFETY_B = _a(
        'CRC-16/OPENSAFETY-B', 16, 0x755B, 0x0000, 0x0000, False, 0x20FE)
    CRC16_PROFIBUS = _a(
        'CRC-16/PROFIBUS', 16, 0x1DCF, 0xFFFF, 0xFFFF, False, 0xA819,
        'CRC-16/IEC-61158-2')
    CRC16_RIELLO = _a(
        'CRC-16/RIELLO', 16, 0x1021, 0x554D, 0x0000, True, 0x63D0)
    CRC16_T10_DIF = _a(
        'CRC-16/T10-DIF', 16, 0x8BB7, 0x0000, 0x0000, False, 0xD0DB)
    CRC16_TELEDISK = _a(
        'CRC-16/TELEDISK', 16, 0xA097, 0x0000, 0x0000, False, 0x0FB3)
    CRC16_TMS37157 = _a(
        'CRC-16/TMS37157', 16, 0x1021, 0x3791, 0x0000, True, 0x26B1)
    CRC16_USB = _a(
        'CRC-16/USB', 16, 0x8005, 0xFFFF, 0xFFFF, True, 0xB4C8)
    CRC16_X_25 = _a(
        'CRC-16/IBM-SDLC', 16, 0x1021, 0xFFFF, 0xFFFF, True, 0x906E,
        'CRC-16/ISO-HDLC', 'CRC-16/ISO-IEC-14443-3-B', 'CRC-B', 'X-25')
    CRC16_XMODEM = _a(
        'CRC-16/XMODEM', 16, 0x1021, 0x0000, 0x0000, False, 0x31C3,
        'CRC16_CCITT_ZERO', 'CRC-16/ACORN', 'CRC-16/LTE', 'CRC-16/V-41-MSB',
        'XMODEM', 'ZMODEM')

    CRC32 = _a(
        'CRC-32/ISO-HDLC', 32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True,
        0xCBF43926,
        'CRC-32/ADCCP', 'CRC-32/V-42', 'CRC-32/XZ', 'PKZIP')
    CRC32_AUTOSAR = _a(
        'CRC-32/AUTOSAR', 32, 0xF4ACFB13, 0xFFFFFFFF, 0xFFFFFFFF, True,
        0x1697D06A)
    CRC32_BZIP2 = _a(
        'CRC-32/BZIP2', 32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, False,
        0xFC891918,
        'CRC-32/AAL5', 'CRC-32/DECT-B', 'B-CRC-32')
    CRC32_C = _a(
        'CRC-32/ISCSI', 32, 0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True,
        0xE3069283,
        'CRC-32/BASE91-C', 'CRC-32/CASTAGNOLI', 'CRC-32/INTERLAKEN', 'CRC-32C')
    CRC32_CD_ROM_EDC = _a(
        'CRC-32/CD-ROM-EDC', 32, 0x8001801B, 0x00000000, 0x00000000, True,
        0x6EC2EDC4)
    CRC32_D = _a(
        'CRC-32/BASE91-D', 32, 0xA833982B, 0xFFFFFFFF, 0xFFFFFFFF, True,
        0x87315576,
        'CRC-32D')
    CRC32_JAMCRC = _a(
        'CRC-32/JAMCRC', 32, 0x04C11DB7, 0xFFFFFFFF, 0x00000000, True,
        0x340BC6D9,
        'JAMCRC')
    CRC32_MEF = _a(
        'CRC-32/MEF', 32, 0x741B8CD7, 0xFFFFFFFF, 0x00000000, True,
        0xD2C22F51)
    CRC32_MPEG2 = _a(
        'CRC-32/MPEG-2', 32, 0x04C11DB7, 0xFFFFFFFF, 0x00000000, False,
        0x0376E6E7)
    CRC32_POSIX = _a(
        'CRC-32/CKSUM', 32, 0x04C11DB7, 0x00000000, 0xFFFFFFFF, False,
        0x765E7680,
        'CKSUM')
    CRC32_Q = _a(
        'CRC-32/AIXM', 32, 0x814141AB, 0x00000000, 0x00000000, False,
        0x3010BF7F,
        'CRC-32Q')
    CRC32_XFER = _a(
        'CRC-32/XFER', 32, 0x000000AF, 0x00000000, 0x00000000, False,
        0xBD0BE338)

    CRC64_ECMA_182 = _a(
        'CRC-64/ECMA-182', 64, 0x42F0E1EBA9EA3693, 0x0, 0x0, False,
        0x6C40DF5F0B497347,
        'CRC-64')
    CRC64_GO_ISO = _a(
        'CRC-64/GO-ISO', 64, 0x000000000000001B, 0xFFFFFFFFFFFFFFFF,
        0xFFFFFFFFFFFFFFFF, True, 0xB90956C775A41001)
    CRC64_MS = _a(
        'CRC-64/MS', 64, 0x259C84CBA6426349, 0xFFFFFFFFFFFFFFFF, 0x0, True,
        0x75D4B74F024ECEEA)
    CRC64_REDIS = _a(
        'CRC-64/REDIS', 64, 0xAD93D23594C935A9, 0x0, 0x0, True,
        0xE9C6D914C4B8D9CA)
    CRC64_WE = _a(
        'CRC-64/WE', 64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF,
        0xFFFFFFFFFFFFFFFF, False, 0x62EC59E3F1A4F00A)
    CRC64_XZ = _a(
        'CRC-64/XZ', 64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF,
        0xFFFFFFFFFFFFFFFF, True, 0x995DC9BBDF1939FA,
        'CRC-64/GO-ECMA')

    @property
    def params(self) -> CrcParams:
        return self.value.params

    @property
    def check(self) -> int:
        return self.value.check

    @property
    def title(self) -> str:
        return self.value.name


# -----------------------------------------------------------------------------

def _build_index() -> dict[str, Preset]:
    index: dict[str, Preset] = {}
    for preset in Preset:
        keys = [preset.name, preset.value.name, *preset.value.aliases]
        for key in map(normalize_name, keys):
            if index.setdefault(key, preset) is not preset:
                raise ValueError(
                    f"{key} names both {index[key].name} and {preset.name}"
                )
    return index


_INDEX = _build_index()


def find(name: str) -> Preset:
    try:
        return _INDEX[normalize_name(name)]
    except KeyError:
        raise UnknownPresetError(name) from None


def lookup(name: str) -> CrcParams:
    """
    >>> lookup('CRC-16/USB')
    CrcParams(bits=16, polynomial=0x8005, init_value=0xffff, \
final_xor_value=0xffff, reflected=True)
    """
    return find(name).params


def names() -> list[str]:
    return [preset.name for preset in Preset]
