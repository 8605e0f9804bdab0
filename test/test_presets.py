import pytest
from rollcrc.common import CHECK_INPUT, UnknownPresetError, WIDTHS
from rollcrc.engine import make_engine
from rollcrc.presets import Preset, find, lookup, names


# Identifiers of the first registry this one grew out of
LEGACY_NAMES = [
    'crc8', 'crc8_sae_j1850', 'crc8_sae_j1850_zero', 'crc8_8h2f',
    'crc8_cdma2000', 'crc8_darc', 'crc8_dvb_s2', 'crc8_ebu', 'crc8_icode',
    'crc8_itu', 'crc8_maxim', 'crc8_sensirion', 'crc8_rohc', 'crc8_wcdma',
    'crc16_ccitt_zero', 'crc16_arc', 'crc16_aug_ccitt', 'crc16_buypass',
    'crc16_ccitt_false', 'crc16_cdma2000', 'crc16_dds_110', 'crc16_dect_r',
    'crc16_dect_x', 'crc16_dnp', 'crc16_en_13757', 'crc16_genibus',
    'crc16_maxim', 'crc16_mcrf4xx', 'crc16_riello', 'crc16_t10_dif',
    'crc16_teledisk', 'crc16_tms37157', 'crc16_usb', 'crc16_a',
    'crc16_kermit', 'crc16_modbus', 'crc16_x_25', 'crc16_xmodem', 'crc32',
    'crc32_bzip2', 'crc32_c', 'crc32_d', 'crc32_mpeg2', 'crc32_posix',
    'crc32_q', 'crc32_jamcrc', 'crc32_xfer', 'crc64_ecma_182',
    'crc64_go_iso', 'crc64_we', 'crc64_xz'
]


# -----------------------------------------------------------------------------

@pytest.mark.parametrize("preset", list(Preset), ids=lambda p: p.name)
def test_check_value(preset):
    assert make_engine(preset.params)(CHECK_INPUT) == preset.check


@pytest.mark.parametrize("preset", list(Preset), ids=lambda p: p.name)
def test_params(preset):
    p = preset.params
    assert p.bits in WIDTHS
    assert 0 <= preset.check < (1 << p.bits)
    assert lookup(preset.name) is p
    assert lookup(preset.title) is p


@pytest.mark.parametrize("name", LEGACY_NAMES)
def test_legacy_names(name):
    assert lookup(name) == lookup(name.upper())


# -----------------------------------------------------------------------------

# [(name, preset)]
SPELLING_TESTS = [
    ('CRC16_AUG_CCITT', Preset.CRC16_AUG_CCITT),
    ('CRC-16/AUG-CCITT', Preset.CRC16_AUG_CCITT),
    ('CRC-16/SPI-FUJITSU', Preset.CRC16_AUG_CCITT),
    (' crc-32 ', Preset.CRC32),
    ('CRC-32/ISO-HDLC', Preset.CRC32),
    ('PKZIP', Preset.CRC32),
    ('CRC-32C', Preset.CRC32_C),
    ('crc-32/castagnoli', Preset.CRC32_C),
    ('X-25', Preset.CRC16_X_25),
    ('CRC16_CCITT_ZERO', Preset.CRC16_XMODEM),
    ('CRC-8/SMBUS', Preset.CRC8),
    ('CRC-64', Preset.CRC64_ECMA_182),
    ('CRC-A', Preset.CRC16_A)
]


@pytest.mark.parametrize(("name", "preset"), SPELLING_TESTS)
def test_spellings(name, preset):
    assert find(name) is preset
    assert lookup(name) == preset.params


@pytest.mark.parametrize("name", ['', 'CRC-13/BBC', 'CRC128', 'crc16_foo'])
def test_unknown(name):
    with pytest.raises(UnknownPresetError):
        lookup(name)


def test_unknown_is_key_error():
    with pytest.raises(KeyError):
        find('nope')


# -----------------------------------------------------------------------------

def test_names():
    xs = names()
    assert len(xs) == len(Preset)
    assert len(set(xs)) == len(xs)
    assert 'CRC32' in xs
    assert 'CRC16_CCITT_ZERO' not in xs


def test_reflected_init_in_register_order():
    # The catalogue lists CRC-16/RIELLO with init=0xB2AA
    assert Preset.CRC16_RIELLO.params.init_value == 0x554D
    assert Preset.CRC16_RIELLO.params.reflected is True
