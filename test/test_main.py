import pytest
from rollcrc.__main__ import format_crc, main, parse_params


# -----------------------------------------------------------------------------

def test_compute_string(capsys):
    assert main(['compute', '-p', 'CRC16_USB', '-s', '123456789']) == 0
    assert capsys.readouterr().out == '0xB4C8\n'


def test_compute_default_preset(capsys):
    assert main(['compute', '-s', '123456789']) == 0
    assert capsys.readouterr().out == '0xCBF43926\n'


def test_compute_params(capsys):
    argv = ['compute', '--params', '16,0x1234,0,0,true', '-s', '123456789']
    assert main(argv) == 0
    assert capsys.readouterr().out == '0x0F13\n'


def test_compute_file(tmp_path, capsys):
    path = tmp_path / 'payload.bin'
    path.write_bytes(b'123456789')
    assert main(['compute', '-p', 'CRC-64/ECMA-182', str(path)]) == 0
    assert capsys.readouterr().out == '0x6C40DF5F0B497347\n'


# -----------------------------------------------------------------------------

def test_check_ok(tmp_path, capsys):
    path = tmp_path / 'framed.bin'
    path.write_bytes(b'123456789\xe5\xcc')
    assert main(['check', '-p', 'crc16_aug_ccitt', str(path)]) == 0
    assert capsys.readouterr().out == 'OK\n'


def test_check_failed(tmp_path, capsys):
    path = tmp_path / 'framed.bin'
    path.write_bytes(b'123456780\xe5\xcc')
    assert main(['check', '-p', 'crc16_aug_ccitt', str(path)]) == 1
    assert capsys.readouterr().out == 'FAILED\n'


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit) as e:
        main(['compute', str(tmp_path / 'missing.bin')])
    assert e.value.code == 2


# -----------------------------------------------------------------------------

def test_table(capsys):
    assert main(['table', '-p', 'CRC8', '-c', '16']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 16
    assert lines[0].split()[:2] == ['00', '07']


def test_table_columns():
    with pytest.raises(SystemExit):
        main(['table', '-c', '0'])


def test_list(capsys):
    assert main(['list']) == 0
    out = capsys.readouterr().out
    assert 'CRC32 ' in out
    assert 'check=0xCBF43926' in out


# -----------------------------------------------------------------------------

def test_unknown_preset():
    with pytest.raises(SystemExit) as e:
        main(['compute', '-p', 'CRC-13/BBC', '-s', ''])
    assert e.value.code == 2


@pytest.mark.parametrize("s", [
    '16,0x1021,0,0',
    '12,0x80f,0,0,false',
    '16,0x1021,0,0,maybe',
    '16,zz,0,0,false'
])
def test_bad_params(s):
    with pytest.raises(SystemExit):
        main(['compute', '--params', s, '-s', ''])


def test_parse_params():
    p = parse_params('16,0x1021,0xFFFF,0,false')
    assert p.as_tuple() == (16, 0x1021, 0xFFFF, 0, False)


def test_format_crc():
    assert format_crc(0xF4, 8) == '0xF4'
    assert format_crc(0x7E, 16) == '0x007E'
