def parse_int(s: str) -> int:
    """
    Parse an integer literal in any base Python accepts.
    >>> parse_int('0x1021')
    4129
    >>> parse_int('7')
    7
    """
    return int(s, 0)


def parse_bool(s: str) -> bool:
    """
    >>> parse_bool('true'), parse_bool('0')
    (True, False)
    """
    match s.strip().lower():
        case 'true' | 'yes' | '1':
            return True
        case 'false' | 'no' | '0':
            return False

    raise ValueError(f"Not a boolean: {s!r}")


def normalize_name(s: str) -> str:
    """
    Fold the spellings of an algorithm name onto a single identifier.
    >>> normalize_name('CRC-16/AUG-CCITT')
    'CRC16_AUG_CCITT'
    >>> normalize_name('crc16_aug_ccitt')
    'CRC16_AUG_CCITT'
    >>> normalize_name('X-25')
    'X_25'
    """
    name = s.strip().upper().replace('/', '_').replace('-', '_')

    # 'CRC_16_...' is how the catalogue spelling comes out of the replaces
    # above, the registry uses 'CRC16_...'
    if name.startswith('CRC_') and name[4:5].isdigit():
        name = 'CRC' + name[4:]

    return name
