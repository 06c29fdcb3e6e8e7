"""Estonian personal identification code (isikukood) parsing and validation"""

from datetime import date

# Layout: G YY MM DD SSS C
#   G   - sex and century of birth
#   SSS - serial number (last four digits incl. C drive credit segment)
#   C   - check digit
CODE_LENGTH = 11

FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

# Every century the code format can encode, keyed by first digit
FORMAT_CENTURIES = {
    1: 1800, 2: 1800,
    3: 1900, 4: 1900,
    5: 2000, 6: 2000,
    7: 2100, 8: 2100,
}


def century_digit(code: str) -> int:
    return int(code[0])


def year_field(code: str) -> int:
    return int(code[1:3])


def month_field(code: str) -> int:
    return int(code[3:5])


def day_field(code: str) -> int:
    return int(code[5:7])


def segment_field(code: str) -> int:
    """Last four digits of the code as an integer"""
    return int(code[-4:])


def calculate_checksum(code: str) -> int:
    """
    Compute the check digit for the first ten digits of a code.

    Two-pass weighted mod 11: if the first pass yields 10 the second weight
    set is used, and a second 10 becomes 0.
    """
    digits = [int(c) for c in code[:10]]

    remainder = sum(d * w for d, w in zip(digits, FIRST_PASS_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, SECOND_PASS_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


def is_valid_personal_code(code: str) -> bool:
    """
    Structural validity: 11 digits, known century digit, real birth date, correct checksum.

    A valid code is not necessarily one the decision engine can use; century
    digits outside 3-6 are valid here but have no supported birth century.
    """
    if not isinstance(code, str) or len(code) != CODE_LENGTH:
        return False
    if not (code.isascii() and code.isdigit()):
        return False

    century = FORMAT_CENTURIES.get(century_digit(code))
    if century is None:
        return False

    try:
        date(century + year_field(code), month_field(code), day_field(code))
    except ValueError:
        return False

    return calculate_checksum(code) == int(code[10])
