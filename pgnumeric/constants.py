"""PostgreSQL NUMERIC wire-format constants.

Values match the server's binary NUMERIC representation
(src/backend/utils/adt/numeric.c).
"""

# Base of the digit array; each digit holds four decimal digits
NBASE = 10_000
DEC_DIGITS = 4

# Sign tags as they appear in the binary header
NUMERIC_POS = 0x0000
NUMERIC_NEG = 0x4000
NUMERIC_NAN = 0xC000

# Field widths of the binary header (weight is int16, dscale is uint16)
INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1
UINT16_MAX = 2**16 - 1

# Largest digit value that can appear in the digit array
MAX_DIGIT = NBASE - 1
