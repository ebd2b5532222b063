"""Numeric kind limits for numrange.

Integer limits are inclusive and describe two's-complement signed widths.
FLOAT32_MAX is the largest finite single-precision magnitude.
"""

# Signed integer widths
INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# IEEE 754 binary32
FLOAT32_MAX = 3.4028234663852886e38

# Unsigned 16-bit code units
CHAR_MIN = 0
CHAR_MAX = 0xFFFF
