#
# Stream Defaults
#

DEFAULT_CHUNK_SIZE = 32 * 1024  # 32 KiB, in bytes

#
# Seeds (64-bit, signed or unsigned view)
#

SEED_MIN = -(2**63)
SEED_MAX = 2**64 - 1
SEED_MASK = 0xFFFFFFFFFFFFFFFF
RANDOM_WORD_BITS = 63
RANDOM_WORD_SIZE = 8  # bytes per drawn word in word mode

#
# Aggregated Errors
#

ERROR_DELIMITER = ";"

#
# Line Check Rules
#

MAX_LINE_RUNES = 20  # lines with this many characters or more are too long
MIN_LINE_SPACES = 2
