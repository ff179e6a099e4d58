"""Default values shared across seqkit operations."""

DEFAULT_CHUNK_SIZE = 1
DEFAULT_DROP_COUNT = 1
DEFAULT_REPEAT_COUNT = 1
NOT_FOUND_INDEX = -1

# Types treated as atomic values rather than sequences of characters.
ATOMIC_SEQUENCE_TYPES = (str, bytes, bytearray)
