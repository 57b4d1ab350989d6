"""
Literal tables and defaults for nullbool.

The string tables are kept separate per parse path; they intentionally
differ in case sensitivity and must not be merged.
"""

# Strict parse path (case-sensitive)
STRICT_TRUE_LITERALS = frozenset({"1", "true"})
STRICT_FALSE_LITERALS = frozenset({"0", "false"})

# Lenient parse path
LENIENT_TRUE_LITERALS = frozenset({"1", "true", "True", "TRUE"})
LENIENT_FALSE_LITERALS = frozenset({"0", "false", "False", "FALSE"})

# Text boundary
TEXT_NULL_LITERALS = frozenset({"", "null"})
TEXT_TRUE = "true"
TEXT_FALSE = "false"

# Field names of the nullable-bool mapping shape
NULL_BOOL_VALUE_FIELD = "Bool"
NULL_BOOL_VALID_FIELD = "Valid"

# Logging defaults
DEFAULT_SERVICE_NAME = "nullbool"
DEFAULT_LOG_FILE = "logs/nullbool.log"
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5
