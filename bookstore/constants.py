"""
Application-level constants for hardcoded business logic.

These values define the data model limits and the canned messages of the
response envelope. They are not configurable via environment variables;
for configurable values (connection pool, logging, server) see
bookstore/settings.py.
"""

# ============================================================================
# Identifier ranges
# ============================================================================

# Authors use an unsigned 16-bit primary key
AUTHOR_ID_MAX = 65535

# Countries use an unsigned 8-bit primary key
COUNTRY_ID_MAX = 255


# ============================================================================
# Field length limits
# ============================================================================

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
ISO3_LENGTH = 3


# ============================================================================
# Envelope messages
# ============================================================================

MSG_OK = "OK"
MSG_BAD_REQUEST = "Bad Request"
MSG_UNAUTHORIZED = "Unauthorized"
MSG_NOT_FOUND = "Not Found"
MSG_UNHANDLED_ERROR = "Unhandled error occurred. Please try again later"


# ============================================================================
# Logging
# ============================================================================

# Upper bound for a single JSON log line; longer messages are truncated
MAX_LOG_SIZE_BYTES = 100_000
