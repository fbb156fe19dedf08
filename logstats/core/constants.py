"""Constants used throughout the core modules."""

import re
from datetime import datetime

# Line grammar: <timestamp> | <severity> | <module>:<function>:<lineNumber> - <message>
FIELD_SEPARATOR = "|"
LOCATION_SEPARATOR = ":"
MESSAGE_SEPARATOR = "-"

# Line numbers must fit a signed 16-bit integer
MIN_LINE_NUMBER = -(2 ** 15)
MAX_LINE_NUMBER = 2 ** 15 - 1

# Timestamps: YYYY-MM-DD HH:MM:SS.fff, fraction optional on input
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
TIMESTAMP_FORMAT_NO_FRACTION = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{1,6})?")

# Instant reported for files without a single parseable record
ZERO_TIME = datetime.min

# Summaries always carry this many top message slots
TOP_MESSAGE_SLOTS = 5

# File Processing
DEFAULT_ENCODING = "utf-8"
RECORD_SEPARATOR = "\n"

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
