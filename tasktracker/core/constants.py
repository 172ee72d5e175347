"""Constants shared across layers (field limits, pagination, wire formats)."""

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Wire format for dueDate, createdAt, updatedAt (no timezone offset).
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
DATETIME_FORMAT_DISPLAY = "yyyy-MM-dd'T'HH:mm:ss"
