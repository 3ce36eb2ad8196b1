"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Sentinel written into persons created before their real data is known.
PLACEHOLDER_VALUE = "TEMPORAL"

NATIONAL_ID_MIN_LENGTH = 6
NATIONAL_ID_MAX_LENGTH = 20
PLATE_MAX_LENGTH = 6
EMPLOYEE_PLATE_MAX_LENGTH = 10

DEFAULT_POOL_NAME = "recepcion"
DEFAULT_POOL_SIZE = 10

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"
