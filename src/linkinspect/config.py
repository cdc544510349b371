"""Configuration file for the linkinspect package."""

# Matches the fixed ``readlink`` buffer: one byte is reserved for the terminator
READLINK_BUFFER_SIZE = 2048
READLINK_MAX_BYTES = READLINK_BUFFER_SIZE - 1

INDENT_STEP = 2  # spaces added per symlink hop
INITIAL_DEPTH = 2

USAGE_MESSAGE = "Expect one or more filepath arguments"
EXIT_FAILURE = 1

LOG_LEVEL_ENV_VAR = "LINKINSPECT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
