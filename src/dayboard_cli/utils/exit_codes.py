"""Exit codes for Dayboard CLI.

Scripts can branch on these to tell a bad invocation from an unreachable store.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or missing configuration
ERROR_INVALID_ARGS = 2

# The task store rejected the request or could not be reached
ERROR_NETWORK = 4

# Task id not present in the store
ERROR_NOT_FOUND = 5
