"""Constants for pymikan - default configuration and program metadata."""

# Program metadata
PROGRAM_NAME = "pymikan"

# Default configuration
# Display columns per line when no width is configured (classic terminal width)
DEFAULT_RUNE_WIDTH = 80

# Display widths
NARROW_WIDTH = 1
WIDE_WIDTH = 2

# East Asian Width property values rendered as two columns
WIDE_EAST_ASIAN_WIDTHS = ("W", "F")
