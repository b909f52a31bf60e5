"""Constants for steprun."""

# Default textual renderings of runner events
DO_FORMAT = "DO\t[{index}/0-{last}]\t{name}"
SKIP_FORMAT = "SKIP\t[{index}/0-{last}]\t{name}"

# Joins step labels in error messages
NAMES_DELIMITER = ", "

# File names looked up by the CLI
STEPS_FILE = "steps.toml"
CONFIG_FILE = "steprun.toml"

# Skip reasons carried on SKIP events
SKIP_BEFORE_START = "before_start"
SKIP_PREDICATE = "predicate"
