#
# Generate Defaults
#

DEFAULT_GENERATE_COUNT = 64  # bytes
HEX_DUMP_WIDTH = 16  # bytes per line

#
# Interactive Check Loop
#

CHECK_PROMPT = "Enter string (to quit press q): "
CHECK_QUIT_COMMAND = "q"
CHECK_PASSED_MESSAGE = "The string passed the check"
