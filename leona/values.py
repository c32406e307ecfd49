DEBUG = False

# Initial turtle state
START_X = 0.0
START_Y = 0.0
START_DIRECTION = 0.0
START_COLOR = "#0000FF"

COORD_FORMAT = "%.4f"

SYNTAX_ERROR_FORMAT = "Syntaxfel på rad {line}"

# Largest DECIMAL literal, larger digit runs lex as errors
MAX_DECIMAL = 2 ** 31 - 1
