"""Characters and literals used by the TOON format."""

LIST_ITEM_MARKER = "-"
LIST_ITEM_PREFIX = "- "

COMMA = ","
COLON = ":"
SPACE = " "
PIPE = "|"
DOT = "."

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

BACKSLASH = "\\"
DOUBLE_QUOTE = '"'
NEWLINE = "\n"
CARRIAGE_RETURN = "\r"
TAB = "\t"

DEFAULT_DELIMITER = COMMA

# Characters with the Unicode White_Space property, used when trimming values.
UNICODE_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)