"""Character sets for O(1) classification.

All sets are frozensets for O(1) membership testing and immutability.
The empty string is the end-of-input sentinel and is never a member of
any set below, so scanners stop at end of input without a separate check.

Usage:
    from tagcursor.parsing.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

# Whitespace between tokens inside a tag. Carriage returns never reach the
# scanners because the cursor normalizes them to line feeds.
WHITESPACE: frozenset[str] = frozenset(" \n\t")

# Characters that end an attribute name
ATTRIBUTE_NAME_DELIMITERS: frozenset[str] = WHITESPACE | frozenset("'\"=/>")

# Tag names are ASCII letters only (no digits, hyphens or namespace colons)
ASCII_LETTERS: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

TAG_OPEN = "<"
EQUALS = "="
QUOTE = '"'

# Characters that stop the scan inside a quoted attribute value
ATTRIBUTE_VALUE_TERMINATORS: frozenset[str] = frozenset('"\n')
