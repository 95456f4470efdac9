"""
Lexical rules shared by the lexer and the classification helpers.
"""

import string

# Non-alphanumeric characters allowed anywhere in an identifier
IDENT_SIGILS = "_$"

# Characters that can start an identifier
IDENT_START = frozenset(string.ascii_letters + IDENT_SIGILS)

# Characters that can continue an identifier
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + IDENT_SIGILS)


def is_valid_identifier(text: str) -> bool:
    """
    Check whether text is a legal identifier.

    The first character must be an ASCII letter or one of the sigils
    '_' and '$'; every following character must be an ASCII letter,
    digit or sigil. The empty string is not an identifier.

    >>> is_valid_identifier("$count_2")
    True
    >>> is_valid_identifier("2fast")
    False
    """
    if not text or text[0] not in IDENT_START:
        return False
    return all(char in IDENT_CHARS for char in text[1:])
