"""
Utility functions for turning JSON keys into PHP identifiers.
"""

import re

# Anything that is not an ASCII letter, digit or underscore
_NON_WORD_PATTERN = re.compile(r"[^a-z0-9_]")


def sanitize_key(key: str) -> str:
    """Lowercase a JSON key and replace every non-identifier character with "_".

    Examples:
        "First Name" -> "first_name"
        "user-id" -> "user_id"
        "Élan" -> "_lan"

    Non-ASCII characters are replaced one character at a time, so "É" gives a
    single "_" rather than one per UTF-8 byte.
    """
    return _NON_WORD_PATTERN.sub("_", key.lower())


def to_camel_case(text: str) -> str:
    """Convert snake_case text to camelCase.

    Leading, trailing and repeated underscores are dropped:
        "first_name" -> "firstName"
        "_id" -> "Id"
        "a__b_" -> "aB"
    """
    segments = text.split("_")
    head, tail = segments[0], segments[1:]
    return head + "".join(segment[:1].upper() + segment[1:] for segment in tail)


def to_pascal_case(text: str) -> str:
    """Convert snake_case text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "user_profile_settings" -> "UserProfileSettings"
    """
    camel = to_camel_case(text)
    return camel[:1].upper() + camel[1:]
