"""
String utility functions for acf-blocks.

Provides the name transformations used to derive keys, block identifiers
and category titles.
"""

from __future__ import annotations

import re

# Underscores, hyphens and spaces all become word separators in kebab case
_KEBAB_SEPARATORS = re.compile(r"[_\- ]")

_WORD_START = re.compile(r"(^|\s)(\S)")


def to_kebab_case(value: str) -> str:
    """
    Convert a name to kebab case.

    The value is lowercased and every underscore, hyphen or space is
    replaced by a hyphen. Applying it twice gives the same result as
    applying it once.

    Args:
        value: Name to convert

    Returns:
        Kebab case representation of the name

    Examples:
        >>> to_kebab_case("Hero Banner")
        'hero-banner'
        >>> to_kebab_case("hello_world")
        'hello-world'
        >>> to_kebab_case("hello-world")
        'hello-world'
    """
    return _KEBAB_SEPARATORS.sub("-", value.lower())


def to_user_friendly_case(value: str) -> str:
    """
    Convert a name to a user friendly title.

    Underscores become spaces and the first letter of every word is
    uppercased. The rest of each word is left untouched.

    Examples:
        >>> to_user_friendly_case("call_to_action")
        'Call To Action'
        >>> to_user_friendly_case("layout")
        'Layout'
    """
    spaced = value.replace("_", " ")
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)
