#!/usr/bin/env python3
"""Capitalization helpers for generated names."""


def capitalize_string(s: str) -> str:
    """
    Uppercase the first character of a string.

    Unlike `str.capitalize`, the remaining characters are left untouched.
    """
    return s[:1].upper() + s[1:]


capitalize = capitalize_string


def capitalize_each_substring(s: str, sep: str = ' ') -> str:
    """
    Capitalize all the substrings contained in a string.

    `sep` is the separator used to recognize substrings; it must be
    non-empty:

        >>> capitalize_each_substring("hi who are you?")
        'Hi Who Are You?'
        >>> capitalize_each_substring("hi,who", ",")
        'Hi,Who'
    """
    return sep.join(capitalize_string(part) for part in s.split(sep))
