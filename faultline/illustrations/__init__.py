"""
Illustrative fallible operations, in unchecked and checked forms.
"""

from .fallible import (
    divide,
    divide_safe,
    get_element,
    get_element_safe,
    get_nested_value,
    parse_and_double,
    parse_and_double_safe,
    parse_int32,
    read_config_file,
    read_config_file_safe,
    unwrap,
)

__all__ = [
    "divide",
    "divide_safe",
    "get_element",
    "get_element_safe",
    "get_nested_value",
    "parse_and_double",
    "parse_and_double_safe",
    "parse_int32",
    "read_config_file",
    "read_config_file_safe",
    "unwrap",
]
