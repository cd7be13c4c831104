"""Thousands-delimited number formatting.

>>> from number_delimit import number_to_delimited
>>> number_to_delimited(12345678.05)
'12,345,678.05'
"""
from number_delimit.config.logsetup import configure_logging
from number_delimit.config.settings import Settings, get_settings
from number_delimit.utils.conversion import NumericValue, normalize, to_float
from number_delimit.utils.delimit import (
    DEFAULT_OPTIONS,
    FormatOptions,
    delimit_integer,
    isolate_decimals,
    number_to_delimited,
    resolve_options,
)
from number_delimit.utils.errors import (
    ERROR_CODES,
    DomainError,
    InvalidNumberError,
    InvalidOptionsError,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "ERROR_CODES",
    "DomainError",
    "FormatOptions",
    "InvalidNumberError",
    "InvalidOptionsError",
    "NumericValue",
    "Settings",
    "configure_logging",
    "delimit_integer",
    "get_settings",
    "isolate_decimals",
    "normalize",
    "number_to_delimited",
    "resolve_options",
    "to_float",
]
