"""Thousands-delimited number formatting.

Formats a number into a string with grouped thousands using ``delimiter`` and a
fixed number of decimal places after ``separator``.

Options (keyword arguments to :func:`number_to_delimited`):
- ``precision``: number of decimal places to include. Default: 2
- ``delimiter``: string used to delimit the integer part by thousands. Default: ","
- ``separator``: string between the integer part and the decimals. Default: "."

Process-wide defaults for these options come from settings
(``NUMBER_DELIMIT_*`` environment variables) and are overridden per call.

Rules:
- ``None`` passes through unchanged
- Values typed as ``int`` never get decimals, whatever the precision
- Zero precision drops the separator as well as the decimals

Examples:
>>> number_to_delimited(998.999)
'999.00'
>>> number_to_delimited(-234234.234)
'-234,234.23'
>>> number_to_delimited(12345678)
'12,345,678'
>>> number_to_delimited(12345678, delimiter=".")
'12.345.678'
>>> number_to_delimited(12345678.05, separator=" ")
'12,345,678 05'
>>> number_to_delimited(98765432.98, delimiter=" ", separator=",")
'98 765 432,98'
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Any, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from number_delimit.config.settings import Settings, get_settings
from number_delimit.utils.conversion import Number, normalize
from number_delimit.utils.errors import InvalidOptionsError

# Wraps a stdlib logger so events obey logging levels even before configure_logging()
logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "delimiter": ",",
    "separator": ".",
    "precision": 2,
})

__all__ = [
    "DEFAULT_OPTIONS",
    "FormatOptions",
    "resolve_options",
    "delimit_integer",
    "isolate_decimals",
    "number_to_delimited",
]


class FormatOptions(BaseModel):
    """Fully resolved formatting options."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    delimiter: StrictStr
    separator: StrictStr
    precision: StrictInt = Field(ge=0)


def resolve_options(overrides: Optional[Mapping[str, Any]] = None,
                    settings: Optional[Settings] = None) -> FormatOptions:
    """Layer caller overrides over configured defaults over built-in defaults.

    Keys missing from a layer (or passed as ``None``) fall through to the
    layer below.
    """
    if settings is None:
        settings = get_settings()
    merged = dict(DEFAULT_OPTIONS)
    merged.update(settings.get_defaults("number", "delimit"))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return FormatOptions(**merged)
    except ValidationError as exc:
        raise InvalidOptionsError(
            "Invalid formatting options", details=exc.errors(include_url=False)) from exc


def delimit_integer(number: int, delimiter: str) -> str:
    """Group the digits of ``abs(number)`` in threes from the right."""
    digits = str(abs(number))
    # Leading group holds the 1-3 digits left over on the most significant side
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    for start in range(head, len(digits), 3):
        groups.append(digits[start:start + 3])
    return delimiter.join(groups)


def isolate_decimals(number: float, precision: int) -> str:
    """Return exactly ``precision`` fractional digits of an already rounded value."""
    if precision == 0:
        return ''
    fraction = number - math.trunc(number)
    # '%.*f' zero-pads on the right; sign and '0.' prefix are dropped
    formatted = '%.*f' % (precision, fraction)
    return formatted.split('.', 1)[1]


def _delimit_float(magnitude: float, options: FormatOptions) -> str:
    rounded = round(magnitude, options.precision)
    integer = delimit_integer(math.trunc(rounded), options.delimiter)
    if options.precision == 0:
        return integer
    return integer + options.separator + isolate_decimals(rounded, options.precision)


def number_to_delimited(number: Optional[Number],
                        settings: Optional[Settings] = None,
                        **options: Any) -> Optional[str]:
    """Format ``number`` with grouped thousands and fixed decimals.

    ``settings`` replaces the process-wide settings for this call; remaining
    keyword arguments are option overrides (``delimiter``, ``separator``,
    ``precision``).
    """
    if number is None:
        return None
    resolved = resolve_options(options, settings)
    numeric = normalize(number)
    prefix = '-' if numeric.negative else ''
    if numeric.is_exact_integer:
        delimited = delimit_integer(numeric.value, resolved.delimiter)
    else:
        delimited = _delimit_float(abs(numeric.value), resolved)
    result = prefix + delimited
    logger.debug(
        "number_delimited",
        number=str(number),
        input_type=type(number).__name__,
        exact_integer=numeric.is_exact_integer,
        result=result,
        **resolved.model_dump(),
    )
    return result
