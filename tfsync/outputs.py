"""
Formatting of Terraform state version outputs.

Outputs are saved as strings (ConfigMap) or bytes (Secret), so every
value has to be turned into text first. Terraform types:
https://developer.hashicorp.com/terraform/language/expressions/types

A `null` output is never returned by the remote service, so it is not
handled separately.
"""

import json
import math
from typing import Any


def _format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _normalize(value: Any) -> Any:
    """Turn integral floats into ints at any depth so nested numbers print like top-level ones."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def format_output(value: Any) -> str:
    """
    Convert an output value to its string form.

    Args:
        value: Decoded JSON value of the output

    Returns:
        "true"/"false" for booleans, plain text for numbers and strings,
        compact JSON for lists and maps

    Raises:
        TypeError: If the value cannot be serialised to JSON
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, str):
        return value
    return json.dumps(_normalize(value), separators=(",", ":"), sort_keys=True, ensure_ascii=False)
