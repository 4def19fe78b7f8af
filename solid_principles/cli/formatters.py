"""
CLI formatting functions for command results.

Example commands print their own console line; these formatters only render
the structured results some commands return (areas, capability lists).
"""

import json
from typing import Any

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain ``key: value`` lines."""
    if isinstance(data, dict):
        lines = []
        for key, value in data.items():
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(item) for item in value)
            lines.append(f"{key}: {value}")
        return "\n".join(lines)
    elif isinstance(data, (list, tuple)):
        return "\n".join(str(item) for item in data)
    return str(data)
