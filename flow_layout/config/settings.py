"""
Configuration, Engine Defaults and Feature Flags

This module provides the default flow layout options and feature flags used
by the MCP tools and server. Values are controlled via environment variables
so hosts can tune the layout without code changes.

Usage:
    from flow_layout.config.settings import get_default_options, is_enabled

    engine = FlowLayoutEngine(FlowLayoutOptions(**get_default_options()))

    if is_enabled('include_row_count'):
        data["row_count"] = layout.row_count

Environment Variables:
    FLOW_LAYOUT_DIRECTION=forward|reverse
    FLOW_LAYOUT_HORIZONTAL_ALIGNMENT=leading|center|trailing
    FLOW_LAYOUT_VERTICAL_ALIGNMENT=top|center|bottom
    FLOW_LAYOUT_HORIZONTAL_SPACING=<number>
    FLOW_LAYOUT_VERTICAL_SPACING=<number>
    FLOW_LAYOUT_INCLUDE_ROW_COUNT=true/false - Include row_count in tool responses
    FLOW_LAYOUT_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR - Server log level

Option values are kept as raw strings here; they are validated when an
engine is built from them, so a bad value fails at that point with a
pydantic ValidationError naming the offending option.
"""

import os
from typing import Dict


# Engine option defaults with environment variable overrides
DEFAULT_OPTIONS: Dict[str, str] = {
    'direction': os.getenv('FLOW_LAYOUT_DIRECTION', 'forward').lower(),
    'horizontal_alignment': os.getenv('FLOW_LAYOUT_HORIZONTAL_ALIGNMENT', 'leading').lower(),
    'vertical_alignment': os.getenv('FLOW_LAYOUT_VERTICAL_ALIGNMENT', 'top').lower(),
    'horizontal_spacing': os.getenv('FLOW_LAYOUT_HORIZONTAL_SPACING', '0'),
    'vertical_spacing': os.getenv('FLOW_LAYOUT_VERTICAL_SPACING', '0'),
}

# Feature flags with environment variable overrides
FEATURE_FLAGS: Dict[str, bool] = {
    # Tool responses report how many rows the items wrapped into
    'include_row_count': os.getenv('FLOW_LAYOUT_INCLUDE_ROW_COUNT', 'true').lower() == 'true',
}

LOG_LEVEL: str = os.getenv('FLOW_LAYOUT_LOG_LEVEL', 'INFO').upper()


def get_default_options() -> Dict[str, str]:
    """
    Get the default engine option values.

    Returns:
        Copy of the option name -> raw value mapping

    Example:
        >>> get_default_options()
        {
            'direction': 'forward',
            'horizontal_alignment': 'leading',
            'vertical_alignment': 'top',
            'horizontal_spacing': '0',
            'vertical_spacing': '0'
        }
    """
    return DEFAULT_OPTIONS.copy()


def is_enabled(flag: str) -> bool:
    """
    Check if a feature flag is enabled.

    Args:
        flag: Feature flag name (e.g., 'include_row_count')

    Returns:
        True if flag is enabled, False otherwise

    Raises:
        KeyError: If flag name is not recognized
    """
    if flag not in FEATURE_FLAGS:
        available = ', '.join(FEATURE_FLAGS.keys())
        raise KeyError(
            f"Unknown feature flag: '{flag}'. "
            f"Available flags: {available}"
        )

    return FEATURE_FLAGS[flag]


def get_all_flags() -> Dict[str, bool]:
    """
    Get all feature flags and their current state.

    Returns:
        Dictionary of flag names to boolean values
    """
    return FEATURE_FLAGS.copy()


def set_flag(flag: str, enabled: bool) -> None:
    """
    Programmatically set a feature flag (for testing only).

    Args:
        flag: Feature flag name
        enabled: True to enable, False to disable

    Warning:
        This is for testing only. In production, use environment variables.

    Example:
        >>> set_flag('include_row_count', False)
        >>> is_enabled('include_row_count')
        False
    """
    if flag not in FEATURE_FLAGS:
        available = ', '.join(FEATURE_FLAGS.keys())
        raise KeyError(
            f"Unknown feature flag: '{flag}'. "
            f"Available flags: {available}"
        )

    FEATURE_FLAGS[flag] = enabled
