"""
Utility Module

Configuration and logging helpers.
"""

from review_filter.utils.config import (
    Config,
    get_config,
    reset_config,
    get_filter_config,
    get_api_config
)

from review_filter.utils.logging import setup_logging

__all__ = [
    'Config',
    'get_config',
    'reset_config',
    'get_filter_config',
    'get_api_config',
    'setup_logging',
]
