"""
Common utilities
"""
from .logging_utils import setup_logging, get_logger
from .shell_executor import ShellExecutor
from .config_loader import ConfigLoader

__all__ = [
    'setup_logging',
    'get_logger',
    'ShellExecutor',
    'ConfigLoader'
]
