"""
Orchestrator
"""
from .package_manager import PackageManager, EXIT_OK, EXIT_BUILD_FAILED

__all__ = ['PackageManager', 'EXIT_OK', 'EXIT_BUILD_FAILED']
