"""
RAUR - Arch User Repository helper
"""

__version__ = "1.0.1"
