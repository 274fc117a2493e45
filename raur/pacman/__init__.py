"""
Pacman integration
"""
from .local_db import LocalPackageDB, parse_query_output

__all__ = ['LocalPackageDB', 'parse_query_output']
