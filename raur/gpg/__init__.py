"""
GPG / PGP helpers
"""
from .diagnostics import diagnose_build_failure, extract_missing_key, PGP_FAILURE_MARKER

__all__ = ['diagnose_build_failure', 'extract_missing_key', 'PGP_FAILURE_MARKER']
