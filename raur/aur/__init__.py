"""
AUR metadata
"""
from .rpc_client import AURClient, PackageInfo

__all__ = ['AURClient', 'PackageInfo']
