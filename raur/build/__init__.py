"""
Build Modules
"""
from .aur_builder import AURBuilder, BuildOutcome
from .workspace import build_workspace

__all__ = ['AURBuilder', 'BuildOutcome', 'build_workspace']
