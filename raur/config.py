"""
Configuration defaults for RAUR
Central source of truth for all configuration values.
"""

import os
from pathlib import Path

# --- AUR ENDPOINTS ---
# Base URL of the AUR web/RPC/git host
AUR_URL = os.getenv("RAUR_AUR_URL", "https://aur.archlinux.org").rstrip("/")

# RPC interface version used for info queries
AUR_RPC_VERSION = 5

# Build-script repository for a package
# e.g., "https://aur.archlinux.org" + "yay-bin" -> "https://aur.archlinux.org/yay-bin.git"
AUR_GIT_URL_TEMPLATE = "{aur_url}/{pkg_name}.git"

# --- PATHS ---
_xdg_config_home = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")

# User configuration file (YAML), overridable for testing and packaging
CONFIG_FILE = os.getenv("RAUR_CONFIG", os.path.join(_xdg_config_home, "raur", "config.yaml"))

# Optional log file; empty means console only
LOG_FILE = os.getenv("RAUR_LOG_FILE", "")

# Prefix for per-operation temporary build directories
WORKSPACE_PREFIX = "raur_"

# --- BUILD CONFIGURATION ---
# makepkg: build, install, don't ask
MAKEPKG_FLAGS = ["-si", "--noconfirm"]
MAKEPKG_SKIP_PGP_FLAG = "--skippgpcheck"

# pacman: remove package, its config files and now-unneeded dependencies
PACMAN_REMOVE_FLAGS = ["-Rns", "--noconfirm"]

# Timeouts (seconds); None waits for the command to finish
REQUEST_TIMEOUT = 30
CLONE_TIMEOUT = 300
MAKEPKG_TIMEOUT = None  # builds run until makepkg exits unless configured

# Signature verification is enforced unless the user opts out
SKIP_PGP_CHECK = False

# Debug mode
DEBUG_MODE = os.getenv("RAUR_DEBUG", "false").lower() == "true"
