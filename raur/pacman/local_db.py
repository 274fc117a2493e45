"""
Local pacman database access
Read-only queries for installed packages, plus delegated removal.
"""
import logging
from typing import Optional

from raur import config as defaults
from raur.common.shell_executor import ShellExecutor


def parse_query_output(output: str) -> Optional[str]:
    """
    Parse `pacman -Q <name>` output into the installed version.

    Assumes the first line is "<name> <version>" separated by whitespace.
    Anything with fewer than two fields is reported as not installed; the
    caller cannot tell that apart from a package that really is absent.
    """
    lines = output.splitlines()
    if not lines:
        return None

    parts = lines[0].split()
    if len(parts) < 2:
        return None
    return parts[1]


class LocalPackageDB:
    """Narrow interface over the system package database"""

    def __init__(self, shell_executor: ShellExecutor, logger: Optional[logging.Logger] = None):
        self.shell_executor = shell_executor
        self.logger = logger or logging.getLogger(__name__)

    def installed_version(self, pkg_name: str) -> Optional[str]:
        """
        Get the installed version of a package, queried fresh every call

        Returns:
            Version string, or None if not installed
        """
        result = self.shell_executor.run(["pacman", "-Q", pkg_name])
        if result.returncode != 0 or not result.stdout:
            self.logger.debug(f"pacman -Q {pkg_name} exited {result.returncode}")
            return None
        return parse_query_output(result.stdout)

    def remove(self, pkg_name: str) -> bool:
        """Remove a package and its now-unneeded dependencies via sudo pacman"""
        result = self.shell_executor.run(
            ["pacman"] + defaults.PACMAN_REMOVE_FLAGS + [pkg_name],
            capture=False,
            sudo=True,
        )
        return result.returncode == 0
