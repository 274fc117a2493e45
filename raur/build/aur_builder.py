"""
AUR Builder Module
Clones a package's build scripts from AUR and runs makepkg on them.
"""
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, List

from raur import config as defaults
from raur.common.shell_executor import ShellExecutor


@dataclass(frozen=True)
class BuildOutcome:
    """Result of one makepkg run; stderr is kept for failure diagnostics"""
    success: bool
    stderr: str = ""
    returncode: int = 0


class AURBuilder:
    """Builds and installs AUR packages using git and makepkg"""

    def __init__(self, config: Dict[str, Any], shell_executor: ShellExecutor, logger: Optional[logging.Logger] = None):
        self.config = config
        self.shell_executor = shell_executor
        self.logger = logger or logging.getLogger(__name__)
        self.aur_url = config.get('aur_url', defaults.AUR_URL)

    def repo_url(self, pkg_name: str) -> str:
        """Git URL of a package's build-script repository"""
        return defaults.AUR_GIT_URL_TEMPLATE.format(aur_url=self.aur_url, pkg_name=pkg_name)

    def build_env(self) -> Dict[str, str]:
        """makepkg runs in the C locale so its error messages can be matched"""
        return {'LC_ALL': 'C'}

    def makepkg_command(self, skip_pgp_check: bool = False) -> List[str]:
        cmd = ["makepkg"] + defaults.MAKEPKG_FLAGS
        if skip_pgp_check:
            cmd.append(defaults.MAKEPKG_SKIP_PGP_FLAG)
        return cmd

    def clone(self, pkg_name: str, dest: Path) -> bool:
        """
        Clone the AUR repository of a package into dest

        Returns:
            True if git exited successfully
        """
        clone_cmd = ["git", "clone", self.repo_url(pkg_name), str(dest)]
        clone_res = self.shell_executor.run(
            clone_cmd,
            timeout=self.config.get('clone_timeout', defaults.CLONE_TIMEOUT),
        )
        if clone_res.returncode != 0:
            self.logger.debug(f"git clone stderr: {clone_res.stderr}")
            return False
        return True

    def build(self, pkg_dir: Path, skip_pgp_check: bool = False) -> BuildOutcome:
        """
        Run makepkg in a cloned package directory

        makepkg's stdout goes straight to the terminal; stderr is captured
        whatever the outcome.
        """
        result = self.shell_executor.run(
            self.makepkg_command(skip_pgp_check),
            cwd=pkg_dir,
            capture=False,
            stderr=subprocess.PIPE,
            timeout=self.config.get('makepkg_timeout', defaults.MAKEPKG_TIMEOUT),
            extra_env=self.build_env(),
        )

        if result.returncode == 0:
            return BuildOutcome(success=True, stderr=result.stderr or "")
        return BuildOutcome(success=False, stderr=result.stderr or "", returncode=result.returncode)
