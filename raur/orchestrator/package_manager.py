"""
RAUR Orchestrator
Sequences the per-package workflows:
  install: AUR lookup -> clone -> makepkg -> diagnostics
  update:  pacman -Q -> AUR lookup -> compare -> install
  remove:  sudo pacman -Rns
"""

import logging
from typing import Dict, Any, Optional

from raur import config as defaults
from raur.aur.rpc_client import AURClient
from raur.build.aur_builder import AURBuilder
from raur.build.workspace import build_workspace
from raur.common.shell_executor import ShellExecutor
from raur.gpg.diagnostics import diagnose_build_failure
from raur.pacman.local_db import LocalPackageDB

EXIT_OK = 0
EXIT_BUILD_FAILED = 1


class PackageManager:
    """Orchestrator for install, update and remove"""

    def __init__(
        self,
        config: Dict[str, Any],
        shell_executor: Optional[ShellExecutor] = None,
        aur_client: Optional[AURClient] = None,
        local_db: Optional[LocalPackageDB] = None,
        builder: Optional[AURBuilder] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        self.shell_executor = shell_executor or ShellExecutor(config.get('debug', False))
        self.aur_client = aur_client or AURClient(config, self.logger)
        self.local_db = local_db or LocalPackageDB(self.shell_executor, self.logger)
        self.builder = builder or AURBuilder(config, self.shell_executor, self.logger)

    @property
    def skip_pgp_check(self) -> bool:
        return bool(self.config.get('skip_pgp_check', False))

    def install(self, pkg_name: str) -> int:
        """
        Look up, clone, build and install a package from AUR

        Returns:
            EXIT_BUILD_FAILED if makepkg failed, EXIT_OK otherwise
        """
        self.logger.info(f"Checking AUR for `{pkg_name}`...")

        info = self.aur_client.info(pkg_name)
        if info is None:
            self.logger.warning(f"Package `{pkg_name}` not found in the AUR.")
            return EXIT_OK

        self.logger.info(f"Found `{info.name}` (v{info.version}): {info.description or 'No description'}")

        with build_workspace(self.config.get('workspace_prefix', defaults.WORKSPACE_PREFIX)) as workspace:
            repo_path = workspace / info.name

            self.logger.info(f"Cloning into temp directory: {repo_path}")
            if not self.builder.clone(info.name, repo_path):
                self.logger.error("`git clone` failed")
                return EXIT_OK

            self.logger.info(f"Running `{' '.join(self.builder.makepkg_command(self.skip_pgp_check))}`...")
            outcome = self.builder.build(repo_path, self.skip_pgp_check)

            if outcome.success:
                self.logger.info(f"Done installing `{info.name}`!")
                return EXIT_OK

            self.logger.error(f"`makepkg` failed for `{info.name}`")
            advice = diagnose_build_failure(outcome.stderr, info.name)
            if advice:
                self.logger.error(advice)
            return EXIT_BUILD_FAILED

    def update(self, pkg_name: str) -> int:
        """
        Reinstall a package if AUR has a different version than pacman reports

        Versions are compared as exact strings, not ordered.
        """
        self.logger.info(f"Checking installed version for `{pkg_name}`...")

        installed_version = self.local_db.installed_version(pkg_name)
        if installed_version is None:
            self.logger.info(f"`{pkg_name}` is not installed. Use `raur install {pkg_name}` instead")
            return EXIT_OK

        self.logger.info(f"Installed version: {installed_version}")

        info = self.aur_client.info(pkg_name)
        if info is None:
            self.logger.warning(f"Package `{pkg_name}` not found in AUR")
            return EXIT_OK

        self.logger.info(f"AUR version: {info.version}")

        if info.version == installed_version:
            self.logger.info(f"`{pkg_name}` is already up to date!")
            return EXIT_OK

        self.logger.info(f"Update available! Updating `{pkg_name}`...")
        return self.install(pkg_name)

    def remove(self, pkg_name: str) -> int:
        """Remove a package through pacman; failure is reported, not fatal"""
        if self.local_db.remove(pkg_name):
            self.logger.info(f"Package `{pkg_name}` removed successfully!")
        else:
            self.logger.error(f"Failed to remove package `{pkg_name}`")
        return EXIT_OK
