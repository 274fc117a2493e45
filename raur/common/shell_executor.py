"""
Shell command execution with logging, timeout, and debug mode support
Single seam through which RAUR launches git, makepkg, pacman and sudo
"""

import os
import signal
import subprocess
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union, Any

from raur.errors import CommandTimeoutError, ToolNotFoundError


class ShellExecutor:
    """
    Executes external commands with logging, timeout handling,
    and optional debug output
    """

    def __init__(self, debug_mode: bool = False, default_timeout: Optional[float] = None):
        """
        Initialize ShellExecutor

        Args:
            debug_mode: If True, log every command with its output and exit code
            default_timeout: Default command timeout in seconds (None waits forever)
        """
        self.debug_mode = debug_mode
        self.default_timeout = default_timeout
        self.logger = logging.getLogger(__name__)

    def run(
        self,
        cmd: List[str],
        cwd: Optional[Union[str, Path]] = None,
        capture: bool = True,
        sudo: bool = False,
        log_cmd: bool = False,
        timeout: Optional[float] = None,
        extra_env: Optional[Dict[str, str]] = None,
        **kwargs  # Passed through to subprocess.Popen (stderr=..., stdout=...)
    ) -> subprocess.CompletedProcess:
        """
        Run command with logging and timeout

        Args:
            cmd: Command and arguments
            cwd: Working directory
            capture: Capture stdout and stderr
            sudo: Prefix the command with sudo
            log_cmd: Log command details at INFO
            timeout: Command timeout in seconds (defaults to self.default_timeout)
            extra_env: Additional environment variables, e.g. {'LC_ALL': 'C'}
            **kwargs: Additional arguments passed to subprocess.Popen

        Returns:
            subprocess.CompletedProcess with decoded string output

        Raises:
            ToolNotFoundError: The program could not be launched
            CommandTimeoutError: Command timed out; its whole process group was killed
        """
        if timeout is None:
            timeout = self.default_timeout

        if sudo:
            cmd = ['sudo'] + list(cmd)

        cmd_str = ' '.join(cmd)

        if log_cmd or self.debug_mode:
            self._log_command(cmd_str, log_cmd)

        env = os.environ.copy()
        if extra_env:
            env.update(extra_env)

        popen_kwargs: Dict[str, Any] = {
            'cwd': Path(cwd) if cwd else None,
            'env': env,
            'text': True,  # Always return strings, not bytes
            'encoding': 'utf-8',
            'errors': 'ignore',
        }
        if capture:
            popen_kwargs['stdout'] = subprocess.PIPE
            popen_kwargs['stderr'] = subprocess.PIPE
        popen_kwargs.update(kwargs)

        # A timed command gets its own session so a timeout can kill everything
        # it spawned. Untimed commands stay on the terminal (sudo prompts, Ctrl-C).
        if timeout is not None:
            popen_kwargs['start_new_session'] = True

        return self._run_direct(cmd, cmd_str, timeout, popen_kwargs, log_cmd)

    def _log_command(self, cmd: str, log_cmd: bool) -> None:
        """Log command execution details"""
        if log_cmd:
            self.logger.info(f"RUNNING COMMAND: {cmd}")
        else:
            self.logger.debug(f"RUNNING COMMAND: {cmd}")

    def _log_output(self, result: subprocess.CompletedProcess, log_cmd: bool) -> None:
        """Log command output based on debug mode"""
        stdout = self._ensure_string(result.stdout)
        stderr = self._ensure_string(result.stderr)

        if self.debug_mode:
            if stdout:
                self.logger.debug(f"STDOUT:\n{stdout}")
            if stderr:
                self.logger.debug(f"STDERR:\n{stderr}")
            self.logger.debug(f"EXIT CODE: {result.returncode}")
        elif log_cmd:
            if stdout:
                self.logger.info(f"STDOUT: {stdout[:500]}")
            if stderr:
                self.logger.info(f"STDERR: {stderr[:500]}")
            self.logger.info(f"EXIT CODE: {result.returncode}")

    def _ensure_string(self, value: Any) -> str:
        """Ensure value is a string, decoding bytes if necessary"""
        if value is None:
            return ""
        elif isinstance(value, str):
            cleaned = value.strip()
            # Drop control characters except newlines and tabs
            return ''.join(char for char in cleaned if ord(char) >= 32 or char in '\n\t')
        elif isinstance(value, bytes):
            return value.decode('utf-8', errors='ignore').strip()
        else:
            return str(value).strip()

    def _kill_process_group(self, process: subprocess.Popen) -> None:
        """Kill a timed-out command together with every child it started"""
        try:
            os.killpg(process.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass

    def _run_direct(
        self,
        cmd: List[str],
        cmd_str: str,
        timeout: Optional[float],
        popen_kwargs: Dict[str, Any],
        log_cmd: bool
    ) -> subprocess.CompletedProcess:
        """Run command and normalize its output"""
        try:
            process = subprocess.Popen(cmd, **popen_kwargs)
        except FileNotFoundError as e:
            raise ToolNotFoundError(cmd[0]) from e

        with process:
            try:
                stdout, stderr = process.communicate(timeout=timeout)
            except subprocess.TimeoutExpired as e:
                self._kill_process_group(process)
                process.communicate()
                self.logger.error(f"⚠️ Command timed out after {timeout} seconds: {cmd_str}")
                raise CommandTimeoutError(cmd_str, timeout) from e
            except BaseException:
                # Ctrl-C and friends: don't leave the child behind
                process.kill()
                raise

        result = subprocess.CompletedProcess(cmd, process.returncode, stdout=stdout, stderr=stderr)

        # Ensure stdout/stderr are clean strings
        if result.stdout is not None:
            result.stdout = self._ensure_string(result.stdout)
        if result.stderr is not None:
            result.stderr = self._ensure_string(result.stderr)

        if log_cmd or self.debug_mode:
            self._log_output(result, log_cmd)

        return result
