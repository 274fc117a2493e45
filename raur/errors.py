"""
Exception hierarchy for RAUR

Everything raised here is fatal for the current command: the CLI reports it
and exits with a distinct status. Expected outcomes such as "package not
found" are never exceptions.
"""


class RaurError(Exception):
    """Base class for all RAUR errors"""


class ConfigError(RaurError):
    """Configuration file could not be read or has the wrong shape"""


class MetadataError(RaurError):
    """AUR RPC request failed or returned an unusable response"""


class WorkspaceError(RaurError):
    """Temporary build directory could not be created"""


class ToolNotFoundError(RaurError):
    """A required external program could not be launched"""

    def __init__(self, tool: str):
        super().__init__(f"Required program `{tool}` was not found in PATH")
        self.tool = tool


class CommandTimeoutError(RaurError):
    """External program ran past its configured timeout"""

    def __init__(self, cmd: str, timeout: float):
        super().__init__(f"Command timed out after {timeout} seconds: {cmd}")
        self.cmd = cmd
        self.timeout = timeout
