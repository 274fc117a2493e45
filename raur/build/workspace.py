"""
Ephemeral build workspaces
"""
import shutil
import tempfile
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from raur import config as defaults
from raur.errors import WorkspaceError

logger = logging.getLogger(__name__)


@contextmanager
def build_workspace(prefix: str = defaults.WORKSPACE_PREFIX) -> Iterator[Path]:
    """
    Create a uniquely named temporary directory for one build.

    The directory and everything cloned or built inside it are removed when
    the with-block exits, however it exits.
    """
    try:
        path = Path(tempfile.mkdtemp(prefix=prefix))
    except OSError as e:
        raise WorkspaceError(f"Failed to create temp directory: {e}") from e

    logger.debug(f"Created workspace {path}")
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        logger.debug(f"Removed workspace {path}")
