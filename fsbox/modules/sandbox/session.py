"""Sandbox session: the movable root every tool path is resolved against."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from fsbox.core.log_sanitizer import sanitize_for_logging
from fsbox.domain.errors import InvalidArgumentError, IOFailureError, NotFoundError

logger = logging.getLogger(__name__)


class SandboxSession:
    """Holds the current root directory for one server process.

    The root is stored as given (possibly relative) until ``set_root``
    replaces it with an absolute path. There is no locking; a session is
    meant to serve one caller at a time.
    """

    def __init__(self, root: Union[str, Path]):
        self._root = str(root)

    @classmethod
    def from_settings(cls, settings=None) -> "SandboxSession":
        """Create a session rooted at the configured base directory."""
        if settings is None:
            from fsbox.modules.config import config_manager

            settings = config_manager.app_settings
        return cls(settings.base_dir)

    @property
    def root(self) -> str:
        return self._root

    def ensure_root(self) -> Path:
        """Create the root directory if it is missing. Idempotent."""
        root = Path(self._root)
        if not root.exists():
            logger.info(f"Creating missing base directory: {sanitize_for_logging(self._root)}")
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailureError(f"Cannot create base directory '{self._root}': {e}") from e
        return root

    def set_root(self, directory: str, cwd: Optional[Union[str, Path]] = None) -> str:
        """Point the session at a new, already existing directory.

        ``directory`` is resolved against ``cwd`` (the process working
        directory by default), not against the current root. The root is
        left unchanged when validation fails.

        Returns:
            The new absolute root.

        Raises:
            NotFoundError: If the directory does not exist.
            InvalidArgumentError: If the path exists but is not a directory.
        """
        base = Path(cwd) if cwd is not None else Path(os.getcwd())
        try:
            resolved = (base / directory).resolve()
        except (OSError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid directory '{directory}': {e}") from None

        if not resolved.exists():
            raise NotFoundError(f"Directory '{resolved}' does not exist")
        if not resolved.is_dir():
            raise InvalidArgumentError(f"'{resolved}' is not a directory")
        if not os.access(resolved, os.R_OK | os.X_OK):
            raise InvalidArgumentError(f"Directory '{resolved}' is not accessible")

        previous = self._root
        self._root = str(resolved)
        logger.info(
            "Base directory changed from %s to %s",
            sanitize_for_logging(previous),
            sanitize_for_logging(self._root),
        )
        return self._root

    def __repr__(self) -> str:
        return f"SandboxSession(root={self._root!r})"
