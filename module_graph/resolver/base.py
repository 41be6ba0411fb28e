"""Abstract filesystem collaborator used by the resolver and warning deriver."""

from __future__ import annotations

import abc
import logging
import os

from module_graph.models import FileStat

logger = logging.getLogger(__name__)


class ResolutionError(OSError):
    """A filesystem failure other than "not found", raised in strict mode."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Cannot access {path}: {cause.strerror or cause}")
        self.errno = cause.errno
        self.path = path
        self.cause = cause


class FileSystem(abc.ABC):
    """Narrow I/O interface behind module resolution."""

    @abc.abstractmethod
    def stat(self, path: str) -> FileStat:
        """Stat ``path``. Raises ``OSError`` when it cannot be stat'ed."""

    @abc.abstractmethod
    def read_manifest(self, path: str) -> dict:
        """Read a package manifest. Raises ``OSError`` or ``ValueError``."""

    @abc.abstractmethod
    def module_paths(self, context: str) -> list[str]:
        """Package search roots visible from ``context``, nearest first."""

    @abc.abstractmethod
    def find_builtin(self, name: str) -> bool:
        """Whether ``name`` is a module provided by the runtime itself."""

    def safe_stat(self, path: str, strict: bool = False) -> FileStat | None:
        """Stat ``path``, returning ``None`` when it is missing.

        Other ``OSError``s are logged and treated as missing, or raised as
        ``ResolutionError`` when ``strict`` is set.
        """
        try:
            return self.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return None
        except OSError as e:
            if strict:
                raise ResolutionError(path, e) from e
            logger.warning("Treating %s as missing: %s", path, e)
            return None

    def find_manifest_for(
        self, name: str, search_roots: list[str], strict: bool = False,
    ) -> str | None:
        """Return the first existing ``<root>/<name>/package.json``."""
        for root in search_roots:
            candidate = os.path.join(root, name, "package.json")
            st = self.safe_stat(candidate, strict)
            if st is not None and st.is_file:
                return candidate
        return None
