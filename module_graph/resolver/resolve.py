"""Node-style module resolution: suffix search, directory index, packages."""

from __future__ import annotations

import logging
import os

from module_graph.models import DEFAULT_EXTENSIONS
from module_graph.resolver.base import FileSystem
from module_graph.resolver.node_fs import NodeFileSystem

logger = logging.getLogger(__name__)

_default_fs = NodeFileSystem()


def append_suffix(
    request: str,
    extensions: list[str],
    fs: FileSystem | None = None,
    strict: bool = False,
) -> str | None:
    """Return the first ``request + suffix`` that is a file, else try ``request/index``."""
    fs = fs or _default_fs
    if "" not in extensions:
        extensions = ["", *extensions]

    for ext in extensions:
        st = fs.safe_stat(request + ext, strict)
        if st is not None and st.is_file:
            return request + ext

    st = fs.safe_stat(request, strict)
    if st is not None and st.is_directory:
        return append_suffix(os.path.join(request, "index"), extensions, fs, strict)
    return None


def resolve(
    context: str,
    request: str,
    extensions: list[str] | None = None,
    fs: FileSystem | None = None,
    strict: bool = False,
) -> str | None:
    """Resolve ``request`` issued from directory ``context`` to a file path.

    Absolute and ``.``-relative requests go straight to suffix resolution.
    Anything else is a package name: the manifest's ``module`` entry wins
    over ``main``; when neither resolves, each search root is tried as a
    plain path. Returns ``None`` for builtins and missing modules.
    """
    fs = fs or _default_fs
    if extensions is None:
        extensions = DEFAULT_EXTENSIONS

    if os.path.isabs(request):
        return append_suffix(request, extensions, fs, strict)
    if request.startswith("."):
        return append_suffix(os.path.normpath(os.path.join(context, request)), extensions, fs, strict)

    # is package
    search_roots = fs.module_paths(context)
    manifest_path = fs.find_manifest_for(request, search_roots, strict)
    if manifest_path is not None:
        entry = _manifest_entry(fs, manifest_path)
        if entry:
            target = os.path.normpath(os.path.join(os.path.dirname(manifest_path), entry))
            found = append_suffix(target, extensions, fs, strict)
            if found is not None:
                return found

    for root in search_roots:
        found = append_suffix(os.path.join(root, request), extensions, fs, strict)
        if found is not None:
            return found
    return None


def _manifest_entry(fs: FileSystem, manifest_path: str) -> str | None:
    try:
        manifest = fs.read_manifest(manifest_path)
    except (OSError, ValueError) as e:
        logger.debug("Unreadable manifest %s: %s", manifest_path, e)
        return None
    for key in ("module", "main"):
        value = manifest.get(key)
        if isinstance(value, str) and value:
            return value
    return None
