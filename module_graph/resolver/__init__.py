"""Module resolution and its filesystem collaborators."""

from __future__ import annotations

from module_graph.resolver.base import FileSystem, ResolutionError
from module_graph.resolver.builtins import NODE_BUILTINS, is_node_builtin
from module_graph.resolver.node_fs import NodeFileSystem
from module_graph.resolver.resolve import append_suffix, resolve

__all__ = [
    "FileSystem",
    "NodeFileSystem",
    "NODE_BUILTINS",
    "ResolutionError",
    "append_suffix",
    "is_node_builtin",
    "resolve",
]
