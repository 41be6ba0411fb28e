"""Local-disk filesystem collaborator following Node's node_modules lookup."""

from __future__ import annotations

import json
import os
import stat as stat_mod

from module_graph.models import FileStat
from module_graph.resolver.base import FileSystem
from module_graph.resolver.builtins import is_node_builtin


class NodeFileSystem(FileSystem):

    def stat(self, path: str) -> FileStat:
        mode = os.stat(path).st_mode
        return FileStat(is_file=stat_mod.S_ISREG(mode), is_directory=stat_mod.S_ISDIR(mode))

    def read_manifest(self, path: str) -> dict:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"Manifest is not an object: {path}")
        return data

    def module_paths(self, context: str) -> list[str]:
        paths: list[str] = []
        current = os.path.abspath(context)
        while True:
            if os.path.basename(current) != "node_modules":
                paths.append(os.path.join(current, "node_modules"))
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        return paths

    def find_builtin(self, name: str) -> bool:
        return is_node_builtin(name)
