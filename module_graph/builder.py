"""Dependency tree builder: walks from entry files and resolves their imports."""

from __future__ import annotations

import logging
import os
from collections import deque
from typing import Callable, Iterable, Mapping, Union

from module_graph.models import Dependency, DependencyTree, ParseOptions
from module_graph.resolver import FileSystem, NodeFileSystem, resolve

logger = logging.getLogger(__name__)

# file -> raw import requests, in source order
ImportSource = Union[Mapping[str, Iterable[str]], Callable[[str], Iterable[str]]]


class DependencyTreeBuilder:
    """Build a dependency tree from entry files and an upstream import source."""

    def __init__(self, options: ParseOptions | None = None, fs: FileSystem | None = None):
        self.options = options or ParseOptions()
        self.fs = fs or NodeFileSystem()

    def build(self, entries: Iterable[str], imports: ImportSource) -> DependencyTree:
        lookup = self._lookup(imports)
        tree: DependencyTree = {}
        resolved: dict[tuple[str, str], str | None] = {}
        queue = deque(self.absolute_path(entry) for entry in entries)
        queued = set(queue)
        lost = 0

        while queue:
            module_id = queue.popleft()
            if module_id in tree:
                continue
            context = os.path.dirname(module_id)
            deps: list[Dependency] = []
            tree[module_id] = deps

            for request in lookup(module_id):
                key = (context, request)
                if key not in resolved:
                    resolved[key] = self._resolve(context, request)
                target = resolved[key]
                deps.append(Dependency(request=request, issuer=module_id, id=target))
                logger.debug("%s: %r -> %s", module_id, request, target)

                if target is None:
                    lost += 1
                elif target not in queued:
                    queued.add(target)
                    if self._should_traverse(target):
                        queue.append(target)
                    else:
                        tree[target] = None

        logger.info(
            "Built dependency tree: %d modules, %d unresolved imports",
            len(tree), lost,
        )
        return tree

    def _resolve(self, context: str, request: str) -> str | None:
        target = resolve(
            context, request, self.options.extensions, fs=self.fs, strict=self.options.strict,
        )
        if target is None and self.fs.find_builtin(request):
            # Builtins keep their request as id and stay leaves
            return request
        return target

    def _should_traverse(self, module_id: str) -> bool:
        if not os.path.isabs(module_id):
            return False
        normalized = module_id.replace(os.sep, "/")
        if self.options.exclude.search(normalized):
            return False
        return self.options.include.search(normalized) is not None

    def absolute_path(self, path: str) -> str:
        return os.path.normpath(os.path.join(self.options.context, path))

    def _lookup(self, imports: ImportSource) -> Callable[[str], Iterable[str]]:
        if callable(imports):
            return imports
        table = {self.absolute_path(path): list(requests) for path, requests in imports.items()}
        return lambda module_id: table.get(module_id, [])
