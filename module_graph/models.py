"""Data models for the module-graph analyzer."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, replace

DEFAULT_EXTENSIONS = ["", ".ts", ".tsx", ".mjs", ".js", ".jsx", ".json"]
DEFAULT_INCLUDE = re.compile(r"\.m?[tj]sx?$")
DEFAULT_EXCLUDE = re.compile(r"/node_modules/")


@dataclass
class Dependency:
    """One import edge: ``issuer`` requested ``request``, which resolved to ``id``."""
    request: str
    issuer: str
    id: str | None = None  # None when resolution failed

    def to_dict(self) -> dict:
        return {"request": self.request, "issuer": self.issuer, "id": self.id}


# module id -> edges in source order, or None for an unexamined leaf
DependencyTree = dict[str, list[Dependency] | None]


@dataclass(frozen=True)
class FileStat:
    is_file: bool = False
    is_directory: bool = False


@dataclass
class ParseOptions:
    """Configuration for resolution and tree building."""
    context: str = field(default_factory=os.getcwd)
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    include: re.Pattern = DEFAULT_INCLUDE
    exclude: re.Pattern = DEFAULT_EXCLUDE
    strict: bool = False


def normalize_options(**overrides) -> ParseOptions:
    """Merge ``overrides`` into the defaults.

    ``None`` values are ignored, string patterns are compiled, and the empty
    suffix is prepended to ``extensions`` when the caller left it out.
    """
    options = ParseOptions()
    values = {k: v for k, v in overrides.items() if v is not None}
    for key in ("include", "exclude"):
        if isinstance(values.get(key), str):
            values[key] = re.compile(values[key])
    if "context" in values:
        values["context"] = os.path.abspath(values["context"])
    options = replace(options, **values)

    extensions = list(options.extensions)
    if "" not in extensions:
        extensions.insert(0, "")
    options.extensions = extensions
    return options
