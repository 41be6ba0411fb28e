"""module-graph: resolve JS/TS imports into a dependency tree and analyze it."""

__version__ = "0.1.0"
