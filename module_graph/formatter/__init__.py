"""Text renderers."""

from __future__ import annotations

from module_graph.formatter.text import pretty_circular, pretty_tree, pretty_warning

__all__ = ["pretty_circular", "pretty_tree", "pretty_warning"]
