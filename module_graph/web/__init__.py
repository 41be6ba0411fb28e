"""HTTP API for module-graph."""

from module_graph.web.app import create_app

__all__ = ["create_app"]
