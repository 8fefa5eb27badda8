"""Exporters for walk results."""

from .json import export_graph_json, export_json, modules_to_json, write_json

__all__ = ["export_graph_json", "export_json", "modules_to_json", "write_json"]
