"""Willow compiler front end: syntax tree, checked types, semantic errors, diagnostics and control-flow graph building."""

__version__ = "0.1.0"