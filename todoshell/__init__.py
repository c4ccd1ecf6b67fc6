"""An interactive to-do list shell with categories, completion status and due dates."""

__version__ = "0.1.0"
__all__ = ["task", "validator", "database", "router", "line_editor", "cli"]