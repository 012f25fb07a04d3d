"""Classic algorithms: sorting, array problems, text search, trees, graphs, dynamic programming and small numeric routines."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "dynamic", "graphs", "sorting", "text", "trees"]