"""Classic algorithms: sorting and searching, greedy choices, graphs and dynamic programming."""

__version__ = "0.1.0"
__all__ = ["sorting", "greedy", "graphs", "dynamic"]