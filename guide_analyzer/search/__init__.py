"""Full-text search with literal keyword matching and highlighting."""

from guide_analyzer.search.engine import compile_rule, count_matches, highlight, search

__all__ = ["compile_rule", "count_matches", "highlight", "search"]
