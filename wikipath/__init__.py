"""
Wikipath.

Shortest-path queries over a static, labeled, unweighted link graph
(for example the Wikispeedia article graph), including paths forced
through a required intermediate article.
"""

__version__ = "0.1.0"
