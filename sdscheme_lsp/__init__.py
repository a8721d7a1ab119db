"""sdscheme editor integration.

This package provides:
- A pygls-based Language Server for sdscheme `.scheme` files.
- A lightweight indexer that scans documents for top-level defines without evaluation.
- The `sdscheme.run` command, which evaluates a document and writes
  `Scheme => <value>` to the client's output log.
"""

__all__ = [
    "server",
    "features",
    "indexer",
]
