"""ok Language Server package.

This package provides:
- A pygls-based Language Server for the ok language.
- A lightweight indexer that scans documents for top-level definitions
  without evaluating them.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
