"""Product catalog demo.

Seeds a single-table SQLite store with sample products and serves two read
queries through an in-process query mediator.
"""

__version__ = "0.1.0"
