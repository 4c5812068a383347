"""MovieBase - a movie catalogue API.

Create, update, delete and look up movies over HTTP, with bearer-token
authentication and a relational store behind it.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
