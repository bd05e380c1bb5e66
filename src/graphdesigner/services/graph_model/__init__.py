"""
Graph model service: the editable node/edge registry the generator reads.
"""

from .store import GraphStore

__all__ = ["GraphStore"]
