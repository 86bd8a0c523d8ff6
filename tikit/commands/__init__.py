"""tikit CLI command group initialization."""

from . import browse, lookup
from .common import cli as cli

__all__ = ["browse", "lookup", "cli"]
