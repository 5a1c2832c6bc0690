""" Loaders: load candidate nodes for a Connection

A loader is any object with a `load(after, before, limit)` method, or a plain function with the same signature.
"""

from .base import Loader, AsyncLoader, LoaderFunc, LoaderLike
from .base import FunctionLoader, as_loader
from .memory import SequenceLoader
