__version__ = __import__('importlib.metadata').metadata.version('relaypager')

from .connection import Connection, Edge, PageInfo
from .connection import ConnectionDict, EdgeDict, PageInfoDict
from .arguments import ConnectionArguments, PaginationBounds
from .settings import ConnectionSettings
from .node import ConnectionNode
from .cursors import Cursor, IdCursor, KeysetCursor
from .loaders import Loader, AsyncLoader, FunctionLoader, SequenceLoader

from . import exc
