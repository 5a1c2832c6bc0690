""" Integration with FastAPI """

from .arguments import connection_arguments
