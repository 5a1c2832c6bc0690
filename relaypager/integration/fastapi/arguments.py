from typing import Optional

import fastapi

from relaypager.arguments import ConnectionArguments


def connection_arguments(*,
        first: Optional[int] = fastapi.Query(
            None,
            title='Forward pagination. The number of items to include.',
        ),
        after: Optional[str] = fastapi.Query(
            None,
            title='Forward pagination. Get items after this cursor.',
        ),
        last: Optional[int] = fastapi.Query(
            None,
            title='Backward pagination. The number of items to include.',
        ),
        before: Optional[str] = fastapi.Query(
            None,
            title='Backward pagination. Get items before this cursor.',
        ),
) -> ConnectionArguments:
    """ Get pagination arguments from the request parameters

    Arguments are validated later, when a Connection is built: see `Connection.new(**args.export())`.

    Example:
        /api/users?first=10&after=MTA=
    """
    return ConnectionArguments(first=first, after=after, last=last, before=before)
