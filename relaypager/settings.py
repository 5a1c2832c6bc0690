from __future__ import annotations

import dataclasses
from typing import Optional


@dataclasses.dataclass
class ConnectionSettings:
    """ Settings for Connection

    This object defines additional behavior for pagination arguments: default and max page sizes.
    Settings are applied after the arguments are validated.
    """
    # The `first` you get by default, if neither `first` nor `last` is specified
    default_first: Optional[int] = None

    # The max number of items you get with `first`, regardless of the argument
    max_first: Optional[int] = None

    # The max number of items you get with `last`, regardless of the argument
    max_last: Optional[int] = None

    def __post_init__(self):
        for name in ('default_first', 'max_first', 'max_last'):
            value = getattr(self, name)
            assert value is None or value >= 0, f'{name} must be non-negative'

    # ### Callbacks for Connection

    def get_final_first(self, first: Optional[int], last: Optional[int]) -> Optional[int]:
        """ Callback that fine-tunes `first` by applying default and max limits

        The default only applies when the client gave no bounds at all:
        with `last` alone, a default `first` would cut the list from the wrong end.
        """
        # Apply default
        if first is None and last is None:
            first = self.default_first

        # Apply max
        if first is not None and self.max_first is not None:
            first = min(first, self.max_first)

        # Done
        return first

    def get_final_last(self, last: Optional[int]) -> Optional[int]:
        """ Callback that fine-tunes `last` by applying the max limit """
        if last is not None and self.max_last is not None:
            last = min(last, self.max_last)
        return last
