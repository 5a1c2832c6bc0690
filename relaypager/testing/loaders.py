from __future__ import annotations

from typing import Any, NamedTuple, Optional

from relaypager.loaders import LoaderLike, as_loader


class LoaderCall(NamedTuple):
    """ Arguments of one `load()` call """
    after: Optional[Any]
    before: Optional[Any]
    limit: Optional[int]


class RecordingLoader(list):
    """ A loader that records every `load()` call, then passes it on to the wrapped loader

    Example:
        loader = RecordingLoader(SequenceLoader(users))
        Connection.new(User, first=2, load=loader)
        assert loader == [LoaderCall(None, None, 3)]
    """

    def __init__(self, loader: LoaderLike):
        super().__init__()
        self.loader = as_loader(loader)

    def load(self, after: Optional[Any], before: Optional[Any], limit: Optional[int]):
        self.append(LoaderCall(after, before, limit))
        return self.loader.load(after, before, limit)

