"""In-memory implementation of the PlayStore."""

from collections.abc import Mapping
from types import MappingProxyType

from theater.domain import Play
from theater.stores.interfaces import PlayStore


class InMemoryPlayStore(PlayStore):
    """Play catalog backed by a mapping of play ID to Play."""

    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._plays = MappingProxyType(dict(plays))

    def get_play(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)
