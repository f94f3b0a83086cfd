"""Domain error codes for the theater module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY,
            message=f"Unknown play: {play_id}",
        )
        self.play_id = play_id


class UnknownPlayTypeError(DomainError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, genre: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {genre}",
        )
        self.genre = genre
