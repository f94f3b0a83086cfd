from theater.domain.errors import DomainError, ErrorCode, UnknownPlayError, UnknownPlayTypeError
from theater.domain.models import Invoice, Performance, Play, Statement, StatementLine
from theater.domain.value_objects import Genre, Money

__all__ = [
    "Play",
    "Performance",
    "Invoice",
    "Statement",
    "StatementLine",
    "Genre",
    "Money",
    "ErrorCode",
    "DomainError",
    "UnknownPlayError",
    "UnknownPlayTypeError",
]
