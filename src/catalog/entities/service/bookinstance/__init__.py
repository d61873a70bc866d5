"""Entity package: BookInstance."""

from .entity import DEFAULT_STATUS, STATUS_VALUES, BookInstance, BookInstanceStatus
from .repository import BookInstanceRepository
from .table import BookInstanceTable

__all__ = [
    "DEFAULT_STATUS",
    "STATUS_VALUES",
    "BookInstance",
    "BookInstanceRepository",
    "BookInstanceStatus",
    "BookInstanceTable",
]
