"""Terminal results of a catalog operation: render a view or redirect."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Rendered:
    view: str
    context: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass(frozen=True)
class Redirect:
    url: str


Outcome = Rendered | Redirect
