"""Logical endpoints exposed by the quotes fixture site."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .errors import InvalidArgumentError


class Endpoint(Enum):
    BASE = "/"  # paginated listing with microdata markup
    SCROLL = "/scroll"  # infinite scroll fed by AJAX calls
    RANDOM = "/random"  # one random quote
    LOGIN = "/login"  # login form with CSRF token
    SEARCH = "/search.aspx"  # AJAX filter form with ViewState-like behaviour
    JS = "/js"  # listing rendered by JavaScript
    TABLEFUL = "/tableful"  # table based layout
    IFRAME = "/iframe"
    FRAMES = "/frames"
    FORM = "/form"  # multi-widget form

    @property
    def path(self) -> str:
        return self.value


def resolve_endpoint(endpoint: Union[Endpoint, str]) -> Endpoint:
    """Accepts an ``Endpoint`` or its case-insensitive name."""

    if isinstance(endpoint, Endpoint):
        return endpoint
    try:
        return Endpoint[str(endpoint).upper()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown endpoint: {endpoint!r}") from None
