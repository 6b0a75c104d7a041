"""Shared data structures produced by the extraction strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class QuoteRecord:
    """Canonical quote shape, independent of the layout it was read from."""

    text: str
    author: str
    tags: Tuple[str, ...] = ()

    @classmethod
    def build(cls, text: str, author: str, tags: Iterable[str] = ()) -> "QuoteRecord":
        return cls(text=text.strip(), author=author.strip(), tags=tuple(tag.strip() for tag in tags if tag.strip()))

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "author": self.author, "tags": list(self.tags)}


@dataclass(slots=True)
class PageHistory:
    """Previous and current pagination index of the last ``paginate`` call."""

    prev_page: Optional[int] = None
    current_page: Optional[int] = None

    @property
    def delta(self) -> Optional[int]:
        if self.prev_page is None or self.current_page is None:
            return None
        return abs(self.prev_page - self.current_page)


@dataclass
class AuthorDirectory:
    """Author name to profile URL, filled while reading the base listing."""

    profiles: Dict[str, str] = field(default_factory=dict)

    def add(self, name: str, url: Optional[str]) -> None:
        if name and url:
            self.profiles[name] = url

    def __len__(self) -> int:
        return len(self.profiles)

    def __contains__(self, name: object) -> bool:
        return name in self.profiles
