"""Append-once verification log used for side-channel assertions and reporting."""

from __future__ import annotations

import inspect
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .errors import TypeMismatchError

logger = logging.getLogger(__name__)


def _caller_location() -> str:
    # Two frames up: _caller_location <- record <- call site
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>"
        return f"{caller.f_code.co_filename}:{caller.f_lineno}"
    finally:
        del frame


@dataclass
class ActionLog:
    """Maps event names to boolean outcomes; the first observation of a name wins.

    The log is passed explicitly to every operation that verifies browser
    behaviour. ``record`` returns the outcome it was given so call sites can
    inline it in compound conditions.
    """

    entries: Dict[str, bool] = field(default_factory=dict)
    echo: bool = True

    def record(self, name: str, outcome: bool) -> bool:
        if not isinstance(outcome, bool):
            raise TypeMismatchError(
                f"Outcome for {name!r} must be a bool, got {type(outcome).__name__}"
            )

        if not outcome:
            logger.warning("Check %r failed at %s", name, _caller_location())
        if self.echo:
            print(f"[{'OK' if outcome else 'FAIL'}] {name}")

        self.entries.setdefault(name, outcome)
        return outcome

    def summary(self) -> bool:
        """``True`` when every recorded outcome is ``True``."""

        return all(self.entries.values())

    @property
    def failures(self) -> List[str]:
        return [name for name, outcome in self.entries.items() if not outcome]

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __getitem__(self, name: str) -> bool:
        return self.entries[name]

    def __len__(self) -> int:
        return len(self.entries)

    # ------------------------------------------------------------------
    # Report persistence
    # ------------------------------------------------------------------
    def to_json(self) -> str:
        data = {
            "passed": self.summary(),
            "checks": self.entries,
            "failures": self.failures,
        }
        return json.dumps(data, indent=4)

    def save(self, path: Path) -> None:
        path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> "ActionLog":
        raw = json.loads(path.read_text(encoding="utf-8"))
        return cls(entries=dict(raw.get("checks", {})), echo=False)
