"""Error kinds raised or returned while loading an inventory."""

from __future__ import annotations

from dataclasses import dataclass

from src.contracts.enums import ErrorKind


@dataclass(slots=True)
class BuildError:
    """A fatal builder outcome returned as a value instead of raised."""

    kind: ErrorKind
    message: str
    ordinal: int = 0  # 0 = document level


class LoadError(Exception):
    """Fatal inventory load failure; no catalog is produced."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def from_build_error(cls, err: BuildError) -> LoadError:
        return cls(err.kind, err.message)
