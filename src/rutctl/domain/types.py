"""Value types shared by the RUT domain functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RutFormat(StrEnum):
    """Canonical textual layouts for a RUT."""

    DOTDASH = "dotdash"  # 12.345.678-5
    DASH = "dash"  # 12345678-5
    NODASH = "nodash"  # 123456785


DEFAULT_FORMAT = RutFormat.DOTDASH


@dataclass(frozen=True)
class DecomposedRut:
    """A RUT split into its digit body and (possibly empty) check character."""

    body: str
    check: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.body) and bool(self.check)
