"""A patient's medical record."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_proximo_id = itertools.count(1)

SEPARADOR = "\n---\n"


@dataclass(eq=False)
class Prontuario:
    """Free-text medical record; entries are separated by a dashed line."""

    id: int = field(init=False, default_factory=lambda: next(_proximo_id))
    registros: str = ""

    def adicionar_registro(self, registro: str) -> None:
        """Append an entry after any existing ones."""
        if self.registros:
            self.registros += SEPARADOR
        self.registros += registro

    def info(self) -> str:
        """Printable description of the record."""
        return (
            f"--- Prontuario ID: {self.id} ---\n"
            f"{self.registros}\n-----------------------\n"
        )