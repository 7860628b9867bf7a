"""Medicines and the prescriptions that list them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_proximo_id_medicamento = itertools.count(1)
_proximo_id_receita = itertools.count(1)


@dataclass(eq=False)
class Medicamento:
    """A medicine with its dosage."""

    nome: str
    dosagem: str
    id: int = field(init=False, default_factory=lambda: next(_proximo_id_medicamento))

    def info(self) -> str:
        """Printable description of the medicine."""
        return (
            f"ID: {self.id}\n"
            f"Medicamento: {self.nome}\n"
            f"Dosagem: {self.dosagem}\n"
        )


@dataclass(eq=False)
class ReceitaMedica:
    """A prescription; it refers to medicines but does not own them."""

    prescricao: str
    id: int = field(init=False, default_factory=lambda: next(_proximo_id_receita))
    medicamentos: list[Medicamento] = field(
        init=False, default_factory=list, repr=False
    )

    def adicionar_medicamento(self, medicamento: Medicamento) -> None:
        self.medicamentos.append(medicamento)

    def remover_medicamento(self, id_medicamento: int) -> bool:
        """Drop every listed medicine with this id; report whether any was found."""
        restantes = [m for m in self.medicamentos if m.id != id_medicamento]
        removido = len(restantes) != len(self.medicamentos)
        self.medicamentos = restantes
        return removido

    def info(self) -> str:
        """Printable description of the prescription."""
        linhas = [
            f"--- Receita ID: {self.id} ---",
            f"Prescricao: {self.prescricao}",
            "Medicamentos:",
        ]
        if self.medicamentos:
            linhas.extend(f"  - {m.nome}" for m in self.medicamentos)
        else:
            linhas.append("  (Nenhum medicamento adicionado)")
        return "\n".join(linhas) + "\n"