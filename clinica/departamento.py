"""Hospital departments and their staff."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from clinica.pessoas import Enfermeiro, Medico

_proximo_id = itertools.count(1)


@dataclass(eq=False)
class Departamento:
    """A department with the doctors and nurses assigned to it."""

    nome: str
    id: int = field(init=False, default_factory=lambda: next(_proximo_id))
    medicos: list[Medico] = field(init=False, default_factory=list, repr=False)
    enfermeiros: list[Enfermeiro] = field(init=False, default_factory=list, repr=False)

    def adicionar_medico(self, medico: Medico) -> None:
        self.medicos.append(medico)

    def adicionar_enfermeiro(self, enfermeiro: Enfermeiro) -> None:
        self.enfermeiros.append(enfermeiro)

    def info(self) -> str:
        """Printable description of the department and its staff."""
        linhas = [
            f"ID: {self.id}",
            f"Departamento: {self.nome}",
            f"Medicos Associados ({len(self.medicos)}):",
        ]
        if self.medicos:
            linhas.extend(
                f"  - ID: {m.id}, Nome: {m.nome} (CRM: {m.crm})" for m in self.medicos
            )
        else:
            linhas.append("  - Nenhum")
        linhas.append(f"Enfermeiros Associados ({len(self.enfermeiros)}):")
        if self.enfermeiros:
            linhas.extend(
                f"  - ID: {e.id}, Nome: {e.nome} (COREN: {e.coren})"
                for e in self.enfermeiros
            )
        else:
            linhas.append("  - Nenhum")
        return "\n".join(linhas) + "\n"