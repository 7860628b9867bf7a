"""People of the clinic: doctors, nurses and patients."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any

from clinica.prontuario import Prontuario

_proximo_id = itertools.count(1)


@dataclass(eq=False)
class Pessoa:
    """A person with an id drawn from one sequence shared by all kinds."""

    nome: str
    cpf: str
    data_nascimento: str
    id: int = field(init=False, default_factory=lambda: next(_proximo_id))

    def gerar_relatorio_atividade(self) -> str:
        return f"Pessoa {self.nome} nao possui relatorio de atividade."

    def info(self) -> str:
        """Printable description of the person."""
        return (
            f"ID: {self.id}\n"
            f"Nome: {self.nome}\n"
            f"CPF: {self.cpf}\n"
            f"Data de Nascimento: {self.data_nascimento}\n"
        )


@dataclass(eq=False)
class Medico(Pessoa):
    especialidade: str
    crm: str
    departamento: Any = field(init=False, default=None, repr=False)
    consultas: list = field(init=False, default_factory=list, repr=False)

    def gerar_relatorio_atividade(self) -> str:
        return (
            f"Relatorio do Medico {self.nome} (CRM: {self.crm}): "
            f"{len(self.consultas)} consultas realizadas."
        )

    def adicionar_consulta(self, consulta: Any) -> None:
        self.consultas.append(consulta)

    def info(self) -> str:
        return (
            super().info()
            + f"Especialidade: {self.especialidade}\nCRM: {self.crm}\n"
        )


@dataclass(eq=False)
class Enfermeiro(Pessoa):
    coren: str
    departamento: Any = field(init=False, default=None, repr=False)

    def gerar_relatorio_atividade(self) -> str:
        return (
            f"Relatorio do Enfermeiro {self.nome} (COREN: {self.coren}): "
            "Atividades de suporte."
        )

    def info(self) -> str:
        return super().info() + f"COREN: {self.coren}\n"


@dataclass(eq=False)
class Paciente(Pessoa):
    historico_medico: str
    prontuario: Prontuario = field(init=False, default_factory=Prontuario, repr=False)
    consultas: list = field(init=False, default_factory=list, repr=False)

    def adicionar_consulta(self, consulta: Any) -> None:
        self.consultas.append(consulta)

    def info(self) -> str:
        return super().info() + f"Historico Medico: {self.historico_medico}\n"