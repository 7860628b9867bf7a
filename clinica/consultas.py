"""Appointments, their status and the schedule that holds them."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass, field

from clinica.medicamentos import ReceitaMedica
from clinica.pessoas import Medico, Paciente
from clinica.repository import EntidadeNaoEncontrada

_proximo_id = itertools.count(1)


class OperacaoInvalida(RuntimeError):
    """Raised when an operation is not allowed in the current state."""


class StatusConsulta(enum.Enum):
    AGENDADA = "Agendada"
    REALIZADA = "Realizada"
    CANCELADA = "Cancelada"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Consulta:
    """An appointment between a doctor and a patient; it owns its prescription."""

    data_hora: str
    medico: Medico | None
    paciente: Paciente | None
    id: int = field(init=False, default_factory=lambda: next(_proximo_id))
    status: StatusConsulta = field(init=False, default=StatusConsulta.AGENDADA)
    receita: ReceitaMedica | None = field(init=False, default=None, repr=False)

    def gerar_receita(self, prescricao: str) -> ReceitaMedica:
        """Create the prescription unless one exists; return the current one."""
        if self.receita is None:
            self.receita = ReceitaMedica(prescricao)
        return self.receita

    def info(self) -> str:
        """Printable description of the appointment."""
        def _pessoa(p):
            return (p.nome, str(p.id)) if p is not None else ("N/A", "N/A")

        medico_nome, medico_id = _pessoa(self.medico)
        paciente_nome, paciente_id = _pessoa(self.paciente)
        texto = (
            f"--- Consulta ID: {self.id} ---\n"
            f"Data/Hora: {self.data_hora}\n"
            f"Status: {self.status}\n"
            f"Medico: {medico_nome} (ID: {medico_id})\n"
            f"Paciente: {paciente_nome} (ID: {paciente_id})\n"
        )
        if self.receita is not None:
            texto += self.receita.info()
        return texto + "-----------------------\n"


class Agendamento:
    """The schedule of appointments, kept in the order they were booked."""

    def __init__(self) -> None:
        self.consultas: list[Consulta] = []

    def agendar_consulta(self, consulta: Consulta) -> None:
        self.consultas.append(consulta)

    def buscar_consulta_por_id(self, id_: int) -> Consulta:
        """Return the appointment with this id or raise EntidadeNaoEncontrada."""
        for consulta in self.consultas:
            if consulta.id == id_:
                return consulta
        raise EntidadeNaoEncontrada(id_, f"Consulta com ID {id_} nao encontrada.")

    def listar_consultas(self) -> str:
        """Printable listing of every scheduled appointment."""
        texto = "\n--- Lista de Consultas Agendadas ---\n"
        if not self.consultas:
            return texto + "Nenhuma consulta agendada.\n"
        return texto + "".join(c.info() for c in self.consultas)

    def __iter__(self):
        return iter(self.consultas)

    def __len__(self) -> int:
        return len(self.consultas)