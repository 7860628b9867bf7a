"""The clinic's state: repositories, schedule and the operations on them."""

from __future__ import annotations

from datetime import datetime

from clinica.consultas import Agendamento, Consulta, OperacaoInvalida, StatusConsulta
from clinica.departamento import Departamento
from clinica.medicamentos import Medicamento, ReceitaMedica
from clinica.pessoas import Enfermeiro, Medico, Paciente
from clinica.repository import Repositorio

FORMATO_DATA_HORA = "%d/%m/%Y %H:%M"


def data_hora_atual(agora: datetime | None = None) -> str:
    """Format a moment (now by default) as DD/MM/AAAA HH:MM."""
    return (agora or datetime.now()).strftime(FORMATO_DATA_HORA)


class Sistema:
    """Everything the clinic knows: people, departments, medicines, appointments."""

    def __init__(self) -> None:
        self.limpar()

    def limpar(self) -> None:
        """Forget every stored entity and appointment."""
        self.pacientes: Repositorio[Paciente] = Repositorio()
        self.medicos: Repositorio[Medico] = Repositorio()
        self.enfermeiros: Repositorio[Enfermeiro] = Repositorio()
        self.departamentos: Repositorio[Departamento] = Repositorio()
        self.medicamentos: Repositorio[Medicamento] = Repositorio()
        self.agendamento = Agendamento()

    def carregar_dados_padrao(self) -> None:
        """Fill the system with the default departments, staff, patients and medicines."""
        cardio = Departamento("Cardiologia")
        neuro = Departamento("Neurologia")
        geral = Departamento("Clinica Geral")
        for depto in (cardio, neuro, geral):
            self.departamentos.adicionar(depto)

        medico1 = Medico("Dr. Joao Silva", "111.222.333-44", "10/05/1980",
                         "Cardiologista", "CRM-12345")
        medico2 = Medico("Dra. Ana Costa", "555.666.777-88", "22/08/1985",
                         "Neurologista", "CRM-54321")
        medico3 = Medico("Dr. Carlos Lima", "999.888.777-66", "15/03/1975",
                         "Clinico Geral", "CRM-67890")
        for medico in (medico1, medico2, medico3):
            self.medicos.adicionar(medico)

        enf1 = Enfermeiro("Mariana Oliveira", "123.456.789-10", "12/01/1990",
                          "COREN-SP-1111")
        enf2 = Enfermeiro("Ricardo Souza", "019.876.543-21", "30/11/1988",
                          "COREN-RJ-2222")
        for enfermeiro in (enf1, enf2):
            self.enfermeiros.adicionar(enfermeiro)

        cardio.adicionar_medico(medico1)
        cardio.adicionar_enfermeiro(enf1)
        neuro.adicionar_medico(medico2)
        geral.adicionar_medico(medico3)
        geral.adicionar_enfermeiro(enf2)

        paciente1 = Paciente("Jose Bezerra", "121.232.343-45", "15/02/1995", "Asma")
        paciente2 = Paciente("Maria das Dores", "565.676.787-89", "20/07/1960",
                             "Diabetes tipo 2, Hipertensao")
        paciente3 = Paciente("Pedro Antunes", "989.878.767-65", "01/12/2001",
                             "Nenhuma condicao pre-existente")
        for paciente in (paciente1, paciente2, paciente3):
            self.pacientes.adicionar(paciente)

        paciente2.prontuario.adicionar_registro(
            "25/06/2024: Paciente relatou dores de cabeca frequentes."
        )

        for nome, dosagem in (
            ("Paracetamol", "750mg"),
            ("Ibuprofeno", "600mg"),
            ("Amoxicilina", "500mg"),
            ("Losartana", "50mg"),
        ):
            self.medicamentos.adicionar(Medicamento(nome, dosagem))

    def agendar_consulta(self, paciente_id: int, medico_id: int, data_hora: str) -> Consulta:
        """Book an appointment and link it to the patient and the doctor."""
        paciente = self.pacientes.buscar_por_id(paciente_id)
        medico = self.medicos.buscar_por_id(medico_id)
        consulta = Consulta(data_hora, medico, paciente)
        self.agendamento.agendar_consulta(consulta)
        paciente.adicionar_consulta(consulta)
        medico.adicionar_consulta(consulta)
        return consulta

    def consultas_por_status(self, status: StatusConsulta | None = None) -> list[Consulta]:
        """Appointments in booking order, all of them or only those with a status."""
        return [c for c in self.agendamento if status is None or c.status is status]

    def atribuir_medico(self, departamento_id: int, medico_id: int) -> tuple[Departamento, Medico]:
        """Assign a doctor to a department."""
        depto = self.departamentos.buscar_por_id(departamento_id)
        medico = self.medicos.buscar_por_id(medico_id)
        depto.adicionar_medico(medico)
        return depto, medico

    def atribuir_enfermeiro(
        self, departamento_id: int, enfermeiro_id: int
    ) -> tuple[Departamento, Enfermeiro]:
        """Assign a nurse to a department."""
        depto = self.departamentos.buscar_por_id(departamento_id)
        enfermeiro = self.enfermeiros.buscar_por_id(enfermeiro_id)
        depto.adicionar_enfermeiro(enfermeiro)
        return depto, enfermeiro

    def iniciar_atendimento(self, consulta_id: int) -> Consulta:
        """Return a still-scheduled appointment, or raise if it cannot be carried out."""
        consulta = self.agendamento.buscar_consulta_por_id(consulta_id)
        if consulta.status is not StatusConsulta.AGENDADA:
            raise OperacaoInvalida(
                "Esta consulta nao pode ser realizada "
                f"(status atual: {consulta.status})."
            )
        return consulta

    def registrar_atendimento(
        self, consulta_id: int, anotacao: str, agora: datetime | None = None
    ) -> str:
        """Add the appointment's notes to the patient's record; return the entry."""
        consulta = self.iniciar_atendimento(consulta_id)
        medico_nome = consulta.medico.nome if consulta.medico is not None else "N/A"
        registro = (
            f"[{data_hora_atual(agora)} - Consulta com {medico_nome}]\n{anotacao}"
        )
        consulta.paciente.prontuario.adicionar_registro(registro)
        return registro

    def receita_para_correcao(self, consulta_id: int) -> ReceitaMedica:
        """Return the prescription of a scheduled appointment so it can be edited."""
        consulta = self.agendamento.buscar_consulta_por_id(consulta_id)
        if consulta.status is not StatusConsulta.AGENDADA:
            raise OperacaoInvalida(
                "So e possivel editar a receita de uma consulta com status 'Agendada'."
            )
        if consulta.receita is None:
            raise OperacaoInvalida("Esta consulta ainda nao possui uma receita.")
        return consulta.receita