from datetime import datetime

import pytest

from clinica.consultas import OperacaoInvalida, StatusConsulta
from clinica.repository import EntidadeNaoEncontrada
from clinica.sistema import Sistema, data_hora_atual


@pytest.fixture
def sistema():
    s = Sistema()
    s.carregar_dados_padrao()
    return s


def test_data_hora_atual_format():
    assert data_hora_atual(datetime(2024, 6, 25, 9, 5)) == "25/06/2024 09:05"


def test_data_hora_atual_default_roundtrip():
    texto = data_hora_atual()
    parsed = datetime.strptime(texto, "%d/%m/%Y %H:%M")
    assert data_hora_atual(parsed) == texto


def test_dados_padrao_counts(sistema):
    assert len(sistema.departamentos) == 3
    assert len(sistema.medicos) == 3
    assert len(sistema.enfermeiros) == 2
    assert len(sistema.pacientes) == 3
    assert len(sistema.medicamentos) == 4
    assert len(sistema.agendamento) == 0


def test_dados_padrao_contents(sistema):
    nomes = [m.nome for m in sistema.medicos.buscar_todos()]
    assert nomes == ["Dr. Joao Silva", "Dra. Ana Costa", "Dr. Carlos Lima"]
    meds = [m.nome for m in sistema.medicamentos.buscar_todos()]
    assert meds == ["Paracetamol", "Ibuprofeno", "Amoxicilina", "Losartana"]
    maria = sistema.pacientes.buscar_todos()[1]
    assert maria.prontuario.registros == (
        "25/06/2024: Paciente relatou dores de cabeca frequentes."
    )


def test_dados_padrao_departments_staff(sistema):
    cardio, neuro, geral = sistema.departamentos.buscar_todos()
    medicos = sistema.medicos.buscar_todos()
    enfermeiros = sistema.enfermeiros.buscar_todos()
    assert cardio.medicos == [medicos[0]]
    assert cardio.enfermeiros == [enfermeiros[0]]
    assert neuro.medicos == [medicos[1]]
    assert neuro.enfermeiros == []
    assert geral.medicos == [medicos[2]]
    assert geral.enfermeiros == [enfermeiros[1]]


def test_agendar_consulta_links(sistema):
    paciente = sistema.pacientes.buscar_todos()[0]
    medico = sistema.medicos.buscar_todos()[0]
    consulta = sistema.agendar_consulta(paciente.id, medico.id, "01/07/2024 10:00")
    assert consulta.paciente is paciente
    assert consulta.medico is medico
    assert consulta.status is StatusConsulta.AGENDADA
    assert paciente.consultas == [consulta]
    assert medico.consultas == [consulta]
    assert sistema.agendamento.buscar_consulta_por_id(consulta.id) is consulta


def test_agendar_consulta_unknown_patient(sistema):
    medico = sistema.medicos.buscar_todos()[0]
    with pytest.raises(EntidadeNaoEncontrada):
        sistema.agendar_consulta(-1, medico.id, "x")
    assert len(sistema.agendamento) == 0


def test_consultas_por_status(sistema):
    p = sistema.pacientes.buscar_todos()[0]
    m = sistema.medicos.buscar_todos()[0]
    c1 = sistema.agendar_consulta(p.id, m.id, "a")
    c2 = sistema.agendar_consulta(p.id, m.id, "b")
    c2.status = StatusConsulta.REALIZADA
    assert sistema.consultas_por_status() == [c1, c2]
    assert sistema.consultas_por_status(StatusConsulta.AGENDADA) == [c1]
    assert sistema.consultas_por_status(StatusConsulta.REALIZADA) == [c2]
    assert sistema.consultas_por_status(StatusConsulta.CANCELADA) == []


def test_atribuir_medico_e_enfermeiro(sistema):
    neuro = sistema.departamentos.buscar_todos()[1]
    medico = sistema.medicos.buscar_todos()[0]
    enfermeiro = sistema.enfermeiros.buscar_todos()[1]
    assert sistema.atribuir_medico(neuro.id, medico.id) == (neuro, medico)
    assert sistema.atribuir_enfermeiro(neuro.id, enfermeiro.id) == (neuro, enfermeiro)
    assert neuro.medicos[-1] is medico
    assert neuro.enfermeiros == [enfermeiro]


def test_atribuir_unknown_department(sistema):
    medico = sistema.medicos.buscar_todos()[0]
    with pytest.raises(EntidadeNaoEncontrada):
        sistema.atribuir_medico(-5, medico.id)


def test_iniciar_atendimento_rejects_done(sistema):
    p = sistema.pacientes.buscar_todos()[0]
    m = sistema.medicos.buscar_todos()[0]
    c = sistema.agendar_consulta(p.id, m.id, "a")
    assert sistema.iniciar_atendimento(c.id) is c
    c.status = StatusConsulta.REALIZADA
    with pytest.raises(OperacaoInvalida, match="status atual: Realizada"):
        sistema.iniciar_atendimento(c.id)


def test_iniciar_atendimento_unknown(sistema):
    with pytest.raises(EntidadeNaoEncontrada):
        sistema.iniciar_atendimento(-1)


def test_registrar_atendimento(sistema):
    p = sistema.pacientes.buscar_todos()[0]
    m = sistema.medicos.buscar_todos()[0]
    c = sistema.agendar_consulta(p.id, m.id, "a")
    registro = sistema.registrar_atendimento(c.id, "Dor", datetime(2024, 6, 25, 9, 5))
    assert registro == "[25/06/2024 09:05 - Consulta com Dr. Joao Silva]\nDor"
    assert p.prontuario.registros == registro


def test_receita_para_correcao(sistema):
    p = sistema.pacientes.buscar_todos()[0]
    m = sistema.medicos.buscar_todos()[0]
    c = sistema.agendar_consulta(p.id, m.id, "a")
    with pytest.raises(OperacaoInvalida, match="ainda nao possui uma receita"):
        sistema.receita_para_correcao(c.id)
    receita = c.gerar_receita("Tomar por 7 dias")
    assert sistema.receita_para_correcao(c.id) is receita
    c.status = StatusConsulta.REALIZADA
    with pytest.raises(OperacaoInvalida, match="'Agendada'"):
        sistema.receita_para_correcao(c.id)


def test_limpar(sistema):
    p = sistema.pacientes.buscar_todos()[0]
    m = sistema.medicos.buscar_todos()[0]
    sistema.agendar_consulta(p.id, m.id, "a")
    sistema.limpar()
    assert len(sistema.pacientes) == 0
    assert len(sistema.medicos) == 0
    assert len(sistema.medicamentos) == 0
    assert len(sistema.agendamento) == 0