"""Interactive menus for registering patients, staff, departments and medicines."""

from __future__ import annotations

from typing import Callable, Iterable

from clinica.consultas import OperacaoInvalida
from clinica.departamento import Departamento
from clinica.medicamentos import Medicamento
from clinica.pessoas import Enfermeiro, Medico, Paciente
from clinica.repository import EntidadeNaoEncontrada
from clinica.sistema import Sistema
from clinica.terminal import Terminal

_ERROS = (EntidadeNaoEncontrada, OperacaoInvalida, ValueError)
_SEPARADOR = "------------------------\n"
_OPCOES_CRUD = "1. Adicionar\n2. Listar\n3. Atualizar\n4. Remover\n0. Voltar\n"


def _laco(terminal: Terminal, cabecalho: str, acoes: dict[int, Callable[[], None]]) -> None:
    """Show the menu until 0 is chosen, reporting failed actions as errors."""
    while True:
        opcao = terminal.ler_opcao(cabecalho)
        if opcao == 0:
            return
        acao = acoes.get(opcao) if opcao is not None else None
        if acao is None:
            continue
        try:
            acao()
        except _ERROS as erro:
            terminal.erro(str(erro))


def _listar(terminal: Terminal, titulo: str, vazio: str, itens: Iterable) -> None:
    itens = list(itens)
    terminal.escrever(f"\n--- {titulo} ---\n")
    if not itens:
        terminal.escrever(f"{vazio}\n")
    for item in itens:
        terminal.escrever(item.info())
        terminal.escrever(_SEPARADOR)


def _ler_pessoa(terminal: Terminal) -> tuple[str, str, str]:
    nome = terminal.ler_linha("Nome: ")
    cpf = terminal.ler_linha("CPF: ")
    data_nascimento = terminal.ler_linha("Data Nascimento: ")
    return nome, cpf, data_nascimento


def _atualizar_pessoa(terminal: Terminal, pessoa) -> tuple[str, str, str]:
    nome = terminal.ler_linha(f"Novo Nome (Atual: {pessoa.nome}): ")
    cpf = terminal.ler_linha(f"Novo CPF (Atual: {pessoa.cpf}): ")
    data_nascimento = terminal.ler_linha(
        f"Nova Data de Nascimento (Atual: {pessoa.data_nascimento}): "
    )
    return nome, cpf, data_nascimento


def _remover(terminal: Terminal, repositorio, prompt: str, mensagem: str) -> None:
    id_ = terminal.ler_inteiro(prompt)
    repositorio.buscar_por_id(id_)
    repositorio.remover(id_)
    terminal.escrever(mensagem)


def menu_pacientes(sistema: Sistema, terminal: Terminal) -> None:
    """Add, list, update and remove patients."""

    def adicionar() -> None:
        nome, cpf, data_nascimento = _ler_pessoa(terminal)
        historico = terminal.ler_linha("Historico: ")
        paciente = Paciente(nome, cpf, data_nascimento, historico)
        sistema.pacientes.adicionar(paciente)
        terminal.escrever(f"Paciente adicionado com ID: {paciente.id}\n")

    def listar() -> None:
        _listar(terminal, "Lista de Pacientes", "Nenhum paciente cadastrado.",
                sistema.pacientes.buscar_todos())

    def atualizar() -> None:
        id_ = terminal.ler_inteiro("ID do paciente para atualizar: ")
        paciente = sistema.pacientes.buscar_por_id(id_)
        nome, cpf, data_nascimento = _atualizar_pessoa(terminal, paciente)
        historico = terminal.ler_linha("Novo Historico Médico: ")
        paciente.nome = nome
        paciente.cpf = cpf
        paciente.data_nascimento = data_nascimento
        paciente.historico_medico = historico
        terminal.escrever("Paciente atualizado.\n")

    def remover() -> None:
        _remover(terminal, sistema.pacientes, "ID do paciente para remover: ",
                 "Paciente removido.\n")

    _laco(terminal, "\n--- Gerenciar Pacientes ---\n" + _OPCOES_CRUD + "Escolha: ",
          {1: adicionar, 2: listar, 3: atualizar, 4: remover})


def menu_medicos(sistema: Sistema, terminal: Terminal) -> None:
    """Add, list, update and remove doctors."""

    def adicionar() -> None:
        nome, cpf, data_nascimento = _ler_pessoa(terminal)
        especialidade = terminal.ler_linha("Especialidade: ")
        crm = terminal.ler_linha("CRM: ")
        medico = Medico(nome, cpf, data_nascimento, especialidade, crm)
        sistema.medicos.adicionar(medico)
        terminal.escrever(f"Medico adicionado com ID: {medico.id}\n")

    def listar() -> None:
        _listar(terminal, "Lista de Medicos", "Nenhum medico cadastrado.",
                sistema.medicos.buscar_todos())

    def atualizar() -> None:
        id_ = terminal.ler_inteiro("ID do medico para atualizar: ")
        medico = sistema.medicos.buscar_por_id(id_)
        nome, cpf, data_nascimento = _atualizar_pessoa(terminal, medico)
        especialidade = terminal.ler_linha(
            f"Nova Especialidade (Atual: {medico.especialidade}): "
        )
        crm = terminal.ler_linha(f"Novo CRM (Atual: {medico.crm}): ")
        medico.nome = nome
        medico.cpf = cpf
        medico.data_nascimento = data_nascimento
        medico.especialidade = especialidade
        medico.crm = crm
        terminal.escrever("Medico atualizado.\n")

    def remover() -> None:
        _remover(terminal, sistema.medicos, "ID do medico para remover: ",
                 "Medico removido.\n")

    _laco(terminal, "\n--- Gerenciar Medicos ---\n" + _OPCOES_CRUD + "Escolha: ",
          {1: adicionar, 2: listar, 3: atualizar, 4: remover})


def menu_enfermeiros(sistema: Sistema, terminal: Terminal) -> None:
    """Add, list, update and remove nurses."""

    def adicionar() -> None:
        nome, cpf, data_nascimento = _ler_pessoa(terminal)
        coren = terminal.ler_linha("COREN: ")
        enfermeiro = Enfermeiro(nome, cpf, data_nascimento, coren)
        sistema.enfermeiros.adicionar(enfermeiro)
        terminal.escrever(f"Enfermeiro adicionado com ID: {enfermeiro.id}\n")

    def listar() -> None:
        _listar(terminal, "Lista de Enfermeiros", "Nenhum enfermeiro cadastrado.",
                sistema.enfermeiros.buscar_todos())

    def atualizar() -> None:
        id_ = terminal.ler_inteiro("ID do enfermeiro para atualizar: ")
        enfermeiro = sistema.enfermeiros.buscar_por_id(id_)
        nome, cpf, data_nascimento = _atualizar_pessoa(terminal, enfermeiro)
        coren = terminal.ler_linha(f"Novo COREN (Atual: {enfermeiro.coren}): ")
        enfermeiro.nome = nome
        enfermeiro.cpf = cpf
        enfermeiro.data_nascimento = data_nascimento
        enfermeiro.coren = coren
        terminal.escrever("Enfermeiro atualizado.\n")

    def remover() -> None:
        _remover(terminal, sistema.enfermeiros, "ID do enfermeiro para remover: ",
                 "Enfermeiro removido.\n")

    _laco(terminal, "\n--- Gerenciar Enfermeiros ---\n" + _OPCOES_CRUD + "Escolha: ",
          {1: adicionar, 2: listar, 3: atualizar, 4: remover})


def menu_departamentos(sistema: Sistema, terminal: Terminal) -> None:
    """Add, list, update and remove departments, and assign staff to them."""

    def adicionar() -> None:
        nome = terminal.ler_linha("Nome do Departamento: ")
        depto = Departamento(nome)
        sistema.departamentos.adicionar(depto)
        terminal.escrever(f"Departamento adicionado com ID: {depto.id}\n")

    def listar() -> None:
        _listar(terminal, "Lista de Departamentos", "Nenhum departamento cadastrado.",
                sistema.departamentos.buscar_todos())

    def atualizar() -> None:
        id_ = terminal.ler_inteiro("ID do Departamento para atualizar: ")
        depto = sistema.departamentos.buscar_por_id(id_)
        depto.nome = terminal.ler_linha(f"Novo Nome ({depto.nome}): ")
        terminal.escrever("Departamento atualizado.\n")

    def remover() -> None:
        _remover(terminal, sistema.departamentos, "ID do Departamento para remover: ",
                 "Departamento removido.\n")

    def atribuir_medico() -> None:
        depto_id = terminal.ler_inteiro("ID do Departamento: ")
        medico_id = terminal.ler_inteiro("ID do Medico a ser atribuido: ")
        depto, medico = sistema.atribuir_medico(depto_id, medico_id)
        terminal.escrever(
            f"Medico '{medico.nome}' atribuido ao departamento '{depto.nome}'.\n"
        )

    def atribuir_enfermeiro() -> None:
        depto_id = terminal.ler_inteiro("ID do Departamento: ")
        enfermeiro_id = terminal.ler_inteiro("ID do Enfermeiro a ser atribuido: ")
        depto, enfermeiro = sistema.atribuir_enfermeiro(depto_id, enfermeiro_id)
        terminal.escrever(
            f"Enfermeiro '{enfermeiro.nome}' atribuido ao departamento '{depto.nome}'.\n"
        )

    cabecalho = (
        "\n--- Gerenciar Departamentos ---\n"
        "1. Adicionar\n2. Listar\n3. Atualizar\n4. Remover\n"
        "5. Atribuir Medico a um Departamento\n"
        "6. Atribuir Enfermeiro a um Departamento\n0. Voltar\n"
        "Escolha: "
    )
    _laco(terminal, cabecalho, {
        1: adicionar, 2: listar, 3: atualizar, 4: remover,
        5: atribuir_medico, 6: atribuir_enfermeiro,
    })


def menu_medicamentos(sistema: Sistema, terminal: Terminal) -> None:
    """Add, list, update and remove medicines."""

    def adicionar() -> None:
        nome = terminal.ler_linha("Nome do Medicamento: ")
        dosagem = terminal.ler_linha("Dosagem: ")
        medicamento = Medicamento(nome, dosagem)
        sistema.medicamentos.adicionar(medicamento)
        terminal.escrever(f"Medicamento adicionado com ID: {medicamento.id}\n")

    def listar() -> None:
        _listar(terminal, "Lista de Medicamentos", "Nenhum medicamento cadastrado.",
                sistema.medicamentos.buscar_todos())

    def atualizar() -> None:
        id_ = terminal.ler_inteiro("ID do medicamento para atualizar: ")
        medicamento = sistema.medicamentos.buscar_por_id(id_)
        nome = terminal.ler_linha(f"Novo Nome (Atual: {medicamento.nome}): ")
        dosagem = terminal.ler_linha(f"Nova Dosagem (Atual: {medicamento.dosagem}): ")
        medicamento.nome = nome
        medicamento.dosagem = dosagem
        terminal.escrever("Medicamento atualizado.\n")

    def remover() -> None:
        _remover(terminal, sistema.medicamentos, "ID do medicamento para remover: ",
                 "Medicamento removido.\n")

    _laco(terminal, "\n--- Gerenciar Medicamentos ---\n" + _OPCOES_CRUD + "Escolha: ",
          {1: adicionar, 2: listar, 3: atualizar, 4: remover})