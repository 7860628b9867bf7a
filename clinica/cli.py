"""Appointment menus, the patient panel and the main menu of the clinic console."""

from __future__ import annotations

import argparse
from typing import Callable

from clinica.consultas import OperacaoInvalida, StatusConsulta
from clinica.cli_cadastros import (
    menu_departamentos,
    menu_enfermeiros,
    menu_medicamentos,
    menu_medicos,
    menu_pacientes,
)
from clinica.repository import EntidadeNaoEncontrada
from clinica.sistema import Sistema, data_hora_atual
from clinica.terminal import Terminal

_ERROS = (EntidadeNaoEncontrada, OperacaoInvalida, ValueError)

_FILTROS = {
    3: (StatusConsulta.REALIZADA, "--- Lista de Consultas REALIZADAS ---"),
    4: (StatusConsulta.AGENDADA, "--- Lista de Consultas AGENDADAS ---"),
}


def _sim(resposta: str) -> bool:
    """True when the first non-blank character of the answer is 's' or 'S'."""
    return resposta.strip()[:1] in ("s", "S")


def menu_agendamento(sistema: Sistema, terminal: Terminal) -> None:
    """Book appointments and list them, all or filtered by status."""
    cabecalho = (
        "\n--- Menu de Consultas ---\n"
        "1. Agendar Nova Consulta\n"
        "2. Listar TODAS as Consultas\n"
        "3. Listar Consultas REALIZADAS\n"
        "4. Listar Consultas AGENDADAS\n"
        "0. Voltar\n"
        "Escolha: "
    )
    while True:
        opcao = terminal.ler_opcao(cabecalho)
        if opcao == 0:
            return
        try:
            if opcao == 1:
                paciente_id = terminal.ler_inteiro("ID do Paciente: ")
                medico_id = terminal.ler_inteiro("ID do Medico: ")
                data_hora = terminal.ler_linha("Data e Hora (DD/MM/AAAA HH:MM): ")
                consulta = sistema.agendar_consulta(paciente_id, medico_id, data_hora)
                terminal.escrever(
                    f"Consulta agendada com sucesso! ID da Consulta: {consulta.id}\n"
                )
            elif opcao in (2, 3, 4):
                if opcao == 2:
                    consultas = sistema.consultas_por_status()
                    titulo = "--- Lista de TODAS as Consultas ---"
                else:
                    status, titulo = _FILTROS[opcao]
                    consultas = sistema.consultas_por_status(status)
                terminal.escrever(f"\n{titulo}\n")
                if not consultas:
                    terminal.escrever("Nenhuma consulta encontrada com este criterio.\n")
                for consulta in consultas:
                    terminal.escrever(consulta.info())
        except _ERROS as erro:
            terminal.erro(str(erro))


def menu_realizar_consulta(sistema: Sistema, terminal: Terminal) -> None:
    """Carry out a scheduled appointment: notes, optional prescription, status."""
    terminal.escrever("\n--- Realizar Consulta ---\n")
    try:
        consulta_id = terminal.ler_inteiro("Digite o ID da consulta a ser realizada: ")
        consulta = sistema.iniciar_atendimento(consulta_id)
        paciente = consulta.paciente
        anotacao = terminal.ler_linha(
            "\nDigite as anotacoes da consulta para o prontuario de "
            f"{paciente.nome}:\n"
        )
        sistema.registrar_atendimento(consulta_id, anotacao)
        terminal.escrever("Registro adicionado ao prontuario.\n")

        if _sim(terminal.ler_linha("\nDeseja criar uma receita? (s/n): ")):
            prescricao = terminal.ler_linha(
                "Digite a prescricao geral da receita (ex: Tomar por 7 dias): "
            )
            receita = consulta.gerar_receita(prescricao)
            terminal.escrever("Receita criada. Agora adicione os medicamentos.\n")
            while _sim(terminal.ler_linha(
                "\nDeseja adicionar um medicamento a receita? (s/n): "
            )):
                for medicamento in sistema.medicamentos.buscar_todos():
                    terminal.escrever(f"ID: {medicamento.id} - {medicamento.nome}\n")
                medicamento_id = terminal.ler_inteiro("Digite o ID do medicamento: ")
                receita.adicionar_medicamento(
                    sistema.medicamentos.buscar_por_id(medicamento_id)
                )
        consulta.status = StatusConsulta.REALIZADA
        terminal.escrever("\nConsulta finalizada com sucesso!\n")
    except _ERROS as erro:
        terminal.erro(str(erro))


def _editar_prontuario(paciente, terminal: Terminal) -> None:
    prontuario = paciente.prontuario
    terminal.escrever("\n--- Conteudo Atual do Prontuario ---\n")
    terminal.escrever(f"{prontuario.registros}\n")
    terminal.escrever("\n-------------------------------------\n")
    terminal.escrever(
        "Copie o texto acima, edite como desejar, e cole o conteudo completo abaixo.\n"
    )
    terminal.escrever(
        "Para finalizar, digite 'FIM' em uma nova linha e pressione Enter.\n"
    )
    linhas = []
    while True:
        try:
            linha = terminal.ler_linha()
        except EOFError:
            break
        if linha == "FIM":
            break
        linhas.append(linha + "\n")
    prontuario.registros = "".join(linhas)
    terminal.escrever("Prontuario atualizado com sucesso!\n")


def _corrigir_receita(sistema: Sistema, terminal: Terminal) -> None:
    consulta_id = terminal.ler_inteiro(
        "Digite o ID da consulta cuja receita deseja corrigir: "
    )
    receita = sistema.receita_para_correcao(consulta_id)
    terminal.escrever(receita.info())
    escolha = terminal.ler_inteiro("1. Adicionar Medicamento\n2. Remover Medicamento\nEscolha: ")
    if escolha == 1:
        medicamento_id = terminal.ler_inteiro("ID do medicamento a adicionar: ")
        receita.adicionar_medicamento(sistema.medicamentos.buscar_por_id(medicamento_id))
    elif escolha == 2:
        medicamento_id = terminal.ler_inteiro("ID do medicamento a remover: ")
        if receita.remover_medicamento(medicamento_id):
            terminal.escrever("Medicamento removido com sucesso.\n")
        else:
            terminal.escrever(
                f"Medicamento com ID {medicamento_id} nao encontrado na receita.\n"
            )


def menu_painel_paciente(sistema: Sistema, terminal: Terminal) -> None:
    """A patient's panel: medical record, appointments and prescription fixes.

    Any error leaves the panel.
    """
    terminal.escrever("\n--- Painel do Paciente ---\n")
    try:
        paciente = sistema.pacientes.buscar_por_id(
            terminal.ler_inteiro("Digite o ID do Paciente: ")
        )
        while True:
            opcao = terminal.ler_opcao(
                f"\n--- Painel de {paciente.nome} ---\n"
                "1. Visualizar Prontuario Completo\n"
                "2. Adicionar Anotacao ao Prontuario\n"
                "3. Editar Prontuario Completo (com cuidado)\n"
                "4. Listar Consultas e Ver Receitas do Paciente\n"
                "5. Corrigir Receita (de consulta nao finalizada)\n"
                "0. Voltar ao Menu Principal\n"
                "Escolha: "
            )
            if opcao == 0:
                return
            if opcao == 1:
                terminal.escrever(paciente.prontuario.info())
            elif opcao == 2:
                anotacao = terminal.ler_linha("Digite a nova anotacao:\n")
                paciente.prontuario.adicionar_registro(
                    f"[{data_hora_atual()}]\n{anotacao}"
                )
                terminal.escrever("Anotacao adicionada.\n")
            elif opcao == 3:
                _editar_prontuario(paciente, terminal)
            elif opcao == 4:
                terminal.escrever(f"\n--- Consultas de {paciente.nome} ---\n")
                if not paciente.consultas:
                    terminal.escrever("Nenhuma consulta registrada para este paciente.\n")
                for consulta in paciente.consultas:
                    terminal.escrever(consulta.info())
            elif opcao == 5:
                _corrigir_receita(sistema, terminal)
    except _ERROS as erro:
        terminal.erro(str(erro))


def executar(sistema: Sistema, terminal: Terminal) -> None:
    """Run the main menu until 0 is chosen or the input ends, then clean up."""
    menus: dict[int, Callable[[Sistema, Terminal], None]] = {
        1: menu_pacientes,
        2: menu_medicos,
        3: menu_enfermeiros,
        4: menu_departamentos,
        5: menu_medicamentos,
        6: menu_agendamento,
        7: menu_realizar_consulta,
        8: menu_painel_paciente,
    }
    cabecalho = (
        "\n===== Sistema de Gestao de Saude =====\n"
        "1. Gerenciar Pacientes\n"
        "2. Gerenciar Medicos\n"
        "3. Gerenciar Enfermeiros\n"
        "4. Gerenciar Departamentos\n"
        "5. Gerenciar Medicamentos\n"
        "--- Operacoes do Sistema ---\n"
        "6. Consultas (Agendar e Listar)\n"
        "7. Realizar Consulta\n"
        "8. Painel do Paciente (Prontuario, Receitas)\n"
        "0. Sair\n"
        "======================================\n"
        "Escolha uma opcao: "
    )
    try:
        while True:
            opcao = terminal.ler_opcao(cabecalho)
            if opcao is None:
                terminal.escrever("Entrada invalida. Por favor, insira um numero.\n")
                continue
            if opcao == 0:
                break
            menu = menus.get(opcao)
            if menu is None:
                terminal.escrever("Opcao invalida.\n")
            else:
                menu(sistema, terminal)
    except EOFError:
        pass
    terminal.escrever("Limpando memoria...\n")
    sistema.limpar()
    terminal.escrever("Saindo do sistema...\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive clinic management console."""
    parser = argparse.ArgumentParser(
        prog="clinica", description="Sistema de Gestao de Saude."
    )
    parser.parse_args(argv)
    terminal = Terminal()
    sistema = Sistema()
    terminal.escrever("Inicializando dados padrao do sistema...\n")
    sistema.carregar_dados_padrao()
    terminal.escrever("Dados carregados com sucesso!\n")
    executar(sistema, terminal)
    return 0