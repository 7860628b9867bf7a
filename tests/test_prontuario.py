from clinica.prontuario import Prontuario


def test_novo_prontuario_vazio():
    assert Prontuario().registros == ""


def test_ids_crescentes():
    a = Prontuario()
    b = Prontuario()
    assert b.id > a.id


def test_primeiro_registro_sem_separador():
    p = Prontuario()
    p.adicionar_registro("primeiro")
    assert p.registros == "primeiro"


def test_registros_separados():
    p = Prontuario()
    p.adicionar_registro("um")
    p.adicionar_registro("dois")
    assert p.registros == "um\n---\ndois"


def test_substituir_registros():
    p = Prontuario()
    p.adicionar_registro("um")
    p.registros = "novo texto\n"
    assert p.registros == "novo texto\n"


def test_info():
    p = Prontuario()
    p.adicionar_registro("nota")
    assert p.info() == (
        f"--- Prontuario ID: {p.id} ---\nnota\n-----------------------\n"
    )