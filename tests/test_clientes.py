import pytest

from gestao_loja.clientes import Cliente, TabelaCliente
from gestao_loja.erros import (
    CodigoExistenteError,
    NadaEscritoError,
    NumeroInvalidoError,
)

CPF = "abcdefghijklmn"


@pytest.fixture
def caminho(tmp_path):
    return tmp_path / "clientes.txt"


def test_missing_file_gives_empty_table(caminho):
    tabela = TabelaCliente.carregar(caminho)
    assert len(tabela) == 0
    assert list(tabela) == []


def test_save_writes_three_lines_per_customer(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["7", "Ana", CPF])
    tabela.salvar()
    assert caminho.read_text(encoding="utf-8") == f"7\nAna\n{CPF}\n"


def test_round_trip(caminho):
    tabela = TabelaCliente(caminho)
    tabela.dados = [Cliente(1, "Ana", CPF), Cliente(2, "Bruno", CPF)]
    tabela.salvar()
    relida = TabelaCliente.carregar(caminho)
    assert relida.dados == tabela.dados


def test_load_ignores_incomplete_record(caminho):
    caminho.write_text(f"1\nAna\n{CPF}\n2\nBruno\n", encoding="utf-8")
    tabela = TabelaCliente.carregar(caminho)
    assert tabela.dados == [Cliente(1, "Ana", CPF)]


def test_load_without_trailing_newline(caminho):
    caminho.write_text(f"3\nCaio\n{CPF}", encoding="utf-8")
    tabela = TabelaCliente.carregar(caminho)
    assert tabela.dados == [Cliente(3, "Caio", CPF)]


def test_load_non_numeric_id_parses_as_zero(caminho):
    caminho.write_text(f"abc\nAna\n{CPF}\n", encoding="utf-8")
    tabela = TabelaCliente.carregar(caminho)
    assert tabela[0].id == 0


def test_cadastrar_appends_to_existing_file(caminho):
    caminho.write_text(f"1\nAna\n{CPF}\n", encoding="utf-8")
    tabela = TabelaCliente.carregar(caminho)
    novo = tabela.cadastrar(["2", "Bruno", CPF])
    assert novo == Cliente(2, "Bruno", CPF)
    assert TabelaCliente.carregar(caminho).dados == tabela.dados
    assert len(tabela) == 2


def test_contem(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["5", "Ana", CPF])
    assert tabela.contem(5)
    assert not tabela.contem(6)


def test_verificar_cadastro_missing_field(caminho):
    tabela = TabelaCliente(caminho)
    with pytest.raises(NadaEscritoError):
        tabela.verificar_cadastro(["1", None, CPF])
    with pytest.raises(NadaEscritoError):
        tabela.verificar_cadastro(["1", "Ana"])


def test_verificar_cadastro_existing_code(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["1", "Ana", CPF])
    with pytest.raises(CodigoExistenteError):
        tabela.verificar_cadastro(["1", "Outra", CPF])


def test_verificar_cadastro_code_checked_before_cpf(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["1", "Ana", CPF])
    with pytest.raises(CodigoExistenteError):
        tabela.verificar_cadastro(["1", "Outra", "curto"])


def test_verificar_cadastro_bad_cpf_length(caminho):
    tabela = TabelaCliente(caminho)
    with pytest.raises(NumeroInvalidoError):
        tabela.verificar_cadastro(["1", "Ana", CPF[:-1]])


def test_excluir_persists(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["1", "Ana", CPF])
    tabela.cadastrar(["2", "Bruno", CPF])
    tabela.excluir(1)
    assert [c.id for c in tabela] == [2]
    assert TabelaCliente.carregar(caminho).dados == [Cliente(2, "Bruno", CPF)]


def test_excluir_unknown_raises(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["1", "Ana", CPF])
    with pytest.raises(KeyError):
        tabela.excluir(9)
    assert len(tabela) == 1


def test_pesquisar_is_case_sensitive(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["1", "Ana", CPF])
    assert tabela.pesquisar("ana") == []
    assert len(tabela) == 0


def test_remover_da_visao_leaves_file(caminho):
    tabela = TabelaCliente(caminho)
    tabela.cadastrar(["1", "Ana", CPF])
    tabela.cadastrar(["2", "Bruno", CPF])
    tabela.remover_da_visao(2)
    assert [c.id for c in tabela] == [1]
    assert len(TabelaCliente.carregar(caminho)) == 2