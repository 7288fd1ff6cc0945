import io
import time
from unittest import mock

import pytest

from gestao_loja.terminal import (
    Console,
    Cor,
    esperar,
    ler_tecla,
    ler_tecla_eco,
    maiusculas,
    minusculas,
)


@pytest.fixture
def console():
    return Console(io.StringIO())


def test_cor_texto_basica(console):
    console.cor_texto(Cor.VERMELHO)
    assert console.saida.getvalue() == "\033[0;31;40m"


def test_cor_texto_clara_liga_atributo(console):
    console.cor_texto(Cor.AZUL_CLARO)
    assert console.saida.getvalue() == "\033[1;34;40m"
    assert console.atributo == 1


def test_cor_texto_clara_e_basica_mesmo_codigo(console):
    console.cor_texto(Cor.VERDE)
    basica = console.frente
    console.cor_texto(Cor.VERDE_CLARO)
    assert console.frente == basica


def test_cor_texto_invalida_nao_escreve(console):
    console.cor_texto(20)
    assert console.saida.getvalue() == ""
    assert console.atributo == 1
    assert console.frente == 37


def test_cor_fundo(console):
    console.cor_fundo(Cor.BRANCO - 8)
    assert console.saida.getvalue() == "\033[0;37;47m"


def test_cor_fundo_invalida_nao_escreve(console):
    console.cor_fundo(Cor.AMARELO)
    console.cor_fundo(-1)
    assert console.saida.getvalue() == ""
    assert console.fundo == 40


def test_cores_combinadas_mantem_estado(console):
    console.cor_fundo(Cor.AZUL)
    console.cor_texto(Cor.AMARELO)
    assert console.saida.getvalue().endswith("\033[1;33;44m")


def test_mover_cursor_origem(console):
    console.mover_cursor(0, 0)
    assert console.saida.getvalue() == "\033[1;1H"


def test_mover_cursor_linha_antes_coluna(console):
    console.mover_cursor(4, 9)
    assert console.saida.getvalue() == "\033[10;5H"


def test_limpar_tela_chama_comando(console):
    with mock.patch("gestao_loja.terminal.subprocess.run") as run:
        console.limpar_tela()
    assert run.call_count == 1
    comando = run.call_args.args[0]
    assert comando in (["clear"], "cls")
    assert console.saida.getvalue() == ""


def test_esperar_em_segundos():
    with mock.patch("gestao_loja.terminal.time.sleep") as sleep:
        resultado = esperar(1500)
    assert resultado is None
    assert sleep.call_args_list == [mock.call(1.5)]


def test_esperar_zero():
    with mock.patch("gestao_loja.terminal.time.sleep") as sleep:
        resultado = esperar(0)
    assert resultado is None
    assert sleep.call_args_list == [mock.call(0.0)]


def test_esperar_realmente_espera():
    inicio = time.monotonic()
    resultado = esperar(50)
    decorrido = time.monotonic() - inicio
    assert resultado is None
    assert decorrido >= 0.04


def test_ler_tecla_le_um_caractere():
    with mock.patch("sys.stdin", io.StringIO("xy")):
        assert ler_tecla() == "x"
        assert ler_tecla() == "y"
        assert ler_tecla() == ""


def test_ler_tecla_eco_escreve():
    saida = io.StringIO()
    with mock.patch("sys.stdin", io.StringIO("q")):
        tecla = ler_tecla_eco(saida)
    assert tecla == "q"
    assert saida.getvalue() == "q"


def test_minusculas_so_ascii():
    assert minusculas("ABC def Ção 123") == "abc def Ção 123"


def test_maiusculas_so_ascii():
    assert maiusculas("abc DEF ção!") == "ABC DEF çãO!"


def test_ida_e_volta():
    texto = "Gestao de Loja"
    assert minusculas(maiusculas(texto)) == minusculas(texto)
    assert maiusculas(minusculas(texto)) == maiusculas(texto)


def test_cor_valores_fixos(console):
    assert Cor(0) is Cor.PRETO
    assert Cor(15) is Cor.BRANCO
    assert len(Cor) == 16
    console.cor_texto(Cor.BRANCO)
    assert console.saida.getvalue() == "\033[1;37;40m"