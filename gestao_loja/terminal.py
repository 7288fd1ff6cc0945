"""Console helpers: ANSI colours, cursor placement, screen clearing and key reads."""

from __future__ import annotations

import os
import string
import subprocess
import sys
import time
from enum import IntEnum
from typing import Optional, TextIO

_ANSI_FRENTE = (30, 34, 32, 36, 31, 35, 33, 37)
_ANSI_FUNDO = (40, 44, 42, 46, 41, 45, 43, 47)

_PARA_MINUSCULAS = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_PARA_MAIUSCULAS = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Cor(IntEnum):
    PRETO = 0
    AZUL = 1
    VERDE = 2
    CIANO = 3
    VERMELHO = 4
    MAGENTA = 5
    MARROM = 6
    CINZA_CLARO = 7
    CINZA_ESCURO = 8
    AZUL_CLARO = 9
    VERDE_CLARO = 10
    CIANO_CLARO = 11
    VERMELHO_CLARO = 12
    MAGENTA_CLARO = 13
    AMARELO = 14
    BRANCO = 15


class Console:
    """Writes ANSI escape sequences to a text stream, keeping the colour state."""

    def __init__(self, saida: Optional[TextIO] = None):
        self.saida = saida if saida is not None else sys.stdout
        self.atributo = 0
        self.frente = 37
        self.fundo = 40

    def _escrever(self, texto: str) -> None:
        self.saida.write(texto)
        self.saida.flush()

    def _aplicar_cores(self) -> None:
        self._escrever(f"\033[{self.atributo};{self.frente};{self.fundo}m")

    def cor_texto(self, cor: int) -> None:
        """Set the text colour; colours above 7 are the bright variants."""
        cor = int(cor)
        if cor > 7:
            self.atributo = 1
            cor -= 8
        else:
            self.atributo = 0
        if not 0 <= cor < len(_ANSI_FRENTE):
            return
        self.frente = _ANSI_FRENTE[cor]
        self._aplicar_cores()

    def cor_fundo(self, cor: int) -> None:
        """Set the background colour; only the eight basic colours apply."""
        cor = int(cor)
        if not 0 <= cor < len(_ANSI_FUNDO):
            return
        self.fundo = _ANSI_FUNDO[cor]
        self._aplicar_cores()

    def mover_cursor(self, x: int, y: int) -> None:
        """Move the cursor; (0, 0) is the top-left corner."""
        self._escrever(f"\033[{y + 1};{x + 1}H")

    def limpar_tela(self) -> None:
        """Clear the screen with the system's own command."""
        self.saida.flush()
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)


def esperar(ms: int) -> None:
    """Pause for ``ms`` milliseconds."""
    time.sleep(ms / 1000)


def ler_tecla() -> str:
    """Read one character without echo or waiting for Enter; "" at end of input."""
    entrada = sys.stdin
    if os.name == "nt" and entrada.isatty():
        import msvcrt

        return msvcrt.getwch()
    if not entrada.isatty():
        return entrada.read(1)

    import termios

    descritor = entrada.fileno()
    original = termios.tcgetattr(descritor)
    novo = termios.tcgetattr(descritor)
    novo[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
    novo[6][termios.VMIN] = 1
    novo[6][termios.VTIME] = 0
    termios.tcsetattr(descritor, termios.TCSANOW, novo)
    try:
        return entrada.read(1)
    finally:
        termios.tcsetattr(descritor, termios.TCSANOW, original)


def ler_tecla_eco(saida: Optional[TextIO] = None) -> str:
    """Read one character like :func:`ler_tecla` and echo it."""
    saida = saida if saida is not None else sys.stdout
    tecla = ler_tecla()
    saida.write(tecla)
    saida.flush()
    return tecla


def minusculas(texto: str) -> str:
    """Lower-case the ASCII letters only."""
    return texto.translate(_PARA_MINUSCULAS)


def maiusculas(texto: str) -> str:
    """Upper-case the ASCII letters only."""
    return texto.translate(_PARA_MAIUSCULAS)