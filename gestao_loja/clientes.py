"""Customer table kept in a plain text file, three lines per customer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from gestao_loja.erros import (
    CodigoExistenteError,
    NadaEscritoError,
    NumeroInvalidoError,
)

ARQUIVO_CLIENTES = "clientes.txt"
TAMANHO_NOME = 64
TAMANHO_CPF = 14

_INTEIRO = re.compile(r"\s*([+-]?\d+)")


def _atoi(texto: str) -> int:
    """Parse a leading integer; 0 when there is none."""
    achado = _INTEIRO.match(texto)
    return int(achado.group(1)) if achado else 0


@dataclass
class Cliente:
    id: int
    nome: str
    cpf: str


class TabelaCliente:
    """The customers, backed by a text file."""

    def __init__(self, caminho=ARQUIVO_CLIENTES):
        self.caminho = Path(caminho)
        self.dados: list[Cliente] = []

    def __len__(self) -> int:
        return len(self.dados)

    def __iter__(self) -> Iterator[Cliente]:
        return iter(self.dados)

    def __getitem__(self, indice: int) -> Cliente:
        return self.dados[indice]

    @classmethod
    def carregar(cls, caminho=ARQUIVO_CLIENTES) -> "TabelaCliente":
        """Read the file; a missing or unreadable file gives an empty table."""
        tabela = cls(caminho)
        try:
            with tabela.caminho.open(encoding="utf-8", newline="") as arquivo:
                texto = arquivo.read()
        except OSError:
            return tabela
        linhas = texto.split("\n")
        if texto.endswith("\n"):
            linhas.pop()
        elif not texto:
            linhas = []
        grupos = iter(linhas)
        for id_texto, nome, cpf in zip(grupos, grupos, grupos):
            tabela.dados.append(Cliente(_atoi(id_texto), nome, cpf))
        return tabela

    def salvar(self) -> None:
        """Rewrite the whole file from the table."""
        with self.caminho.open("w", encoding="utf-8", newline="") as arquivo:
            for cliente in self.dados:
                arquivo.write(f"{cliente.id}\n{cliente.nome}\n{cliente.cpf}\n")

    def contem(self, id: int) -> bool:
        return any(cliente.id == id for cliente in self.dados)

    def verificar_cadastro(self, conteudo: Sequence[Optional[str]]) -> None:
        """Check id, name and CPF fields before a new customer is added."""
        campos = list(conteudo[:3]) + [None] * (3 - len(conteudo[:3]))
        if any(campo is None for campo in campos):
            raise NadaEscritoError()
        if self.contem(_atoi(campos[0])):
            raise CodigoExistenteError()
        if len(campos[2]) != TAMANHO_CPF:
            raise NumeroInvalidoError()

    def cadastrar(self, conteudo: Sequence[str]) -> Cliente:
        """Append the customer to the file and to the table."""
        id_texto, nome, cpf = conteudo[0], conteudo[1], conteudo[2]
        with self.caminho.open("a", encoding="utf-8", newline="") as arquivo:
            arquivo.write(f"{id_texto}\n{nome}\n{cpf}\n")
        cliente = Cliente(_atoi(id_texto), nome, cpf)
        self.dados.append(cliente)
        return cliente

    def _retirar(self, id: int) -> None:
        restantes = [cliente for cliente in self.dados if cliente.id != id]
        if len(restantes) == len(self.dados):
            raise KeyError(id)
        self.dados = restantes

    def excluir(self, id: int) -> None:
        """Remove the customer and rewrite the file."""
        self._retirar(id)
        self.salvar()

    def pesquisar(self, nome: str) -> list[Cliente]:
        """Keep only the customers whose name contains ``nome``."""
        self.dados = [cliente for cliente in self.dados if nome in cliente.nome]
        return list(self.dados)

    def remover_da_visao(self, id: int) -> None:
        """Remove the customer from the table without touching the file."""
        self._retirar(id)