"""Supplier table kept in a binary data file."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from gestao_loja.erros import (
    CodigoExistenteError,
    NadaEscritoError,
    NumeroInvalidoError,
)

ARQUIVO_FORNECEDORES = "fornecedores.dat"
TAMANHO_CONTATO = 11

_INT32 = struct.Struct("<i")
_TAMANHO_TEXTO = struct.Struct("<H")
_INTEIRO = re.compile(r"\s*([+-]?\d+)")


def _stoi(texto: str) -> int:
    """Parse a leading integer; raise ValueError when there is none."""
    achado = _INTEIRO.match(texto)
    if achado is None:
        raise ValueError(f"código inválido: {texto!r}")
    return int(achado.group(1))


@dataclass
class Fornecedor:
    codigo: int
    empresa_nome: str
    responsavel: str
    contato: str


def formatar_contato(contato: str) -> str:
    """Turn eleven digits into the form ``(DD) NNNNN-NNNN``."""
    if len(contato) != TAMANHO_CONTATO:
        raise NumeroInvalidoError()
    c = contato
    return f"({c[0:2]}) {c[2:7]}-{c[7:11]}"


def verificar_edicao(
    empresa_nome: Optional[str], responsavel: Optional[str], contato: Optional[str]
) -> None:
    """Check the editable fields of a supplier."""
    if not empresa_nome or not responsavel or not contato:
        raise NadaEscritoError()
    if len(contato) != TAMANHO_CONTATO:
        raise NumeroInvalidoError()


def _codificar(fornecedores: Sequence[Fornecedor]) -> bytes:
    partes = [_INT32.pack(len(fornecedores))]
    try:
        for fornecedor in fornecedores:
            partes.append(_INT32.pack(fornecedor.codigo))
            for texto in (fornecedor.empresa_nome, fornecedor.responsavel, fornecedor.contato):
                bruto = texto.encode("utf-8")
                partes.append(_TAMANHO_TEXTO.pack(len(bruto)))
                partes.append(bruto)
    except struct.error as exc:
        raise ValueError(f"fornecedor não pode ser gravado: {exc}") from exc
    return b"".join(partes)


def _decodificar(conteudo: bytes) -> list[Fornecedor]:
    if not conteudo:
        return []
    try:
        (qtd,) = _INT32.unpack_from(conteudo, 0)
        if qtd < 0:
            raise ValueError("quantidade de fornecedores negativa")
        pos = _INT32.size
        fornecedores = []
        for _ in range(qtd):
            (codigo,) = _INT32.unpack_from(conteudo, pos)
            pos += _INT32.size
            textos = []
            for _ in range(3):
                (tamanho,) = _TAMANHO_TEXTO.unpack_from(conteudo, pos)
                pos += _TAMANHO_TEXTO.size
                bruto = conteudo[pos:pos + tamanho]
                if len(bruto) != tamanho:
                    raise ValueError("arquivo de fornecedores truncado")
                textos.append(bruto.decode("utf-8"))
                pos += tamanho
            fornecedores.append(Fornecedor(codigo, *textos))
    except struct.error as exc:
        raise ValueError("arquivo de fornecedores truncado") from exc
    return fornecedores


class TabelaFornecedor:
    """The suppliers, backed by a binary file."""

    def __init__(self, caminho=ARQUIVO_FORNECEDORES):
        self.caminho = Path(caminho)
        self.dados: list[Fornecedor] = []

    def __len__(self) -> int:
        return len(self.dados)

    def __iter__(self) -> Iterator[Fornecedor]:
        return iter(self.dados)

    def __getitem__(self, indice: int) -> Fornecedor:
        return self.dados[indice]

    @classmethod
    def carregar(cls, caminho=ARQUIVO_FORNECEDORES) -> "TabelaFornecedor":
        """Read the file; a missing or unreadable file gives an empty table."""
        tabela = cls(caminho)
        try:
            conteudo = tabela.caminho.read_bytes()
        except OSError:
            return tabela
        tabela.dados = _decodificar(conteudo)
        return tabela

    def salvar(self) -> None:
        """Rewrite the whole file from the table."""
        self.caminho.write_bytes(_codificar(self.dados))

    def contem(self, codigo: int) -> bool:
        return any(fornecedor.codigo == codigo for fornecedor in self.dados)

    def adicionar(self, fornecedor: Fornecedor) -> None:
        """Add a supplier to the table without saving."""
        self.dados.append(fornecedor)

    def verificar_cadastro(self, dados: Sequence[Optional[str]]) -> None:
        """Check code, company, person and contact before a new supplier is added."""
        campos = list(dados[:4]) + [None] * (4 - len(dados[:4]))
        if any(campo is None for campo in campos):
            raise NadaEscritoError()
        if self.contem(_stoi(campos[0])):
            raise CodigoExistenteError()
        if len(campos[3]) != TAMANHO_CONTATO:
            raise NumeroInvalidoError()

    def cadastrar(self, dados: Sequence[str]) -> Fornecedor:
        """Add a supplier with a formatted contact and save the table."""
        fornecedor = Fornecedor(
            codigo=_stoi(dados[0]),
            empresa_nome=dados[1],
            responsavel=dados[2],
            contato=formatar_contato(dados[3]),
        )
        self.adicionar(fornecedor)
        self.salvar()
        return fornecedor

    def _retirar(self, codigo: int) -> None:
        restantes = [f for f in self.dados if f.codigo != codigo]
        if len(restantes) == len(self.dados):
            raise KeyError(codigo)
        self.dados = restantes

    def excluir(self, codigo: int) -> None:
        """Remove the supplier and save the table."""
        self._retirar(codigo)
        self.salvar()

    def pesquisar(self, empresa: str) -> list[Fornecedor]:
        """Keep only the suppliers whose company name contains ``empresa``."""
        self.dados = [f for f in self.dados if empresa in f.empresa_nome]
        return list(self.dados)

    def editar(self, indice: int, fornecedor: Fornecedor) -> None:
        """Replace company, person and contact at ``indice`` and save."""
        atual = self.dados[indice]
        atual.empresa_nome = fornecedor.empresa_nome
        atual.responsavel = fornecedor.responsavel
        atual.contato = fornecedor.contato
        self.salvar()

    def remover_da_visao(self, codigo: int) -> None:
        """Remove the supplier from the table without touching the file."""
        self._retirar(codigo)