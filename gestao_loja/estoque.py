"""Product stock table kept in a binary data file."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterator, Optional, Sequence

from gestao_loja.erros import (
    CodigoExistenteError,
    NadaEscritoError,
    ProdutoNaoExisteError,
    QuantidadeInsuficienteError,
)

ARQUIVO_PRODUTOS = "produtos.dat"

_INT32 = struct.Struct("<i")
_CABECALHO = struct.Struct("<iidd")
_BOOL = struct.Struct("<?")
_TAMANHO_TEXTO = struct.Struct("<H")
_INTEIRO = re.compile(r"\s*([+-]?\d+)")
_REAL = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _stoi(texto: str) -> int:
    """Parse a leading integer; raise ValueError when there is none."""
    achado = _INTEIRO.match(texto)
    if achado is None:
        raise ValueError(f"código inválido: {texto!r}")
    return int(achado.group(1))


def _atoi(texto: str) -> int:
    """Parse a leading integer; 0 when there is none."""
    achado = _INTEIRO.match(texto)
    return int(achado.group(1)) if achado else 0


def _atof(texto: str) -> float:
    """Parse a leading real number; 0.0 when there is none."""
    achado = _REAL.match(texto)
    return float(achado.group(1)) if achado else 0.0


@dataclass
class Produto:
    id: int
    quantidade: int
    preco: float
    nome: str
    categoria: str
    preco_total: float = 0.0
    dia: str = ""
    mes: str = ""
    ano: str = ""
    disponivel: bool = True


def verificar_edicao_produto(dados: Sequence[Optional[str]]) -> None:
    """Check that the four editable product fields were all given."""
    campos = list(dados[:4]) + [None] * (4 - len(dados[:4]))
    if any(campo is None for campo in campos):
        raise NadaEscritoError()


def _texto(bruto: str) -> bytes:
    codificado = bruto.encode("utf-8")
    return _TAMANHO_TEXTO.pack(len(codificado)) + codificado


def _codificar(produtos: Sequence[Produto]) -> bytes:
    partes = [_INT32.pack(len(produtos))]
    try:
        for p in produtos:
            partes.append(_CABECALHO.pack(p.id, p.quantidade, p.preco, p.preco_total))
            for texto in (p.nome, p.categoria, p.dia, p.mes, p.ano):
                partes.append(_texto(texto))
            partes.append(_BOOL.pack(p.disponivel))
    except struct.error as exc:
        raise ValueError(f"produto não pode ser gravado: {exc}") from exc
    return b"".join(partes)


def _decodificar(conteudo: bytes) -> list[Produto]:
    if not conteudo:
        return []
    try:
        (qtd,) = _INT32.unpack_from(conteudo, 0)
        if qtd < 0:
            raise ValueError("quantidade de produtos negativa")
        pos = _INT32.size
        produtos = []
        for _ in range(qtd):
            id_, quantidade, preco, preco_total = _CABECALHO.unpack_from(conteudo, pos)
            pos += _CABECALHO.size
            textos = []
            for _ in range(5):
                (tamanho,) = _TAMANHO_TEXTO.unpack_from(conteudo, pos)
                pos += _TAMANHO_TEXTO.size
                bruto = conteudo[pos:pos + tamanho]
                if len(bruto) != tamanho:
                    raise ValueError("arquivo de produtos truncado")
                textos.append(bruto.decode("utf-8"))
                pos += tamanho
            (disponivel,) = _BOOL.unpack_from(conteudo, pos)
            pos += _BOOL.size
            nome, categoria, dia, mes, ano = textos
            produtos.append(
                Produto(id_, quantidade, preco, nome, categoria,
                        preco_total, dia, mes, ano, disponivel)
            )
    except struct.error as exc:
        raise ValueError("arquivo de produtos truncado") from exc
    return produtos


class TabelaProduto:
    """The products in stock, backed by a binary file."""

    def __init__(self, caminho=ARQUIVO_PRODUTOS):
        self.caminho = Path(caminho)
        self.dados: list[Produto] = []

    def __len__(self) -> int:
        return len(self.dados)

    def __iter__(self) -> Iterator[Produto]:
        return iter(self.dados)

    def __getitem__(self, indice: int) -> Produto:
        return self.dados[indice]

    @classmethod
    def carregar(cls, caminho=ARQUIVO_PRODUTOS) -> "TabelaProduto":
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

    def contem(self, id: int) -> bool:
        return any(produto.id == id for produto in self.dados)

    def _indice(self, id: int) -> Optional[int]:
        return next((i for i, p in enumerate(self.dados) if p.id == id), None)

    def checar_estoque(self, id: int, quantidade: int) -> int:
        """Return the index of product ``id`` if ``quantidade`` is in stock."""
        indice = self._indice(id)
        if indice is None:
            raise ProdutoNaoExisteError()
        if quantidade > self.dados[indice].quantidade:
            raise QuantidadeInsuficienteError()
        return indice

    def remover_estoque(self, id: int, qtd: int) -> None:
        """Take ``qtd`` units of product ``id`` out of stock and save."""
        indice = self._indice(id)
        if indice is not None:
            self.dados[indice].quantidade -= qtd
            self.salvar()

    def adicionar_estoque(self, id: int, qtd: int) -> None:
        """Put ``qtd`` units of product ``id`` back in stock and save."""
        indice = self._indice(id)
        if indice is not None:
            self.dados[indice].quantidade += qtd
            self.salvar()

    def adicionar(self, produto: Produto) -> None:
        """Add a product to the table without saving."""
        self.dados.append(produto)

    def verificar_cadastro(self, dados: Sequence[Optional[str]]) -> None:
        """Check the five fields of a new product and that its id is free."""
        campos = list(dados[:5]) + [None] * (5 - len(dados[:5]))
        if any(campo is None for campo in campos):
            raise NadaEscritoError()
        if self.contem(_stoi(campos[0])):
            raise CodigoExistenteError()

    def cadastrar(self, dados: Sequence[str], hoje: Optional[date] = None) -> Produto:
        """Add a product from id, quantity, price, name and category; save."""
        hoje = hoje or date.today()
        quantidade = _atoi(dados[1])
        preco = _atof(dados[2])
        produto = Produto(
            id=_stoi(dados[0]),
            quantidade=quantidade,
            preco=preco,
            nome=dados[3],
            categoria=dados[4],
            preco_total=preco * quantidade,
            dia=f"{hoje.day:02d}",
            mes=f"{hoje.month:02d}",
            ano=f"{hoje.year:04d}",
            disponivel=True,
        )
        self.adicionar(produto)
        self.salvar()
        return produto

    def _retirar(self, id: int) -> None:
        restantes = [p for p in self.dados if p.id != id]
        if len(restantes) == len(self.dados):
            raise KeyError(id)
        self.dados = restantes

    def excluir(self, id: int) -> None:
        """Remove the product and save the table."""
        self._retirar(id)
        self.salvar()

    def editar(self, indice: int, produto: Produto) -> None:
        """Replace name, price, quantity and category at ``indice`` and save."""
        atual = self.dados[indice]
        atual.nome = produto.nome
        atual.preco = produto.preco
        atual.quantidade = produto.quantidade
        atual.categoria = produto.categoria
        self.salvar()

    def pesquisar(self, nome: str) -> list[Produto]:
        """Keep only the products whose name contains ``nome``."""
        self.dados = [p for p in self.dados if nome in p.nome]
        return list(self.dados)

    def remover_da_visao(self, id: int) -> None:
        """Remove the product from the table without touching the file."""
        self._retirar(id)