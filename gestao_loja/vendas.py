"""Sales in progress and the files that record them."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from gestao_loja.erros import NadaEscritoError, QuantidadeInvalidaError
from gestao_loja.estoque import TabelaProduto

ARQUIVO_CONTADOR = "contador_vendas.txt"
ARQUIVO_VENDAS = "vendas.txt"
ARQUIVO_ESTOQUE_VENDA = "estoque_venda.txt"
ARQUIVO_ESTADO = "venda_estado.dat"

_CODIGO = struct.Struct("<i")
_VALORES = struct.Struct("<did")
_TAMANHO_TEXTO = struct.Struct("<H")
_INTEIRO = re.compile(r"\s*([+-]?\d+)")


def _atoi(texto: str) -> int:
    achado = _INTEIRO.match(texto)
    return int(achado.group(1)) if achado else 0


@dataclass
class ItemVenda:
    codigo_produto: int
    descricao: str
    preco_unitario: float
    quantidade: int
    subtotal: float

    def codificar(self) -> bytes:
        descricao = self.descricao.encode("utf-8")
        return b"".join((
            _CODIGO.pack(self.codigo_produto),
            _TAMANHO_TEXTO.pack(len(descricao)),
            descricao,
            _VALORES.pack(self.preco_unitario, self.quantidade, self.subtotal),
        ))


def _ler_itens(conteudo: bytes):
    """Yield the complete items in ``conteudo``; a trailing partial one is ignored."""
    pos = 0
    while pos < len(conteudo):
        try:
            (codigo,) = _CODIGO.unpack_from(conteudo, pos)
            pos += _CODIGO.size
            (tamanho,) = _TAMANHO_TEXTO.unpack_from(conteudo, pos)
            pos += _TAMANHO_TEXTO.size
            bruto = conteudo[pos:pos + tamanho]
            if len(bruto) != tamanho:
                return
            pos += tamanho
            preco, quantidade, subtotal = _VALORES.unpack_from(conteudo, pos)
            pos += _VALORES.size
        except struct.error:
            return
        yield ItemVenda(codigo, bruto.decode("utf-8"), preco, quantidade, subtotal)


@dataclass
class Venda:
    numero_venda: int
    data: str
    codigo_cliente: int = 0
    itens: list[ItemVenda] = field(default_factory=list)
    total_venda: float = 0.0

    @property
    def qtd_lista(self) -> int:
        return len(self.itens)

    def inserir(self, item: ItemVenda) -> None:
        """Append an item without touching the total."""
        self.itens.append(item)

    def remover(self, indice: int) -> ItemVenda:
        """Take the item at ``indice`` out of the list."""
        return self.itens.pop(indice)

    def adicionar_item(self, tabela: TabelaProduto, indice: int, qtd: int) -> ItemVenda:
        """Add ``qtd`` units of the product at ``indice`` and update the total."""
        produto = tabela[indice]
        item = ItemVenda(
            codigo_produto=produto.id,
            descricao=produto.nome,
            preco_unitario=produto.preco,
            quantidade=qtd,
            subtotal=produto.preco * qtd,
        )
        self.inserir(item)
        self.total_venda += item.subtotal
        return item


def data_atual(agora: Optional[datetime] = None) -> str:
    """The date as ``DD/MM/YYYY``."""
    agora = agora or datetime.now()
    return f"{agora.day:02d}/{agora.month:02d}/{agora.year:04d}"


def pesquisar_item(dados: Sequence[Optional[str]], tabela: TabelaProduto) -> tuple[int, int]:
    """Validate product id and quantity; return the product index and quantity."""
    campos = list(dados[:2]) + [None] * (2 - len(dados[:2]))
    if campos[0] is None or campos[1] is None:
        raise NadaEscritoError()
    id_ = _atoi(campos[0])
    qtd = _atoi(campos[1])
    if qtd <= 0:
        raise QuantidadeInvalidaError()
    return tabela.checar_estoque(id_, qtd), qtd


class RegistroVendas:
    """The sale counter, sale records and the saved in-progress list."""

    def __init__(self, diretorio="."):
        self.diretorio = Path(diretorio)
        self.contador = self.diretorio / ARQUIVO_CONTADOR
        self.vendas = self.diretorio / ARQUIVO_VENDAS
        self.estoque_venda = self.diretorio / ARQUIVO_ESTOQUE_VENDA
        self.estado = self.diretorio / ARQUIVO_ESTADO

    def proximo_numero(self) -> int:
        """The number of the next sale: 1 when no counter file exists."""
        try:
            texto = self.contador.read_text(encoding="utf-8")
        except OSError:
            return 1
        return _atoi(texto)

    def nova_venda(self) -> Venda:
        return Venda(numero_venda=self.proximo_numero(), data=data_atual())

    def salvar_venda(self, venda: Venda) -> None:
        """Write the sale record and its stock lines, then advance the counter."""
        linhas = [
            str(venda.numero_venda),
            venda.data,
            str(venda.codigo_cliente),
            str(venda.qtd_lista),
            f"{venda.total_venda:.2f}",
        ]
        for item in venda.itens:
            linhas += [
                str(item.codigo_produto),
                item.descricao,
                f"{item.preco_unitario:.2f}",
                str(item.quantidade),
                f"{item.subtotal:.2f}",
            ]
        self.vendas.write_text("".join(f"{l}\n" for l in linhas), encoding="utf-8")
        estoque = "".join(f"{i.codigo_produto}\n{i.quantidade}\n" for i in venda.itens)
        self.estoque_venda.write_text(estoque, encoding="utf-8")
        self.contador.write_text(str(venda.numero_venda + 1), encoding="utf-8")

    def carregar_lista(self, venda: Venda) -> bool:
        """Append the saved in-progress items to ``venda``; False if none saved."""
        try:
            conteudo = self.estado.read_bytes()
        except OSError:
            return False
        for item in _ler_itens(conteudo):
            venda.inserir(item)
            venda.total_venda += item.subtotal
        return True

    def armazenar_item(self, item: ItemVenda) -> None:
        with self.estado.open("ab") as arquivo:
            arquivo.write(item.codificar())

    def sobrescrever_lista(self, venda: Venda) -> None:
        self.estado.write_bytes(b"".join(item.codificar() for item in venda.itens))

    def excluir_lista(self) -> None:
        self.estado.unlink(missing_ok=True)

    def remover_item(self, tabela: TabelaProduto, venda: Venda, indice: int) -> ItemVenda:
        """Return the item's units to stock, drop it and rewrite the saved list."""
        item = venda.itens[indice]
        tabela.adicionar_estoque(item.codigo_produto, item.quantidade)
        venda.total_venda -= item.subtotal
        venda.remover(indice)
        self.sobrescrever_lista(venda)
        return item

    def resetar(self, venda: Venda) -> None:
        """Start ``venda`` over with the next number and today's date."""
        venda.numero_venda = self.proximo_numero()
        venda.data = data_atual()
        venda.total_venda = 0.0
        venda.itens = []