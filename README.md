# gestao_loja

A small library for keeping a shop's back-office records in local files:
customers, suppliers, product stock and the sale currently being rung up.
It uses only the standard library.

## Modules

- **`gestao_loja.clientes`**: `Cliente` records held in a `TabelaCliente`,
  stored as a plain text file (`clientes.txt` by default), three lines per
  customer: code, name, CPF.
  - `TabelaCliente.carregar(caminho)` reads the file; a missing file gives an
    empty table. `salvar()` rewrites the whole file.
  - `verificar_cadastro(conteudo)` checks a new entry: all three fields must
    be given, the code must not be in use and the CPF must be exactly 14
    characters long.
  - `cadastrar(conteudo)` appends the entry to the file and to the table.
  - `excluir(id)` removes a customer and rewrites the file;
    `remover_da_visao(id)` removes it from the table only. Both raise
    `KeyError` when the id is not present.
  - `pesquisar(nome)` narrows the table, in place, to the customers whose name
    contains `nome`, and returns them.
- **`gestao_loja.fornecedores`**: `Fornecedor` records held in a
  `TabelaFornecedor`, stored in a binary file (`fornecedores.dat` by default).
  `verificar_cadastro` requires code, company, person in charge and an
  11-character contact; `cadastrar` stores the contact formatted by
  `formatar_contato` as `(XX) XXXXX-XXXX` and saves the table. `editar`,
  `excluir`, `pesquisar` and `remover_da_visao` work as for customers, and
  `verificar_edicao(empresa_nome, responsavel, contato)` checks edited fields.
- **`gestao_loja.estoque`**: `Produto` records held in a `TabelaProduto`,
  stored in a binary file (`produtos.dat` by default). `cadastrar(dados, hoje)`
  takes id, quantity, price, name and category, computes the total price and
  stamps the date. `checar_estoque(id, quantidade)` returns the product's
  index or raises when the product is missing or stock is short;
  `remover_estoque` and `adicionar_estoque` adjust a quantity and save at once.
- **`gestao_loja.vendas`**: a `Venda` is a list of `ItemVenda` entries with a
  running total. `pesquisar_item(dados, tabela)` validates a product id and
  quantity and returns `(indice, qtd)`; `Venda.adicionar_item` adds that
  product to the sale. `RegistroVendas(diretorio)` numbers the sales, writes
  the finished sale (`salvar_venda`), and keeps the list of the sale in
  progress on disk (`armazenar_item`, `sobrescrever_lista`, `carregar_lista`,
  `excluir_lista`) so that it survives a restart. `remover_item` takes an item
  out of the sale and returns its units to stock.
- **`gestao_loja.terminal`**: a `Console` that writes ANSI colour and cursor
  sequences (`cor_texto`, `cor_fundo`, `mover_cursor`) and clears the screen
  with the system's `clear`/`cls` command; `ler_tecla` and `ler_tecla_eco`
  read one key press without Enter; `esperar`, `minusculas` and `maiusculas`
  are small helpers. Colours are named by the `Cor` enum.

## Errors

Validation failures are raised as exceptions from `gestao_loja.erros`, all
derived from `CadastroError`:

| Exception                     | Raised when                                |
|-------------------------------|--------------------------------------------|
| `NadaEscritoError`            | a required field was left empty            |
| `CodigoExistenteError`        | the code is already registered             |
| `NumeroInvalidoError`         | a CPF or contact has the wrong length      |
| `QuantidadeInvalidaError`     | a sale quantity is zero or negative        |
| `ProdutoNaoExisteError`       | no product has the given code              |
| `QuantidadeInsuficienteError` | there is not enough stock                  |

A supplier or product file that is truncated or malformed raises `ValueError`
when loaded.

## Example

```python
from gestao_loja.clientes import TabelaCliente
from gestao_loja.erros import CadastroError

clientes = TabelaCliente.carregar("clientes.txt")
conteudo = ["7", "Maria", "cpf-do-cliente"]

try:
    clientes.verificar_cadastro(conteudo)
except CadastroError as erro:
    print("cadastro recusado:", erro)
else:
    clientes.cadastrar(conteudo)
```

A sale:

```python
from gestao_loja.estoque import TabelaProduto
from gestao_loja.vendas import RegistroVendas, pesquisar_item

produtos = TabelaProduto.carregar("produtos.dat")
registro = RegistroVendas(".")

venda = registro.nova_venda()
registro.carregar_lista(venda)

indice, qtd = pesquisar_item(["10", "2"], produtos)
item = venda.adicionar_item(produtos, indice, qtd)
produtos.remover_estoque(item.codigo_produto, qtd)
registro.armazenar_item(item)

registro.salvar_venda(venda)
registro.excluir_lista()
```

`adicionar_item` does not change the stock itself; the caller takes the units
out with `remover_estoque`, as above.

## What it does not do

This is a library only. It has no command to run and no interactive menus or
screens: reading input, showing tables and choosing what to do next is left to
the program that uses it. The `terminal` module gives the building blocks for
such screens but does not draw any.