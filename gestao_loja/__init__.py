"""Store back-office records: customers, suppliers, stock and sales kept in local files."""

__version__ = "0.1.0"

__all__ = ["clientes", "erros", "estoque", "fornecedores", "terminal", "vendas"]