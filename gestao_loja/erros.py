"""Exceptions raised when validating records and sales."""


class CadastroError(Exception):
    """Base of every record and sale validation error."""

    mensagem = "erro de cadastro"

    def __init__(self, mensagem=None):
        super().__init__(self.mensagem if mensagem is None else mensagem)


class NadaEscritoError(CadastroError):
    """A required field was left empty."""

    mensagem = "campo obrigatório não preenchido"


class CodigoExistenteError(CadastroError):
    """The code or id is already in use."""

    mensagem = "código já cadastrado"


class NumeroInvalidoError(CadastroError):
    """A document or contact number has the wrong length."""

    mensagem = "número inválido"


class QuantidadeInvalidaError(CadastroError):
    """A quantity that is not positive was given."""

    mensagem = "quantidade inválida"


class ProdutoNaoExisteError(CadastroError):
    """No product has the requested id."""

    mensagem = "produto não existe"


class QuantidadeInsuficienteError(CadastroError):
    """There is not enough stock for the requested quantity."""

    mensagem = "quantidade insuficiente em estoque"