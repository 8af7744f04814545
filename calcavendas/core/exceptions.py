class BaseErroCore(Exception):
    """Classe base para todas as exceções da Camada Core."""
    pass

class DadosInvalidosError(BaseErroCore):
    """Erro levantado quando dados inválidos são fornecidos."""
    def __init__(self, message="Os dados fornecidos são inválidos."):
        self.message = message
        super().__init__(self.message)

class TamanhoInvalidoError(DadosInvalidosError):
    """Erro levantado quando a numeração não pertence à grade 33-46."""
    def __init__(self, tamanho: str, message=None):
        self.tamanho = tamanho
        if message is None:
            message = f"Numeração {tamanho} não pertence à grade (33 a 46)."
        super().__init__(message)

# ===============================================
# ERROS DE PERSISTÊNCIA E ENTIDADE
# ===============================================

class ItemNaoEncontradoError(BaseErroCore):
    """Erro levantado quando um item (genérico) não é encontrado."""
    def __init__(self, message="O item solicitado não foi encontrado."):
        self.message = message
        super().__init__(self.message)

class ProdutoNaoEncontradoError(ItemNaoEncontradoError):
    """Erro levantado quando um produto específico não é encontrado."""
    def __init__(self, message="O produto solicitado não foi encontrado."):
        super().__init__(message)

class ClienteNaoEncontradoError(ItemNaoEncontradoError):
    """Erro específico para Clientes não encontrados."""
    pass

class PedidoNaoEncontradoError(ItemNaoEncontradoError):
    """Erro específico para Pedidos não encontrados."""
    pass

class PersistenciaError(BaseErroCore):
    """Erro levantado quando o banco de documentos rejeita uma gravação."""
    def __init__(self, message="Erro ao salvar os dados. Tente novamente."):
        self.message = message
        super().__init__(self.message)

class ConexaoError(BaseErroCore):
    """Erro levantado quando o banco de documentos não responde a tempo ou recusa a leitura."""
    def __init__(self, message="Não foi possível conectar ao banco de dados."):
        self.message = message
        super().__init__(self.message)

# ===============================================
# ERROS DO FLUXO DE MONTAGEM DO PEDIDO
# ===============================================

class CarrinhoVazioError(BaseErroCore):
    """Erro levantado ao tentar salvar um pedido sem itens ou sem cliente."""
    def __init__(self, message="Selecione um cliente e adicione ao menos um item ao pedido."):
        self.message = message
        super().__init__(self.message)
