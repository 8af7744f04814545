# calcavendas/core/ports.py
"""
Definição das Portas (Interfaces/Protocolos) da Arquitetura Limpa.

Estes protocolos definem o contrato que a camada de Infraestrutura (banco de
documentos, Repositórios, Exportação) DEVE seguir para se conectar à camada
Core (Casos de Uso e Montagem do Pedido).
"""

from typing import Protocol, List, Optional, Dict, Any
from abc import abstractmethod

from calcavendas.core.entities import Produto, Cliente, Pedido


class _ServerTimestamp:
    """Sentinela substituída pelo relógio do banco de documentos no momento da gravação."""

    def __repr__(self):
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()

# Nomes das coleções do banco de documentos
COLECAO_CLIENTES = "clients"
COLECAO_PRODUTOS = "products"
COLECAO_PEDIDOS = "orders"


# ====================================================================
# 1. BANCO DE DOCUMENTOS (Coleções chave -> documento)
# ====================================================================

class IDocumentStore(Protocol):
    """Protocolo genérico de um banco de documentos organizado em coleções."""

    @abstractmethod
    def listar(self, colecao: str) -> List[Dict[str, Any]]: ...

    @abstractmethod
    def buscar(self, colecao: str, doc_id: str) -> Optional[Dict[str, Any]]: ...

    @abstractmethod
    def criar(self, colecao: str, dados: Dict[str, Any]) -> str:
        """Grava um novo documento e devolve o id atribuído pelo banco."""
        ...

    @abstractmethod
    def atualizar(self, colecao: str, doc_id: str, dados: Dict[str, Any], merge: bool = True):
        """
        Atualiza o documento. Com merge, campos não informados permanecem intactos.
        Se o documento não existir, ele é criado com o id informado.
        """
        ...

    @abstractmethod
    def deletar(self, colecao: str, doc_id: str): ...

    @abstractmethod
    def consultar(self, colecao: str, filtros: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Documentos cujos campos são iguais a todos os valores de `filtros`."""
        ...


# ====================================================================
# 2. REPOSITÓRIOS (Portas de Persistência)
# ====================================================================

class IProdutoRepository(Protocol):
    """Protocolo para a persistência e busca de Produtos do catálogo."""

    @abstractmethod
    def listar(self) -> List[Produto]: ...

    @abstractmethod
    def buscar_por_id(self, produto_id: str) -> Optional[Produto]: ...

    @abstractmethod
    def buscar_por_referencia(self, referencia: str) -> Optional[Produto]: ...

    @abstractmethod
    def salvar(self, produto: Produto) -> Produto:
        """Cria ou atualiza o produto, reaproveitando o documento de mesma referência."""
        ...

    @abstractmethod
    def deletar(self, produto_id: str): ...


class IClienteRepository(Protocol):
    """Protocolo para a persistência de Clientes."""

    @abstractmethod
    def listar(self) -> List[Cliente]: ...

    @abstractmethod
    def buscar_por_id(self, cliente_id: str) -> Optional[Cliente]: ...

    @abstractmethod
    def salvar(self, cliente: Cliente) -> Cliente: ...

    @abstractmethod
    def deletar(self, cliente_id: str): ...


class IPedidoRepository(Protocol):
    """Protocolo para a persistência e consulta de Pedidos."""

    @abstractmethod
    def listar(self) -> List[Pedido]: ...

    @abstractmethod
    def buscar_por_id(self, pedido_id: str) -> Optional[Pedido]: ...

    @abstractmethod
    def listar_por_cliente(self, cliente_id: str) -> List[Pedido]: ...

    @abstractmethod
    def criar(self, pedido: Pedido) -> Pedido:
        """Grava o pedido num único documento, com data atribuída pelo servidor."""
        ...

    @abstractmethod
    def atualizar(self, pedido: Pedido) -> Pedido:
        """Regrava um pedido existente mantendo o id e a data original."""
        ...


# ====================================================================
# 3. GATEWAYS (Portas de Serviços Externos)
# ====================================================================

class IExportadorPedido(Protocol):
    """Protocolo para gerar o documento do pedido e o texto de compartilhamento."""

    @abstractmethod
    def gerar_documento(self, pedido: Pedido, cliente: Cliente) -> str: ...

    @abstractmethod
    def gerar_link_compartilhamento(self, pedido: Pedido, cliente: Cliente) -> str: ...
