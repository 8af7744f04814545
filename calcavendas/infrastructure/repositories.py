from typing import List, Optional
import logging

from calcavendas.core import entities
from calcavendas.core.ports import (
    IDocumentStore,
    SERVER_TIMESTAMP,
    COLECAO_CLIENTES,
    COLECAO_PRODUTOS,
    COLECAO_PEDIDOS,
)
from calcavendas.infrastructure.mappers import ProdutoMapper, ClienteMapper, PedidoMapper

logger = logging.getLogger(__name__)

# ====================================================================
# REPOSITÓRIOS: Adaptadores que implementam os protocolos da camada de domínio.
# Responsáveis por converter entre documentos das coleções e entidades de negócio.
# ====================================================================

class ProdutoRepository:
    """Implementação do IProdutoRepository sobre a coleção `products`."""

    def __init__(self, store: IDocumentStore):
        self.store = store

    def listar(self) -> List[entities.Produto]:
        return [ProdutoMapper.to_entity(doc) for doc in self.store.listar(COLECAO_PRODUTOS)]

    def buscar_por_id(self, produto_id: str) -> Optional[entities.Produto]:
        return ProdutoMapper.to_entity(self.store.buscar(COLECAO_PRODUTOS, produto_id))

    def buscar_por_referencia(self, referencia: str) -> Optional[entities.Produto]:
        """Primeiro documento com a referência exata (a coleção não garante unicidade)."""
        docs = self.store.consultar(COLECAO_PRODUTOS, {"reference": referencia})
        return ProdutoMapper.to_entity(docs[0]) if docs else None

    def salvar(self, produto_entity: entities.Produto) -> entities.Produto:
        """
        Salva o produto com merge.
        Sem id, procura um documento com a mesma referência e o atualiza; só cria
        um novo documento quando a referência ainda não existe. A consulta e a
        gravação não são atômicas: duas gravações simultâneas da mesma referência
        nova podem gerar dois documentos.
        """
        dados = ProdutoMapper.to_documento(produto_entity)
        if produto_entity.id:
            self.store.atualizar(COLECAO_PRODUTOS, produto_entity.id, dados, merge=True)
        else:
            existente = self.buscar_por_referencia(produto_entity.referencia)
            if existente:
                logger.debug("Referência %s já cadastrada; atualizando %s", produto_entity.referencia, existente.id)
                self.store.atualizar(COLECAO_PRODUTOS, existente.id, dados, merge=True)
                produto_entity.id = existente.id
            else:
                produto_entity.id = self.store.criar(COLECAO_PRODUTOS, dados)
        return produto_entity

    def deletar(self, produto_id: str):
        self.store.deletar(COLECAO_PRODUTOS, produto_id)


class ClienteRepository:
    """Implementação do IClienteRepository sobre a coleção `clients`."""

    def __init__(self, store: IDocumentStore):
        self.store = store

    def listar(self) -> List[entities.Cliente]:
        return [ClienteMapper.to_entity(doc) for doc in self.store.listar(COLECAO_CLIENTES)]

    def buscar_por_id(self, cliente_id: str) -> Optional[entities.Cliente]:
        return ClienteMapper.to_entity(self.store.buscar(COLECAO_CLIENTES, cliente_id))

    def salvar(self, cliente_entity: entities.Cliente) -> entities.Cliente:
        """Atualiza com merge quando há id; caso contrário cria com a data do servidor."""
        dados = ClienteMapper.to_documento(cliente_entity)
        if cliente_entity.id:
            self.store.atualizar(COLECAO_CLIENTES, cliente_entity.id, dados, merge=True)
            return self.buscar_por_id(cliente_entity.id)
        dados["createdAt"] = SERVER_TIMESTAMP
        cliente_id = self.store.criar(COLECAO_CLIENTES, dados)
        return self.buscar_por_id(cliente_id)

    def deletar(self, cliente_id: str):
        self.store.deletar(COLECAO_CLIENTES, cliente_id)


class PedidoRepository:
    """Implementação do IPedidoRepository sobre a coleção `orders`."""

    def __init__(self, store: IDocumentStore):
        self.store = store

    def listar(self) -> List[entities.Pedido]:
        return [PedidoMapper.to_entity(doc) for doc in self.store.listar(COLECAO_PEDIDOS)]

    def buscar_por_id(self, pedido_id: str) -> Optional[entities.Pedido]:
        return PedidoMapper.to_entity(self.store.buscar(COLECAO_PEDIDOS, pedido_id))

    def listar_por_cliente(self, cliente_id: str) -> List[entities.Pedido]:
        docs = self.store.consultar(COLECAO_PEDIDOS, {"clientId": cliente_id})
        return [PedidoMapper.to_entity(doc) for doc in docs]

    def criar(self, pedido_entity: entities.Pedido) -> entities.Pedido:
        """Grava o pedido completo (itens embutidos) num único documento."""
        dados = PedidoMapper.to_documento(pedido_entity)
        dados["date"] = SERVER_TIMESTAMP
        pedido_id = self.store.criar(COLECAO_PEDIDOS, dados)
        logger.debug("Pedido %s gravado com %d itens", pedido_id, len(pedido_entity.itens))
        return self.buscar_por_id(pedido_id)

    def atualizar(self, pedido_entity: entities.Pedido) -> entities.Pedido:
        """Regrava itens e condições; a data original do documento é mantida."""
        if not pedido_entity.id:
            raise ValueError("ID do pedido não pode ser nulo ao atualizar.")
        dados = PedidoMapper.to_documento(pedido_entity)
        self.store.atualizar(COLECAO_PEDIDOS, pedido_entity.id, dados, merge=True)
        return self.buscar_por_id(pedido_entity.id)
