# calcavendas/core/dependency_injection.py
"""
Módulo de Injeção de Dependência (DI).
Responsável por instanciar os Use Cases com suas dependências de Repositórios/Gateways
concretos da camada de Infraestrutura.

O banco de documentos é construído uma única vez na inicialização do Django
(`CoreConfig.ready`) conforme `settings.DOCUMENT_STORE_BACKEND` e repassado
aos repositórios; `definir_document_store` permite trocá-lo nos testes.
"""
import logging
import threading
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from calcavendas.core.ports import IDocumentStore
from calcavendas.core.montagem_pedido import MontadorPedido
from .use_cases import (
    GerenciarClientesUseCase,
    GerenciarCatalogoUseCase,
    SemearCatalogoUseCase,
    ListarPedidosUseCase,
    ExportarPedidoUseCase,
    RelatorioVendasUseCase,
    PainelUseCase,
    CarregarDadosIniciaisUseCase,
    TIMEOUT_CARGA_INICIAL,
)

logger = logging.getLogger(__name__)

_store: Optional[IDocumentStore] = None
_lock = threading.Lock()


def criar_document_store(backend: str) -> IDocumentStore:
    from calcavendas.infrastructure.document_stores import DocumentStoreDjango, DocumentStoreMemoria

    if backend == 'django':
        return DocumentStoreDjango()
    if backend == 'memoria':
        return DocumentStoreMemoria()
    raise ImproperlyConfigured(f"DOCUMENT_STORE_BACKEND '{backend}' desconhecido. Use 'django' ou 'memoria'.")


def get_document_store() -> IDocumentStore:
    with _lock:
        if _store is None:
            raise ImproperlyConfigured("Banco de documentos não inicializado. O app calcavendas.core está em INSTALLED_APPS?")
        return _store


def definir_document_store(store: Optional[IDocumentStore]):
    """Define o banco de documentos entregue aos repositórios."""
    global _store
    with _lock:
        _store = store


def inicializar_document_store(backend: str) -> IDocumentStore:
    store = criar_document_store(backend)
    definir_document_store(store)
    logger.info("Banco de documentos inicializado (%s)", backend)
    return store


# ====================================================================
# Repositórios e Gateways Concretos
# ====================================================================

def get_produto_repo():
    from calcavendas.infrastructure.repositories import ProdutoRepository
    return ProdutoRepository(get_document_store())

def get_cliente_repo():
    from calcavendas.infrastructure.repositories import ClienteRepository
    return ClienteRepository(get_document_store())

def get_pedido_repo():
    from calcavendas.infrastructure.repositories import PedidoRepository
    return PedidoRepository(get_document_store())

def get_exportador_pedido():
    from calcavendas.infrastructure.gateways import ExportadorPedidoHTML
    return ExportadorPedidoHTML(settings.WHATSAPP_BASE_URL)


# ====================================================================
# Use Cases de Cadastro
# ====================================================================

def get_gerenciar_clientes_use_case() -> GerenciarClientesUseCase:
    return GerenciarClientesUseCase(get_cliente_repo())

def get_gerenciar_catalogo_use_case() -> GerenciarCatalogoUseCase:
    return GerenciarCatalogoUseCase(get_produto_repo())

def get_semear_catalogo_use_case() -> SemearCatalogoUseCase:
    return SemearCatalogoUseCase(get_produto_repo())


# ====================================================================
# Use Cases de Pedidos e Relatórios
# ====================================================================

def get_listar_pedidos_use_case() -> ListarPedidosUseCase:
    return ListarPedidosUseCase(get_pedido_repo())

def get_exportar_pedido_use_case() -> ExportarPedidoUseCase:
    return ExportarPedidoUseCase(
        pedido_repo=get_pedido_repo(),
        cliente_repo=get_cliente_repo(),
        exportador=get_exportador_pedido(),
    )

def get_relatorio_vendas_use_case() -> RelatorioVendasUseCase:
    return RelatorioVendasUseCase()

def get_painel_use_case() -> PainelUseCase:
    return PainelUseCase()

def get_carregar_dados_iniciais_use_case() -> CarregarDadosIniciaisUseCase:
    return CarregarDadosIniciaisUseCase(
        cliente_repo=get_cliente_repo(),
        produto_repo=get_produto_repo(),
        pedido_repo=get_pedido_repo(),
        timeout=getattr(settings, 'CARGA_INICIAL_TIMEOUT', TIMEOUT_CARGA_INICIAL),
    )

def get_montador_pedido() -> MontadorPedido:
    """Montador com os cadastros lidos no momento da chamada."""
    return MontadorPedido(
        clientes=get_cliente_repo().listar(),
        produtos=get_produto_repo().listar(),
        pedido_repo=get_pedido_repo(),
    )
