# calcavendas/core/use_cases.py
"""
Implementação dos Casos de Uso (Lógica de Negócio) da aplicação.
Esta camada depende apenas das Entidades e Portas (Interfaces) do Core,
garantindo o isolamento da lógica de negócio.

A montagem do pedido propriamente dita fica em `montagem_pedido.py`.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import List, Optional, Dict, Iterable, Tuple

# Entidades e Exceções
from calcavendas.core.entities import (
    Cliente, Produto, Pedido, ResumoRelatorio, ResumoPainel, ProdutoVendido, DadosIniciais
)
from calcavendas.core.exceptions import (
    DadosInvalidosError,
    ClienteNaoEncontradoError,
    ProdutoNaoEncontradoError,
    PedidoNaoEncontradoError,
    ConexaoError,
)
from calcavendas.core.montagem_pedido import filtrar_clientes, filtrar_produtos

# Portas (Interfaces)
from calcavendas.core.ports import (
    IProdutoRepository,
    IClienteRepository,
    IPedidoRepository,
    IExportadorPedido,
)

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Tempo máximo de espera pela carga inicial antes de oferecer nova tentativa
TIMEOUT_CARGA_INICIAL = 12


def _data_ordenacao(pedido: Pedido) -> datetime:
    """Pedidos sem data são tratados como se fossem do início da época."""
    return pedido.data or EPOCH


# ====================================================================
# 1. CASOS DE USO DO CADASTRO (Clientes e Catálogo)
# ====================================================================

class GerenciarClientesUseCase:
    """Caso de Uso para listagem e manutenção do cadastro de clientes."""
    def __init__(self, cliente_repo: IClienteRepository):
        self.cliente_repo = cliente_repo

    def listar(self, busca: Optional[str] = None) -> List[Cliente]:
        return filtrar_clientes(self.cliente_repo.listar(), busca or "")

    def detalhar(self, cliente_id: str) -> Cliente:
        cliente = self.cliente_repo.buscar_por_id(cliente_id)
        if not cliente:
            raise ClienteNaoEncontradoError(f"Cliente ID {cliente_id} não encontrado.")
        return cliente

    def salvar(self, cliente: Cliente) -> Cliente:
        if not (cliente.nome or "").strip():
            raise DadosInvalidosError("O nome do responsável é obrigatório.")
        if not (cliente.telefone or "").strip():
            raise DadosInvalidosError("O telefone principal é obrigatório.")
        salvo = self.cliente_repo.salvar(cliente)
        logger.info("Cliente %s salvo", salvo.id)
        return salvo

    def deletar(self, cliente_id: str):
        self.cliente_repo.deletar(cliente_id)
        logger.info("Cliente %s removido", cliente_id)


class GerenciarCatalogoUseCase:
    """Caso de Uso para listagem e manutenção do catálogo de produtos."""
    def __init__(self, produto_repo: IProdutoRepository):
        self.produto_repo = produto_repo

    def listar(self, busca: Optional[str] = None) -> List[Produto]:
        """Catálogo completo (sem limite de sugestões), filtrado por referência ou descrição."""
        produtos = self.produto_repo.listar()
        if busca:
            produtos = filtrar_produtos(produtos, busca, limite=None)
        return produtos

    def detalhar(self, produto_id: str) -> Produto:
        produto = self.produto_repo.buscar_por_id(produto_id)
        if not produto:
            raise ProdutoNaoEncontradoError(f"Produto ID {produto_id} não encontrado.")
        return produto

    def salvar(self, produto: Produto) -> Produto:
        """
        Salva o produto. Sem id, o repositório reaproveita o documento que já
        tiver a mesma referência em vez de criar uma duplicata.
        """
        produto.referencia = (produto.referencia or "").strip().upper()
        if not produto.referencia:
            raise DadosInvalidosError("A referência do produto é obrigatória.")
        if produto.preco is None or produto.preco < 0:
            raise DadosInvalidosError("O preço do produto não pode ser negativo.")
        return self.produto_repo.salvar(produto)

    def deletar(self, produto_id: str):
        self.produto_repo.deletar(produto_id)
        logger.info("Produto %s removido", produto_id)


class SemearCatalogoUseCase:
    """Carrega o catálogo inicial somente quando ainda não existe nenhum produto."""
    def __init__(self, produto_repo: IProdutoRepository):
        self.produto_repo = produto_repo

    def executar(self, produtos: Iterable[Produto]) -> int:
        if self.produto_repo.listar():
            return 0
        criados = 0
        for produto in produtos:
            self.produto_repo.salvar(produto)
            criados += 1
        logger.info("Catálogo inicial carregado com %d produtos", criados)
        return criados


# ====================================================================
# 2. CASOS DE USO DE PEDIDOS
# ====================================================================

class ListarPedidosUseCase:
    """Caso de Uso para consultar os pedidos gravados."""
    def __init__(self, pedido_repo: IPedidoRepository):
        self.pedido_repo = pedido_repo

    def listar(self, cliente_id: Optional[str] = None) -> List[Pedido]:
        """Pedidos do mais recente para o mais antigo, opcionalmente de um único cliente."""
        if cliente_id:
            pedidos = self.pedido_repo.listar_por_cliente(cliente_id)
        else:
            pedidos = self.pedido_repo.listar()
        return sorted(pedidos, key=_data_ordenacao, reverse=True)

    def detalhar(self, pedido_id: str) -> Pedido:
        pedido = self.pedido_repo.buscar_por_id(pedido_id)
        if not pedido:
            raise PedidoNaoEncontradoError(f"Pedido ID {pedido_id} não encontrado.")
        return pedido


class ExportarPedidoUseCase:
    """Prepara o documento imprimível e o link de compartilhamento de um pedido."""
    def __init__(
        self,
        pedido_repo: IPedidoRepository,
        cliente_repo: IClienteRepository,
        exportador: IExportadorPedido,
    ):
        self.pedido_repo = pedido_repo
        self.cliente_repo = cliente_repo
        self.exportador = exportador

    def _carregar(self, pedido_id: str) -> Tuple[Pedido, Cliente]:
        pedido = self.pedido_repo.buscar_por_id(pedido_id)
        if not pedido:
            raise PedidoNaoEncontradoError(f"Pedido ID {pedido_id} não encontrado.")
        cliente = self.cliente_repo.buscar_por_id(pedido.cliente_id)
        if not cliente:
            raise ClienteNaoEncontradoError("Dados do cliente não encontrados para gerar o documento.")
        return pedido, cliente

    def documento(self, pedido_id: str) -> str:
        return self.exportador.gerar_documento(*self._carregar(pedido_id))

    def link_compartilhamento(self, pedido_id: str) -> str:
        return self.exportador.gerar_link_compartilhamento(*self._carregar(pedido_id))


# ====================================================================
# 3. RELATÓRIOS E PAINEL (somente leitura)
# ====================================================================

def periodo_predefinido(dias: int, hoje: Optional[date] = None) -> Tuple[date, date]:
    """Intervalo dos atalhos 'Últimos N dias' da tela de relatórios."""
    hoje = hoje or date.today()
    return hoje - timedelta(days=dias), hoje


class RelatorioVendasUseCase:
    """
    Projeção de leitura sobre os pedidos: filtro por período e busca textual,
    com faturamento, quantidade de pedidos e total de pares.
    """

    def gerar(
        self,
        pedidos: Iterable[Pedido],
        inicio: Optional[date] = None,
        fim: Optional[date] = None,
        busca: str = "",
        fuso: tzinfo = timezone.utc,
        agora: Optional[datetime] = None,
    ) -> ResumoRelatorio:
        inicio_dt = datetime.combine(inicio, time.min, tzinfo=fuso) if inicio else EPOCH
        # O dia final inteiro entra no período
        if fim:
            fim_dt = datetime.combine(fim, time.min, tzinfo=fuso) + timedelta(days=1)
        else:
            fim_dt = agora or datetime.now(timezone.utc)
        termo = (busca or "").strip().lower()

        filtrados = [
            pedido for pedido in pedidos
            if inicio_dt <= _data_ordenacao(pedido) < fim_dt
            and (
                termo in (pedido.nome_cliente or "").lower()
                or termo in (pedido.id or "").lower()
            )
        ]
        filtrados.sort(key=_data_ordenacao, reverse=True)

        resumo = ResumoRelatorio(
            pedidos=filtrados,
            faturamento_total=sum(pedido.valor_total or 0 for pedido in filtrados),
            total_pedidos=len(filtrados),
            total_itens=sum(item.quantidade for pedido in filtrados for item in pedido.itens),
        )
        logger.info(
            "Relatório gerado: %d pedidos entre %s e %s", resumo.total_pedidos, inicio_dt, fim_dt
        )
        return resumo


class PainelUseCase:
    """Indicadores dos últimos 30 dias exibidos no painel inicial."""

    DIAS = 30
    LIMITE_TOP_PRODUTOS = 5
    LIMITE_PEDIDOS_RECENTES = 5

    def gerar(self, pedidos: Iterable[Pedido], agora: Optional[datetime] = None) -> ResumoPainel:
        agora = agora or datetime.now(timezone.utc)
        pedidos = sorted(pedidos, key=_data_ordenacao, reverse=True)
        janela = timedelta(days=self.DIAS)
        recentes = [p for p in pedidos if agora - _data_ordenacao(p) < janela]

        vendidos: Dict[str, ProdutoVendido] = {}
        for pedido in recentes:
            for item in pedido.itens:
                vendido = vendidos.setdefault(
                    item.referencia, ProdutoVendido(referencia=item.referencia, descricao=item.descricao)
                )
                vendido.quantidade += item.quantidade
                vendido.faturamento += item.total

        top = sorted(vendidos.values(), key=lambda v: v.quantidade, reverse=True)
        return ResumoPainel(
            faturamento=sum(p.valor_total or 0 for p in recentes),
            total_pedidos=len(recentes),
            clientes_ativos=len({p.cliente_id for p in recentes}),
            top_produtos=top[:self.LIMITE_TOP_PRODUTOS],
            pedidos_recentes=pedidos[:self.LIMITE_PEDIDOS_RECENTES],
        )


# ====================================================================
# 4. CARGA INICIAL
# ====================================================================

class CarregarDadosIniciaisUseCase:
    """
    Busca clientes, produtos e pedidos em paralelo (leituras independentes),
    aguardando no máximo `timeout` segundos. Não há nova tentativa automática.
    """
    def __init__(
        self,
        cliente_repo: IClienteRepository,
        produto_repo: IProdutoRepository,
        pedido_repo: IPedidoRepository,
        timeout: float = TIMEOUT_CARGA_INICIAL,
    ):
        self.cliente_repo = cliente_repo
        self.produto_repo = produto_repo
        self.pedido_repo = pedido_repo
        self.timeout = timeout

    def executar(self) -> DadosIniciais:
        executor = ThreadPoolExecutor(max_workers=3)
        futuros = {
            "clientes": executor.submit(self.cliente_repo.listar),
            "produtos": executor.submit(self.produto_repo.listar),
            "pedidos": executor.submit(self.pedido_repo.listar),
        }
        try:
            _, pendentes = wait(futuros.values(), timeout=self.timeout)
            if pendentes:
                logger.warning("Carga inicial excedeu %s segundos", self.timeout)
                raise ConexaoError(
                    "O servidor demorou muito para responder. Verifique sua conexão e tente novamente."
                )
            try:
                return DadosIniciais(
                    clientes=futuros["clientes"].result(),
                    produtos=futuros["produtos"].result(),
                    pedidos=futuros["pedidos"].result(),
                )
            except Exception as e:
                logger.warning("Falha na carga inicial: %s", e)
                raise ConexaoError(f"Erro ao carregar os dados: {e}") from e
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
