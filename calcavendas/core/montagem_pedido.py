# calcavendas/core/montagem_pedido.py
"""
Montagem do Pedido de Venda.

Concentra o fluxo de uma sessão de digitação de pedido: escolha do cliente,
localização do produto pela referência, digitação das quantidades por
numeração, acúmulo dos itens no carrinho e gravação do pedido.

Toda a filtragem é feita sobre as listas de clientes e produtos já carregadas
em memória; o único acesso ao banco é a gravação do pedido.
"""
import logging
import re
from typing import Dict, List, Optional, Iterable, Any

from calcavendas.core.entities import (
    Cliente, Produto, ItemPedido, Pedido,
    TAMANHOS, FRETES, FORMAS_PAGAMENTO, FRETE_PADRAO, FORMA_PAGAMENTO_PADRAO, STATUS_PADRAO,
)
from calcavendas.core.exceptions import (
    DadosInvalidosError,
    TamanhoInvalidoError,
    ItemNaoEncontradoError,
    ClienteNaoEncontradoError,
    ProdutoNaoEncontradoError,
    PersistenciaError,
)
from calcavendas.core.ports import IPedidoRepository

logger = logging.getLogger(__name__)

# Quantidade máxima de sugestões exibidas na busca por referência
LIMITE_SUGESTOES = 5
# Referências mais curtas não disparam busca nem seleção automática
MINIMO_CARACTERES_BUSCA = 2

_INTEIRO_INICIAL = re.compile(r"^\s*([+-]?\d+)")


# ====================================================================
# FUNÇÕES DE SELEÇÃO (sem acesso ao banco)
# ====================================================================

def filtrar_clientes(clientes: Iterable[Cliente], termo: str) -> List[Cliente]:
    """Filtra por empresa, responsável ou telefone, sem diferenciar maiúsculas."""
    termo = (termo or "").strip().lower()
    if not termo:
        return list(clientes)
    return [
        cliente for cliente in clientes
        if termo in (cliente.empresa or "").lower()
        or termo in (cliente.nome or "").lower()
        or termo in (cliente.telefone or "").lower()
        or termo in (cliente.telefone2 or "").lower()
    ]


def filtrar_produtos(
    produtos: Iterable[Produto], termo: str, limite: Optional[int] = LIMITE_SUGESTOES
) -> List[Produto]:
    """Filtra por referência ou descrição. `limite=None` devolve todos."""
    termo = (termo or "").strip().lower()
    encontrados = [
        produto for produto in produtos
        if termo in (produto.referencia or "").lower()
        or termo in (produto.descricao or "").lower()
    ]
    return encontrados if limite is None else encontrados[:limite]


def buscar_referencia_exata(produtos: Iterable[Produto], referencia: str) -> Optional[Produto]:
    referencia = (referencia or "").strip().lower()
    if not referencia:
        return None
    return next((p for p in produtos if (p.referencia or "").lower() == referencia), None)


def converter_quantidade(valor: Any) -> int:
    """
    Converte o valor digitado numa numeração em inteiro.
    Vazio ou não numérico vale 0; negativos são aceitos.
    """
    if isinstance(valor, bool) or valor is None:
        return 0
    if isinstance(valor, int):
        return valor
    if isinstance(valor, float):
        return int(valor)
    encontrado = _INTEIRO_INICIAL.match(str(valor))
    return int(encontrado.group(1)) if encontrado else 0


# ====================================================================
# MONTADOR DO PEDIDO
# ====================================================================

class MontadorPedido:
    """
    Estado de uma sessão de criação (ou edição) de pedido.

    O carrinho é a única fonte dos totais: `total_pedido` e `total_pares`
    são sempre recalculados a partir dos itens.
    """

    def __init__(
        self,
        clientes: Iterable[Cliente],
        produtos: Iterable[Produto],
        pedido_repo: IPedidoRepository,
    ):
        self.clientes: List[Cliente] = list(clientes)
        self.produtos: List[Produto] = list(produtos)
        self.pedido_repo = pedido_repo
        self._iniciar_estado()

    def _iniciar_estado(self):
        self.cliente_selecionado: Optional[Cliente] = None
        self.carrinho: List[ItemPedido] = []
        self.frete = FRETE_PADRAO
        self.condicao_pagamento = ""
        self.forma_pagamento = FORMA_PAGAMENTO_PADRAO
        self.pedido_em_edicao: Optional[Pedido] = None
        self.pedido_salvo: Optional[Pedido] = None
        self._limpar_produto()

    def _limpar_produto(self):
        self.referencia = ""
        self.produto_ativo: Optional[Produto] = None
        self.quantidades: Dict[str, int] = {}

    # --- 1. Cliente ---

    def filtrar_clientes(self, termo: str) -> List[Cliente]:
        return filtrar_clientes(self.clientes, termo)

    def selecionar_cliente(self, cliente_id: str) -> Cliente:
        cliente = next((c for c in self.clientes if c.id == cliente_id), None)
        if not cliente:
            raise ClienteNaoEncontradoError(f"Cliente ID {cliente_id} não encontrado.")
        self.cliente_selecionado = cliente
        return cliente

    def trocar_cliente(self):
        self.cliente_selecionado = None

    # --- 2. Produto e grade ---

    @property
    def sugestoes(self) -> List[Produto]:
        """Produtos sugeridos para a referência digitada."""
        if len(self.referencia) < MINIMO_CARACTERES_BUSCA:
            return []
        return filtrar_produtos(self.produtos, self.referencia)

    def informar_referencia(self, texto: str) -> Optional[Produto]:
        """
        Atualiza a referência digitada. A partir de dois caracteres, uma referência
        idêntica a de um produto seleciona o produto automaticamente.
        """
        self.referencia = (texto or "").strip().upper()
        if not self.referencia:
            self._limpar_produto()
            return None
        if len(self.referencia) < MINIMO_CARACTERES_BUSCA:
            return self.produto_ativo

        exato = buscar_referencia_exata(self.produtos, self.referencia)
        if exato:
            self.produto_ativo = exato
        elif self.produto_ativo and self.produto_ativo.referencia.lower() != self.referencia.lower():
            # A referência deixou de corresponder ao produto ativo
            self.produto_ativo = None
            self.quantidades = {}
        return self.produto_ativo

    def selecionar_produto(self, produto_id: str) -> Produto:
        produto = next((p for p in self.produtos if p.id == produto_id), None)
        if not produto:
            raise ProdutoNaoEncontradoError(f"Produto ID {produto_id} não encontrado.")
        self.produto_ativo = produto
        self.referencia = produto.referencia
        return produto

    def alterar_tamanho(self, tamanho: Any, valor: Any) -> int:
        """Registra a quantidade digitada numa numeração e devolve a quantidade total."""
        tamanho = str(tamanho).strip()
        if tamanho not in TAMANHOS:
            raise TamanhoInvalidoError(tamanho)
        self.quantidades[tamanho] = converter_quantidade(valor)
        return self.quantidade_atual

    def alterar_tamanhos(self, valores: Dict[Any, Any]) -> int:
        for tamanho, valor in valores.items():
            self.alterar_tamanho(tamanho, valor)
        return self.quantidade_atual

    @property
    def quantidade_atual(self) -> int:
        return sum(self.quantidades.values())

    @property
    def preco_atual(self) -> float:
        if not self.produto_ativo:
            return 0.0
        return self.quantidade_atual * self.produto_ativo.preco

    @property
    def pode_adicionar(self) -> bool:
        return self.produto_ativo is not None and self.quantidade_atual > 0

    # --- 3. Carrinho ---

    def adicionar_item(self) -> Optional[ItemPedido]:
        """
        Acrescenta ao carrinho uma nova linha com o produto ativo e a grade digitada.
        Nunca agrupa com linhas existentes da mesma referência.
        """
        if not self.pode_adicionar:
            return None

        produto = self.produto_ativo
        item = ItemPedido(
            produto_id=produto.id or "",
            referencia=produto.referencia,
            descricao=produto.descricao,
            preco_unitario=produto.preco,
            tamanhos=dict(self.quantidades),
            cor=produto.cor or "",
            solado=produto.solado or "",
            material=produto.material or "",
        )
        self.carrinho.append(item)
        self._limpar_produto()
        return item

    def remover_item(self, indice: int) -> ItemPedido:
        if not 0 <= indice < len(self.carrinho):
            raise ItemNaoEncontradoError(f"Item {indice} não existe no pedido.")
        return self.carrinho.pop(indice)

    @property
    def total_pedido(self) -> float:
        return sum(item.total for item in self.carrinho)

    @property
    def total_pares(self) -> int:
        return sum(item.quantidade for item in self.carrinho)

    # --- 4. Pagamento e entrega ---

    def definir_condicoes(
        self,
        frete: Optional[str] = None,
        condicao_pagamento: Optional[str] = None,
        forma_pagamento: Optional[str] = None,
    ):
        if frete is not None:
            frete = frete.strip().upper()
            if frete not in FRETES:
                raise DadosInvalidosError(f"Frete '{frete}' inválido. Use FOB ou CIF.")
            self.frete = frete
        if condicao_pagamento is not None:
            self.condicao_pagamento = condicao_pagamento.strip()
        if forma_pagamento is not None:
            if forma_pagamento and forma_pagamento not in FORMAS_PAGAMENTO:
                raise DadosInvalidosError(f"Forma de pagamento '{forma_pagamento}' inválida.")
            self.forma_pagamento = forma_pagamento

    # --- 5. Gravação ---

    @property
    def pode_salvar(self) -> bool:
        return self.cliente_selecionado is not None and len(self.carrinho) > 0

    @property
    def em_edicao(self) -> bool:
        return self.pedido_em_edicao is not None

    @property
    def em_confirmacao(self) -> bool:
        return self.pedido_salvo is not None

    def editar_pedido(self, pedido: Pedido):
        """Carrega um pedido já gravado para alteração de itens e condições."""
        self._iniciar_estado()
        self.cliente_selecionado = next((c for c in self.clientes if c.id == pedido.cliente_id), None)
        self.carrinho = list(pedido.itens)
        self.frete = pedido.frete or FRETE_PADRAO
        self.condicao_pagamento = pedido.condicao_pagamento or ""
        self.forma_pagamento = pedido.forma_pagamento or FORMA_PAGAMENTO_PADRAO
        self.pedido_em_edicao = pedido

    def salvar_pedido(self) -> Optional[Pedido]:
        """
        Grava o pedido com um único documento. Sem cliente ou sem itens nada é feito.
        Em caso de falha o estado da sessão é preservado para nova tentativa.
        """
        if not self.pode_salvar:
            return None

        cliente = self.cliente_selecionado
        pedido = Pedido(
            cliente_id=cliente.id,
            nome_cliente=cliente.nome_exibicao,
            itens=list(self.carrinho),
            frete=self.frete,
            condicao_pagamento=self.condicao_pagamento,
            forma_pagamento=self.forma_pagamento,
            status=STATUS_PADRAO,
        )

        try:
            if self.pedido_em_edicao:
                pedido.id = self.pedido_em_edicao.id
                pedido.status = self.pedido_em_edicao.status or STATUS_PADRAO
                pedido.data = self.pedido_em_edicao.data
                salvo = self.pedido_repo.atualizar(pedido)
            else:
                salvo = self.pedido_repo.criar(pedido)
        except Exception as e:
            logger.warning("Falha ao salvar pedido do cliente %s: %s", cliente.id, e)
            raise PersistenciaError("Erro ao salvar o pedido.") from e

        logger.info("Pedido %s salvo para o cliente %s (R$ %.2f)", salvo.id, cliente.id, salvo.valor_total)
        self.pedido_salvo = salvo
        self.pedido_em_edicao = None
        self.carrinho = []
        self._limpar_produto()
        return salvo

    def novo_pedido(self):
        """Descarta a sessão atual e volta ao formulário vazio."""
        self._iniciar_estado()
