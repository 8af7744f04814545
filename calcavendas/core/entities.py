from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict

# ====================================================================
# CONSTANTES DE DOMÍNIO
# ====================================================================

# Grade fixa de numeração usada na digitação de quantidades e nas colunas do documento.
TAMANHOS = tuple(str(numero) for numero in range(33, 47))

FRETES = ("FOB", "CIF")

FORMAS_PAGAMENTO = (
    "Boleto Bancário",
    "Pix",
    "Cartão de Crédito",
    "Dinheiro",
    "Cheque",
    "Depósito",
)

FRETE_PADRAO = "FOB"
FORMA_PAGAMENTO_PADRAO = "Boleto Bancário"
STATUS_PADRAO = "pendente"


# ====================================================================
# ENTIDADES CORE
# Representam os objetos de negócio puros.
# ====================================================================

@dataclass
class Produto:
    """Entidade do Produto (calçado) do catálogo."""
    referencia: str
    descricao: str
    preco: float
    categoria: str = ""
    grade: str = ""
    cor: str = ""
    solado: str = ""
    material: str = ""
    imagem_url: Optional[str] = None
    id: Optional[str] = None


@dataclass
class Cliente:
    """Entidade do Cliente (loja revendedora)."""
    nome: str
    telefone: str
    empresa: str = ""
    telefone2: str = ""
    email: str = ""
    cep: str = ""
    endereco: str = ""
    numero: str = ""
    bairro: str = ""
    cidade: str = ""
    estado: str = ""
    cpf_cnpj: str = ""
    inscricao_estadual: str = ""
    criado_em: Optional[datetime] = None
    id: Optional[str] = None

    @property
    def nome_exibicao(self) -> str:
        """Nome da empresa quando houver, senão o nome do responsável."""
        return self.empresa or self.nome

    @property
    def endereco_completo(self) -> str:
        linha = self.endereco
        if self.numero:
            linha += f", {self.numero}"
        if self.bairro:
            linha += f" - {self.bairro}"
        linha += f" - {self.cidade}"
        if self.estado:
            linha += f"/{self.estado}"
        if self.cep:
            linha += f" - CEP: {self.cep}"
        return linha


def normalizar_tamanhos(tamanhos: Dict[str, int]) -> Dict[str, int]:
    """
    Remove as numerações zeradas e devolve o mapa na ordem da grade.
    Valores negativos são mantidos.
    """
    ordem = {tamanho: posicao for posicao, tamanho in enumerate(TAMANHOS)}
    preenchidos = {str(chave): int(valor) for chave, valor in tamanhos.items() if valor}
    return {
        chave: preenchidos[chave]
        for chave in sorted(preenchidos, key=lambda chave: ordem.get(chave, len(ordem)))
    }


@dataclass
class ItemPedido:
    """Snapshot de um produto no momento do pedido, com a quantidade por numeração."""
    produto_id: str
    referencia: str
    descricao: str
    preco_unitario: float
    tamanhos: Dict[str, int] = field(default_factory=dict)
    cor: str = ""
    solado: str = ""
    material: str = ""
    quantidade: int = field(init=False)
    total: float = field(init=False)

    def __post_init__(self):
        """Calcula quantidade e total a partir da grade."""
        self.tamanhos = normalizar_tamanhos(self.tamanhos)
        self.quantidade = sum(self.tamanhos.values())
        self.total = self.quantidade * self.preco_unitario


@dataclass
class Pedido:
    """Entidade do Pedido de Venda."""
    cliente_id: str
    nome_cliente: str
    itens: List[ItemPedido] = field(default_factory=list)
    frete: str = FRETE_PADRAO
    condicao_pagamento: str = ""
    forma_pagamento: str = ""
    status: str = STATUS_PADRAO
    valor_total: Optional[float] = None
    data: Optional[datetime] = None
    id: Optional[str] = None

    def __post_init__(self):
        # Pedidos montados no sistema sempre têm o total derivado dos itens.
        if self.valor_total is None:
            self.valor_total = sum(item.total for item in self.itens)

    @property
    def total_pares(self) -> int:
        return sum(item.quantidade for item in self.itens)


# ====================================================================
# PROJEÇÕES DE LEITURA (Relatórios e Painel)
# ====================================================================

@dataclass
class ResumoRelatorio:
    """Resultado do relatório de vendas para um período."""
    pedidos: List[Pedido]
    faturamento_total: float
    total_pedidos: int
    total_itens: int


@dataclass
class ProdutoVendido:
    referencia: str
    descricao: str
    quantidade: int = 0
    faturamento: float = 0.0


@dataclass
class ResumoPainel:
    """Indicadores do painel (últimos 30 dias)."""
    faturamento: float
    total_pedidos: int
    clientes_ativos: int
    top_produtos: List[ProdutoVendido] = field(default_factory=list)
    pedidos_recentes: List[Pedido] = field(default_factory=list)


@dataclass
class DadosIniciais:
    """Coleções carregadas na abertura do sistema."""
    clientes: List[Cliente]
    produtos: List[Produto]
    pedidos: List[Pedido]
