# calcavendas/presentation/sessao_pedido.py
# Mantém a montagem do pedido na sessão do Django entre requisições.

from typing import Dict, Any

from django.http import HttpRequest

from calcavendas.core import dependency_injection as di
from calcavendas.core.exceptions import CarrinhoVazioError, PedidoNaoEncontradoError
from calcavendas.core.montagem_pedido import MontadorPedido
from calcavendas.core.entities import Pedido
from calcavendas.infrastructure.mappers import ItemPedidoMapper


class GerenciadorMontagem:
    """
    Reconstrói o MontadorPedido a partir da sessão a cada requisição e grava o
    estado de volta depois de cada alteração.
    Na sessão ficam apenas ids e valores digitados; clientes e produtos são
    relidos do banco de documentos.
    """

    SESSION_KEY = 'montagem_pedido'

    def __init__(self, request: HttpRequest):
        self.request = request
        self.pedido_repo = di.get_pedido_repo()
        self.montador: MontadorPedido = di.get_montador_pedido()
        self._carregar_da_sessao()

    # --- Métodos de Persistência ---

    def _carregar_da_sessao(self):
        estado = self.request.session.get(self.SESSION_KEY)
        if not estado:
            return

        montador = self.montador
        cliente_id = estado.get('cliente_id')
        montador.cliente_selecionado = next((c for c in montador.clientes if c.id == cliente_id), None)
        montador.carrinho = [ItemPedidoMapper.to_entity(item) for item in estado.get('carrinho', [])]
        montador.frete = estado.get('frete', montador.frete)
        montador.condicao_pagamento = estado.get('condicao_pagamento', "")
        montador.forma_pagamento = estado.get('forma_pagamento', montador.forma_pagamento)
        montador.referencia = estado.get('referencia', "")
        produto_id = estado.get('produto_id')
        montador.produto_ativo = next((p for p in montador.produtos if p.id == produto_id), None)
        montador.quantidades = dict(estado.get('quantidades', {}))

        if estado.get('pedido_em_edicao_id'):
            montador.pedido_em_edicao = self.pedido_repo.buscar_por_id(estado['pedido_em_edicao_id'])
        if estado.get('pedido_salvo_id'):
            montador.pedido_salvo = self.pedido_repo.buscar_por_id(estado['pedido_salvo_id'])

    def _salvar_na_sessao(self):
        montador = self.montador
        self.request.session[self.SESSION_KEY] = {
            'cliente_id': montador.cliente_selecionado.id if montador.cliente_selecionado else None,
            'carrinho': [ItemPedidoMapper.to_documento(item) for item in montador.carrinho],
            'frete': montador.frete,
            'condicao_pagamento': montador.condicao_pagamento,
            'forma_pagamento': montador.forma_pagamento,
            'referencia': montador.referencia,
            'produto_id': montador.produto_ativo.id if montador.produto_ativo else None,
            'quantidades': dict(montador.quantidades),
            'pedido_em_edicao_id': montador.pedido_em_edicao.id if montador.pedido_em_edicao else None,
            'pedido_salvo_id': montador.pedido_salvo.id if montador.pedido_salvo else None,
        }
        self.request.session.modified = True

    def limpar(self):
        """Descarta a montagem atual (novo pedido)."""
        self.montador.novo_pedido()
        if self.SESSION_KEY in self.request.session:
            del self.request.session[self.SESSION_KEY]
            self.request.session.modified = True

    # --- Métodos de Manipulação ---

    def selecionar_cliente(self, cliente_id: str):
        self.montador.selecionar_cliente(cliente_id)
        self._salvar_na_sessao()

    def trocar_cliente(self):
        self.montador.trocar_cliente()
        self._salvar_na_sessao()

    def informar_referencia(self, texto: str):
        self.montador.informar_referencia(texto)
        self._salvar_na_sessao()

    def selecionar_produto(self, produto_id: str):
        self.montador.selecionar_produto(produto_id)
        self._salvar_na_sessao()

    def alterar_tamanhos(self, valores: Dict[str, Any]):
        self.montador.alterar_tamanhos(valores)
        self._salvar_na_sessao()

    def adicionar_item(self):
        item = self.montador.adicionar_item()
        self._salvar_na_sessao()
        return item

    def remover_item(self, indice: int):
        item = self.montador.remover_item(indice)
        self._salvar_na_sessao()
        return item

    def definir_condicoes(self, **condicoes):
        self.montador.definir_condicoes(**condicoes)
        self._salvar_na_sessao()

    def editar_pedido(self, pedido_id: str):
        pedido = self.pedido_repo.buscar_por_id(pedido_id)
        if not pedido:
            raise PedidoNaoEncontradoError(f"Pedido ID {pedido_id} não encontrado.")
        self.montador.editar_pedido(pedido)
        self._salvar_na_sessao()

    def salvar_pedido(self) -> Pedido:
        if not self.montador.pode_salvar:
            raise CarrinhoVazioError()
        pedido = self.montador.salvar_pedido()
        self._salvar_na_sessao()
        return pedido

    # --- Métodos de Consulta ---

    def get_contexto(self) -> Dict[str, Any]:
        """Estado atual da montagem, para serialização."""
        montador = self.montador
        return {
            'cliente': montador.cliente_selecionado,
            'referencia': montador.referencia,
            'sugestoes': montador.sugestoes if not montador.produto_ativo else [],
            'produto_ativo': montador.produto_ativo,
            'quantidades': montador.quantidades,
            'quantidade_atual': montador.quantidade_atual,
            'preco_atual': montador.preco_atual,
            'pode_adicionar': montador.pode_adicionar,
            'carrinho': montador.carrinho,
            'total_pedido': montador.total_pedido,
            'total_pares': montador.total_pares,
            'frete': montador.frete,
            'condicao_pagamento': montador.condicao_pagamento,
            'forma_pagamento': montador.forma_pagamento,
            'pode_salvar': montador.pode_salvar,
            'em_edicao': montador.em_edicao,
            'pedido_em_edicao_id': montador.pedido_em_edicao.id if montador.pedido_em_edicao else None,
            'pedido_salvo': montador.pedido_salvo,
        }
