# calcavendas/infrastructure/gateways.py

import logging
import re
from typing import List, Dict, Any
from urllib.parse import quote

from django.conf import settings
from django.template.loader import render_to_string

from calcavendas.core.entities import Cliente, Pedido, TAMANHOS
from calcavendas.core.ports import IExportadorPedido

logger = logging.getLogger(__name__)

TEMPLATE_PEDIDO = 'pedidos/pedido_impressao.html'


def formatar_moeda(valor: float) -> str:
    """Formata no padrão brasileiro: R$ 1.234,50."""
    texto = f"{valor or 0:,.2f}"
    return "R$ " + texto.replace(",", "_").replace(".", ",").replace("_", ".")


def somente_digitos(texto: str) -> str:
    return re.sub(r"\D", "", texto or "")


# ====================================================================
# GATEWAYS: Implementações concretas da exportação do pedido.
# ====================================================================

class ExportadorPedidoHTML(IExportadorPedido):
    """
    Gera a folha de pedido imprimível (HTML) e o link de compartilhamento
    pelo WhatsApp com o resumo do pedido.
    """
    def __init__(self, whatsapp_base_url: str = None):
        self.whatsapp_base_url = (whatsapp_base_url or getattr(settings, 'WHATSAPP_BASE_URL', 'https://wa.me')).rstrip('/')

    def _linhas(self, pedido: Pedido) -> List[Dict[str, Any]]:
        return [
            {
                'referencia': item.referencia,
                'descricao': item.descricao,
                'solado': item.solado,
                'material': item.material,
                'cor': item.cor,
                'grade': [item.tamanhos.get(t, "") for t in TAMANHOS],
                'quantidade': item.quantidade,
                'preco_unitario': formatar_moeda(item.preco_unitario),
                'total': formatar_moeda(item.total),
            }
            for item in pedido.itens
        ]

    def gerar_documento(self, pedido: Pedido, cliente: Cliente) -> str:
        contexto = {
            'pedido': pedido,
            'numero': (pedido.id or "").upper(),
            'cliente': cliente,
            'tamanhos': TAMANHOS,
            'linhas': self._linhas(pedido),
            'total_pares': pedido.total_pares,
            'total_geral': formatar_moeda(pedido.valor_total),
        }
        logger.debug("Gerando documento do pedido %s", pedido.id)
        return render_to_string(TEMPLATE_PEDIDO, contexto)

    def texto_resumo(self, pedido: Pedido, cliente: Cliente) -> str:
        return (
            f"Olá {cliente.nome}, segue o resumo do seu pedido #{(pedido.id or '').upper()}\n\n"
            f"Valor Total: {formatar_moeda(pedido.valor_total)}\n"
            f"Itens: {len(pedido.itens)}\n"
            f"Condição: {pedido.condicao_pagamento or '-'}\n\n"
            "Obrigado pela compra!"
        )

    def gerar_link_compartilhamento(self, pedido: Pedido, cliente: Cliente) -> str:
        telefone = somente_digitos(cliente.telefone)
        texto = quote(self.texto_resumo(pedido, cliente), safe="")
        return f"{self.whatsapp_base_url}/{telefone}?text={texto}"
