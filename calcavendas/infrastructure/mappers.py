"""
Mapeadores (Mappers) para converter entre:
1. Documentos das coleções (dicionários com os nomes de campo gravados)
2. Entidades de Domínio (calcavendas.core.entities)

Os documentos mantêm os nomes de campo já existentes nas coleções
(`companyName`, `totalValue`, `sizes`...), para que pedidos gravados por
versões anteriores continuem legíveis.
"""
import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from calcavendas.core.entities import (
    Cliente as ClienteEntity,
    Produto as ProdutoEntity,
    ItemPedido as ItemPedidoEntity,
    Pedido as PedidoEntity,
    FRETE_PADRAO,
    STATUS_PADRAO,
)

logger = logging.getLogger(__name__)

# Nomes já usados para o total do pedido, do atual para o mais antigo
CAMPOS_TOTAL_PEDIDO = ("totalValue", "total", "totalAmount")


# ====================================================================
# NORMALIZAÇÃO DE VALORES
# ====================================================================

def normalizar_data(valor: Any) -> Optional[datetime]:
    """
    Converte qualquer representação de data encontrada nos documentos em
    `datetime` com fuso UTC:
    - número (milissegundos desde a época);
    - dicionário `{"seconds": ..., "nanoseconds": ...}`;
    - texto ISO-8601 (ou número em texto);
    - `datetime` / `date`.
    """
    if valor is None or valor == "" or isinstance(valor, bool):
        return None
    if isinstance(valor, datetime):
        return valor if valor.tzinfo else valor.replace(tzinfo=timezone.utc)
    if isinstance(valor, date):
        return datetime(valor.year, valor.month, valor.day, tzinfo=timezone.utc)
    if isinstance(valor, (int, float)):
        return datetime.fromtimestamp(valor / 1000, tz=timezone.utc)
    if isinstance(valor, dict):
        segundos = valor.get("seconds", valor.get("_seconds"))
        if segundos is None:
            return None
        nanos = valor.get("nanoseconds", valor.get("_nanoseconds", 0)) or 0
        return datetime.fromtimestamp(segundos + nanos / 1e9, tz=timezone.utc)
    if isinstance(valor, str):
        texto = valor.strip()
        try:
            return normalizar_data(float(texto))
        except ValueError:
            pass
        try:
            return normalizar_data(datetime.fromisoformat(texto))
        except ValueError:
            logger.debug("Data em formato desconhecido ignorada: %r", valor)
            return None
    return None


def _para_float(valor: Any) -> float:
    if valor is None or valor == "":
        return 0.0
    if isinstance(valor, str):
        return float(valor.replace(",", "."))
    return float(valor)


def _para_int(valor: Any) -> int:
    try:
        return int(valor)
    except (TypeError, ValueError):
        return 0


def _texto(valor: Any) -> str:
    return "" if valor is None else str(valor)


def normalizar_total(documento: Dict[str, Any]) -> Optional[float]:
    """Total canônico do pedido, aceitando os nomes de campo legados."""
    for campo in CAMPOS_TOTAL_PEDIDO:
        if documento.get(campo) is not None:
            return _para_float(documento[campo])
    # Sem total gravado: o pedido assume a soma dos itens
    return None


# ====================================================================
# MAPPERS DO CATÁLOGO E CLIENTES
# ====================================================================

class ProdutoMapper:
    """Mapeador para Produto."""

    @staticmethod
    def to_entity(doc: Dict[str, Any]) -> Optional[ProdutoEntity]:
        if not doc: return None
        return ProdutoEntity(
            id=doc.get("id"),
            referencia=_texto(doc.get("reference")),
            descricao=_texto(doc.get("description")),
            preco=_para_float(doc.get("price")),
            categoria=_texto(doc.get("category")),
            grade=_texto(doc.get("grid")),
            cor=_texto(doc.get("color")),
            solado=_texto(doc.get("sole")),
            material=_texto(doc.get("material")),
            imagem_url=doc.get("imageUrl") or None,
        )

    @staticmethod
    def to_documento(entity: ProdutoEntity) -> Dict[str, Any]:
        doc = {
            "reference": entity.referencia,
            "description": entity.descricao,
            "price": entity.preco,
            "category": entity.categoria,
            "grid": entity.grade,
            "color": entity.cor,
            "sole": entity.solado,
            "material": entity.material,
        }
        if entity.imagem_url:
            doc["imageUrl"] = entity.imagem_url
        return doc


class ClienteMapper:
    """Mapeador para Cliente."""

    @staticmethod
    def to_entity(doc: Dict[str, Any]) -> Optional[ClienteEntity]:
        if not doc: return None
        return ClienteEntity(
            id=doc.get("id"),
            empresa=_texto(doc.get("companyName")),
            nome=_texto(doc.get("name")),
            telefone=_texto(doc.get("phone")),
            telefone2=_texto(doc.get("phone2")),
            email=_texto(doc.get("email")),
            cep=_texto(doc.get("zipCode")),
            endereco=_texto(doc.get("address")),
            numero=_texto(doc.get("number")),
            bairro=_texto(doc.get("neighborhood")),
            cidade=_texto(doc.get("city")),
            estado=_texto(doc.get("state")),
            cpf_cnpj=_texto(doc.get("cpfCnpj")),
            inscricao_estadual=_texto(doc.get("stateRegistration")),
            criado_em=normalizar_data(doc.get("createdAt")),
        )

    @staticmethod
    def to_documento(entity: ClienteEntity) -> Dict[str, Any]:
        return {
            "companyName": entity.empresa,
            "name": entity.nome,
            "phone": entity.telefone,
            "phone2": entity.telefone2,
            "email": entity.email,
            "zipCode": entity.cep,
            "address": entity.endereco,
            "number": entity.numero,
            "neighborhood": entity.bairro,
            "city": entity.cidade,
            "state": entity.estado,
            "cpfCnpj": entity.cpf_cnpj,
            "stateRegistration": entity.inscricao_estadual,
        }


# ====================================================================
# MAPPERS DE PEDIDOS
# ====================================================================

class ItemPedidoMapper:
    """Mapeador para o item embutido no documento do pedido."""

    @staticmethod
    def to_entity(doc: Dict[str, Any]) -> ItemPedidoEntity:
        tamanhos = {str(tamanho): _para_int(qtd) for tamanho, qtd in (doc.get("sizes") or {}).items()}
        item = ItemPedidoEntity(
            produto_id=_texto(doc.get("productId")),
            referencia=_texto(doc.get("reference")),
            descricao=_texto(doc.get("description")),
            preco_unitario=_para_float(doc.get("unitPrice")),
            tamanhos=tamanhos,
            cor=_texto(doc.get("color")),
            solado=_texto(doc.get("sole")),
            material=_texto(doc.get("material")),
        )
        if not item.tamanhos and doc.get("quantity") not in (None, ""):
            # Item sem grade: vale a quantidade gravada
            item.quantidade = _para_int(doc.get("quantity"))
            if doc.get("total") not in (None, ""):
                item.total = _para_float(doc.get("total"))
            else:
                item.total = item.quantidade * item.preco_unitario
        return item

    @staticmethod
    def to_documento(entity: ItemPedidoEntity) -> Dict[str, Any]:
        return {
            "productId": entity.produto_id,
            "reference": entity.referencia,
            "description": entity.descricao,
            "quantity": entity.quantidade,
            "unitPrice": entity.preco_unitario,
            "total": entity.total,
            "sizes": dict(entity.tamanhos),
            "color": entity.cor,
            "sole": entity.solado,
            "material": entity.material,
        }


class PedidoMapper:
    """Mapeador para Pedido (documento único com os itens embutidos)."""

    @staticmethod
    def to_entity(doc: Dict[str, Any]) -> Optional[PedidoEntity]:
        if not doc: return None
        return PedidoEntity(
            id=doc.get("id"),
            cliente_id=_texto(doc.get("clientId")),
            nome_cliente=_texto(doc.get("clientName")),
            itens=[ItemPedidoMapper.to_entity(item) for item in doc.get("items") or []],
            valor_total=normalizar_total(doc),
            data=normalizar_data(doc.get("date")),
            status=_texto(doc.get("status")) or STATUS_PADRAO,
            frete=_texto(doc.get("freight")) or FRETE_PADRAO,
            condicao_pagamento=_texto(doc.get("paymentTerms")),
            forma_pagamento=_texto(doc.get("paymentMethod")),
        )

    @staticmethod
    def to_documento(entity: PedidoEntity) -> Dict[str, Any]:
        """Campos do pedido para gravação. A data é responsabilidade do repositório."""
        return {
            "clientId": entity.cliente_id,
            "clientName": entity.nome_cliente,
            "items": [ItemPedidoMapper.to_documento(item) for item in entity.itens],
            "totalValue": entity.valor_total,
            "status": entity.status,
            "freight": entity.frete,
            "paymentTerms": entity.condicao_pagamento,
            "paymentMethod": entity.forma_pagamento,
        }
