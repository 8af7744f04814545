"""
Implementações concretas do banco de documentos (IDocumentStore).

- DocumentStoreDjango: documentos persistidos numa tabela relacional via Django ORM.
- DocumentStoreMemoria: documentos mantidos no processo (desenvolvimento e testes).

As duas implementações seguem as mesmas regras: `atualizar` com merge preserva
os campos não informados, atualizar um id inexistente cria o documento e a
sentinela SERVER_TIMESTAMP é trocada pelo relógio do servidor na gravação.
"""
import copy
import logging
import secrets
import string
import threading
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from django.apps import apps
from django.db import transaction

from calcavendas.core.ports import IDocumentStore, SERVER_TIMESTAMP

logger = logging.getLogger(__name__)

_ALFABETO_ID = string.ascii_letters + string.digits


def gerar_id_documento() -> str:
    """Identificador aleatório de 20 caracteres, no formato usado pelas coleções."""
    return "".join(secrets.choice(_ALFABETO_ID) for _ in range(20))


def agora_servidor() -> str:
    return datetime.now(timezone.utc).isoformat()


def _serializar_valor(valor: Any, agora: str) -> Any:
    if valor is SERVER_TIMESTAMP:
        return agora
    if isinstance(valor, datetime):
        return valor.isoformat()
    if isinstance(valor, date):
        return valor.isoformat()
    if isinstance(valor, dict):
        return {str(chave): _serializar_valor(v, agora) for chave, v in valor.items()}
    if isinstance(valor, (list, tuple)):
        return [_serializar_valor(v, agora) for v in valor]
    return valor


def preparar_dados(dados: Dict[str, Any]) -> Dict[str, Any]:
    """Copia os campos para gravação, sem o id e com as datas resolvidas."""
    agora = agora_servidor()
    return {
        chave: _serializar_valor(valor, agora)
        for chave, valor in dados.items()
        if chave != "id"
    }


# ====================================================================
# 1. BANCO DE DOCUMENTOS (Django ORM)
# ====================================================================

class DocumentStoreDjango(IDocumentStore):
    """Banco de documentos sobre o modelo `Documento` (campo JSON por documento)."""

    # Propriedade para carregar o modelo de forma LAZY
    @property
    def DocumentoModel(self):
        return apps.get_model('infrastructure', 'Documento')

    @staticmethod
    def _para_dict(model) -> Dict[str, Any]:
        return {**model.dados, "id": model.id}

    def listar(self, colecao: str) -> List[Dict[str, Any]]:
        return [self._para_dict(m) for m in self.DocumentoModel.objects.filter(colecao=colecao)]

    def buscar(self, colecao: str, doc_id: str) -> Optional[Dict[str, Any]]:
        model = self.DocumentoModel.objects.filter(colecao=colecao, pk=doc_id).first()
        return self._para_dict(model) if model else None

    def criar(self, colecao: str, dados: Dict[str, Any]) -> str:
        model = self.DocumentoModel.objects.create(colecao=colecao, dados=preparar_dados(dados))
        logger.debug("Documento %s/%s criado", colecao, model.id)
        return model.id

    @transaction.atomic
    def atualizar(self, colecao: str, doc_id: str, dados: Dict[str, Any], merge: bool = True):
        preparados = preparar_dados(dados)
        model = (
            self.DocumentoModel.objects.select_for_update()
            .filter(colecao=colecao, pk=doc_id)
            .first()
        )
        if model is None:
            self.DocumentoModel.objects.create(id=doc_id, colecao=colecao, dados=preparados)
            return
        model.dados = {**model.dados, **preparados} if merge else preparados
        model.save(update_fields=['dados', 'atualizado_em'])

    def deletar(self, colecao: str, doc_id: str):
        self.DocumentoModel.objects.filter(colecao=colecao, pk=doc_id).delete()

    def consultar(self, colecao: str, filtros: Dict[str, Any]) -> List[Dict[str, Any]]:
        qs = self.DocumentoModel.objects.filter(colecao=colecao)
        for campo, valor in filtros.items():
            qs = qs.filter(**{f"dados__{campo}": valor})
        return [self._para_dict(m) for m in qs]


# ====================================================================
# 2. BANCO DE DOCUMENTOS EM MEMÓRIA
# ====================================================================

class DocumentStoreMemoria(IDocumentStore):
    """
    Banco de documentos mantido em memória, com a mesma semântica do banco real.
    Devolve sempre cópias, de modo que quem chama não altera o estado gravado.
    """

    def __init__(self):
        self._colecoes: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def _colecao(self, colecao: str) -> Dict[str, Dict[str, Any]]:
        return self._colecoes.setdefault(colecao, {})

    def listar(self, colecao: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [
                {**copy.deepcopy(dados), "id": doc_id}
                for doc_id, dados in self._colecao(colecao).items()
            ]

    def buscar(self, colecao: str, doc_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            dados = self._colecao(colecao).get(doc_id)
            return {**copy.deepcopy(dados), "id": doc_id} if dados is not None else None

    def criar(self, colecao: str, dados: Dict[str, Any]) -> str:
        doc_id = gerar_id_documento()
        with self._lock:
            self._colecao(colecao)[doc_id] = copy.deepcopy(preparar_dados(dados))
        return doc_id

    def atualizar(self, colecao: str, doc_id: str, dados: Dict[str, Any], merge: bool = True):
        preparados = copy.deepcopy(preparar_dados(dados))
        with self._lock:
            documentos = self._colecao(colecao)
            if merge and doc_id in documentos:
                documentos[doc_id].update(preparados)
            else:
                documentos[doc_id] = preparados

    def deletar(self, colecao: str, doc_id: str):
        with self._lock:
            self._colecao(colecao).pop(doc_id, None)

    def consultar(self, colecao: str, filtros: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [
            documento for documento in self.listar(colecao)
            if all(documento.get(campo) == valor for campo, valor in filtros.items())
        ]
