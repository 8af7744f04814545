# Define os modelos do banco de dados para a camada de infraestrutura.

from django.db import models

from calcavendas.infrastructure.document_stores import gerar_id_documento


# ====================================================================
# MODELO DE DOCUMENTO
# ====================================================================

class Documento(models.Model):
    """
    Documento de uma coleção (clients, products, orders).
    Os campos do documento ficam em `dados`; o banco relacional guarda apenas
    a chave, a coleção e as datas de controle.
    """
    id = models.CharField(primary_key=True, max_length=40, default=gerar_id_documento, editable=False)
    colecao = models.CharField(max_length=50, db_index=True)
    dados = models.JSONField(default=dict)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Documento'
        verbose_name_plural = 'Documentos'
        db_table = 'infra_documento'
        ordering = ['criado_em', 'id']

    def __str__(self):
        return f"{self.colecao}/{self.id}"
