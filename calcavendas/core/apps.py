# calcavendas/core/apps.py

from django.apps import AppConfig
from django.conf import settings

class CoreConfig(AppConfig):
    # O nome completo do path da aplicação
    name = 'calcavendas.core'
    label = 'core'
    verbose_name = 'Camada de Entidades e Lógica (Core)'

    # Sem modelos nesta camada: a persistência fica na Infrastructure.
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        # O banco de documentos nasce com o processo e é injetado nos repositórios.
        from calcavendas.core.dependency_injection import inicializar_document_store
        inicializar_document_store(getattr(settings, 'DOCUMENT_STORE_BACKEND', 'django'))
