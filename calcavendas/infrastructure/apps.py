from django.apps import AppConfig


class InfrastructureConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'calcavendas.infrastructure'
    label = 'infrastructure' # Define um label para evitar conflitos de nomes
    verbose_name = 'Banco de Documentos e Repositórios'
