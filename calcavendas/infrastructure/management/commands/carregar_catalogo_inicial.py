from django.core.management.base import BaseCommand

from calcavendas.core.dependency_injection import get_semear_catalogo_use_case
from calcavendas.infrastructure.catalogo_inicial import produtos_catalogo_inicial


class Command(BaseCommand):
    help = 'Carrega o catálogo inicial de produtos quando a base ainda está vazia'

    def handle(self, *args, **kwargs):
        self.stdout.write('Verificando catálogo de produtos...')
        criados = get_semear_catalogo_use_case().executar(produtos_catalogo_inicial())
        if criados:
            self.stdout.write(self.style.SUCCESS(f'{criados} produtos cadastrados.'))
        else:
            self.stdout.write(self.style.WARNING('Catálogo já possui produtos; nada foi alterado.'))
