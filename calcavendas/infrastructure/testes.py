# calcavendas/infrastructure/testes.py

from datetime import date, datetime, timezone
from io import StringIO
from urllib.parse import unquote

from django.core.management import call_command
from django.test import SimpleTestCase, TestCase

from calcavendas.core import dependency_injection as di
from calcavendas.core.entities import Cliente, Produto, ItemPedido, Pedido
from calcavendas.core.ports import SERVER_TIMESTAMP, COLECAO_PRODUTOS, COLECAO_PEDIDOS
from calcavendas.infrastructure.catalogo_inicial import CATALOGO_INICIAL
from calcavendas.infrastructure.document_stores import DocumentStoreDjango, DocumentStoreMemoria
from calcavendas.infrastructure.gateways import ExportadorPedidoHTML, formatar_moeda
from calcavendas.infrastructure.mappers import PedidoMapper, normalizar_data, normalizar_total
from calcavendas.infrastructure.models import Documento
from calcavendas.infrastructure.repositories import ProdutoRepository, ClienteRepository, PedidoRepository


# ====================================================================
# BANCO DE DOCUMENTOS
# ====================================================================

class DocumentStoreContrato:
    """Regras comuns aos dois bancos de documentos."""

    def criar_store(self):
        raise NotImplementedError

    def setUp(self):
        self.store = self.criar_store()

    def test_criar_e_buscar(self):
        doc_id = self.store.criar('clients', {'name': 'Ana', 'phone': '1'})
        self.assertEqual(len(doc_id), 20)
        self.assertEqual(self.store.buscar('clients', doc_id), {'id': doc_id, 'name': 'Ana', 'phone': '1'})
        self.assertIsNone(self.store.buscar('clients', 'inexistente'))

    def test_merge_preserva_campos_nao_informados(self):
        doc_id = self.store.criar('products', {'reference': '1', 'price': 10.0, 'color': 'PRETA'})
        self.store.atualizar('products', doc_id, {'price': 12.5}, merge=True)
        self.assertEqual(
            self.store.buscar('products', doc_id),
            {'id': doc_id, 'reference': '1', 'price': 12.5, 'color': 'PRETA'},
        )

    def test_sem_merge_substitui_o_documento(self):
        doc_id = self.store.criar('products', {'reference': '1', 'price': 10.0})
        self.store.atualizar('products', doc_id, {'price': 3.0}, merge=False)
        self.assertEqual(self.store.buscar('products', doc_id), {'id': doc_id, 'price': 3.0})

    def test_atualizar_id_inexistente_cria_o_documento(self):
        self.store.atualizar('products', 'novo-id', {'reference': '7'})
        self.assertEqual(self.store.buscar('products', 'novo-id'), {'id': 'novo-id', 'reference': '7'})

    def test_consultar_por_igualdade(self):
        self.store.criar('orders', {'clientId': 'c-1', 'totalValue': 1.0})
        self.store.criar('orders', {'clientId': 'c-2', 'totalValue': 2.0})
        self.store.criar('products', {'clientId': 'c-1'})
        encontrados = self.store.consultar('orders', {'clientId': 'c-1'})
        self.assertEqual([d['totalValue'] for d in encontrados], [1.0])

    def test_data_do_servidor(self):
        doc_id = self.store.criar('orders', {'date': SERVER_TIMESTAMP})
        gravada = normalizar_data(self.store.buscar('orders', doc_id)['date'])
        self.assertLess(abs((datetime.now(timezone.utc) - gravada).total_seconds()), 60)

    def test_deletar(self):
        doc_id = self.store.criar('clients', {'name': 'Ana'})
        self.store.deletar('clients', doc_id)
        self.store.deletar('clients', doc_id)
        self.assertEqual(self.store.listar('clients'), [])


class DocumentStoreDjangoTest(DocumentStoreContrato, TestCase):

    def criar_store(self):
        return DocumentStoreDjango()

    def test_documento_persistido_na_tabela(self):
        doc_id = self.store.criar('clients', {'name': 'Ana'})
        model = Documento.objects.get(pk=doc_id)
        self.assertEqual(model.colecao, 'clients')
        self.assertEqual(model.dados, {'name': 'Ana'})


class DocumentStoreMemoriaTest(DocumentStoreContrato, SimpleTestCase):

    def criar_store(self):
        return DocumentStoreMemoria()

    def test_devolve_copias(self):
        doc_id = self.store.criar('orders', {'items': [{'sizes': {'40': 1}}]})
        lido = self.store.buscar('orders', doc_id)
        lido['items'][0]['sizes']['40'] = 99
        self.assertEqual(self.store.buscar('orders', doc_id)['items'][0]['sizes']['40'], 1)


# ====================================================================
# NORMALIZAÇÃO NOS MAPPERS
# ====================================================================

class NormalizacaoTest(SimpleTestCase):

    def test_normalizar_data_aceita_todos_os_formatos(self):
        esperado = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)
        milissegundos = int(esperado.timestamp() * 1000)
        self.assertEqual(normalizar_data(milissegundos), esperado)
        self.assertEqual(normalizar_data(str(milissegundos)), esperado)
        self.assertEqual(normalizar_data({'seconds': int(esperado.timestamp()), 'nanoseconds': 0}), esperado)
        self.assertEqual(normalizar_data('2024-06-30T12:00:00+00:00'), esperado)
        self.assertEqual(normalizar_data('2024-06-30T12:00:00Z'), esperado)
        self.assertEqual(normalizar_data(datetime(2024, 6, 30, 12, 0)), esperado)
        self.assertEqual(normalizar_data(date(2024, 6, 30)), datetime(2024, 6, 30, tzinfo=timezone.utc))
        self.assertIsNone(normalizar_data(None))
        self.assertIsNone(normalizar_data('ontem'))

    def test_normalizar_total_com_nomes_legados(self):
        self.assertEqual(normalizar_total({'totalValue': 10.0, 'total': 5.0}), 10.0)
        self.assertEqual(normalizar_total({'total': '7,50'}), 7.5)
        self.assertEqual(normalizar_total({'totalAmount': 3}), 3.0)
        self.assertIsNone(normalizar_total({}))

    def test_pedido_legado_sem_total_soma_os_itens(self):
        pedido = PedidoMapper.to_entity({
            'id': 'legado',
            'clientId': 'c-1',
            'clientName': 'Loja',
            'date': 1719748800000,
            'items': [
                {'productId': 'p', 'reference': '323', 'description': 'B', 'unitPrice': 78.0, 'sizes': {'38': 2, '39': '1'}},
            ],
        })
        self.assertEqual(pedido.itens[0].quantidade, 3)
        self.assertEqual(pedido.itens[0].solado, '')
        self.assertAlmostEqual(pedido.valor_total, 234.0)
        self.assertEqual(pedido.status, 'pendente')
        self.assertEqual(pedido.frete, 'FOB')

    def test_item_sem_grade_usa_a_quantidade_gravada(self):
        pedido = PedidoMapper.to_entity({
            'id': 'legado',
            'clientId': 'c-1',
            'clientName': 'Loja',
            'items': [
                {'productId': 'p', 'reference': '323', 'description': 'B', 'unitPrice': 78.0, 'quantity': 4},
                {'productId': 'q', 'reference': '4001', 'description': 'C', 'unitPrice': '53,90',
                 'quantity': '2', 'total': 100.0},
            ],
        })
        self.assertEqual([i.quantidade for i in pedido.itens], [4, 2])
        self.assertAlmostEqual(pedido.itens[0].total, 312.0)
        self.assertAlmostEqual(pedido.itens[1].total, 100.0)
        self.assertEqual(pedido.total_pares, 6)
        self.assertAlmostEqual(pedido.valor_total, 412.0)


# ====================================================================
# REPOSITÓRIOS
# ====================================================================

class ProdutoRepositoryTest(TestCase):

    def setUp(self):
        self.store = DocumentStoreDjango()
        self.repo = ProdutoRepository(self.store)

    def test_salvar_referencia_existente_atualiza_o_mesmo_documento(self):
        primeiro = self.repo.salvar(Produto(referencia='999', descricao='BOTINA TESTE', preco=50.0))
        segundo = self.repo.salvar(Produto(referencia='999', descricao='BOTINA TESTE', preco=65.0))

        documentos = self.store.listar(COLECAO_PRODUTOS)
        self.assertEqual(len(documentos), 1)
        self.assertEqual(primeiro.id, segundo.id)
        self.assertEqual(documentos[0]['price'], 65.0)

    def test_referencia_nova_cria_um_documento(self):
        self.repo.salvar(Produto(referencia='1', descricao='A', preco=1.0))
        self.repo.salvar(Produto(referencia='2', descricao='B', preco=2.0))
        self.assertEqual(len(self.store.listar(COLECAO_PRODUTOS)), 2)

    def test_salvar_com_id_faz_merge(self):
        produto = self.repo.salvar(Produto(referencia='1', descricao='A', preco=1.0, imagem_url='http://x/1.png'))
        produto.imagem_url = None
        produto.preco = 9.0
        self.repo.salvar(produto)
        documento = self.store.buscar(COLECAO_PRODUTOS, produto.id)
        self.assertEqual(documento['price'], 9.0)
        self.assertEqual(documento['imageUrl'], 'http://x/1.png')


class ClienteRepositoryTest(TestCase):

    def test_criar_define_data_de_cadastro(self):
        repo = ClienteRepository(DocumentStoreDjango())
        cliente = repo.salvar(Cliente(nome='Ana', telefone='(11) 9999-0000', empresa='Loja da Ana'))
        self.assertIsNotNone(cliente.id)
        self.assertIsNotNone(cliente.criado_em)
        self.assertEqual(repo.buscar_por_id(cliente.id).empresa, 'Loja da Ana')


class PedidoRepositoryTest(TestCase):

    def setUp(self):
        self.store = DocumentStoreDjango()
        self.repo = PedidoRepository(self.store)
        self.item = ItemPedido(produto_id='p-323', referencia='323', descricao='BOTINA', preco_unitario=78.0,
                               tamanhos={'38': 2, '39': 1}, cor='PALHA')

    def test_criar_grava_documento_unico_com_data_do_servidor(self):
        pedido = self.repo.criar(Pedido(cliente_id='c-1', nome_cliente='Loja', itens=[self.item]))

        documento = self.store.buscar(COLECAO_PEDIDOS, pedido.id)
        self.assertEqual(documento['totalValue'], 234.0)
        self.assertEqual(documento['items'][0]['sizes'], {'38': 2, '39': 1})
        self.assertEqual(documento['items'][0]['quantity'], 3)
        self.assertEqual(documento['status'], 'pendente')
        self.assertIsNotNone(pedido.data)

    def test_atualizar_preserva_id_e_data(self):
        criado = self.repo.criar(Pedido(cliente_id='c-1', nome_cliente='Loja', itens=[self.item]))
        criado.itens = criado.itens + [
            ItemPedido(produto_id='p-4001', referencia='4001', descricao='BOTINA', preco_unitario=53.9, tamanhos={'40': 5})
        ]
        criado.valor_total = sum(i.total for i in criado.itens)

        atualizado = self.repo.atualizar(criado)

        self.assertEqual(atualizado.id, criado.id)
        self.assertEqual(atualizado.data, criado.data)
        self.assertAlmostEqual(atualizado.valor_total, 503.5)
        self.assertEqual(len(self.store.listar(COLECAO_PEDIDOS)), 1)

    def test_listar_por_cliente(self):
        self.repo.criar(Pedido(cliente_id='c-1', nome_cliente='Loja', itens=[self.item]))
        self.repo.criar(Pedido(cliente_id='c-2', nome_cliente='Outra', itens=[self.item]))
        self.assertEqual([p.cliente_id for p in self.repo.listar_por_cliente('c-2')], ['c-2'])


# ====================================================================
# EXPORTAÇÃO E CATÁLOGO INICIAL
# ====================================================================

class ExportadorPedidoHTMLTest(SimpleTestCase):

    def setUp(self):
        self.exportador = ExportadorPedidoHTML('https://wa.me')
        self.cliente = Cliente(id='c-1', nome='João', telefone='(11) 98888-7777', empresa='Calçados Silva',
                               cpf_cnpj='12.345.678/0001-90')
        self.pedido = Pedido(
            id='abc123', cliente_id='c-1', nome_cliente='Calçados Silva', condicao_pagamento='30/60',
            data=datetime(2024, 6, 30, 15, tzinfo=timezone.utc),
            itens=[ItemPedido(produto_id='p', referencia='323', descricao='BOTINA AGROLEV ELASTICO',
                              preco_unitario=78.0, tamanhos={'38': 2, '39': 1}, solado='VIPFLEX', material='LATEGO')],
        )

    def test_formatar_moeda(self):
        self.assertEqual(formatar_moeda(1234.5), 'R$ 1.234,50')
        self.assertEqual(formatar_moeda(0), 'R$ 0,00')

    def test_documento_com_grade_e_totais(self):
        html = self.exportador.gerar_documento(self.pedido, self.cliente)
        self.assertIn('PEDIDO DE VENDA', html)
        self.assertIn('ABC123', html)
        self.assertIn('Calçados Silva', html)
        self.assertIn('<th>33</th>', html)
        self.assertIn('<th>46</th>', html)
        self.assertIn('R$ 234,00', html)
        self.assertIn('TOTAL GERAL', html)
        self.assertLess(html.index('<th>33</th>'), html.index('<th>46</th>'))

    def test_link_do_whatsapp(self):
        link = self.exportador.gerar_link_compartilhamento(self.pedido, self.cliente)
        self.assertTrue(link.startswith('https://wa.me/11988887777?text='))
        texto = unquote(link.split('?text=', 1)[1])
        self.assertIn('Olá João, segue o resumo do seu pedido #ABC123', texto)
        self.assertIn('Valor Total: R$ 234,00', texto)
        self.assertIn('Itens: 1', texto)
        self.assertIn('Condição: 30/60', texto)


class CarregarCatalogoInicialCommandTest(TestCase):

    def setUp(self):
        di.definir_document_store(DocumentStoreDjango())

    def test_semeia_apenas_uma_vez(self):
        call_command('carregar_catalogo_inicial', stdout=StringIO())
        call_command('carregar_catalogo_inicial', stdout=StringIO())

        produtos = di.get_produto_repo().listar()
        self.assertEqual(len(produtos), len(CATALOGO_INICIAL))
        botina = next(p for p in produtos if p.referencia == '323')
        self.assertEqual(botina.preco, 78.0)
        self.assertEqual(botina.grade, '33-46')
