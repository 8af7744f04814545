# calcavendas/presentation/testes.py

from datetime import timedelta
from unittest.mock import patch

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from calcavendas.core import dependency_injection as di
from calcavendas.core.entities import Cliente, Produto, ItemPedido, Pedido
from calcavendas.core.exceptions import ConexaoError
from calcavendas.core.ports import COLECAO_PEDIDOS
from calcavendas.infrastructure.document_stores import DocumentStoreDjango, DocumentStoreMemoria


class BaseAPITest(APITestCase):
    """Cada teste usa um banco de documentos em memória próprio."""

    def setUp(self):
        self.store = DocumentStoreMemoria()
        di.definir_document_store(self.store)
        self.cliente = di.get_cliente_repo().salvar(
            Cliente(nome='João Silva', telefone='(11) 98888-7777', empresa='Calçados Silva')
        )
        produto_repo = di.get_produto_repo()
        self.produto_323 = produto_repo.salvar(Produto(
            referencia='323', descricao='BOTINA AGROLEV ELASTICO', preco=78.00,
            cor='PALHA', solado='VIPFLEX FOLHA AMARELO', material='LATEGO PALHA',
        ))
        self.produto_4001 = produto_repo.salvar(Produto(
            referencia='4001', descricao='BOTINA SEG./PNEU', preco=53.90,
            cor='PRETA', solado='BORRACHA PRETO', material='RASPA PRETA',
        ))

    def tearDown(self):
        di.definir_document_store(DocumentStoreDjango())

    def criar_pedido(self, dias_atras=0, itens=None):
        itens = itens or [ItemPedido(produto_id=self.produto_323.id, referencia='323', descricao='BOTINA',
                                     preco_unitario=78.0, tamanhos={'38': 2, '39': 1})]
        pedido = di.get_pedido_repo().criar(Pedido(
            cliente_id=self.cliente.id, nome_cliente=self.cliente.nome_exibicao, itens=itens,
            condicao_pagamento='30 dias',
        ))
        if dias_atras:
            data = timezone.now() - timedelta(days=dias_atras)
            self.store.atualizar(COLECAO_PEDIDOS, pedido.id, {'date': data})
        return pedido


# ====================================================================
# CADASTROS
# ====================================================================

class ClienteAPITest(BaseAPITest):

    def test_cadastrar_cliente(self):
        response = self.client.post(reverse('clientes'), {'nome': 'Ana', 'telefone': '1133334444'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['nome'], 'Ana')
        self.assertIsNotNone(response.data['id'])

    def test_cadastro_sem_telefone(self):
        response = self.client.post(reverse('clientes'), {'nome': 'Ana'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('telefone', response.data)

    def test_busca(self):
        response = self.client.get(reverse('clientes'), {'busca': 'silva'})
        self.assertEqual([c['id'] for c in response.data], [self.cliente.id])
        response = self.client.get(reverse('clientes'), {'busca': 'inexistente'})
        self.assertEqual(response.data, [])

    def test_atualizar_preserva_campos_nao_enviados(self):
        url = reverse('cliente_detalhe', args=[self.cliente.id])
        response = self.client.put(url, {'cidade': 'Franca', 'estado': 'SP'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['cidade'], 'Franca')
        self.assertEqual(response.data['empresa'], 'Calçados Silva')

    def test_cliente_inexistente(self):
        response = self.client.get(reverse('cliente_detalhe', args=['nao-existe']))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ProdutoAPITest(BaseAPITest):

    def test_mesma_referencia_atualiza_o_produto(self):
        dados = {'referencia': '999', 'descricao': 'BOTINA TESTE', 'preco': 50.0}
        primeiro = self.client.post(reverse('produtos'), dados, format='json')
        segundo = self.client.post(reverse('produtos'), {**dados, 'preco': 61.5}, format='json')

        self.assertEqual(primeiro.data['id'], segundo.data['id'])
        response = self.client.get(reverse('produtos'), {'busca': '999'})
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['preco'], 61.5)

    def test_preco_negativo(self):
        response = self.client.post(
            reverse('produtos'), {'referencia': '1', 'descricao': 'X', 'preco': -1}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_remover_produto(self):
        response = self.client.delete(reverse('produto_detalhe', args=[self.produto_4001.id]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        response = self.client.get(reverse('produtos'))
        self.assertEqual([p['referencia'] for p in response.data], ['323'])


# ====================================================================
# MONTAGEM DO PEDIDO
# ====================================================================

class MontagemAPITest(BaseAPITest):

    def _adicionar(self, referencia, tamanhos):
        self.client.post(reverse('montagem_referencia'), {'referencia': referencia}, format='json')
        self.client.post(reverse('montagem_tamanhos'), {'tamanhos': tamanhos}, format='json')
        return self.client.post(reverse('montagem_itens'), format='json')

    def test_fluxo_completo(self):
        # 1. Cliente
        response = self.client.post(reverse('montagem_cliente'), {'cliente_id': self.cliente.id}, format='json')
        self.assertEqual(response.data['cliente']['id'], self.cliente.id)

        # 2. Itens
        response = self._adicionar('323', {'38': '2', '39': '1'})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        response = self._adicionar('4001', {'40': 5})
        self.assertEqual(response.data['total_pedido'], 503.5)
        self.assertEqual(response.data['total_pares'], 8)
        self.assertEqual([i['referencia'] for i in response.data['carrinho']], ['323', '4001'])

        # 3. Condições
        response = self.client.post(
            reverse('montagem_condicoes'),
            {'frete': 'CIF', 'condicao_pagamento': '30/60', 'forma_pagamento': 'Pix'},
            format='json',
        )
        self.assertEqual(response.data['frete'], 'CIF')

        # 4. Gravação
        response = self.client.post(reverse('montagem_salvar'), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['carrinho'], [])
        self.assertEqual(response.data['pedido_salvo']['valor_total'], 503.5)
        self.assertEqual(response.data['pedido_salvo']['status'], 'pendente')

        pedidos = self.client.get(reverse('pedidos')).data
        self.assertEqual(len(pedidos), 1)
        self.assertEqual(pedidos[0]['forma_pagamento'], 'Pix')

    def test_estado_sobrevive_entre_requisicoes(self):
        self.client.post(reverse('montagem_referencia'), {'referencia': '323'}, format='json')
        self.client.post(reverse('montagem_tamanhos'), {'tamanhos': {'40': '3'}}, format='json')
        response = self.client.get(reverse('montagem'))
        self.assertEqual(response.data['produto_ativo']['referencia'], '323')
        self.assertEqual(response.data['quantidade_atual'], 3)
        self.assertEqual(response.data['preco_atual'], 234.0)
        self.assertTrue(response.data['pode_adicionar'])

    def test_remover_item(self):
        self._adicionar('323', {'38': 1})
        self._adicionar('4001', {'40': 1})
        response = self.client.delete(reverse('montagem_item', args=[0]))
        self.assertEqual([i['referencia'] for i in response.data['carrinho']], ['4001'])
        response = self.client.delete(reverse('montagem_item', args=[5]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_item_sem_quantidade(self):
        self.client.post(reverse('montagem_referencia'), {'referencia': '323'}, format='json')
        response = self.client.post(reverse('montagem_itens'), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_numeracao_fora_da_grade(self):
        self.client.post(reverse('montagem_referencia'), {'referencia': '323'}, format='json')
        response = self.client.post(reverse('montagem_tamanhos'), {'tamanhos': {'47': '1'}}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_salvar_sem_itens(self):
        self.client.post(reverse('montagem_cliente'), {'cliente_id': self.cliente.id}, format='json')
        response = self.client.post(reverse('montagem_salvar'), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_falha_ao_gravar_preserva_o_carrinho(self):
        self.client.post(reverse('montagem_cliente'), {'cliente_id': self.cliente.id}, format='json')
        self._adicionar('323', {'38': 1})
        with patch.object(DocumentStoreMemoria, 'criar', side_effect=RuntimeError('permission denied')):
            response = self.client.post(reverse('montagem_salvar'), format='json')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        response = self.client.get(reverse('montagem'))
        self.assertEqual(len(response.data['carrinho']), 1)
        self.assertEqual(response.data['cliente']['id'], self.cliente.id)

    def test_editar_pedido(self):
        pedido = self.criar_pedido()
        response = self.client.post(reverse('montagem_editar', args=[pedido.id]), format='json')
        self.assertTrue(response.data['em_edicao'])
        self.assertEqual(len(response.data['carrinho']), 1)

        self._adicionar('4001', {'40': 5})
        response = self.client.post(reverse('montagem_salvar'), format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['pedido_salvo']['id'], pedido.id)
        self.assertEqual(response.data['pedido_salvo']['valor_total'], 503.5)
        self.assertEqual(len(self.client.get(reverse('pedidos')).data), 1)

    def test_novo_pedido(self):
        self.client.post(reverse('montagem_cliente'), {'cliente_id': self.cliente.id}, format='json')
        response = self.client.delete(reverse('montagem'))
        self.assertIsNone(response.data['cliente'])


# ====================================================================
# PEDIDOS, RELATÓRIOS E CARGA INICIAL
# ====================================================================

class PedidoAPITest(BaseAPITest):

    def test_documento_e_link(self):
        pedido = self.criar_pedido()
        response = self.client.get(reverse('pedido_documento', args=[pedido.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('text/html', response['Content-Type'])
        self.assertIn('R$ 234,00', response.content.decode())

        response = self.client.get(reverse('pedido_compartilhar', args=[pedido.id]))
        self.assertTrue(response.data['link'].startswith('https://wa.me/11988887777?text='))

    def test_pedido_inexistente(self):
        response = self.client.get(reverse('pedido_detalhe', args=['nao-existe']))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_filtrar_por_cliente(self):
        self.criar_pedido()
        response = self.client.get(reverse('pedidos'), {'cliente_id': 'outro'})
        self.assertEqual(response.data, [])


class RelatorioAPITest(BaseAPITest):

    def test_periodo_predefinido(self):
        self.criar_pedido(dias_atras=2)
        self.criar_pedido(dias_atras=45)
        response = self.client.get(reverse('relatorio_vendas'), {'periodo': 30})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total_pedidos'], 1)
        self.assertEqual(response.data['faturamento_total'], 234.0)
        self.assertEqual(response.data['total_itens'], 3)

    def test_datas_invertidas(self):
        response = self.client.get(reverse('relatorio_vendas'), {'inicio': '2024-07-01', 'fim': '2024-06-01'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_painel(self):
        self.criar_pedido(dias_atras=1)
        self.criar_pedido(dias_atras=60)
        response = self.client.get(reverse('painel'))
        self.assertEqual(response.data['total_pedidos'], 1)
        self.assertEqual(response.data['clientes_ativos'], 1)
        self.assertEqual(response.data['top_produtos'][0]['referencia'], '323')
        self.assertEqual(len(response.data['pedidos_recentes']), 2)
        self.assertEqual(response.data['pedidos_recentes'][0]['cliente_id'], self.cliente.id)


class DadosIniciaisAPITest(BaseAPITest):

    def test_carga_inicial(self):
        self.criar_pedido()
        response = self.client.get(reverse('dados_iniciais'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['clientes']), 1)
        self.assertEqual(len(response.data['produtos']), 2)
        self.assertEqual(len(response.data['pedidos']), 1)

    def test_tempo_esgotado(self):
        with patch('calcavendas.presentation.views.di.get_carregar_dados_iniciais_use_case') as fabrica:
            fabrica.return_value.executar.side_effect = ConexaoError('O servidor demorou muito para responder.')
            response = self.client.get(reverse('dados_iniciais'))
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertIn('demorou', response.data['message'])
