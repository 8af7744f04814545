# calcavendas/core/testes.py

import threading
import unittest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import Mock

from calcavendas.core.entities import Cliente, Produto, ItemPedido, Pedido, normalizar_tamanhos
from calcavendas.core.exceptions import (
    DadosInvalidosError,
    TamanhoInvalidoError,
    ItemNaoEncontradoError,
    ClienteNaoEncontradoError,
    PedidoNaoEncontradoError,
    PersistenciaError,
    ConexaoError,
)
from calcavendas.core.montagem_pedido import (
    MontadorPedido,
    converter_quantidade,
    filtrar_clientes,
    filtrar_produtos,
)
from calcavendas.core.use_cases import (
    GerenciarClientesUseCase,
    GerenciarCatalogoUseCase,
    SemearCatalogoUseCase,
    ListarPedidosUseCase,
    ExportarPedidoUseCase,
    RelatorioVendasUseCase,
    PainelUseCase,
    CarregarDadosIniciaisUseCase,
    periodo_predefinido,
)


def _produto_323():
    return Produto(
        id='p-323', referencia='323', descricao='BOTINA AGROLEV ELASTICO', preco=78.00,
        cor='PALHA', solado='VIPFLEX FOLHA AMARELO', material='LATEGO PALHA',
    )


def _produto_4001():
    return Produto(
        id='p-4001', referencia='4001', descricao='BOTINA SEG./PNEU', preco=53.90,
        cor='PRETA', solado='BORRACHA PRETO', material='RASPA PRETA',
    )


def _cliente():
    return Cliente(id='c-1', nome='João Silva', telefone='(11) 98888-7777', empresa='Calçados Silva')


# ====================================================================
# ENTIDADES
# ====================================================================

class TestItemPedido(unittest.TestCase):

    def test_quantidade_e_total_derivados_da_grade(self):
        item = ItemPedido(produto_id='p-323', referencia='323', descricao='BOTINA', preco_unitario=78.00,
                          tamanhos={'38': 2, '39': 1})
        self.assertEqual(item.quantidade, 3)
        self.assertAlmostEqual(item.total, 234.00)

    def test_numeracoes_zeradas_nao_atrapalham_o_calculo(self):
        item = ItemPedido(produto_id='x', referencia='x', descricao='x', preco_unitario=10.0,
                          tamanhos={'40': 0, '41': 2, '33': 0})
        self.assertEqual(item.tamanhos, {'41': 2})
        self.assertEqual(item.quantidade, 2)

    def test_grade_fica_na_ordem_das_numeracoes(self):
        self.assertEqual(list(normalizar_tamanhos({'46': 1, '33': 2, '40': 3})), ['33', '40', '46'])

    def test_pedido_sem_total_assume_soma_dos_itens(self):
        pedido = Pedido(cliente_id='c-1', nome_cliente='X', itens=[
            ItemPedido(produto_id='a', referencia='a', descricao='a', preco_unitario=10.0, tamanhos={'40': 2}),
            ItemPedido(produto_id='b', referencia='b', descricao='b', preco_unitario=5.5, tamanhos={'41': 2}),
        ])
        self.assertAlmostEqual(pedido.valor_total, 31.0)
        self.assertEqual(pedido.total_pares, 4)


# ====================================================================
# FILTROS E CONVERSÃO DE QUANTIDADES
# ====================================================================

class TestFiltros(unittest.TestCase):

    def setUp(self):
        self.clientes = [
            _cliente(),
            Cliente(id='c-2', nome='Maria', telefone='3333-4444', telefone2='99999-0000', empresa='Botas Maria'),
        ]
        self.produtos = [_produto_323(), _produto_4001()] + [
            Produto(id=f'p-{n}', referencia=f'32{n}', descricao='BOTINA', preco=1.0) for n in range(4, 10)
        ]

    def test_busca_de_cliente_por_empresa_nome_ou_telefone(self):
        self.assertEqual([c.id for c in filtrar_clientes(self.clientes, 'silva')], ['c-1'])
        self.assertEqual([c.id for c in filtrar_clientes(self.clientes, 'MARIA')], ['c-2'])
        self.assertEqual([c.id for c in filtrar_clientes(self.clientes, '99999')], ['c-2'])
        self.assertEqual(len(filtrar_clientes(self.clientes, '')), 2)

    def test_sugestoes_limitadas_a_cinco(self):
        self.assertEqual(len(filtrar_produtos(self.produtos, 'botina')), 5)
        self.assertEqual(len(filtrar_produtos(self.produtos, 'botina', limite=None)), 8)

    def test_converter_quantidade(self):
        self.assertEqual(converter_quantidade('3'), 3)
        self.assertEqual(converter_quantidade(''), 0)
        self.assertEqual(converter_quantidade('abc'), 0)
        self.assertEqual(converter_quantidade('12abc'), 12)
        self.assertEqual(converter_quantidade('-2'), -2)
        self.assertEqual(converter_quantidade(None), 0)


# ====================================================================
# MONTAGEM DO PEDIDO
# ====================================================================

class TestMontadorPedido(unittest.TestCase):

    def setUp(self):
        self.pedido_repo_mock = Mock()
        self.cliente = _cliente()
        self.montador = MontadorPedido(
            clientes=[self.cliente],
            produtos=[_produto_323(), _produto_4001()],
            pedido_repo=self.pedido_repo_mock,
        )

    def _adicionar(self, referencia, tamanhos):
        self.montador.informar_referencia(referencia)
        self.montador.alterar_tamanhos(tamanhos)
        return self.montador.adicionar_item()

    def test_cenario_de_dois_itens(self):
        """
        Cenário: 323 com 38:2 e 39:1 (R$ 234,00) e 4001 com 40:5 (R$ 269,50).
        """
        item = self._adicionar('323', {'38': 2, '39': 1})
        self.assertEqual(item.quantidade, 3)
        self.assertAlmostEqual(item.total, 234.00)

        self._adicionar('4001', {'40': 5})

        self.assertAlmostEqual(self.montador.total_pedido, 503.50)
        self.assertEqual(self.montador.total_pares, 8)

    def test_referencia_exata_seleciona_o_produto(self):
        produto = self.montador.informar_referencia(' 323 ')
        self.assertEqual(produto.id, 'p-323')
        self.assertEqual(self.montador.referencia, '323')

    def test_referencia_divergente_limpa_o_produto_ativo(self):
        self.montador.informar_referencia('323')
        self.montador.alterar_tamanho('40', 2)
        self.montador.informar_referencia('32')
        self.assertIsNone(self.montador.produto_ativo)
        self.assertEqual(self.montador.quantidades, {})
        self.assertEqual([p.referencia for p in self.montador.sugestoes], ['323'])

    def test_nao_adiciona_sem_quantidade(self):
        self.montador.informar_referencia('323')
        self.assertFalse(self.montador.pode_adicionar)
        self.assertIsNone(self.montador.adicionar_item())
        self.assertEqual(self.montador.carrinho, [])

    def test_numeracao_fora_da_grade(self):
        self.montador.informar_referencia('323')
        with self.assertRaises(TamanhoInvalidoError):
            self.montador.alterar_tamanho('47', 1)

    def test_mesmo_produto_duas_vezes_gera_duas_linhas(self):
        self._adicionar('323', {'38': 1})
        self._adicionar('323', {'40': 2})
        self.assertEqual(len(self.montador.carrinho), 2)
        self.assertEqual([i.quantidade for i in self.montador.carrinho], [1, 2])

    def test_adicionar_limpa_produto_e_grade(self):
        self._adicionar('323', {'38': 1})
        self.assertEqual(self.montador.referencia, '')
        self.assertIsNone(self.montador.produto_ativo)
        self.assertEqual(self.montador.quantidades, {})

    def test_remover_mantem_a_ordem_dos_demais(self):
        self._adicionar('323', {'38': 1})
        self._adicionar('4001', {'40': 1})
        self._adicionar('323', {'41': 3})

        removido = self.montador.remover_item(1)

        self.assertEqual(removido.referencia, '4001')
        self.assertEqual([(i.referencia, i.quantidade) for i in self.montador.carrinho], [('323', 1), ('323', 3)])
        self.assertAlmostEqual(self.montador.total_pedido, sum(i.total for i in self.montador.carrinho))

    def test_remover_indice_inexistente(self):
        with self.assertRaises(ItemNaoEncontradoError):
            self.montador.remover_item(0)

    def test_quantidade_negativa_e_aceita(self):
        item = self._adicionar('323', {'38': 3, '39': -1})
        self.assertEqual(item.quantidade, 2)

    def test_grade_com_total_negativo_nao_entra_no_carrinho(self):
        self.montador.informar_referencia('323')
        self.montador.alterar_tamanhos({'38': '-2'})

        self.assertFalse(self.montador.pode_adicionar)
        self.assertIsNone(self.montador.adicionar_item())
        self.assertEqual(self.montador.carrinho, [])
        self.assertEqual(self.montador.quantidades, {'38': -2})

    def test_referencia_de_um_caractere_nao_busca(self):
        self.montador.produtos.append(
            Produto(id='p-9', referencia='9', descricao='CHINELO', preco=10.0)
        )

        self.assertIsNone(self.montador.informar_referencia('9'))
        self.assertEqual(self.montador.sugestoes, [])

        self.montador.informar_referencia('32')
        self.assertEqual([p.referencia for p in self.montador.sugestoes], ['323'])

    def test_referencia_de_um_caractere_mantem_o_produto_ativo(self):
        self.montador.informar_referencia('323')
        self.montador.alterar_tamanho('40', 2)

        produto = self.montador.informar_referencia('3')

        self.assertEqual(produto.id, 'p-323')
        self.assertEqual(self.montador.quantidades, {'40': 2})

    def test_condicoes_invalidas(self):
        with self.assertRaises(DadosInvalidosError):
            self.montador.definir_condicoes(frete='EXW')
        with self.assertRaises(DadosInvalidosError):
            self.montador.definir_condicoes(forma_pagamento='Fiado')
        self.montador.definir_condicoes(frete='cif', condicao_pagamento='30/60/90', forma_pagamento='Pix')
        self.assertEqual(self.montador.frete, 'CIF')

    def test_selecionar_cliente_inexistente(self):
        with self.assertRaises(ClienteNaoEncontradoError):
            self.montador.selecionar_cliente('nao-existe')

    def test_salvar_sem_cliente_nao_grava(self):
        self._adicionar('323', {'38': 1})
        self.assertIsNone(self.montador.salvar_pedido())
        self.pedido_repo_mock.criar.assert_not_called()

    def test_salvar_pedido_com_sucesso(self):
        # ARRANGE
        self.montador.selecionar_cliente('c-1')
        self._adicionar('323', {'38': 2, '39': 1})
        self.montador.definir_condicoes(frete='CIF', condicao_pagamento='30 dias')
        self.pedido_repo_mock.criar.side_effect = lambda pedido: Pedido(
            **{**pedido.__dict__, 'id': 'ped-1'}
        )

        # ACT
        salvo = self.montador.salvar_pedido()

        # ASSERT
        enviado = self.pedido_repo_mock.criar.call_args.args[0]
        self.assertEqual(enviado.cliente_id, 'c-1')
        self.assertEqual(enviado.nome_cliente, 'Calçados Silva')
        self.assertAlmostEqual(enviado.valor_total, 234.00)
        self.assertEqual(enviado.status, 'pendente')
        self.assertEqual(enviado.frete, 'CIF')
        self.assertEqual(salvo.id, 'ped-1')
        self.assertTrue(self.montador.em_confirmacao)
        self.assertEqual(self.montador.carrinho, [])
        self.assertEqual(self.montador.cliente_selecionado, self.cliente)

    def test_falha_ao_salvar_preserva_o_estado(self):
        self.montador.selecionar_cliente('c-1')
        self._adicionar('323', {'38': 2})
        self.montador.definir_condicoes(condicao_pagamento='À vista')
        self.pedido_repo_mock.criar.side_effect = RuntimeError('permission denied')

        with self.assertRaises(PersistenciaError):
            self.montador.salvar_pedido()

        self.assertEqual(len(self.montador.carrinho), 1)
        self.assertEqual(self.montador.cliente_selecionado, self.cliente)
        self.assertEqual(self.montador.condicao_pagamento, 'À vista')
        self.assertFalse(self.montador.em_confirmacao)

    def test_editar_pedido_mantem_id_status_e_data(self):
        data_original = datetime(2024, 5, 1, 12, tzinfo=timezone.utc)
        existente = Pedido(
            id='ped-9', cliente_id='c-1', nome_cliente='Calçados Silva', status='faturado', data=data_original,
            itens=[ItemPedido(produto_id='p-323', referencia='323', descricao='BOTINA', preco_unitario=78.0,
                              tamanhos={'40': 1})],
        )
        self.pedido_repo_mock.atualizar.side_effect = lambda pedido: pedido

        self.montador.editar_pedido(existente)
        self._adicionar('4001', {'41': 2})
        salvo = self.montador.salvar_pedido()

        self.pedido_repo_mock.criar.assert_not_called()
        self.assertEqual(salvo.id, 'ped-9')
        self.assertEqual(salvo.status, 'faturado')
        self.assertEqual(salvo.data, data_original)
        self.assertAlmostEqual(salvo.valor_total, 78.0 + 2 * 53.90)
        self.assertFalse(self.montador.em_edicao)

    def test_novo_pedido_limpa_tudo(self):
        self.montador.selecionar_cliente('c-1')
        self._adicionar('323', {'38': 1})
        self.montador.novo_pedido()
        self.assertIsNone(self.montador.cliente_selecionado)
        self.assertEqual(self.montador.carrinho, [])
        self.assertEqual(self.montador.frete, 'FOB')
        self.assertEqual(self.montador.forma_pagamento, 'Boleto Bancário')


# ====================================================================
# CASOS DE USO DE CADASTRO
# ====================================================================

class TestCadastros(unittest.TestCase):

    def setUp(self):
        self.cliente_repo_mock = Mock()
        self.produto_repo_mock = Mock()

    def test_cliente_exige_nome_e_telefone(self):
        use_case = GerenciarClientesUseCase(self.cliente_repo_mock)
        with self.assertRaises(DadosInvalidosError):
            use_case.salvar(Cliente(nome='', telefone='1111'))
        with self.assertRaises(DadosInvalidosError):
            use_case.salvar(Cliente(nome='Ana', telefone=' '))
        self.cliente_repo_mock.salvar.assert_not_called()

    def test_detalhar_cliente_inexistente(self):
        self.cliente_repo_mock.buscar_por_id.return_value = None
        with self.assertRaises(ClienteNaoEncontradoError):
            GerenciarClientesUseCase(self.cliente_repo_mock).detalhar('x')

    def test_produto_tem_referencia_em_maiusculas(self):
        self.produto_repo_mock.salvar.side_effect = lambda produto: produto
        produto = GerenciarCatalogoUseCase(self.produto_repo_mock).salvar(
            Produto(referencia=' 4001a ', descricao='BOTINA', preco=10.0)
        )
        self.assertEqual(produto.referencia, '4001A')

    def test_produto_com_preco_negativo(self):
        with self.assertRaises(DadosInvalidosError):
            GerenciarCatalogoUseCase(self.produto_repo_mock).salvar(
                Produto(referencia='1', descricao='X', preco=-1.0)
            )

    def test_semear_somente_catalogo_vazio(self):
        use_case = SemearCatalogoUseCase(self.produto_repo_mock)

        self.produto_repo_mock.listar.return_value = [_produto_323()]
        self.assertEqual(use_case.executar([_produto_4001()]), 0)
        self.produto_repo_mock.salvar.assert_not_called()

        self.produto_repo_mock.listar.return_value = []
        self.assertEqual(use_case.executar([_produto_323(), _produto_4001()]), 2)
        self.assertEqual(self.produto_repo_mock.salvar.call_count, 2)


# ====================================================================
# PEDIDOS, RELATÓRIOS E PAINEL
# ====================================================================

def _pedido(pedido_id, data, total=100.0, cliente_id='c-1', nome='Calçados Silva', itens=None):
    return Pedido(id=pedido_id, cliente_id=cliente_id, nome_cliente=nome, data=data,
                  valor_total=total, itens=itens or [])


class TestListarPedidos(unittest.TestCase):

    def test_mais_recentes_primeiro_e_sem_data_por_ultimo(self):
        repo = Mock()
        repo.listar.return_value = [
            _pedido('a', datetime(2024, 1, 1, tzinfo=timezone.utc)),
            _pedido('b', None),
            _pedido('c', datetime(2024, 3, 1, tzinfo=timezone.utc)),
        ]
        self.assertEqual([p.id for p in ListarPedidosUseCase(repo).listar()], ['c', 'a', 'b'])

    def test_filtra_por_cliente(self):
        repo = Mock()
        repo.listar_por_cliente.return_value = []
        ListarPedidosUseCase(repo).listar('c-7')
        repo.listar_por_cliente.assert_called_once_with('c-7')

    def test_detalhar_inexistente(self):
        repo = Mock()
        repo.buscar_por_id.return_value = None
        with self.assertRaises(PedidoNaoEncontradoError):
            ListarPedidosUseCase(repo).detalhar('x')


class TestExportarPedido(unittest.TestCase):

    def test_documento_recebe_pedido_e_cliente(self):
        pedido = _pedido('ped-1', None)
        cliente = _cliente()
        pedido_repo, cliente_repo, exportador = Mock(), Mock(), Mock()
        pedido_repo.buscar_por_id.return_value = pedido
        cliente_repo.buscar_por_id.return_value = cliente
        exportador.gerar_documento.return_value = '<html></html>'

        html = ExportarPedidoUseCase(pedido_repo, cliente_repo, exportador).documento('ped-1')

        self.assertEqual(html, '<html></html>')
        exportador.gerar_documento.assert_called_once_with(pedido, cliente)

    def test_sem_cliente_nao_gera_documento(self):
        pedido_repo, cliente_repo, exportador = Mock(), Mock(), Mock()
        pedido_repo.buscar_por_id.return_value = _pedido('ped-1', None)
        cliente_repo.buscar_por_id.return_value = None
        with self.assertRaises(ClienteNaoEncontradoError):
            ExportarPedidoUseCase(pedido_repo, cliente_repo, exportador).link_compartilhamento('ped-1')
        exportador.gerar_link_compartilhamento.assert_not_called()


class TestRelatorioVendas(unittest.TestCase):

    def setUp(self):
        self.use_case = RelatorioVendasUseCase()
        item = ItemPedido(produto_id='p', referencia='323', descricao='B', preco_unitario=10.0, tamanhos={'40': 3})
        self.pedidos = [
            _pedido('fim-do-dia', datetime(2024, 6, 30, 23, 59, 59, tzinfo=timezone.utc), 100.0, itens=[item]),
            _pedido('dia-seguinte', datetime(2024, 7, 1, 0, 0, 0, tzinfo=timezone.utc), 50.0),
            _pedido('antes', datetime(2024, 5, 31, 23, 0, tzinfo=timezone.utc), 20.0, nome='Outro'),
            _pedido('inicio', datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc), 30.0, nome='Botas Maria'),
        ]

    def test_dia_final_inteiro_entra_no_periodo(self):
        resumo = self.use_case.gerar(self.pedidos, inicio=date(2024, 6, 1), fim=date(2024, 6, 30))
        self.assertEqual([p.id for p in resumo.pedidos], ['fim-do-dia', 'inicio'])
        self.assertAlmostEqual(resumo.faturamento_total, 130.0)
        self.assertEqual(resumo.total_pedidos, 2)
        self.assertEqual(resumo.total_itens, 3)

    def test_busca_por_cliente_ou_id(self):
        resumo = self.use_case.gerar(self.pedidos, inicio=date(2024, 1, 1), fim=date(2024, 12, 31), busca='maria')
        self.assertEqual([p.id for p in resumo.pedidos], ['inicio'])
        resumo = self.use_case.gerar(self.pedidos, inicio=date(2024, 1, 1), fim=date(2024, 12, 31), busca='SEGUINTE')
        self.assertEqual([p.id for p in resumo.pedidos], ['dia-seguinte'])

    def test_periodo_predefinido(self):
        self.assertEqual(periodo_predefinido(30, date(2024, 7, 31)), (date(2024, 7, 1), date(2024, 7, 31)))


class TestPainel(unittest.TestCase):

    def test_indicadores_dos_ultimos_trinta_dias(self):
        agora = datetime(2024, 7, 31, 12, tzinfo=timezone.utc)

        def item(ref, qtd):
            return ItemPedido(produto_id=ref, referencia=ref, descricao=ref, preco_unitario=10.0, tamanhos={'40': qtd})

        pedidos = [
            _pedido('a', agora - timedelta(days=1), 70.0, 'c-1', itens=[item('323', 5), item('4001', 2)]),
            _pedido('b', agora - timedelta(days=10), 30.0, 'c-2', itens=[item('4001', 1)]),
            _pedido('c', agora - timedelta(days=40), 999.0, 'c-3', itens=[item('9', 50)]),
        ]

        resumo = PainelUseCase().gerar(pedidos, agora=agora)

        self.assertAlmostEqual(resumo.faturamento, 100.0)
        self.assertEqual(resumo.total_pedidos, 2)
        self.assertEqual(resumo.clientes_ativos, 2)
        self.assertEqual([(p.referencia, p.quantidade) for p in resumo.top_produtos], [('323', 5), ('4001', 3)])
        self.assertEqual([p.id for p in resumo.pedidos_recentes], ['a', 'b', 'c'])

    def test_pedidos_recentes_limitados_aos_cinco_mais_novos(self):
        agora = datetime(2024, 7, 31, 12, tzinfo=timezone.utc)
        pedidos = [
            _pedido(str(dias), agora - timedelta(days=dias), 10.0, 'c-1')
            for dias in (90, 3, 50, 1, 7, 2, 120)
        ]

        resumo = PainelUseCase().gerar(pedidos, agora=agora)

        self.assertEqual([p.id for p in resumo.pedidos_recentes], ['1', '2', '3', '7', '50'])


# ====================================================================
# CARGA INICIAL
# ====================================================================

class TestCarregarDadosIniciais(unittest.TestCase):

    def setUp(self):
        self.cliente_repo_mock = Mock()
        self.produto_repo_mock = Mock()
        self.pedido_repo_mock = Mock()
        self.cliente_repo_mock.listar.return_value = [_cliente()]
        self.produto_repo_mock.listar.return_value = [_produto_323()]
        self.pedido_repo_mock.listar.return_value = []

    def _use_case(self, timeout=1):
        return CarregarDadosIniciaisUseCase(
            self.cliente_repo_mock, self.produto_repo_mock, self.pedido_repo_mock, timeout=timeout
        )

    def test_carga_com_sucesso(self):
        dados = self._use_case().executar()
        self.assertEqual(len(dados.clientes), 1)
        self.assertEqual(len(dados.produtos), 1)
        self.assertEqual(dados.pedidos, [])

    def test_tempo_esgotado_gera_erro_de_conexao(self):
        liberar = threading.Event()
        self.pedido_repo_mock.listar.side_effect = lambda: liberar.wait(5)
        try:
            with self.assertRaises(ConexaoError):
                self._use_case(timeout=0.05).executar()
        finally:
            liberar.set()

    def test_falha_de_leitura_gera_erro_de_conexao(self):
        self.produto_repo_mock.listar.side_effect = RuntimeError('unavailable')
        with self.assertRaises(ConexaoError):
            self._use_case().executar()


if __name__ == '__main__':
    unittest.main()
