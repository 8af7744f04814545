"""
Define as rotas da API REST da força de vendas: cadastros, pedidos,
relatórios e a montagem do pedido mantida na sessão.
"""
from django.urls import path

from . import views


urlpatterns = [
    # ====================================================================
    # 1. CADASTROS
    # ====================================================================
    path('clientes/', views.ClienteListAPIView.as_view(), name='clientes'),
    path('clientes/<str:cliente_id>/', views.ClienteDetailAPIView.as_view(), name='cliente_detalhe'),
    path('produtos/', views.ProdutoListAPIView.as_view(), name='produtos'),
    path('produtos/<str:produto_id>/', views.ProdutoDetailAPIView.as_view(), name='produto_detalhe'),

    # ====================================================================
    # 2. PEDIDOS
    # ====================================================================
    path('pedidos/', views.PedidoListAPIView.as_view(), name='pedidos'),
    path('pedidos/<str:pedido_id>/', views.PedidoDetailAPIView.as_view(), name='pedido_detalhe'),
    path('pedidos/<str:pedido_id>/documento/', views.PedidoDocumentoView.as_view(), name='pedido_documento'),
    path('pedidos/<str:pedido_id>/compartilhar/', views.PedidoCompartilharAPIView.as_view(), name='pedido_compartilhar'),

    # ====================================================================
    # 3. RELATÓRIOS E PAINEL
    # ====================================================================
    path('relatorios/vendas/', views.RelatorioVendasAPIView.as_view(), name='relatorio_vendas'),
    path('painel/', views.PainelAPIView.as_view(), name='painel'),
    path('dados-iniciais/', views.DadosIniciaisAPIView.as_view(), name='dados_iniciais'),

    # ====================================================================
    # 4. MONTAGEM DO PEDIDO
    # ====================================================================
    path('montagem/', views.MontagemAPIView.as_view(), name='montagem'),
    path('montagem/cliente/', views.MontagemClienteAPIView.as_view(), name='montagem_cliente'),
    path('montagem/referencia/', views.MontagemReferenciaAPIView.as_view(), name='montagem_referencia'),
    path('montagem/produto/', views.MontagemProdutoAPIView.as_view(), name='montagem_produto'),
    path('montagem/tamanhos/', views.MontagemTamanhosAPIView.as_view(), name='montagem_tamanhos'),
    path('montagem/itens/', views.MontagemItensAPIView.as_view(), name='montagem_itens'),
    path('montagem/itens/<int:indice>/', views.MontagemItemDetailAPIView.as_view(), name='montagem_item'),
    path('montagem/condicoes/', views.MontagemCondicoesAPIView.as_view(), name='montagem_condicoes'),
    path('montagem/salvar/', views.MontagemSalvarAPIView.as_view(), name='montagem_salvar'),
    path('montagem/editar/<str:pedido_id>/', views.MontagemEditarAPIView.as_view(), name='montagem_editar'),
]
