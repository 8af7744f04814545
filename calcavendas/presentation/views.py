# calcavendas/presentation/views.py
"""
Views da API REST (Django REST Framework).
As views apenas validam a entrada com os serializers e delegam aos Use Cases
obtidos pela camada de injeção de dependência.
"""
import dataclasses
import logging

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from calcavendas.core import dependency_injection as di
from calcavendas.core.exceptions import (
    BaseErroCore,
    DadosInvalidosError,
    CarrinhoVazioError,
    ItemNaoEncontradoError,
    ConexaoError,
    PersistenciaError,
)
from calcavendas.core.use_cases import periodo_predefinido
from .serializers import (
    ClienteSerializer,
    ProdutoSerializer,
    PedidoSerializer,
    FiltroRelatorioSerializer,
    ResumoRelatorioSerializer,
    ResumoPainelSerializer,
    DadosIniciaisSerializer,
    SelecionarClienteSerializer,
    ReferenciaSerializer,
    SelecionarProdutoSerializer,
    TamanhosSerializer,
    CondicoesSerializer,
    MontagemSerializer,
)
from .sessao_pedido import GerenciadorMontagem

logger = logging.getLogger(__name__)

STATUS_POR_ERRO = (
    (DadosInvalidosError, status.HTTP_400_BAD_REQUEST),
    (CarrinhoVazioError, status.HTTP_400_BAD_REQUEST),
    (ItemNaoEncontradoError, status.HTTP_404_NOT_FOUND),
    (ConexaoError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (PersistenciaError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


class CoreAPIView(APIView):
    """APIView que converte as exceções do Core em respostas HTTP."""

    def handle_exception(self, exc):
        if isinstance(exc, BaseErroCore):
            codigo = next(
                (codigo for tipo, codigo in STATUS_POR_ERRO if isinstance(exc, tipo)),
                status.HTTP_400_BAD_REQUEST,
            )
            if codigo >= 500:
                logger.warning("%s em %s: %s", type(exc).__name__, self.request.path, exc)
            return Response({'message': str(exc)}, status=codigo)
        return super().handle_exception(exc)


# ====================================================================
# 1. CADASTRO DE CLIENTES
# ====================================================================

class ClienteListAPIView(CoreAPIView):
    """Lista (com busca) e cadastra clientes."""

    def get(self, request):
        clientes = di.get_gerenciar_clientes_use_case().listar(request.query_params.get('busca'))
        return Response(ClienteSerializer(clientes, many=True).data)

    def post(self, request):
        serializer = ClienteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        cliente = di.get_gerenciar_clientes_use_case().salvar(serializer.to_entity())
        return Response(ClienteSerializer(cliente).data, status=status.HTTP_201_CREATED)


class ClienteDetailAPIView(CoreAPIView):

    def get(self, request, cliente_id):
        cliente = di.get_gerenciar_clientes_use_case().detalhar(cliente_id)
        return Response(ClienteSerializer(cliente).data)

    def put(self, request, cliente_id):
        use_case = di.get_gerenciar_clientes_use_case()
        atual = use_case.detalhar(cliente_id)
        serializer = ClienteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        cliente = use_case.salvar(dataclasses.replace(atual, **serializer.validated_data))
        return Response(ClienteSerializer(cliente).data)

    def delete(self, request, cliente_id):
        di.get_gerenciar_clientes_use_case().deletar(cliente_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


# ====================================================================
# 2. CATÁLOGO DE PRODUTOS
# ====================================================================

class ProdutoListAPIView(CoreAPIView):
    """Lista o catálogo e cadastra produtos (reaproveitando a referência existente)."""

    def get(self, request):
        produtos = di.get_gerenciar_catalogo_use_case().listar(request.query_params.get('busca'))
        return Response(ProdutoSerializer(produtos, many=True).data)

    def post(self, request):
        serializer = ProdutoSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        produto = di.get_gerenciar_catalogo_use_case().salvar(serializer.to_entity())
        return Response(ProdutoSerializer(produto).data, status=status.HTTP_201_CREATED)


class ProdutoDetailAPIView(CoreAPIView):

    def get(self, request, produto_id):
        produto = di.get_gerenciar_catalogo_use_case().detalhar(produto_id)
        return Response(ProdutoSerializer(produto).data)

    def put(self, request, produto_id):
        use_case = di.get_gerenciar_catalogo_use_case()
        atual = use_case.detalhar(produto_id)
        serializer = ProdutoSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        produto = use_case.salvar(dataclasses.replace(atual, **serializer.validated_data))
        return Response(ProdutoSerializer(produto).data)

    def delete(self, request, produto_id):
        di.get_gerenciar_catalogo_use_case().deletar(produto_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


# ====================================================================
# 3. PEDIDOS
# ====================================================================

class PedidoListAPIView(CoreAPIView):
    """Pedidos do mais recente para o mais antigo (`?cliente_id=` filtra por cliente)."""

    def get(self, request):
        pedidos = di.get_listar_pedidos_use_case().listar(request.query_params.get('cliente_id'))
        return Response(PedidoSerializer(pedidos, many=True).data)


class PedidoDetailAPIView(CoreAPIView):

    def get(self, request, pedido_id):
        pedido = di.get_listar_pedidos_use_case().detalhar(pedido_id)
        return Response(PedidoSerializer(pedido).data)


class PedidoDocumentoView(CoreAPIView):
    """Folha de pedido imprimível (HTML)."""

    def get(self, request, pedido_id):
        html = di.get_exportar_pedido_use_case().documento(pedido_id)
        return HttpResponse(html, content_type='text/html; charset=utf-8')


class PedidoCompartilharAPIView(CoreAPIView):
    """Link do WhatsApp com o resumo do pedido."""

    def get(self, request, pedido_id):
        link = di.get_exportar_pedido_use_case().link_compartilhamento(pedido_id)
        return Response({'link': link})


# ====================================================================
# 4. RELATÓRIOS, PAINEL E CARGA INICIAL
# ====================================================================

class RelatorioVendasAPIView(CoreAPIView):

    def get(self, request):
        filtro = FiltroRelatorioSerializer(data=request.query_params)
        if not filtro.is_valid():
            return Response(filtro.errors, status=status.HTTP_400_BAD_REQUEST)
        dados = filtro.validated_data
        inicio, fim = dados.get('inicio'), dados.get('fim')
        if dados.get('periodo'):
            inicio, fim = periodo_predefinido(dados['periodo'], timezone.localdate())

        pedidos = di.get_listar_pedidos_use_case().listar()
        resumo = di.get_relatorio_vendas_use_case().gerar(
            pedidos,
            inicio=inicio,
            fim=fim,
            busca=dados.get('busca', ""),
            fuso=timezone.get_current_timezone(),
        )
        return Response(ResumoRelatorioSerializer(resumo).data)


class PainelAPIView(CoreAPIView):

    def get(self, request):
        pedidos = di.get_listar_pedidos_use_case().listar()
        resumo = di.get_painel_use_case().gerar(pedidos)
        return Response(ResumoPainelSerializer(resumo).data)


class DadosIniciaisAPIView(CoreAPIView):
    """Clientes, produtos e pedidos em uma única leitura com tempo limite."""

    def get(self, request):
        dados = di.get_carregar_dados_iniciais_use_case().executar()
        return Response(DadosIniciaisSerializer(dados).data)


# ====================================================================
# 5. MONTAGEM DO PEDIDO (estado na sessão)
# ====================================================================

class BaseMontagemAPIView(CoreAPIView):
    """Base das views que operam sobre a montagem guardada na sessão."""

    def _resposta(self, gerenciador, codigo=status.HTTP_200_OK):
        return Response(MontagemSerializer(gerenciador.get_contexto()).data, status=codigo)

    def _validar(self, serializer_class, request):
        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


class MontagemAPIView(BaseMontagemAPIView):
    """Estado atual da montagem (GET) e início de um novo pedido (DELETE)."""

    def get(self, request):
        return self._resposta(GerenciadorMontagem(request))

    def delete(self, request):
        gerenciador = GerenciadorMontagem(request)
        gerenciador.limpar()
        return self._resposta(gerenciador)


class MontagemClienteAPIView(BaseMontagemAPIView):

    def post(self, request):
        dados = self._validar(SelecionarClienteSerializer, request)
        gerenciador = GerenciadorMontagem(request)
        gerenciador.selecionar_cliente(dados['cliente_id'])
        return self._resposta(gerenciador)

    def delete(self, request):
        gerenciador = GerenciadorMontagem(request)
        gerenciador.trocar_cliente()
        return self._resposta(gerenciador)


class MontagemReferenciaAPIView(BaseMontagemAPIView):

    def post(self, request):
        dados = self._validar(ReferenciaSerializer, request)
        gerenciador = GerenciadorMontagem(request)
        gerenciador.informar_referencia(dados['referencia'])
        return self._resposta(gerenciador)


class MontagemProdutoAPIView(BaseMontagemAPIView):

    def post(self, request):
        dados = self._validar(SelecionarProdutoSerializer, request)
        gerenciador = GerenciadorMontagem(request)
        gerenciador.selecionar_produto(dados['produto_id'])
        return self._resposta(gerenciador)


class MontagemTamanhosAPIView(BaseMontagemAPIView):

    def post(self, request):
        dados = self._validar(TamanhosSerializer, request)
        gerenciador = GerenciadorMontagem(request)
        gerenciador.alterar_tamanhos(dados['tamanhos'])
        return self._resposta(gerenciador)


class MontagemItensAPIView(BaseMontagemAPIView):

    def post(self, request):
        gerenciador = GerenciadorMontagem(request)
        if gerenciador.adicionar_item() is None:
            return Response(
                {'message': 'Selecione um produto e informe ao menos uma quantidade.'},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return self._resposta(gerenciador, status.HTTP_201_CREATED)


class MontagemItemDetailAPIView(BaseMontagemAPIView):

    def delete(self, request, indice):
        gerenciador = GerenciadorMontagem(request)
        gerenciador.remover_item(indice)
        return self._resposta(gerenciador)


class MontagemCondicoesAPIView(BaseMontagemAPIView):

    def post(self, request):
        dados = self._validar(CondicoesSerializer, request)
        gerenciador = GerenciadorMontagem(request)
        gerenciador.definir_condicoes(**dados)
        return self._resposta(gerenciador)


class MontagemSalvarAPIView(BaseMontagemAPIView):

    def post(self, request):
        gerenciador = GerenciadorMontagem(request)
        em_edicao = gerenciador.montador.em_edicao
        gerenciador.salvar_pedido()
        codigo = status.HTTP_200_OK if em_edicao else status.HTTP_201_CREATED
        return self._resposta(gerenciador, codigo)


class MontagemEditarAPIView(BaseMontagemAPIView):

    def post(self, request, pedido_id):
        gerenciador = GerenciadorMontagem(request)
        gerenciador.editar_pedido(pedido_id)
        return self._resposta(gerenciador)
