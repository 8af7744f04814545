from rest_framework import serializers

from calcavendas.core.entities import Cliente, Produto, FRETES, FORMAS_PAGAMENTO


class MoedaField(serializers.FloatField):
    """Valores monetários circulam como float e são arredondados só na saída."""

    def to_representation(self, value):
        return round(float(value or 0), 2)


# ====================================================================
# SERIALIZERS DO CADASTRO
# ====================================================================

class ProdutoSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    referencia = serializers.CharField(max_length=30)
    descricao = serializers.CharField(max_length=255)
    preco = MoedaField(min_value=0)
    categoria = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    grade = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    cor = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    solado = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    material = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    imagem_url = serializers.URLField(required=False, allow_null=True, allow_blank=True, default=None)

    def to_entity(self, produto_id: str = None) -> Produto:
        return Produto(id=produto_id, **self.validated_data)


class ClienteSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    nome = serializers.CharField(max_length=255)
    telefone = serializers.CharField(max_length=30)
    empresa = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    telefone2 = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")
    email = serializers.EmailField(required=False, allow_blank=True, default="")
    cep = serializers.CharField(max_length=10, required=False, allow_blank=True, default="")
    endereco = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    numero = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    bairro = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    cidade = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    estado = serializers.CharField(max_length=2, required=False, allow_blank=True, default="")
    cpf_cnpj = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    inscricao_estadual = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")
    criado_em = serializers.DateTimeField(read_only=True)
    nome_exibicao = serializers.CharField(read_only=True)

    def to_entity(self, cliente_id: str = None) -> Cliente:
        return Cliente(id=cliente_id, **self.validated_data)


# ====================================================================
# SERIALIZERS DE PEDIDOS (somente leitura)
# ====================================================================

class ItemPedidoSerializer(serializers.Serializer):
    produto_id = serializers.CharField()
    referencia = serializers.CharField()
    descricao = serializers.CharField()
    preco_unitario = MoedaField()
    tamanhos = serializers.DictField(child=serializers.IntegerField())
    cor = serializers.CharField()
    solado = serializers.CharField()
    material = serializers.CharField()
    quantidade = serializers.IntegerField()
    total = MoedaField()


class PedidoSerializer(serializers.Serializer):
    id = serializers.CharField()
    cliente_id = serializers.CharField()
    nome_cliente = serializers.CharField()
    itens = ItemPedidoSerializer(many=True)
    valor_total = MoedaField()
    total_pares = serializers.IntegerField()
    data = serializers.DateTimeField(allow_null=True)
    status = serializers.CharField()
    frete = serializers.CharField()
    condicao_pagamento = serializers.CharField()
    forma_pagamento = serializers.CharField()


# ====================================================================
# SERIALIZERS DE RELATÓRIOS E PAINEL
# ====================================================================

class FiltroRelatorioSerializer(serializers.Serializer):
    """Parâmetros do relatório. `periodo` (em dias) substitui início e fim."""
    inicio = serializers.DateField(required=False)
    fim = serializers.DateField(required=False)
    periodo = serializers.ChoiceField(choices=[7, 15, 30], required=False)
    busca = serializers.CharField(required=False, allow_blank=True, default="")

    def validate(self, data):
        if data.get('inicio') and data.get('fim') and data['inicio'] > data['fim']:
            raise serializers.ValidationError("A data inicial não pode ser posterior à data final.")
        return data


class ResumoRelatorioSerializer(serializers.Serializer):
    pedidos = PedidoSerializer(many=True)
    faturamento_total = MoedaField()
    total_pedidos = serializers.IntegerField()
    total_itens = serializers.IntegerField()


class ProdutoVendidoSerializer(serializers.Serializer):
    referencia = serializers.CharField()
    descricao = serializers.CharField()
    quantidade = serializers.IntegerField()
    faturamento = MoedaField()


class ResumoPainelSerializer(serializers.Serializer):
    faturamento = MoedaField()
    total_pedidos = serializers.IntegerField()
    clientes_ativos = serializers.IntegerField()
    top_produtos = ProdutoVendidoSerializer(many=True)
    pedidos_recentes = PedidoSerializer(many=True)


class DadosIniciaisSerializer(serializers.Serializer):
    clientes = ClienteSerializer(many=True)
    produtos = ProdutoSerializer(many=True)
    pedidos = PedidoSerializer(many=True)


# ====================================================================
# SERIALIZERS DA MONTAGEM DO PEDIDO
# ====================================================================

class SelecionarClienteSerializer(serializers.Serializer):
    cliente_id = serializers.CharField()


class ReferenciaSerializer(serializers.Serializer):
    referencia = serializers.CharField(allow_blank=True, trim_whitespace=True)


class SelecionarProdutoSerializer(serializers.Serializer):
    produto_id = serializers.CharField()


class TamanhosSerializer(serializers.Serializer):
    """Valores digitados por numeração; o texto é convertido pelo montador."""
    tamanhos = serializers.DictField(child=serializers.CharField(allow_blank=True, allow_null=True))


class CondicoesSerializer(serializers.Serializer):
    frete = serializers.ChoiceField(choices=FRETES, required=False)
    condicao_pagamento = serializers.CharField(max_length=100, required=False, allow_blank=True)
    forma_pagamento = serializers.ChoiceField(choices=FORMAS_PAGAMENTO, required=False, allow_blank=True)


class MontagemSerializer(serializers.Serializer):
    """Estado corrente da montagem do pedido."""
    cliente = ClienteSerializer(allow_null=True)
    referencia = serializers.CharField()
    sugestoes = ProdutoSerializer(many=True)
    produto_ativo = ProdutoSerializer(allow_null=True)
    quantidades = serializers.DictField(child=serializers.IntegerField())
    quantidade_atual = serializers.IntegerField()
    preco_atual = MoedaField()
    pode_adicionar = serializers.BooleanField()
    carrinho = ItemPedidoSerializer(many=True)
    total_pedido = MoedaField()
    total_pares = serializers.IntegerField()
    frete = serializers.CharField()
    condicao_pagamento = serializers.CharField()
    forma_pagamento = serializers.CharField()
    pode_salvar = serializers.BooleanField()
    em_edicao = serializers.BooleanField()
    pedido_em_edicao_id = serializers.CharField(allow_null=True)
    pedido_salvo = PedidoSerializer(allow_null=True)
