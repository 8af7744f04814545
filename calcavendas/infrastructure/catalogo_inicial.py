# calcavendas/infrastructure/catalogo_inicial.py
"""Catálogo de fábrica usado para semear uma base de produtos vazia."""
from typing import List

from calcavendas.core.entities import Produto

GRADE_PADRAO = "33-46"

# (referência, preço, descrição, categoria, cor, solado, couro)
CATALOGO_INICIAL = (
    ("323", 78.00, "BOTINA AGROLEV ELASTICO", "Segurança VIPFLEX", "PALHA", "VIPFLEX FOLHA AMARELO", "LATEGO PALHA"),
    ("327", 81.80, "BOTINA AGROLEV ELASTICO", "Segurança VIPFLEX", "MILHO", "VIPFLEX FOLHA AMARELO", "NOBUCK MILHO"),
    ("328", 81.80, "BOTINA AGROLEV ELASTICO", "Segurança VIPFLEX", "CAFÉ", "VIPFLEX FOLHA GRAFITE", "NOBUCK CAFÉ"),
    ("329", 81.80, "BOTINA AGROLEV ELASTICO", "Segurança VIPFLEX", "PRETO", "VIPFLEX FOLHA GRAFITE", "NOBUCK PRETO"),
    ("330", 95.90, "COTURNO AGROLEV CADARÇO", "Segurança VIPFLEX", "CAFÉ", "VIPFLEX FOLHA GRAFITE", "NOBUCK CAFÉ"),
    ("331", 89.90, "COTURNO AGROLEV CADARÇO", "Segurança VIPFLEX", "CHOCOLATE", "VIPFLEX FOLHA GRAFITE", "LATEGO CHOCOLATE"),
    ("332", 89.90, "COTURNO AGROLEV CADARÇO", "Segurança VIPFLEX", "PALHA", "VIPFLEX FOLHA GRAFITE", "LATEGO PALHA"),
    ("350", 99.90, "COTURNO AGROLEV VELCRO", "Segurança VIPFLEX", "CAFÉ", "VIPFLEX FOLHA GRAFITE", "NOBUCK CAFÉ"),
    ("354", 96.50, "COTURNO AGROLEV VELCRO", "Segurança VIPFLEX", "CHOCOLATE", "VIPFLEX FOLHA GRAFITE", "LATEGO CHOCOLATE"),
    ("360", 83.00, "BOTINA ELETRICISTA", "Segurança VIPFLEX", "CARAMELO", "VIPFLEX FOLHA AMARELO", "FLOTER CARA. HIDROF."),
    ("2103", 81.00, "BOTINA SEG. VIPFLEX C/ ELASTICO", "Segurança VIPFLEX", "PRETA", "VIPFLEX PRETO/CAFÉ", "VAQUETA PRETA"),
    ("2123", 81.00, "BOTINA SEG. VIPFLEX C/ ELASTICO", "Segurança VIPFLEX", "PALHA", "VIPFLEX PRETO/CARAMELO", "LATEGO PALHA"),
    ("2124", 81.00, "BOTINA SEG. VIPFLEX C/ ELASTICO", "Segurança VIPFLEX", "CHOCOLATE", "VIPFLEX PRETO/CAFÉ", "LATEGO CHOCOLATE"),
    ("2127", 86.00, "BOTINA SEG. VIPFLEX C/ ELASTICO", "Segurança VIPFLEX", "MILHO", "VIPFLEX PRETO/CARAMELO", "NOBUCK MILHO"),
    ("2153", 98.00, "COTURNO SEG. VIPFLEX ACOLCH. C/ VELCRO", "Segurança VIPFLEX", "PRETA", "VIPFLEX PRETO/CAFÉ", "VAQUETA PRETA"),
    ("2154", 98.00, "COTURNO SEG. VIPFLEX ACOLCH. C/ VELCRO", "Segurança VIPFLEX", "CHOCOLATE", "VIPFLEX PRETO/CAFÉ", "LATEGO CHOCOLATE"),
    ("2170", 108.80, "COTURNO COMFORT VIPFLEX ACOLCH. C/ CADAR", "Segurança VIPFLEX", "MILHO", "VIPFLEX PRETO/CARAMELO", "NOBUCK MILHO"),
    ("4001", 53.90, "BOTINA SEG./PNEU", "Segurança BORRACHA", "PRETA", "BORRACHA PRETO", "RASPA PRETA"),
    ("4002", 53.90, "BOTINA SEG./PNEU", "Segurança BORRACHA", "AMARELA", "BORRACHA PRETO", "RASPA AMARELA"),
    ("5001", 59.90, "BOTINA SEG. ELASTICO COBERTO CANO BAIXO", "Segurança BORRACHA", "PRETA", "BORRACHA PRETO", "RASPA LISA PRETA"),
    ("5003", 63.60, "BOTINA SEG. ELASTICO COBERTO CANO BAIXO", "Segurança BORRACHA", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("5023", 63.60, "BOTINA SEG. ELASTICO COBERTO CANO BAIXO", "Segurança BORRACHA", "PALHA", "BORRACHA PRETO", "LATEGO PALHA"),
    ("1001", 66.50, "BOTINA SEG. ELASTICO COBERTO", "Segurança BORRACHA", "PRETA", "BORRACHA PRETO", "RASPA PRETA"),
    ("1003", 69.90, "BOTINA SEG. ELASTICO COBERTO", "Segurança BORRACHA", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("1010", 69.90, "BOTINA SEG. ELASTICO COBERTO", "Segurança BORRACHA", "FÓSSIL", "BORRACHA PRETO", "LATEGO FÓSSIL"),
    ("1023", 69.90, "BOTINA SEG. ELASTICO COBERTO", "Segurança BORRACHA", "PALHA", "BORRACHA PRETO", "LATEGO PALHA"),
    ("1024", 69.90, "BOTINA SEG. ELASTICO COBERTO", "Segurança BORRACHA", "CHOCOLATE", "BORRACHA PRETO", "LATEGO CHOCOLATE"),
    ("26", 84.80, "BOTINA AGRO SEG. ELASTICO COBERTO", "Segurança BORRACHA", "RATO", "BORRACHA BICOLOR DELTA", "NOBUCK RATO"),
    ("27", 84.80, "BOTINA AGRO SEG. ELASTICO COBERTO", "Segurança BORRACHA", "MILHO", "BORRACHA BICOLOR SENNA", "NOBUCK MILHO"),
    ("28", 84.80, "BOTINA AGRO SEG. ELASTICO COBERTO", "Segurança BORRACHA", "CAFÉ", "BORRACHA BICOLOR SENNA", "NOBUCK CAFÉ"),
    ("29", 84.80, "BOTINA AGRO SEG. ELASTICO COBERTO", "Segurança BORRACHA", "PRETO", "BORRACHA BICOLOR SENNA", "NOBUCK PRETO"),
    ("3130", 89.90, "COTURNO CADARÇO ADV", "Segurança BORRACHA", "CAFÉ", "SOLADO TREKKING", "NOBUCK CAFÉ"),
    ("3135", 89.90, "COTURNO CADARÇO ADV", "Segurança BORRACHA", "PRETO", "SOLADO TREKKING", "NOBUCK PRETO"),
    ("200", 99.90, "BOTTENIS SEGURANCA", "Segurança BORRACHA", "RATO", "BORRACHA BICOLOR", "NOBUCK RATO"),
    ("4055", 117.00, "COTURNO TIPO MILITAR CADARÇO C/ ZIPER", "Segurança BORRACHA", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("1101", 81.90, "BOTINA SEG. ELASTICO COBERTO", "Segurança P.U", "PRETA", "PU BID. PRETO/GRAFITE", "RASPA PRETA"),
    ("1103", 86.50, "BOTINA SEG. ELASTICO COBERTO", "Segurança P.U", "PRETA", "PU BID. PRETO/GRAFITE", "VAQUETA PRETA"),
    ("1110", 86.50, "BOTINA SEG. ELASTICO COBERTO", "Segurança P.U", "FÓSSIL", "PU BID. PRETO/GRAFITE", "LATEGO FÓSSIL"),
    ("1123", 86.50, "BOTINA SEG. ELASTICO COBERTO", "Segurança P.U", "PALHA", "PU BID. PRETO/GRAFITE", "LATEGO PALHA"),
    ("1124", 86.50, "BOTINA SEG. ELASTICO COBERTO", "Segurança P.U", "CHOCOLATE", "PU BID. PRETO/GRAFITE", "LATEGO CHOCOLATE"),
    ("1104", 96.90, "COTURNO SEG. ACOLCH. C/ CADARÇO", "Segurança P.U", "PRETA", "PU BID. PRETO/GRAFITE", "VAQUETA PRETA"),
    ("1126", 96.90, "COTURNO SEG. ACOLCH. C/ CADARÇO", "Segurança P.U", "PALHA", "PU BID. PRETO/GRAFITE", "LATEGO PALHA"),
    ("1128", 96.90, "COTURNO SEG. ACOLCH. C/ CADARÇO", "Segurança P.U", "CHOCOLATE", "PU BID. PRETO/GRAFITE", "LATEGO CHOCOLATE"),
    ("1180", 95.00, "BOTINA SEG. ELASTICO COB. COMPOSITE", "Segurança P.U", "PRETA", "PU BID. PRETO/GRAFITE", "VAQUETA PRETA"),
    ("1130", 99.90, "COTURNO SEG. ACOLCH. C/ CADARÇO", "Segurança P.U", "CAFÉ", "PU BID. PRETO/GRAFITE", "NOBUCK CAFÉ"),
    ("1185", 106.60, "COTURNO SEG. ACOLCH. C/ CADARÇO", "Segurança P.U", "PRETA", "PU BID. PRETO/GRAFITE", "VAQUETA PRETA"),
    ("1153", 105.50, "COTURNO SEG. ACOLCH. C/ VELCRO", "Segurança P.U", "PRETA", "PU BID. PRETO/GRAFITE", "VAQUETA PRETA"),
    ("1154", 105.50, "COTURNO SEG. ACOLCH. C/ VELCRO", "Segurança P.U", "CHOCOLATE", "PU BID. PRETO/GRAFITE", "LATEGO CHOCOLATE"),
    ("1150", 110.90, "COTURNO SEG. ACOLCH. C/ VELCRO", "Segurança P.U", "CAFÉ", "PU BID. PRETO/GRAFITE", "NOBUCK CAFÉ"),
    ("1155", 110.90, "COTURNO SEG. ACOLCH. C/ VELCRO", "Segurança P.U", "PRETO", "PU BID. PRETO/GRAFITE", "NOBUCK PRETO"),
    ("76", 50.80, "BOTINA INFANTIL TRADICIONAL. 2 PIQ", "Infantil", "PALHA", "BORRACHA PRETO", "LATEGO PALHA"),
    ("78", 56.50, "BOTINA INFANTIL TRADICIONAL. 2 PIQ", "Infantil", "CAFÉ", "PVC NATURAL", "NOBUCK CAFÉ"),
    ("79", 56.50, "BOTINA INFANTIL TRADICIONAL. 2 PIQ", "Infantil", "MILHO", "PVC NATURAL", "NOBUCK MILHO"),
    ("9", 105.90, "BOTINA ELASTICO COBERTO", "Passeio", "PALHA", "LATEX NATURAL", "LATEGO PALHA"),
    ("10", 91.00, "BOTINA ELASTICO COBERTO", "Passeio", "CAFÉ", "BORRACHA CAFÉ", "NOBUCK CAFÉ"),
    ("17", 99.90, "BOTINA TRADICIONAL 2PIQ BORDADO", "Passeio", "CAFÉ", "LATEX NATURAL", "NOBUCK CAFÉ"),
    ("35", 105.00, "BOTINA ACOLCH. ZIPER", "Passeio", "CAFÉ", "BORRACHA CAFÉ", "NOBUCK CAFÉ"),
    ("36", 117.80, "BOTINA ACOLCH. ZIPER", "Passeio", "PALHA", "LATEX NATURAL", "LATEGO PALHA"),
    ("38", 109.90, "BOTINA ACOLCH. ZIPER", "Passeio", "PRETA", "LATEX PRETO", "VAQUETA PRETA"),
    ("81", 94.40, "BOTINA CHELSEA FLOTER BR", "Passeio", "CHOCOLATE", "BORRACHA SELEIRO", "FLOTER CHOCOLATE"),
    ("82", 94.40, "BOTINA CHELSEA FLOTER BR", "Passeio", "PRETA", "BORRACHA SELEIRO", "FLOTER PRETA"),
    ("83", 94.40, "BOTINA CHELSEA FLOTER BR", "Passeio", "FÓSSIL", "BORRACHA SELEIRO", "FLOTER FOSSIL"),
    ("180", 92.90, "BOTINA VAQUEIRO B. REDONDO", "Passeio", "PALHA", "LATEX NATURAL", "LATEGO PALHA"),
    ("500", 53.90, "BOTINA SERVIÇO", "Serviço", "PRETA", "BORRACHA PRETO", "RASPA LISA PRETO"),
    ("403", 56.50, "BOTINA SERVIÇO COM COSTURA LATERAL", "Serviço", "PALHA", "SOLADO BOIADEIRO", "LATEGO PALHA"),
    ("503", 56.50, "BOTINA SERVIÇO", "Serviço", "PALHA", "BORRACHA PRETO", "LATEGO PALHA"),
    ("504", 56.50, "BOTINA SERVIÇO", "Serviço", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("506", 56.50, "BOTINA SERVIÇO", "Serviço", "CHOCOLATE", "BORRACHA PRETO", "LATEGO CHOCOLATE"),
    ("510", 56.50, "BOTINA SERVIÇO", "Serviço", "FÓSSIL", "BORRACHA PRETO", "LATEGO FÓSSIL"),
    ("502", 58.60, "BOTINA COLHEDOR DE CAFÉ", "Serviço", "PALHA", "CHUTEIRA PRETO", "LATEGO PALHA"),
    ("505", 61.60, "BOTINA SERVIÇO", "Serviço", "PALHA", "PVC NATURAL", "LATEGO PALHA"),
    ("507", 65.90, "BOTINA SERVIÇO", "Serviço", "CAFÉ", "PVC NATURAL", "NOBUCK CAFÉ"),
    ("606", 69.90, "BOTINA 2 PIQ C/ TIRA", "Serviço", "PALHA", "BORRACHA PRETO", "LATEGO PALHA"),
    ("605", 73.80, "BOTINA 2 PIQ C/ TIRA", "Serviço", "PALHA", "PVC NATURAL", "LATEGO PALHA"),
    ("3002", 58.90, "SAPATO SEG. ACOLCH. CADARÇO", "Sapato", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("3006", 58.90, "SAPATO SEG. ACOLCH. ELASTICO", "Sapato", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("3020", 65.50, "SAPATO SOCIAL CADARÇO BICO QUADRADO", "Sapato", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("3000", 74.00, "SAPATO SOCIAL CADARÇO BICO REDONDO", "Sapato", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("3030", 74.00, "SAPATO SOCIAL CADARÇO BICO QUADRADO", "Sapato", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("3220", 72.30, "SAPATO FEMININO ELASTICO", "Sapato", "PRETA", "PVC PRETO", "VAQUETA PRETA"),
    ("3040", 82.80, "SAPATO SOCIAL ELÁSTICO BICO QUADRADO", "Sapato", "PRETA", "BORRACHA PRETO", "VAQUETA PRETA"),
    ("3102", 79.90, "SAPATO SEG. ACOLCH. ELASTICO", "Sapato", "PRETA", "PU BID. PRETO/GRAFITE", "RELAX PRETA"),
    ("3101", 86.00, "SAPATO SEG. ACOLCH. ELASTICO", "Sapato", "PRETA", "PU BID. PRETO/GRAFITE", "VAQUETA PRETA"),
)


def produtos_catalogo_inicial() -> List[Produto]:
    return [
        Produto(
            referencia=referencia,
            preco=preco,
            descricao=descricao,
            categoria=categoria,
            grade=GRADE_PADRAO,
            cor=cor,
            solado=solado,
            material=material,
        )
        for referencia, preco, descricao, categoria, cor, solado, material in CATALOGO_INICIAL
    ]
