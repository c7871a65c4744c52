"""
Auto-categorização de despesas por palavras-chave
"""
from typing import List, Tuple

ALIMENTACAO = "Alimentação"
TRANSPORTE = "Transporte"
SAUDE = "Saúde"
CONTAS = "Contas"
OUTROS = "Outros"

CATEGORIES = (ALIMENTACAO, TRANSPORTE, SAUDE, CONTAS, OUTROS)

# A ordem importa: a primeira regra que casar vence
# ("mercado e conta de luz" -> Alimentação).
CATEGORY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("mercado", "supermercado", "comida"), ALIMENTACAO),
    (("combustível", "gasolina", "posto"), TRANSPORTE),
    (("farmacia", "farmácia", "remédio", "medicamento"), SAUDE),
    (("conta", "luz", "água", "internet"), CONTAS),
    (("restaurante", "lanche", "ifood"), ALIMENTACAO),
]


def categorize_expense(description: str) -> str:
    """Retorna a categoria da despesa a partir da descrição (substring, sem diferenciar maiúsculas)"""
    desc = (description or "").lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in desc for keyword in keywords):
            return category
    return OUTROS
