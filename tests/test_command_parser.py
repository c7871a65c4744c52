import pytest

from hz_solucoes.core.config import BotConfig
from hz_solucoes.models.commands import (
    AddExpense,
    AddIncome,
    AddShoppingItem,
    ListTransactions,
    LogWater,
    ShowBalance,
    ShowHelp,
    ShowShoppingList,
    Unknown,
    UsageError,
)
from hz_solucoes.services.command_parser import (
    EXPENSE_USAGE,
    INCOME_USAGE,
    classify_command,
    parse_command,
)


def classify(text):
    return classify_command(parse_command(text), BotConfig())


def test_parse_trims_lowercases_and_splits():
    parsed = parse_command("  Despesa  50   mercado ")
    assert parsed.command == "despesa"
    assert parsed.args == ["50", "mercado"]


def test_parse_empty_message():
    for text in ["", "   ", "\n\t"]:
        parsed = parse_command(text)
        assert parsed.command == ""
        assert parsed.args == []


@pytest.mark.parametrize("text", ["despesa 50 mercado", "  SALDO ", "comprar Arroz   5,50", "ajuda"])
def test_parse_is_idempotent_on_reconstruction(text):
    first = parse_command(text)
    second = parse_command(" ".join([first.command] + first.args))
    assert second == first


@pytest.mark.parametrize("token", ["gasto", "despesa"])
def test_expense_synonyms(token):
    command = classify(f"{token} 50 compras no mercado")
    assert command == AddExpense(amount=50.0, description="compras no mercado")


def test_expense_accepts_comma_decimal():
    assert classify("gasto 12,50 lanche").amount == 12.5


def test_expense_without_description_uses_default():
    assert classify("despesa 30").description == "Sem descrição"


@pytest.mark.parametrize("text", ["despesa", "despesa abc mercado", "despesa -5 mercado", "gasto 0", "gasto nan"])
def test_invalid_expense_is_usage_error(text):
    assert classify(text) == UsageError(message=EXPENSE_USAGE)


@pytest.mark.parametrize("token", ["receita", "ganho"])
def test_income_synonyms(token):
    assert classify(f"{token} 1000 salário") == AddIncome(amount=1000.0, description="salário")


def test_invalid_income_is_usage_error():
    assert classify("receita inf") == UsageError(message=INCOME_USAGE)


@pytest.mark.parametrize("text,expected", [
    ("saldo", ShowBalance()),
    ("transacoes", ListTransactions()),
    ("transações", ListTransactions()),
    ("despesas", ListTransactions()),
    ("lista", ShowShoppingList()),
    ("itens", ShowShoppingList()),
    ("compras", ShowShoppingList()),
    ("ajuda", ShowHelp()),
    ("help", ShowHelp()),
    ("comandos", ShowHelp()),
])
def test_commands_without_arguments(text, expected):
    assert classify(text) == expected


@pytest.mark.parametrize("token", ["comprar", "item", "adicionar"])
def test_shopping_item_with_trailing_price(token):
    assert classify(f"{token} arroz integral 5,50") == AddShoppingItem(name="arroz integral", price=5.5)


def test_shopping_item_without_price():
    assert classify("comprar arroz 5kg") == AddShoppingItem(name="arroz 5kg", price=None)


def test_shopping_item_single_numeric_token_is_the_name():
    assert classify("comprar 7") == AddShoppingItem(name="7", price=None)


def test_shopping_item_without_arguments():
    assert isinstance(classify("comprar"), UsageError)


def test_water_default_amount():
    assert classify("agua") == LogWater(amount=200)
    assert classify("água") == LogWater(amount=200)


def test_water_default_comes_from_config():
    command = classify_command(parse_command("agua"), BotConfig(default_water_ml=250))
    assert command == LogWater(amount=250)


def test_water_explicit_amount():
    assert classify("agua 350") == LogWater(amount=350)


def test_water_invalid_amount():
    assert isinstance(classify("agua muito"), UsageError)


def test_unknown_command_keeps_token():
    assert classify("xyz 1 2") == Unknown(token="xyz")
    assert classify("") == Unknown(token="")
