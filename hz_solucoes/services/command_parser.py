"""
Command Parser - tokeniza e classifica mensagens do WhatsApp
"""
from typing import Callable, Dict, List

from hz_solucoes.core.config import BotConfig
from hz_solucoes.core.exceptions import InvalidAmountError
from hz_solucoes.core.utils import parse_amount, parse_positive_amount
from hz_solucoes.models.commands import (
    AddExpense,
    AddIncome,
    AddShoppingItem,
    Command,
    ListTransactions,
    LogWater,
    ParsedCommand,
    ShowBalance,
    ShowHelp,
    ShowShoppingList,
    Unknown,
    UsageError,
)

DEFAULT_DESCRIPTION = "Sem descrição"

EXPENSE_USAGE = "❌ Formato: despesa [valor] [descrição]\nExemplo: despesa 50 compras"
INCOME_USAGE = "❌ Formato: receita [valor] [descrição]\nExemplo: receita 1000 salário"
ITEM_USAGE = "❌ Formato: comprar [nome] [preço opcional]\nExemplo: comprar arroz 5,50"
WATER_USAGE = "❌ Formato: agua [ml]\nExemplo: agua 300"


def parse_command(message: str) -> ParsedCommand:
    """
    "  Despesa  50   mercado " -> ParsedCommand(command="despesa", args=["50", "mercado"])
    Mensagem vazia -> command="" e args=[]
    """
    parts = (message or "").strip().lower().split()
    if not parts:
        return ParsedCommand(command="", args=[])
    return ParsedCommand(command=parts[0], args=parts[1:])


def _transaction_args(args: List[str], usage: str):
    if not args:
        return None, None, UsageError(message=usage)
    try:
        amount = parse_positive_amount(args[0])
    except InvalidAmountError:
        return None, None, UsageError(message=usage)
    description = " ".join(args[1:]) or DEFAULT_DESCRIPTION
    return amount, description, None


def _expense(args: List[str], config: BotConfig) -> Command:
    amount, description, error = _transaction_args(args, EXPENSE_USAGE)
    return error or AddExpense(amount=amount, description=description)


def _income(args: List[str], config: BotConfig) -> Command:
    amount, description, error = _transaction_args(args, INCOME_USAGE)
    return error or AddIncome(amount=amount, description=description)


def _shopping_item(args: List[str], config: BotConfig) -> Command:
    if not args:
        return UsageError(message=ITEM_USAGE)

    price = None
    name_parts = args
    if len(args) > 1:
        try:
            price = parse_amount(args[-1])
            name_parts = args[:-1]
        except InvalidAmountError:
            price = None

    if price is not None and price < 0:
        return UsageError(message=ITEM_USAGE)
    return AddShoppingItem(name=" ".join(name_parts), price=price)


def _water(args: List[str], config: BotConfig) -> Command:
    if not args:
        return LogWater(amount=config.default_water_ml)
    try:
        return LogWater(amount=parse_positive_amount(args[0]))
    except InvalidAmountError:
        return UsageError(message=WATER_USAGE)


_BUILDERS: Dict[str, Callable[[List[str], BotConfig], Command]] = {
    "gasto": _expense,
    "despesa": _expense,
    "receita": _income,
    "ganho": _income,
    "saldo": lambda args, config: ShowBalance(),
    "transacoes": lambda args, config: ListTransactions(),
    "transações": lambda args, config: ListTransactions(),
    "despesas": lambda args, config: ListTransactions(),
    "lista": lambda args, config: ShowShoppingList(),
    "itens": lambda args, config: ShowShoppingList(),
    "compras": lambda args, config: ShowShoppingList(),
    "comprar": _shopping_item,
    "item": _shopping_item,
    "adicionar": _shopping_item,
    "agua": _water,
    "água": _water,
    "ajuda": lambda args, config: ShowHelp(),
    "help": lambda args, config: ShowHelp(),
    "comandos": lambda args, config: ShowHelp(),
}


def classify_command(parsed: ParsedCommand, config: BotConfig) -> Command:
    """Converte o comando tokenizado em uma variante validada de Command"""
    builder = _BUILDERS.get(parsed.command)
    if builder is None:
        return Unknown(token=parsed.command)
    return builder(parsed.args, config)
