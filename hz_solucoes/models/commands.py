"""
Command Models - comandos de chat já classificados e validados
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ParsedCommand(BaseModel):
    """Mensagem tokenizada: primeiro token + argumentos"""
    command: str
    args: List[str] = Field(default_factory=list)


class AddExpense(BaseModel):
    kind: Literal["add_expense"] = "add_expense"
    amount: float
    description: str


class AddIncome(BaseModel):
    kind: Literal["add_income"] = "add_income"
    amount: float
    description: str


class ShowBalance(BaseModel):
    kind: Literal["show_balance"] = "show_balance"


class ListTransactions(BaseModel):
    kind: Literal["list_transactions"] = "list_transactions"


class ShowShoppingList(BaseModel):
    kind: Literal["show_shopping_list"] = "show_shopping_list"


class AddShoppingItem(BaseModel):
    kind: Literal["add_shopping_item"] = "add_shopping_item"
    name: str
    price: Optional[float] = None


class LogWater(BaseModel):
    kind: Literal["log_water"] = "log_water"
    amount: float


class ShowHelp(BaseModel):
    kind: Literal["show_help"] = "show_help"


class Unknown(BaseModel):
    kind: Literal["unknown"] = "unknown"
    token: str


class UsageError(BaseModel):
    """Comando conhecido com argumentos ausentes ou inválidos"""
    kind: Literal["usage_error"] = "usage_error"
    message: str


Command = Union[
    AddExpense,
    AddIncome,
    ShowBalance,
    ListTransactions,
    ShowShoppingList,
    AddShoppingItem,
    LogWater,
    ShowHelp,
    Unknown,
    UsageError,
]
