"""
Command Interpreter - executa comandos do WhatsApp para o usuário do remetente
"""
import logging
from typing import Callable, Dict, Optional, Type

from pydantic import BaseModel

from hz_solucoes.core.config import BotConfig
from hz_solucoes.models.commands import (
    AddExpense,
    AddIncome,
    AddShoppingItem,
    Command,
    ListTransactions,
    LogWater,
    ShowBalance,
    ShowHelp,
    ShowShoppingList,
    Unknown,
    UsageError,
)
from hz_solucoes.models.finance import User
from hz_solucoes.services.command_parser import classify_command, parse_command
from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.use_cases.add_expense import AddExpenseUseCase
from hz_solucoes.use_cases.add_income import AddIncomeUseCase
from hz_solucoes.use_cases.add_shopping_item import AddShoppingItemUseCase
from hz_solucoes.use_cases.list_transactions import ListTransactionsUseCase
from hz_solucoes.use_cases.log_water import LogWaterUseCase
from hz_solucoes.use_cases.monthly_report import MonthlyReportUseCase
from hz_solucoes.use_cases.resolve_user import ResolveUserUseCase
from hz_solucoes.use_cases.shopping_list import ShoppingListUseCase

logger = logging.getLogger(__name__)

GENERIC_FAILURE_REPLY = "❌ Não foi possível concluir a operação. Tente novamente."

HELP_TEXT = (
    "🤖 *Comandos Disponíveis*\n\n"
    "💰 *Finanças:*\n"
    "• despesa 50 compras - Adiciona despesa\n"
    "• receita 1000 salário - Adiciona receita\n"
    "• saldo - Ver resumo financeiro do mês\n"
    "• transacoes - Ver últimas transações\n\n"
    "🛒 *Lista de Compras:*\n"
    "• comprar arroz 5,50 - Adiciona item\n"
    "• lista - Ver lista de compras\n\n"
    "💧 *Água:*\n"
    "• agua 300 - Registra consumo (padrão 200ml)\n\n"
    "❓ *Outros:*\n"
    "• ajuda - Mostra esta mensagem"
)


class CommandOutcome(BaseModel):
    """Resultado de uma mensagem processada"""
    reply: str
    user: User
    failed: bool = False
    error: Optional[str] = None


class CommandInterpreter:
    """
    Resolve o usuário do remetente e despacha o comando para um único handler.

    Falhas na resolução do usuário propagam UserResolutionError.
    Falhas dentro de um handler viram uma resposta genérica com failed=True.
    """

    def __init__(self, db: Optional[FirestoreService] = None, config: Optional[BotConfig] = None):
        self.db = db or FirestoreService()
        self.config = config or BotConfig()

        self.resolve_user_uc = ResolveUserUseCase(self.db, self.config)
        self.add_expense_uc = AddExpenseUseCase(self.db)
        self.add_income_uc = AddIncomeUseCase(self.db)
        self.monthly_report_uc = MonthlyReportUseCase(self.db)
        self.list_transactions_uc = ListTransactionsUseCase(self.db)
        self.shopping_list_uc = ShoppingListUseCase(self.db)
        self.add_shopping_item_uc = AddShoppingItemUseCase(self.db)
        self.log_water_uc = LogWaterUseCase(self.db, daily_goal_ml=self.config.daily_water_goal_ml)

        self._handlers: Dict[Type[BaseModel], Callable[[User, Command], str]] = {
            AddExpense: self._add_expense,
            AddIncome: self._add_income,
            ShowBalance: self._show_balance,
            ListTransactions: self._list_transactions,
            ShowShoppingList: self._show_shopping_list,
            AddShoppingItem: self._add_shopping_item,
            LogWater: self._log_water,
            ShowHelp: self._show_help,
            Unknown: self._unknown,
            UsageError: self._usage_error,
        }

    def execute(self, sender_id: str, text: str) -> CommandOutcome:
        user = self.resolve_user_uc.execute(sender_id)
        command = classify_command(parse_command(text), self.config)
        handler = self._handlers[type(command)]

        try:
            reply = handler(user, command)
        except Exception as e:
            logger.error(f"Erro ao executar comando '{command.kind}' de {sender_id}: {e}", exc_info=True)
            return CommandOutcome(reply=GENERIC_FAILURE_REPLY, user=user, failed=True, error=str(e))

        return CommandOutcome(reply=reply, user=user)

    # --- HANDLERS ---
    def _add_expense(self, user: User, command: AddExpense) -> str:
        return self.add_expense_uc.execute(user.id, command.amount, command.description)["formatted"]

    def _add_income(self, user: User, command: AddIncome) -> str:
        return self.add_income_uc.execute(user.id, command.amount, command.description)["formatted"]

    def _show_balance(self, user: User, command: ShowBalance) -> str:
        return self.monthly_report_uc.execute(user.id)["formatted"]

    def _list_transactions(self, user: User, command: ListTransactions) -> str:
        return self.list_transactions_uc.execute(user.id, limit=self.config.recent_transactions_limit)["formatted"]

    def _show_shopping_list(self, user: User, command: ShowShoppingList) -> str:
        return self.shopping_list_uc.execute(user.id)

    def _add_shopping_item(self, user: User, command: AddShoppingItem) -> str:
        return self.add_shopping_item_uc.execute(user.id, command.name, command.price)["formatted"]

    def _log_water(self, user: User, command: LogWater) -> str:
        return self.log_water_uc.execute(user.id, command.amount)["formatted"]

    def _show_help(self, user: User, command: ShowHelp) -> str:
        return HELP_TEXT

    def _unknown(self, user: User, command: Unknown) -> str:
        return (
            f"❓ Comando não reconhecido: \"{command.token}\"\n\n"
            "Digite *ajuda* para ver os comandos disponíveis."
        )

    def _usage_error(self, user: User, command: UsageError) -> str:
        return command.message
