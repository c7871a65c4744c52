"""
Add Expense Use Case
"""
from typing import Optional

from hz_solucoes.services.categorizer import categorize_expense
from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import Transaction, TransactionType
from hz_solucoes.core.utils import format_currency_br, ensure_string_id


class AddExpenseUseCase:
    """Use case para adicionar despesa"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, amount: float, description: str) -> dict:
        """
        Registra despesa com categoria automática.
        O valor já chega validado (> 0) pelo parser de comandos.
        """
        category = categorize_expense(description)
        transaction = Transaction(
            user_id=ensure_string_id(user_id),
            type=TransactionType.EXPENSE,
            amount=amount,
            description=description,
            category=category,
            is_fixed=False,
        )
        transaction_id = self.db.add_transaction(transaction)

        return {
            "status": "created",
            "id": transaction_id,
            "amount": amount,
            "description": description,
            "category": category,
            "formatted": (
                "❌ *Despesa Adicionada*\n\n"
                f"💵 Valor: R$ {format_currency_br(amount)}\n"
                f"📝 Descrição: {description}\n"
                f"🏷️ Categoria: {category}"
            ),
        }
