"""
Add Income Use Case
"""
from typing import Optional

from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import Transaction, TransactionType
from hz_solucoes.core.utils import format_currency_br, ensure_string_id


class AddIncomeUseCase:
    """Use case para adicionar receita (receitas nunca têm categoria)"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, amount: float, description: str) -> dict:
        transaction = Transaction(
            user_id=ensure_string_id(user_id),
            type=TransactionType.INCOME,
            amount=amount,
            description=description,
        )
        transaction_id = self.db.add_transaction(transaction)

        return {
            "status": "created",
            "id": transaction_id,
            "amount": amount,
            "description": description,
            "formatted": (
                "✅ *Receita Adicionada*\n\n"
                f"💵 Valor: R$ {format_currency_br(amount)}\n"
                f"📝 Descrição: {description}"
            ),
        }
