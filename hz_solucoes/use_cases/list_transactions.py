"""
List Transactions Use Case
"""
from typing import Optional

from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import TransactionType
from hz_solucoes.core.utils import format_currency_br, format_date_br, ensure_string_id


class ListTransactionsUseCase:
    """Use case para listar as transações mais recentes"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, limit: int = 10) -> dict:
        """
        Returns:
            dict: {"status": "ok", "transactions": List[Transaction], "formatted": str}
        """
        user_id_str = ensure_string_id(user_id)
        transactions = self.db.get_transactions(user_id_str, limit=limit)[:limit]

        if not transactions:
            return {
                "status": "ok",
                "transactions": [],
                "formatted": "📋 *Transações Recentes*\n\nNenhuma transação encontrada."
            }

        txt = "📋 *Transações Recentes*\n\n"
        for index, t in enumerate(transactions, start=1):
            is_income = t.type == TransactionType.INCOME
            emoji, sign = ("📈", "+") if is_income else ("📉", "-")
            txt += f"{index}. {emoji} {sign}R$ {format_currency_br(t.amount)}\n"
            if t.description:
                txt += f"   {t.description}\n"
            txt += f"   {format_date_br(t.date)}\n\n"

        return {
            "status": "ok",
            "transactions": transactions,
            "formatted": txt.rstrip("\n")
        }
