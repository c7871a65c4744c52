"""
Monthly Report Use Case
"""
from datetime import datetime
from typing import Optional

from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import MonthlySummary, TransactionType
from hz_solucoes.core.utils import format_currency_br, ensure_string_id, month_window


class MonthlyReportUseCase:
    """Use case para o resumo financeiro do mês"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(
        self,
        user_id: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> dict:
        """
        Soma receitas e despesas do mês (mês corrente se year/month não forem informados)

        Returns:
            dict: {"status": "ok", "summary": MonthlySummary, "formatted": str}
        """
        user_id_str = ensure_string_id(user_id)
        reference = now or datetime.now()
        if year is not None and month is not None:
            reference = datetime(year, month, 1)
        start, end = month_window(reference)

        transactions = self.db.get_transactions(user_id_str, start, end)

        income = 0.0
        expenses = 0.0
        by_category = {}
        for t in transactions:
            if t.type == TransactionType.INCOME:
                income += t.amount
            else:
                expenses += t.amount
                category = t.category or 'Outros'
                by_category[category] = by_category.get(category, 0.0) + t.amount

        balance = income - expenses
        summary = MonthlySummary(
            year=reference.year,
            month=reference.month,
            income=income,
            expenses=expenses,
            balance=balance,
            by_category=by_category,
        )

        txt = f"📊 *Resumo Financeiro - {reference.month:02d}/{reference.year}*\n\n"
        txt += f"📈 Receitas: R$ {format_currency_br(income)}\n"
        txt += f"📉 Despesas: R$ {format_currency_br(expenses)}\n"
        txt += f"\n{'✅' if balance >= 0 else '❌'} Saldo: R$ {format_currency_br(balance)}"

        return {
            "status": "ok",
            "summary": summary,
            "formatted": txt
        }
