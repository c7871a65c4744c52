from datetime import datetime

from hz_solucoes.models.finance import ItemStatus, ShoppingItem, Transaction, TransactionType, WaterIntakeEntry
from hz_solucoes.use_cases.log_water import LogWaterUseCase
from hz_solucoes.use_cases.monthly_report import MonthlyReportUseCase
from hz_solucoes.use_cases.shopping_list import ShoppingListUseCase

USER = "5511999999999"


def _transaction(type_, amount, date, category=None):
    return Transaction(user_id=USER, type=type_, amount=amount, date=date, category=category)


def test_monthly_report_for_given_month(store):
    store.transactions.extend([
        _transaction(TransactionType.INCOME, 3000, datetime(2026, 3, 5)),
        _transaction(TransactionType.EXPENSE, 200, datetime(2026, 3, 10), "Alimentação"),
        _transaction(TransactionType.EXPENSE, 100, datetime(2026, 3, 31, 23, 59), "Contas"),
        _transaction(TransactionType.EXPENSE, 50, datetime(2026, 3, 20), "Alimentação"),
        _transaction(TransactionType.EXPENSE, 999, datetime(2026, 4, 1), "Contas"),
    ])

    result = MonthlyReportUseCase(store).execute(USER, year=2026, month=3)
    summary = result["summary"]

    assert summary.income == 3000
    assert summary.expenses == 350
    assert summary.balance == 2650
    assert summary.by_category == {"Alimentação": 250, "Contas": 100}
    assert "03/2026" in result["formatted"]
    assert "✅ Saldo: R$ 2.650,00" in result["formatted"]


def test_monthly_report_empty_month(store):
    result = MonthlyReportUseCase(store).execute(USER, now=datetime(2026, 5, 10))
    assert result["summary"].balance == 0
    assert "Saldo: R$ 0,00" in result["formatted"]


def test_log_water_uses_configured_goal(store):
    now = datetime(2026, 10, 19, 12, 0)
    store.water.append(WaterIntakeEntry(user_id=USER, amount=300, date=datetime(2026, 10, 19, 8, 0)))
    store.water.append(WaterIntakeEntry(user_id=USER, amount=900, date=datetime(2026, 10, 18, 20, 0)))

    result = LogWaterUseCase(store, daily_goal_ml=1000).execute(USER, 200, now=now)

    assert result["total_today"] == 500
    assert result["percent"] == 50
    assert "Total hoje: 500ml / 1000ml" in result["formatted"]


def test_monthly_report_december_9999(store):
    store.transactions.append(_transaction(TransactionType.INCOME, 10, datetime(9999, 12, 31, 22, 0)))

    summary = MonthlyReportUseCase(store).execute(USER, year=9999, month=12)["summary"]

    assert (summary.year, summary.month) == (9999, 12)
    assert summary.income == 10


def test_shopping_list_shows_zero_price(store):
    store.items.extend([
        ShoppingItem(user_id=USER, name="sacola", price=0.0),
        ShoppingItem(user_id=USER, name="pão", price=8.5, status=ItemStatus.BOUGHT),
        ShoppingItem(user_id=USER, name="leite"),
    ])

    txt = ShoppingListUseCase(store).execute(USER)

    assert "1. ⭕ sacola - R$ 0,00" in txt
    assert "2. ✅ pão - R$ 8,50" in txt
    assert "3. ⭕ leite\n" not in txt
    assert txt.endswith("3. ⭕ leite")
    assert "Total pendente" not in txt
