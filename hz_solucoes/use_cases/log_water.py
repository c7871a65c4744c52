"""
Log Water Use Case
"""
from datetime import datetime
from typing import Optional

from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import WaterIntakeEntry
from hz_solucoes.core.utils import day_window, format_ml, ensure_string_id


class LogWaterUseCase:
    """Use case para registrar consumo de água"""

    def __init__(self, db: Optional[FirestoreService] = None, daily_goal_ml: int = 2000):
        self.db = db or FirestoreService()
        self.daily_goal_ml = daily_goal_ml

    def execute(self, user_id: str, amount: float, now: Optional[datetime] = None) -> dict:
        """
        Registra o consumo e recalcula o total do dia contra a meta diária

        Returns:
            dict: {"status": "created", "amount": float, "total_today": float, "percent": float, "formatted": str}
        """
        user_id_str = ensure_string_id(user_id)
        now = now or datetime.now()

        self.db.add_water_intake(WaterIntakeEntry(user_id=user_id_str, amount=amount, date=now))

        start, end = day_window(now)
        total_today = sum(e.amount for e in self.db.get_water_intake(user_id_str, start, end))
        percent = (total_today / self.daily_goal_ml) * 100 if self.daily_goal_ml else 0.0

        txt = "💧 *Água Registrada*\n\n"
        txt += f"+{format_ml(amount)}ml adicionado!\n\n"
        txt += f"📊 Total hoje: {format_ml(total_today)}ml / {self.daily_goal_ml}ml\n"
        txt += f"📈 {percent:.0f}% da meta"

        return {
            "status": "created",
            "amount": amount,
            "total_today": total_today,
            "percent": percent,
            "formatted": txt
        }
