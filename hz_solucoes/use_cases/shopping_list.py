"""
Shopping List Use Case
"""
from typing import Optional

from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import ItemStatus
from hz_solucoes.core.utils import format_currency_br, ensure_string_id


class ShoppingListUseCase:
    """Use case para listar a lista de compras"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str) -> str:
        """
        Lista itens com status (✅ comprado, ⭕ pendente) e total pendente

        Returns:
            str: Lista formatada
        """
        user_id_str = ensure_string_id(user_id)
        items = self.db.get_shopping_items(user_id_str)

        if not items:
            return "🛒 *Lista de Compras*\n\nNenhum item pendente."

        txt = "🛒 *Lista de Compras*\n\n"
        pending_total = 0.0
        for index, item in enumerate(items, start=1):
            status = "✅" if item.status == ItemStatus.BOUGHT else "⭕"
            txt += f"{index}. {status} {item.name}"
            if item.price is not None:
                txt += f" - R$ {format_currency_br(item.price)}"
                if item.status == ItemStatus.PENDING:
                    pending_total += item.price
            txt += "\n"

        if pending_total > 0:
            txt += f"\n💰 Total pendente: R$ {format_currency_br(pending_total)}"

        return txt.rstrip("\n")
