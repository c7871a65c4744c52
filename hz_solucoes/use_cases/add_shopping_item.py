"""
Add Shopping Item Use Case
"""
from typing import Optional

from hz_solucoes.services.firestore_service import FirestoreService
from hz_solucoes.models.finance import ShoppingItem, ItemStatus
from hz_solucoes.core.utils import format_currency_br, ensure_string_id


class AddShoppingItemUseCase:
    """Use case para adicionar item à lista de compras"""

    def __init__(self, db: Optional[FirestoreService] = None):
        self.db = db or FirestoreService()

    def execute(self, user_id: str, name: str, price: Optional[float] = None) -> dict:
        """
        Returns:
            dict: {"status": "created", "name": name, "price": price, "formatted": str}
        """
        item = ShoppingItem(
            user_id=ensure_string_id(user_id),
            name=name,
            status=ItemStatus.PENDING,
            price=price,
        )
        self.db.add_shopping_item(item)

        txt = f"✅ *Item Adicionado*\n\n📋 {name}"
        if price is not None:
            txt += f"\n💵 R$ {format_currency_br(price)}"

        return {"status": "created", "name": name, "price": price, "formatted": txt}
