from datetime import datetime
from typing import List, Optional

import pytest

from hz_solucoes.core.config import BotConfig
from hz_solucoes.core.exceptions import StoreError
from hz_solucoes.models.finance import ShoppingItem, Transaction, User, WaterIntakeEntry
from hz_solucoes.services.interpreter import CommandInterpreter


class InMemoryStore:
    """Mesma interface do FirestoreService, guardando tudo em listas"""

    def __init__(self):
        self.users = {}
        self.transactions: List[Transaction] = []
        self.items: List[ShoppingItem] = []
        self.water: List[WaterIntakeEntry] = []
        self.calls: List[str] = []
        self.fail_on = set()

    def _call(self, name):
        self.calls.append(name)
        if name in self.fail_on:
            raise StoreError(f"{name} falhou")

    def get_user(self, sender_id) -> Optional[User]:
        self._call("get_user")
        return self.users.get(str(sender_id))

    def create_user(self, sender_id, name, password):
        self._call("create_user")
        sender_id = str(sender_id)
        self.users.setdefault(sender_id, User(
            id=sender_id, whatsapp=sender_id, name=name, password=password, created_at=datetime.now()
        ))

    def add_transaction(self, transaction):
        self._call("add_transaction")
        transaction = transaction.model_copy(update={"id": f"t{len(self.transactions) + 1}"})
        self.transactions.append(transaction)
        return transaction.id

    def get_transactions(self, user_id, start_date=None, end_date=None, limit=None):
        self._call("get_transactions")
        result = [
            t for t in self.transactions
            if t.user_id == str(user_id)
            and (start_date is None or t.date >= start_date)
            and (end_date is None or t.date <= end_date)
        ]
        result.sort(key=lambda t: t.date, reverse=True)
        return result[:limit] if limit else result

    def add_shopping_item(self, item):
        self._call("add_shopping_item")
        item = item.model_copy(update={"id": f"i{len(self.items) + 1}"})
        self.items.append(item)
        return item.id

    def get_shopping_items(self, user_id):
        self._call("get_shopping_items")
        return [i for i in self.items if i.user_id == str(user_id)]

    def add_water_intake(self, entry):
        self._call("add_water_intake")
        entry = entry.model_copy(update={"id": f"w{len(self.water) + 1}"})
        self.water.append(entry)
        return entry.id

    def get_water_intake(self, user_id, start_date, end_date):
        self._call("get_water_intake")
        return [
            e for e in self.water
            if e.user_id == str(user_id) and start_date <= e.date <= end_date
        ]


class FakeWhatsApp:
    def __init__(self, result=True):
        self.result = result
        self.sent = []

    def send_message(self, to, text):
        self.sent.append((to, text))
        return self.result

    def is_configured(self):
        return False

    def test_connection(self):
        return False


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def config():
    return BotConfig()


@pytest.fixture
def interpreter(store, config):
    return CommandInterpreter(store, config)


@pytest.fixture
def fake_whatsapp():
    return FakeWhatsApp()
