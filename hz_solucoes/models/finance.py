"""
Finance Models
"""
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class ItemStatus(str, Enum):
    PENDING = "pending"
    BOUGHT = "bought"


class User(BaseModel):
    """Usuário identificado pelo número do WhatsApp"""
    id: str
    whatsapp: str
    name: str
    password: str
    created_at: Optional[datetime] = None


class Transaction(BaseModel):
    """Receita ou despesa"""
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    id: Optional[str] = None
    user_id: str
    type: TransactionType
    amount: float
    description: Optional[str] = None
    category: Optional[str] = None  # Somente despesas
    is_fixed: bool = False  # Despesa fixa mensal
    date: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)


class ShoppingItem(BaseModel):
    """Item da lista de compras"""
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    id: Optional[str] = None
    user_id: str
    name: str
    status: ItemStatus = ItemStatus.PENDING
    price: Optional[float] = None
    created_at: datetime = Field(default_factory=datetime.now)


class WaterIntakeEntry(BaseModel):
    """Registro de consumo de água (ml)"""
    id: Optional[str] = None
    user_id: str
    amount: float
    date: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)


class MonthlySummary(BaseModel):
    """Modelo de resposta do resumo mensal"""
    year: int
    month: int
    income: float
    expenses: float
    balance: float
    by_category: Dict[str, float] = Field(default_factory=dict)
