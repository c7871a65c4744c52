"""
Core utilities: amount parsing, currency formatting, date windows, ID normalization.
"""
import calendar
import math
from datetime import datetime, timedelta
from typing import Any, Tuple, Union

from hz_solucoes.core.exceptions import InvalidAmountError


def parse_amount(value: Any) -> float:
    """
    Converte o token de valor digitado pelo usuário em float.
    Aceita vírgula como separador decimal.
    Exemplos:
    "50" -> 50.0
    "50,90" -> 50.9
    "12.5" -> 12.5
    "abc" -> InvalidAmountError
    """
    if isinstance(value, (float, int)):
        amount = float(value)
    else:
        text = str(value or "").strip().replace(",", ".")
        try:
            amount = float(text)
        except ValueError:
            raise InvalidAmountError(f"Valor inválido: {value!r}")

    if not math.isfinite(amount):
        raise InvalidAmountError(f"Valor inválido: {value!r}")
    return amount


def parse_positive_amount(value: Any) -> float:
    amount = parse_amount(value)
    if amount <= 0:
        raise InvalidAmountError(f"Valor deve ser maior que zero: {value!r}")
    return amount


def format_currency_br(value: float) -> str:
    """Formata float para string no formato brasileiro (1.234,56)"""
    return f"{value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_ml(value: float) -> str:
    """200.0 -> "200", 250.5 -> "250.5" """
    return f"{value:g}"


def format_date_br(value: datetime) -> str:
    return value.strftime("%d/%m/%Y")


def month_window(now: datetime) -> Tuple[datetime, datetime]:
    """Primeiro e último instante do mês corrente (hora local)"""
    last_day = calendar.monthrange(now.year, now.month)[1]
    start = datetime(now.year, now.month, 1)
    return start, datetime(now.year, now.month, last_day, 23, 59, 59, 999999)


def day_window(now: datetime) -> Tuple[datetime, datetime]:
    start = datetime(now.year, now.month, now.day)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def default_user_name(sender_id: str) -> str:
    """5511999999999@s.whatsapp.net -> 5511999999999"""
    return sender_id.split("@")[0]


def ensure_string_id(sender_id: Union[str, int]) -> str:
    """
    Garante que o identificador do remetente seja sempre string.
    Usado em TODAS as interações com Firestore.
    """
    return str(sender_id)
