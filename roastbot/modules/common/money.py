# roastbot/modules/common/money.py
from __future__ import annotations

def fmt_usd(cents: int) -> str:
    """
    Formatte un montant en centimes → '$12.50'.
    Exemple: 1250 → '$12.50', -50 → '-$0.50'
    """
    s = int(cents)
    sign = "-" if s < 0 else ""
    return f"{sign}${abs(s) // 100}.{abs(s) % 100:02d}"

def short_addr(wallet: str) -> str:
    return f"{wallet[:6]}…{wallet[-4:]}" if len(wallet) > 12 else wallet
