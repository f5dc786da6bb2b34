"""
Denominations — адреса знаменателей Feed Registry

Feed Registry адресует пары (base, quote) адресами. Для фиатных и нативных
знаменателей используются хорошо известные псевдо-адреса (USD = ISO 4217
код 840 = 0x348, ETH и BTC — "eeee" / "bbbb" адреса).

Все адреса внутри движка хранятся в нижнем регистре.
"""

import re
from typing import Final

_ADDRESS_RE: Final = re.compile(r"^0x[0-9a-fA-F]{40}$")

# =============================================================================
# WELL-KNOWN DENOMINATIONS
# =============================================================================

USD: Final[str] = "0x0000000000000000000000000000000000000348"
ETH: Final[str] = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"
BTC: Final[str] = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"


def is_address(value: object) -> bool:
    """Проверка формата 0x + 40 hex символов."""
    return isinstance(value, str) and _ADDRESS_RE.match(value) is not None


def normalize_address(value: str, name: str = "address") -> str:
    """
    Нормализация адреса (нижний регистр).

    Raises:
        ValueError: Если value не является адресом
    """
    if not is_address(value):
        raise ValueError(f"{name} must be a 0x-prefixed 20-byte hex address, got {value!r}")
    return value.lower()
