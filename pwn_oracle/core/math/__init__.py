"""
Core math modules для pwn_oracle

Целочисленная fixed-point арифметика цен и пересчёт между знаменателями.
"""

# Fixed-point primitives
from pwn_oracle.core.math.fixed_point import (
    MAX_DECIMALS,
    UINT256_MAX,
    mul_div,
    pow10,
    scale_price,
    sync_decimals_up,
    validate_decimals,
    validate_uint256,
)

# Denomination math
from pwn_oracle.core.math.denomination import (
    LOAN_TO_VALUE_DENOMINATOR,
    Rate,
    apply_loan_to_value,
    convert_price_denomination,
    validate_loan_to_value,
)

__all__ = [
    # Fixed-point — Constants
    "MAX_DECIMALS",
    "UINT256_MAX",
    # Fixed-point — Functions
    "mul_div",
    "pow10",
    "scale_price",
    "sync_decimals_up",
    "validate_decimals",
    "validate_uint256",
    # Denomination — Constants
    "LOAN_TO_VALUE_DENOMINATOR",
    # Denomination — Types
    "Rate",
    # Denomination — Functions
    "apply_loan_to_value",
    "convert_price_denomination",
    "validate_loan_to_value",
]
