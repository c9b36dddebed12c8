"""Shared type definitions for balancing fee models.

On-chain amounts travel as decimal integer strings so they survive JSON
without precision loss. Rates and running balances can be negative, so the
base type here is a signed 256-bit integer.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

INT256_MIN = -(2**255)
INT256_MAX = 2**255 - 1


def validate_int256(value: Any) -> int:
    """Validate that a value is a valid int256 (int or decimal string).

    Args:
        value: Value to validate (string or int)

    Returns:
        The value as int

    Raises:
        ValueError: If value is not an integer within int256 range
    """
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool):
        raise ValueError(f"Int256 must be string or int, got {type(value).__name__}")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Int256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Int256 must be string or int, got {type(value).__name__}")

    if not INT256_MIN <= int_value <= INT256_MAX:
        raise ValueError(f"Int256 out of range: {value}")

    return int_value


# Signed 256-bit integer, accepted as int or decimal string, serialized as string
Int256 = Annotated[
    int,
    BeforeValidator(validate_int256),
    PlainSerializer(str, return_type=str),
    Field(description="Signed 256-bit integer as decimal string"),
]
