"""
Input schemas

Raw payloads from the CLI (or any other caller) are validated here into
typed records before they reach a service's SQL. Each model mirrors the
writable fields of one table. Amounts are capped at 12 digits with 2
decimal places so they survive the REAL column unchanged.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, Field

from errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class TransactionInput(BaseModel):
    """Create or full-replace payload for a transaction."""

    amount: Decimal = Field(
        ..., gt=0, max_digits=12, decimal_places=2, description="Amount, always positive"
    )
    type: Literal["income", "expense"] = Field(..., description="Transaction type")
    category: str = Field(..., min_length=1, description="Category name")
    description: Optional[str] = Field(None, description="Free-form note")
    date: Optional[datetime] = Field(
        None, description="When it happened; now if omitted on create"
    )


class CategoryInput(BaseModel):
    name: str = Field(..., min_length=1, description="Category name, e.g. Groceries")


class BudgetInput(BaseModel):
    """Create or full-replace payload for a budget."""

    category: str = Field(..., min_length=1, description="Category name")
    amount: Decimal = Field(
        ..., gt=0, max_digits=12, decimal_places=2, description="Monthly limit"
    )
    period: Literal["monthly"] = Field("monthly", description="Budget period")


class UserInput(BaseModel):
    name: str = Field(..., min_length=1, description="Login name")


def validate(schema: Type[SchemaT], payload: dict) -> SchemaT:
    """Validate a raw payload against a schema.

    Args:
        schema: Pydantic model class to validate with.
        payload: Raw field values.

    Returns:
        The validated model instance.

    Raises:
        ValidationError: Naming the first offending field.
    """
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        label = field or "payload"
        raise ValidationError(f"{label}: {error['msg']}", field=field) from e
