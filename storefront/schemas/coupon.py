from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .common import CouponRejection


class CouponRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    code: str
    description: str | None = None
    discount_percent: float
    min_order_amount: float = 0
    is_permanent: bool = False
    expiry_date: datetime | None = None
    is_active: bool = True
    usage_count: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: object) -> object:
        return None if value is None else str(value)


class CouponCreate(BaseModel):
    code: str = Field(min_length=1)
    description: str = ""
    discount_percent: float = Field(ge=1, le=100)
    min_order_amount: float = Field(default=0, ge=0)
    is_permanent: bool = False
    expiry_date: datetime | None = None

    @field_validator("code")
    @classmethod
    def canonical_code(cls, value: str) -> str:
        return value.strip().upper()

    @model_validator(mode="after")
    def expiry_matches_permanence(self) -> CouponCreate:
        if self.is_permanent and self.expiry_date is not None:
            raise ValueError("permanent coupons cannot have an expiry date")
        if not self.is_permanent and self.expiry_date is None:
            raise ValueError("expiry_date is required for non-permanent coupons")
        return self


class CouponValidation(BaseModel):
    valid: bool
    reason: CouponRejection | None = None
    message: str | None = None


class CouponApplication(CouponValidation):
    code: str | None = None
    discount_percent: float | None = None
    discount: Decimal = Decimal("0.00")


class CouponCheckRequest(BaseModel):
    code: str = Field(min_length=1)
    order_amount: float | None = Field(default=None, ge=0)


class CouponApplyRequest(BaseModel):
    code: str = Field(min_length=1)
    order_amount: float = Field(ge=0)
