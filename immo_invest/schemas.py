"""Pydantic schemas for property and tax input records (JSON files, CLI)."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from immo_invest.models.assumptions import MaritalStatus, TaxSettings
from immo_invest.models.property import GERMAN_STATES, Property, PropertyStatus


class PropertyInput(BaseModel):
    id: int = 0
    address: str = ""
    unit_number: str = ""
    total_price: Decimal = Field(..., gt=0, description="Purchase price")
    monthly_rent_cold: Decimal = Field(..., ge=0, description="Kaltmiete per month")
    size_m2: Decimal | None = Field(None, gt=0)
    rooms: Decimal | None = None
    status: PropertyStatus = PropertyStatus.AVAILABLE

    house_fee: Decimal | None = Field(None, ge=0, description="Hausgeld per month")
    management_costs: Decimal | None = Field(None, ge=0, description="Per year")
    value_growth_percent: Decimal | None = None
    rent_increase_percent: Decimal | None = None
    commission_percent: Decimal | None = Field(None, ge=0)

    def to_property(self) -> Property:
        return Property(**self.model_dump())


class TaxSettingsInput(BaseModel):
    gross_annual_income: Decimal = Field(Decimal("80000"), gt=0)
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    church_tax: bool = False
    state: str = "Bayern"

    @field_validator("state")
    @classmethod
    def _known_state(cls, v: str) -> str:
        if v not in GERMAN_STATES:
            raise ValueError(f"unknown state {v!r}")
        return v

    def to_tax_settings(self) -> TaxSettings:
        return TaxSettings(**self.model_dump())
