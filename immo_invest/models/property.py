from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


GERMAN_STATES = (
    "Baden-Württemberg",
    "Bayern",
    "Berlin",
    "Brandenburg",
    "Bremen",
    "Hamburg",
    "Hessen",
    "Mecklenburg-Vorpommern",
    "Niedersachsen",
    "Nordrhein-Westfalen",
    "Rheinland-Pfalz",
    "Saarland",
    "Sachsen",
    "Sachsen-Anhalt",
    "Schleswig-Holstein",
    "Thüringen",
)


class PropertyStatus(Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"


@dataclass(frozen=True)
class Property:
    """A listed unit as the calculators see it.

    Optional cost and growth fields are None when the listing does not carry
    them; each calculator applies its own fallback.
    """

    id: int
    total_price: Decimal
    monthly_rent_cold: Decimal  # Kaltmiete
    address: str = ""
    unit_number: str = ""
    size_m2: Decimal | None = None
    rooms: Decimal | None = None
    status: PropertyStatus = PropertyStatus.AVAILABLE

    house_fee: Decimal | None = None  # Hausgeld, monthly
    management_costs: Decimal | None = None  # Annual
    value_growth_percent: Decimal | None = None
    rent_increase_percent: Decimal | None = None
    commission_percent: Decimal | None = None

    @property
    def monthly_house_fee(self) -> Decimal:
        return self.house_fee if self.house_fee is not None else Decimal("0")

    @property
    def commission_amount(self) -> Decimal:
        if self.commission_percent is None:
            return Decimal("0")
        return self.total_price * self.commission_percent / 100
