"""Provincial sales tax multipliers."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

NO_TAX = Decimal("1.00")


class Region(str, Enum):
    """Canadian provinces and territories accepted at the prompt."""

    AB = "AB"
    BC = "BC"
    MB = "MB"
    NB = "NB"
    NL = "NL"
    NT = "NT"
    NS = "NS"
    NU = "NU"
    ON = "ON"
    PE = "PE"
    QC = "QC"
    SK = "SK"
    YT = "YT"


GST = Decimal("1.05")
HST_MARITIMES = Decimal("1.15")
ON_MB = Decimal("1.13")


@dataclass(frozen=True)
class TaxTable:
    """Read-only mapping from region code to ``1 + tax rate``."""

    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        canonical = {self.normalize(code): Decimal(rate) for code, rate in self.rates.items()}
        object.__setattr__(self, "rates", MappingProxyType(canonical))

    @staticmethod
    def normalize(region_code: str) -> str:
        return region_code.strip().upper()

    def resolve(self, region_code: Optional[str]) -> Decimal:
        """Return the multiplier for a region; unknown codes are untaxed."""
        if not region_code:
            return NO_TAX
        return self.rates.get(self.normalize(region_code), NO_TAX)

    def __contains__(self, region_code: object) -> bool:
        return isinstance(region_code, str) and self.normalize(region_code) in self.rates


DEFAULT_TAX_TABLE = TaxTable(
    {
        Region.AB.value: GST,
        Region.NT.value: GST,
        Region.NU.value: GST,
        Region.YT.value: GST,
        Region.BC.value: Decimal("1.12"),
        Region.MB.value: ON_MB,
        Region.ON.value: ON_MB,
        Region.NB.value: HST_MARITIMES,
        Region.NL.value: HST_MARITIMES,
        Region.NS.value: HST_MARITIMES,
        Region.PE.value: Decimal("1.14"),
        Region.QC.value: Decimal("1.14975"),
        Region.SK.value: Decimal("1.10"),
    }
)


def resolve_tax_multiplier(
    region_code: Optional[str], table: TaxTable = DEFAULT_TAX_TABLE
) -> Decimal:
    """Resolve ``region_code`` against ``table`` (case-insensitive)."""
    return table.resolve(region_code)
