# ==================== PRICING/POLICY.PY ====================
"""
Jurisdiction policy: which provinces are taxed, and which province may
create full accounts while the regional signup gate is on.
"""
from dataclasses import dataclass, field
from decimal import Decimal

DEFAULT_TAX_RATE = Decimal('0.15')
DEFAULT_TAXABLE_JURISDICTION = 'NS'
DEFAULT_ALLOWED_JURISDICTION = 'NS'


def normalize_jurisdiction(value):
    """Trim and uppercase a province code; None when there is nothing to compare."""
    if value is None:
        return None
    normalized = str(value).strip().upper()
    return normalized or None


@dataclass(frozen=True)
class JurisdictionPolicy:
    """Immutable snapshot of tax and signup-gate settings"""
    taxable_jurisdictions: frozenset = field(
        default_factory=lambda: frozenset({DEFAULT_TAXABLE_JURISDICTION})
    )
    tax_rate: Decimal = DEFAULT_TAX_RATE
    allowed_jurisdiction: str = DEFAULT_ALLOWED_JURISDICTION
    gate_enabled: bool = False

    def __post_init__(self):
        codes = (normalize_jurisdiction(code) for code in self.taxable_jurisdictions)
        object.__setattr__(self, 'taxable_jurisdictions', frozenset(c for c in codes if c))
        object.__setattr__(self, 'tax_rate', Decimal(str(self.tax_rate)))
        object.__setattr__(self, 'allowed_jurisdiction', normalize_jurisdiction(self.allowed_jurisdiction))

    def is_taxable(self, jurisdiction):
        code = normalize_jurisdiction(jurisdiction)
        if code is None:
            return False
        return code in self.taxable_jurisdictions

    def is_allowed_for_signup(self, jurisdiction):
        code = normalize_jurisdiction(jurisdiction)
        if code is None:
            return False
        return code == self.allowed_jurisdiction

    def admits_signup(self, jurisdiction):
        """Gate off admits everyone; gate on admits only the allowed province."""
        if not self.gate_enabled:
            return True
        return self.is_allowed_for_signup(jurisdiction)
