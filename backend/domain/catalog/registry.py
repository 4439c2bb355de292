"""
Catalog Domain - Calculator kind registry.

Every `component` key the client build can render is listed here. Catalog
records may name components this build does not know (records added after
a deploy, typos in the admin panel); those resolve to `CalculatorKind.UNKNOWN`
so the client renders a placeholder instead of failing.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional

from domain.shared.exceptions import CatalogIntegrityException


class CalculatorKind(str, Enum):
    """Client calculator implementations known to this build."""

    # Health
    BMI = "BmiCalculator"
    BMR = "BmrCalculator"
    BODY_FAT = "BodyFatCalculator"
    CALORIE = "CalorieCalculator"
    CALORIE_BURN = "CalorieBurnCalculator"
    DUE_DATE = "DueDateCalculator"
    IDEAL_WEIGHT = "IdealWeightCalculator"
    KG_TO_LB = "KgToLbCalculator"
    PACE = "PaceCalculator"
    PERIOD = "PeriodCalculator"

    # Finance
    AMORTIZATION = "AmortizationCalculator"
    AUTO_LOAN = "AutoLoanCalculator"
    CURRENCY = "CurrencyConverter"
    DEBT_CONSOLIDATION = "DebtConsolidationCalculator"
    FUTURE_VALUE = "FutureValueCalculator"
    INFLATION = "InflationCalculator"
    INVESTMENT = "InvestmentCalculator"
    LOAN = "LoanCalculator"
    MORTGAGE = "MortgageCalculator"
    RETIREMENT = "RetirementCalculator"
    SALES_TAX = "SalesTaxCalculator"
    SIMPLE_INTEREST = "SimpleInterestCalculator"
    TIP = "TipCalculator"

    # Math
    FRACTION = "FractionCalculator"
    GCD = "GcdCalculator"
    GPA = "GPACalculator"
    PERCENTAGE = "PercentageCalculator"
    SCIENTIFIC = "ScientificCalculator"

    # Other
    CONCRETE = "ConcreteCalculator"
    CONVERSION = "ConversionCalculator"
    DOB = "DobCalculator"
    PASSWORD = "PasswordGenerator"
    RANDOM_NUMBER = "RandomNumberGenerator"

    UNKNOWN = "Unknown"

    @property
    def is_known(self) -> bool:
        return self is not CalculatorKind.UNKNOWN

    @property
    def client_module(self) -> Optional[str]:
        """Client bundle module rendering this kind, None for UNKNOWN."""
        return CLIENT_MODULES.get(self)

    @classmethod
    def from_component(cls, component: Optional[str]) -> CalculatorKind:
        """Map a catalog `component` key to a kind. Never raises."""
        if not component:
            return cls.UNKNOWN
        try:
            kind = cls(component)
        except ValueError:
            return cls.UNKNOWN
        return kind

    @classmethod
    def known_components(cls) -> List[str]:
        return [k.value for k in cls if k.is_known]


CLIENT_MODULES: Dict[CalculatorKind, str] = {
    CalculatorKind.BMI: "calculators/bmi-calculator",
    CalculatorKind.BMR: "calculators/bmr-calculator",
    CalculatorKind.BODY_FAT: "calculators/body-fat-calculator",
    CalculatorKind.CALORIE: "calculators/calorie-calculator",
    CalculatorKind.CALORIE_BURN: "calculators/calorie-burn-calculator",
    CalculatorKind.DUE_DATE: "calculators/due-date-calculator",
    CalculatorKind.IDEAL_WEIGHT: "calculators/ideal-weight-calculator",
    CalculatorKind.KG_TO_LB: "calculators/kg-to-lb-calculator",
    CalculatorKind.PACE: "calculators/pace-calculator",
    CalculatorKind.PERIOD: "calculators/period-calculator",
    CalculatorKind.AMORTIZATION: "calculators/amortization-calculator",
    CalculatorKind.AUTO_LOAN: "calculators/auto-loan-calculator",
    CalculatorKind.CURRENCY: "calculators/currency-converter",
    CalculatorKind.DEBT_CONSOLIDATION: "calculators/debt-consolidation",
    CalculatorKind.FUTURE_VALUE: "calculators/future-value-calculator",
    CalculatorKind.INFLATION: "calculators/inflation-calculator",
    CalculatorKind.INVESTMENT: "calculators/investment-calculator",
    CalculatorKind.LOAN: "calculators/loan-calculator",
    CalculatorKind.MORTGAGE: "calculators/mortgage-calculator",
    CalculatorKind.RETIREMENT: "calculators/retirement-calculator",
    CalculatorKind.SALES_TAX: "calculators/sales-tax-calculator",
    CalculatorKind.SIMPLE_INTEREST: "calculators/simple-interest-calculator",
    CalculatorKind.TIP: "calculators/tip-calculator",
    CalculatorKind.FRACTION: "calculators/fraction-calculator",
    CalculatorKind.GCD: "calculators/gcd-calculator",
    CalculatorKind.GPA: "calculators/gpa-calculator",
    CalculatorKind.PERCENTAGE: "calculators/percentage-calculator",
    CalculatorKind.SCIENTIFIC: "calculators/scientific-calculator",
    CalculatorKind.CONCRETE: "calculators/concrete-calculator",
    CalculatorKind.CONVERSION: "calculators/conversion-calculator",
    CalculatorKind.DOB: "calculators/dob-calculator",
    CalculatorKind.PASSWORD: "calculators/password-generator",
    CalculatorKind.RANDOM_NUMBER: "calculators/random-number-generator",
}


def require_kind(component: str) -> CalculatorKind:
    """
    Strict variant of `CalculatorKind.from_component` for write paths.

    Raises:
        CatalogIntegrityException: if the component is not known to this build
    """
    kind = CalculatorKind.from_component(component)
    if not kind.is_known:
        raise CatalogIntegrityException(component, CalculatorKind.known_components())
    return kind
