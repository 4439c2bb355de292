"""
Catalog Domain - Local calculators.

Bundled with the build and served when the remote catalog is unreachable.
Remote records with the same slug replace these entries.
"""

from typing import Tuple

from .entities import Calculator


LOCAL_CALCULATORS: Tuple[Calculator, ...] = (
    Calculator(
        id='debt-consolidation',
        name='Debt Consolidation',
        slug='debt-consolidation',
        description='Plan and manage your debt consolidation strategy.',
        component='DebtConsolidationCalculator',
        icon='LineChart',
        category_slug='finance',
    ),
    Calculator(
        id='kg-to-lb-calculator',
        name='Kg to Lb Calculator',
        slug='kg-to-lb-calculator',
        description='Convert kilograms to pounds quickly and easily.',
        component='KgToLbCalculator',
        icon='BalanceScale',
        category_slug='health',
    ),
    Calculator(
        id='gpa-calculator',
        name='GPA Calculator',
        slug='gpa-calculator',
        description='Calculate your Grade Point Average (GPA) easily.',
        component='GPACalculator',
        icon='BookOpen',
        category_slug='math',
    ),
    Calculator(
        id='future-value-calculator',
        name='Future Value Calculator',
        slug='future-value-calculator',
        description='Determine the future value of your investments over time.',
        component='FutureValueCalculator',
        icon='TrendingUp',
        category_slug='finance',
    ),
    Calculator(
        id='calorie-burn-calculator',
        name='Calorie Burn Calculator',
        slug='calorie-burn-calculator',
        description='Estimate the number of calories burned during various activities.',
        component='CalorieBurnCalculator',
        icon='Fire',
        category_slug='health',
    ),
    Calculator(
        id='conversion-calculator',
        name='Conversion Calculator',
        slug='conversion-calculator',
        description='Convert between various units of measurement easily.',
        component='ConversionCalculator',
        icon='Repeat',
        category_slug='finance',
    ),
)
