"""
Suggestion service.

Builds the "next step" prompt for a calculator result and answers it from
canned, per-calculator tips. No model provider is wired in; `source`
reports whether the tip was specific to the calculator (`canned`) or the
generic one (`fallback`).
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from domain.catalog.registry import CalculatorKind

logger = logging.getLogger(__name__)

SOURCE_CANNED = 'canned'
SOURCE_FALLBACK = 'fallback'

PROMPT_TEMPLATE = (
    'A user just finished using the "{calculator_name}".\n\n'
    'Provide a helpful and concise two-line suggestion for their next step. '
    'This could be a practical tip related to their result, or a recommendation '
    'for another relevant calculator in the app.\n\n'
    'Keep the tone encouraging and straightforward.'
)

GENERIC_SUGGESTION = (
    "Double-check your inputs to make sure the result reflects your situation. "
    "Browse related calculators in the same category for a fuller picture."
)

# Older clients post {prompt} and expect expression suggestions back
EXPRESSION_SUGGESTIONS = ['input*2', 'input*input']

CANNED_SUGGESTIONS: Dict[CalculatorKind, str] = {
    CalculatorKind.AMORTIZATION: "Consider making bi-weekly payments instead of monthly to pay off your loan faster and save thousands in interest.",
    CalculatorKind.AUTO_LOAN: "A larger down payment can lower your monthly payments and reduce the total interest you pay over the life of the loan. Consider comparing offers from multiple lenders.",
    CalculatorKind.BMI: "Consider consulting with a healthcare professional for personalized advice based on your BMI results.",
    CalculatorKind.BMR: "Your BMR is the baseline calories your body needs at complete rest. To lose weight, aim for 300-500 calories below your TDEE. For muscle gain, aim for 300-500 calories above.",
    CalculatorKind.BODY_FAT: "For accurate measurements, take them in the morning before eating or drinking, and be consistent with your technique. Measure at the widest point for waist and hips.",
    CalculatorKind.CALORIE: "Remember to listen to your body. These numbers are estimates; adjust based on your progress and energy levels. Consider tracking your food intake for better accuracy.",
    CalculatorKind.CONCRETE: "Always order about 10% extra concrete to account for spillage and uneven ground levels. Consider the weather conditions, hot weather can cause concrete to set faster.",
    CalculatorKind.CURRENCY: "Exchange rates fluctuate daily. For large transactions, consider using limit orders or forward contracts to lock in favorable rates.",
    CalculatorKind.DEBT_CONSOLIDATION: "Debt consolidation works best when you can secure a lower interest rate than your current debts. Consider improving your credit score before applying for consolidation loans.",
    CalculatorKind.DOB: "Did you know you can also calculate the time until your next birthday? Planning a celebration early is always a good idea!",
    CalculatorKind.DUE_DATE: "Every pregnancy is unique. Use this estimate as a guide and be sure to consult with your healthcare provider for accurate tracking and prenatal care.",
    CalculatorKind.FRACTION: "Remember that fractions represent parts of a whole. Visualizing fractions as slices of pizza or pie can help understand the operations better.",
    CalculatorKind.FUTURE_VALUE: "Consider increasing your investment amount or exploring higher-yield options. The power of compounding works best over longer time periods.",
    CalculatorKind.GCD: "The GCD is useful for simplifying fractions and solving Diophantine equations. Try it with our Fraction Calculator for practical applications!",
    CalculatorKind.GPA: "Maintaining a strong GPA is important for academic success. Consider meeting with academic advisors for personalized guidance!",
    CalculatorKind.INFLATION: "To beat inflation, your investments need to earn a higher return than the inflation rate. Consider diversifying your portfolio with assets that historically outpace inflation.",
    CalculatorKind.INVESTMENT: "The power of compound interest grows over time. Try increasing the number of years to see the long-term impact. Consider increasing your monthly contributions for even greater growth.",
    CalculatorKind.LOAN: "Consider making extra payments to reduce your loan term and total interest paid. Even small additional payments can save you thousands over the life of the loan.",
    CalculatorKind.MORTGAGE: "Making extra payments can significantly reduce your total interest paid. Consider a 15-year loan or making bi-weekly payments to save on interest.",
    CalculatorKind.PACE: "Consistency is key! Try to maintain a similar pace for your next run to build endurance. Consider doing interval training once a week to improve your speed.",
    CalculatorKind.PASSWORD: "Use a unique password for every account. Consider a password manager to keep track of them securely and enable two-factor authentication where available.",
    CalculatorKind.PERCENTAGE: "Percentages are everywhere! Try using this for calculating tips, store discounts, or tracking your own goals and progress.",
    CalculatorKind.RANDOM_NUMBER: "Use this for games, picking winners, or whenever you need an unbiased choice. Try changing the range for different results!",
    CalculatorKind.RETIREMENT: "Consider increasing your monthly contributions by 1% each year. This 'save more tomorrow' approach can significantly boost your retirement savings without impacting your current lifestyle.",
    CalculatorKind.SALES_TAX: "Planning a big purchase? Consider shopping in areas with lower sales tax rates, or look for tax-free weekends in your state.",
    CalculatorKind.SCIENTIFIC: "Use parentheses to ensure correct order of operations. Remember: sin/cos/tan use radians by default.",
    CalculatorKind.SIMPLE_INTEREST: "Consider exploring compound interest to see how your savings could grow even faster with interest earned on interest.",
    CalculatorKind.TIP: "Tipping customs vary by country. When traveling, it's always a good idea to check local etiquette!",
}


@dataclass(frozen=True)
class Suggestion:
    text: str
    source: str
    prompt: str

    def to_dict(self, include_prompt: bool = False) -> Dict[str, Any]:
        data = {'suggestion': self.text, 'source': self.source}
        if include_prompt:
            data['prompt'] = self.prompt
        return data


def _normalize(name: str) -> str:
    return re.sub(r'[^a-z0-9]+', '', (name or '').lower())


def match_calculator_kind(calculator_name: str) -> CalculatorKind:
    """
    Find the calculator kind for a display name, component key or slug.

    "Tip Calculator", "TipCalculator" and "tip-calculator" all map to
    `CalculatorKind.TIP`. Returns UNKNOWN when nothing matches.
    """
    kind = CalculatorKind.from_component(calculator_name)
    if kind.is_known:
        return kind

    wanted = _normalize(calculator_name)
    if not wanted:
        return CalculatorKind.UNKNOWN
    for candidate in CalculatorKind:
        if not candidate.is_known:
            continue
        module_name = candidate.client_module.rsplit('/', 1)[-1]
        if wanted in (_normalize(candidate.value), _normalize(module_name)):
            return candidate
    return CalculatorKind.UNKNOWN


def build_prompt(calculator_name: str, context: Optional[Dict[str, Any]] = None) -> str:
    """Prompt text for the next-step suggestion, with the result context appended."""
    prompt = PROMPT_TEMPLATE.format(calculator_name=calculator_name)
    if context:
        lines = [
            f'- {key}: {value if isinstance(value, str) else json.dumps(value, default=str)}'
            for key, value in sorted(context.items())
        ]
        prompt += '\n\nResult details:\n' + '\n'.join(lines)
    return prompt


def suggest_next_step(calculator_name: str, context: Optional[Dict[str, Any]] = None) -> Suggestion:
    prompt = build_prompt(calculator_name, context)
    kind = match_calculator_kind(calculator_name)
    text = CANNED_SUGGESTIONS.get(kind)
    if text is None:
        logger.info(f"No canned suggestion for '{calculator_name}', using generic tip")
        return Suggestion(text=GENERIC_SUGGESTION, source=SOURCE_FALLBACK, prompt=prompt)
    return Suggestion(text=text, source=SOURCE_CANNED, prompt=prompt)


def suggest_expressions(prompt: str) -> List[str]:
    return list(EXPRESSION_SUGGESTIONS)
