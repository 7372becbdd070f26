"""Token staking pool with time-based reward accrual.

The ``tokenDecimals`` option is embedded as the ``TOKEN_DECIMALS`` constant
of the generated program and client SDK.
"""

from __future__ import annotations

from typing import Any

from sol_anchor_gen.patterns.base import AnchorTemplateGenerator, GenerationContext
from sol_anchor_gen.patterns.options import OptionType, TemplateOption

DEFAULT_TOKEN_DECIMALS = 9

TOKEN_DECIMALS_OPTION = TemplateOption(
    name="tokenDecimals",
    flag="token-decimals",
    description=f"Token decimals (default: {DEFAULT_TOKEN_DECIMALS})",
    type=OptionType.NUMBER,
    default=DEFAULT_TOKEN_DECIMALS,
    validate=lambda value: isinstance(value, int) and 0 <= value <= 18,
)


class StakingGenerator(AnchorTemplateGenerator):
    pattern = "staking"
    summary = "Staking program generated with SolAnchorGen"

    def template_vars(self, context: GenerationContext) -> dict[str, Any]:
        variables = super().template_vars(context)
        variables["token_decimals"] = context.option(
            TOKEN_DECIMALS_OPTION.name, DEFAULT_TOKEN_DECIMALS
        )
        return variables
