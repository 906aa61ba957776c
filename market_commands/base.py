"""Command contract: check raw positional params, then act on them."""

import logging
from dataclasses import replace
from typing import Any, List, Sequence, Tuple

from market_models.errors import InvalidParameterError
from param_validation.engine import validate
from param_validation.rules import ParamRule, number_rule

logger = logging.getLogger(__name__)


class Command:
    name = ""

    def rules(self) -> Tuple[ParamRule, ...]:
        return ()

    async def validate(self, params: Sequence[Any]) -> List[Any]:
        return await validate(self.rules(), params)

    async def execute(self, params: List[Any]) -> Any:
        raise NotImplementedError

    async def run(self, params: Sequence[Any]) -> Any:
        checked = await self.validate(params)
        logger.debug("running %s", self.name)
        return await self.execute(checked)


def retention_rule(max_days: int) -> ParamRule:
    async def check(rule: ParamRule, value: Any, index: int, all_values: Sequence[Any]) -> Any:
        if isinstance(value, float) and not value.is_integer():
            raise InvalidParameterError(rule.name, "integer")
        if value < 1 or value > max_days:
            raise InvalidParameterError(rule.name, f"1..{max_days}")
        return int(value)

    return replace(number_rule("daysRetention", default=max_days), check=check)
