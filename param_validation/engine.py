"""Fail-fast interpreter for ordered parameter rules."""

import logging
from enum import Enum
from typing import Any, List, Sequence

from market_models.errors import InvalidParameterError, MissingParameterError

from .rules import ParamRule, PrimitiveType

logger = logging.getLogger(__name__)


async def validate(rules: Sequence[ParamRule], params: Sequence[Any]) -> List[Any]:
    """Check ``params`` positionally against ``rules``.

    Returns a new list with defaults filled in and values coerced. Values
    past the last rule are passed through untouched. The first violated rule
    raises; nothing after it is evaluated.
    """

    checked: List[Any] = list(params)
    if len(checked) < len(rules):
        checked.extend([None] * (len(rules) - len(checked)))

    for index, rule in enumerate(rules):
        value = checked[index]
        if value is None:
            if rule.required:
                raise MissingParameterError(rule.name)
            checked[index] = rule.default
            continue

        if rule.type is not None and not _matches_type(value, rule.type):
            raise InvalidParameterError(rule.name, rule.type.value)

        checked[index] = await rule.validate(value, index, checked)

    logger.debug("validated %d params against %d rules", len(checked), len(rules))
    return checked


def _matches_type(value: Any, expected: PrimitiveType) -> bool:
    if isinstance(value, Enum):
        value = value.value
    if expected == PrimitiveType.BOOLEAN:
        return isinstance(value, bool)
    if expected == PrimitiveType.NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected == PrimitiveType.STRING:
        return isinstance(value, str)
    return True
