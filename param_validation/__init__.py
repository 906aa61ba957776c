from .engine import validate
from .rules import (
    SHIPPING_ADDRESS_KEYS,
    STANDARD_RULES,
    CommentType,
    ModelLookup,
    ParamRule,
    PrimitiveType,
    RuleKind,
    address_or_address_id_rule,
    boolean_rule,
    choice_rule,
    enum_rule,
    id_rule,
    non_negative_rule,
    number_rule,
    standard_rule,
    string_rule,
)

__all__ = [
    "CommentType",
    "ModelLookup",
    "ParamRule",
    "PrimitiveType",
    "RuleKind",
    "SHIPPING_ADDRESS_KEYS",
    "STANDARD_RULES",
    "address_or_address_id_rule",
    "boolean_rule",
    "choice_rule",
    "enum_rule",
    "id_rule",
    "non_negative_rule",
    "number_rule",
    "standard_rule",
    "string_rule",
    "validate",
]
