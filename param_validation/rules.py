"""Parameter rules for command validation.

Every rule is a :class:`ParamRule`. Its ``kind`` selects the default check
and a rule may carry its own ``check`` to override it. Checks receive the
rule, the value, its position and the full argument list, and return the
(possibly coerced) value or raise.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Sequence, Tuple, Type

from market_models.errors import InvalidParameterError, MissingParameterError, ModelNotFoundError
from market_models.models import Cryptocurrency, EscrowReleaseType, EscrowScheme, SaleType


class PrimitiveType(Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


class RuleKind(Enum):
    PLAIN = "PLAIN"
    ID = "ID"
    NON_NEGATIVE = "NON_NEGATIVE"
    ENUM = "ENUM"
    ADDRESS_OR_ID = "ADDRESS_OR_ID"


class ModelLookup(Protocol):
    """Resolves an id; a missing model is signalled by raising LookupError or returning None."""

    async def find_one(self, model_id: int) -> Any:
        ...


RuleCheck = Callable[["ParamRule", Any, int, Sequence[Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ParamRule:
    name: str
    kind: RuleKind = RuleKind.PLAIN
    required: bool = False
    type: Optional[PrimitiveType] = None
    default: Any = None
    lookup: Optional[ModelLookup] = None
    enum_type: Optional[Type[Enum]] = None
    allowed: Tuple[Any, ...] = ()
    companions: Tuple[str, ...] = ()
    check: Optional[RuleCheck] = None

    @property
    def model_name(self) -> str:
        # listingItemTemplateId -> ListingItemTemplate
        base = self.name[:-2] if self.name.endswith("Id") else self.name
        return base[:1].upper() + base[1:]

    async def validate(self, value: Any, index: int, all_values: Sequence[Any]) -> Any:
        check = self.check or _DEFAULT_CHECKS[self.kind]
        return await check(self, value, index, all_values)


async def _check_plain(rule: ParamRule, value: Any, index: int, all_values: Sequence[Any]) -> Any:
    return value


async def _check_non_negative(
    rule: ParamRule, value: Any, index: int, all_values: Sequence[Any]
) -> Any:
    if value < 0:
        raise InvalidParameterError(rule.name, "value >= 0")
    return value


async def _check_id(rule: ParamRule, value: Any, index: int, all_values: Sequence[Any]) -> Any:
    if value < 0:
        raise InvalidParameterError(rule.name, "value >= 0")
    if rule.lookup is not None:
        try:
            found = await rule.lookup.find_one(value)
        except LookupError as exc:
            raise ModelNotFoundError(rule.model_name) from exc
        if found is None:
            raise ModelNotFoundError(rule.model_name)
    return value


async def _check_enum(rule: ParamRule, value: Any, index: int, all_values: Sequence[Any]) -> Any:
    enum_type = rule.enum_type
    if enum_type is None:
        if value not in rule.allowed:
            raise InvalidParameterError(rule.name, "|".join(str(item) for item in rule.allowed))
        return value
    member = value if isinstance(value, enum_type) else _enum_member(enum_type, value)
    if member is None or (rule.allowed and member not in rule.allowed):
        raise InvalidParameterError(rule.name, enum_type.__name__)
    return member


async def _check_address_or_id(
    rule: ParamRule, value: Any, index: int, all_values: Sequence[Any]
) -> Any:
    if value is False:
        for key in rule.companions:
            if key not in all_values:
                raise MissingParameterError(key)
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError("address", "false|number")
    return value


def _enum_member(enum_type: Type[Enum], value: Any) -> Optional[Enum]:
    for member in enum_type:
        if member.value == value or member.name == value:
            return member
    return None


_DEFAULT_CHECKS: Dict[RuleKind, RuleCheck] = {
    RuleKind.PLAIN: _check_plain,
    RuleKind.ID: _check_id,
    RuleKind.NON_NEGATIVE: _check_non_negative,
    RuleKind.ENUM: _check_enum,
    RuleKind.ADDRESS_OR_ID: _check_address_or_id,
}


def string_rule(name: str, required: bool = False, default: Any = None) -> ParamRule:
    return ParamRule(name=name, required=required, type=PrimitiveType.STRING, default=default)


def number_rule(name: str, required: bool = False, default: Any = None) -> ParamRule:
    return ParamRule(name=name, required=required, type=PrimitiveType.NUMBER, default=default)


def boolean_rule(name: str, required: bool = False, default: Any = None) -> ParamRule:
    return ParamRule(name=name, required=required, type=PrimitiveType.BOOLEAN, default=default)


def non_negative_rule(name: str, required: bool = False, default: Any = None) -> ParamRule:
    return ParamRule(
        name=name,
        kind=RuleKind.NON_NEGATIVE,
        required=required,
        type=PrimitiveType.NUMBER,
        default=default,
    )


def id_rule(name: str, required: bool = False, lookup: Optional[ModelLookup] = None) -> ParamRule:
    return ParamRule(
        name=name,
        kind=RuleKind.ID,
        required=required,
        type=PrimitiveType.NUMBER,
        lookup=lookup,
    )


def enum_rule(
    name: str,
    enum_type: Type[Enum],
    allowed: Tuple[Enum, ...] = (),
    default: Any = None,
    required: bool = False,
) -> ParamRule:
    return ParamRule(
        name=name,
        kind=RuleKind.ENUM,
        required=required,
        type=PrimitiveType.STRING,
        default=default,
        enum_type=enum_type,
        allowed=allowed,
    )


def choice_rule(name: str, allowed: Tuple[str, ...], required: bool = False) -> ParamRule:
    return ParamRule(
        name=name,
        kind=RuleKind.ENUM,
        required=required,
        type=PrimitiveType.STRING,
        allowed=allowed,
    )


SHIPPING_ADDRESS_KEYS: Tuple[str, ...] = (
    "shippingAddress.firstName",
    "shippingAddress.lastName",
    "shippingAddress.addressLine1",
    "shippingAddress.city",
    "shippingAddress.state",
    "shippingAddress.zipCode",
    "shippingAddress.country",
)


def address_or_address_id_rule(
    required: bool = False, companions: Tuple[str, ...] = SHIPPING_ADDRESS_KEYS
) -> ParamRule:
    return ParamRule(
        name="address|addressId",
        kind=RuleKind.ADDRESS_OR_ID,
        required=required,
        companions=companions,
    )


class CommentType(Enum):
    LISTINGITEM_QUESTION_AND_ANSWERS = "LISTINGITEM_QUESTION_AND_ANSWERS"
    PROPOSAL_QUESTION_AND_ANSWERS = "PROPOSAL_QUESTION_AND_ANSWERS"
    MARKET_QUESTION_AND_ANSWERS = "MARKET_QUESTION_AND_ANSWERS"
    PRIVATE_MESSAGE = "PRIVATE_MESSAGE"


STANDARD_RULES: Dict[str, ParamRule] = {
    rule.name: rule
    for rule in (
        id_rule("listingItemTemplateId"),
        id_rule("listingItemId"),
        id_rule("marketId"),
        id_rule("profileId"),
        id_rule("identityId"),
        id_rule("categoryId"),
        string_rule("title"),
        string_rule("shortDescription"),
        string_rule("longDescription"),
        non_negative_rule("basePrice", default=0),
        non_negative_rule("domesticShippingPrice", default=0),
        non_negative_rule("internationalShippingPrice", default=0),
        non_negative_rule("buyerRatio", default=100),
        non_negative_rule("sellerRatio", default=100),
        enum_rule("saleType", SaleType, (SaleType.SALE,), default=SaleType.SALE),
        enum_rule("currency", Cryptocurrency, (Cryptocurrency.PART,), default=Cryptocurrency.PART),
        enum_rule(
            "escrowType",
            EscrowScheme,
            (EscrowScheme.CONFIDENTIAL, EscrowScheme.MULTISIG),
            default=EscrowScheme.CONFIDENTIAL,
        ),
        enum_rule(
            "escrowReleaseType",
            EscrowReleaseType,
            (EscrowReleaseType.ANON, EscrowReleaseType.BLIND),
            default=EscrowReleaseType.ANON,
        ),
        enum_rule("commentType", CommentType),
        address_or_address_id_rule(),
    )
}


def standard_rule(name: str, **overrides: Any) -> ParamRule:
    """Return the registered rule for ``name`` with ``overrides`` applied."""

    try:
        rule = STANDARD_RULES[name]
    except KeyError:
        raise KeyError(f"Unknown parameter rule: {name}") from None
    return replace(rule, **overrides) if overrides else rule
