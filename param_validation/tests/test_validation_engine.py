"""Unit tests for fail-fast parameter validation."""

import unittest

from market_models.errors import InvalidParameterError, MissingParameterError, ModelNotFoundError
from market_models.models import EscrowScheme, SaleType
from param_validation.engine import validate
from param_validation.rules import (
    SHIPPING_ADDRESS_KEYS,
    address_or_address_id_rule,
    boolean_rule,
    id_rule,
    number_rule,
    standard_rule,
    string_rule,
)


class RecordingLookup:
    def __init__(self, known=()) -> None:
        self.known = set(known)
        self.calls = []

    async def find_one(self, model_id):
        self.calls.append(model_id)
        if model_id not in self.known:
            raise ModelNotFoundError("Anything")
        return {"id": model_id}


class ValidationEngineTests(unittest.IsolatedAsyncioTestCase):
    async def test_missing_required_names_parameter_and_stops(self) -> None:
        lookup = RecordingLookup(known=(1,))
        rules = (
            string_rule("title", required=True),
            id_rule("marketId", required=True, lookup=lookup),
        )
        with self.assertRaises(MissingParameterError) as ctx:
            await validate(rules, [None, 1])
        self.assertEqual(ctx.exception.name, "title")
        self.assertEqual(lookup.calls, [])

    async def test_missing_when_list_too_short(self) -> None:
        rules = (id_rule("listingItemTemplateId", required=True), id_rule("marketId", required=True))
        with self.assertRaises(MissingParameterError) as ctx:
            await validate(rules, [1])
        self.assertEqual(ctx.exception.name, "marketId")

    async def test_defaults_fill_absent_optional_values(self) -> None:
        rules = (
            standard_rule("basePrice"),
            standard_rule("buyerRatio"),
            standard_rule("escrowType"),
            boolean_rule("estimateFee", default=False),
            string_rule("note"),
        )
        checked = await validate(rules, [])
        self.assertEqual(checked, [0, 100, EscrowScheme.CONFIDENTIAL, False, None])

    async def test_extra_params_pass_through(self) -> None:
        rules = (string_rule("title", required=True),)
        checked = await validate(rules, ["Lamp", {"free": "form"}, 7])
        self.assertEqual(checked, ["Lamp", {"free": "form"}, 7])

    async def test_input_is_not_mutated(self) -> None:
        params = [None]
        await validate((standard_rule("basePrice"),), params)
        self.assertEqual(params, [None])

    async def test_type_mismatch(self) -> None:
        with self.assertRaises(InvalidParameterError) as ctx:
            await validate((id_rule("marketId", required=True),), ["1"])
        self.assertEqual((ctx.exception.name, ctx.exception.expected), ("marketId", "number"))

        with self.assertRaises(InvalidParameterError) as ctx:
            await validate((number_rule("amount"),), [True])
        self.assertEqual(ctx.exception.expected, "number")

        with self.assertRaises(InvalidParameterError) as ctx:
            await validate((boolean_rule("estimateFee"),), ["false"])
        self.assertEqual(ctx.exception.expected, "boolean")

    async def test_negative_prices_and_ids_rejected(self) -> None:
        for name in ("basePrice", "domesticShippingPrice", "sellerRatio", "marketId"):
            with self.subTest(name=name):
                with self.assertRaises(InvalidParameterError) as ctx:
                    await validate((standard_rule(name),), [-1])
                self.assertEqual(ctx.exception.name, name)
        checked = await validate((standard_rule("basePrice"),), [0])
        self.assertEqual(checked, [0])

    async def test_enum_values_are_coerced(self) -> None:
        rules = (standard_rule("saleType"), standard_rule("escrowType"))
        checked = await validate(rules, ["SALE", "MULTISIG"])
        self.assertEqual(checked, [SaleType.SALE, EscrowScheme.MULTISIG])
        checked = await validate(rules, [SaleType.SALE, "MAD_CT"])
        self.assertEqual(checked[1], EscrowScheme.CONFIDENTIAL)

    async def test_enum_outside_allowed_set(self) -> None:
        with self.assertRaises(InvalidParameterError) as ctx:
            await validate((standard_rule("escrowType"),), ["MAD"])
        self.assertEqual((ctx.exception.name, ctx.exception.expected), ("escrowType", "EscrowScheme"))

        with self.assertRaises(InvalidParameterError):
            await validate((standard_rule("currency"),), ["BTC"])

    async def test_referential_lookup(self) -> None:
        lookup = RecordingLookup(known=(3,))
        rule = standard_rule("listingItemTemplateId", required=True, lookup=lookup)
        self.assertEqual(await validate((rule,), [3]), [3])

        with self.assertRaises(ModelNotFoundError) as ctx:
            await validate((rule,), [4])
        self.assertEqual(ctx.exception.model_name, "ListingItemTemplate")
        self.assertEqual(lookup.calls, [3, 4])

    async def test_lookup_returning_none_is_not_found(self) -> None:
        class NoneLookup:
            async def find_one(self, model_id):
                return None

        rule = standard_rule("marketId", required=True, lookup=NoneLookup())
        with self.assertRaises(ModelNotFoundError) as ctx:
            await validate((rule,), [2])
        self.assertEqual(ctx.exception.model_name, "Market")

    async def test_optional_lookup_skipped_when_absent(self) -> None:
        lookup = RecordingLookup()
        await validate((standard_rule("profileId", lookup=lookup),), [None])
        self.assertEqual(lookup.calls, [])

    async def test_unknown_standard_rule(self) -> None:
        with self.assertRaises(KeyError):
            standard_rule("nope")


class AddressOrAddressIdTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.rules = (address_or_address_id_rule(required=True),)

    def _address_params(self, keys):
        params = [False]
        for key in keys:
            params.extend([key, "value"])
        return params

    async def test_all_companion_fields_present(self) -> None:
        params = self._address_params(SHIPPING_ADDRESS_KEYS)
        checked = await validate(self.rules, params)
        self.assertIs(checked[0], False)

    async def test_first_absent_companion_is_reported(self) -> None:
        present = SHIPPING_ADDRESS_KEYS[:3] + SHIPPING_ADDRESS_KEYS[4:]
        with self.assertRaises(MissingParameterError) as ctx:
            await validate(self.rules, self._address_params(present))
        self.assertEqual(ctx.exception.name, SHIPPING_ADDRESS_KEYS[3])

    async def test_numeric_address_id_accepted(self) -> None:
        self.assertEqual(await validate(self.rules, [12]), [12])

    async def test_other_types_rejected(self) -> None:
        for value in ("12", True, {"id": 1}):
            with self.subTest(value=value):
                with self.assertRaises(InvalidParameterError) as ctx:
                    await validate(self.rules, [value])
                self.assertEqual(ctx.exception.expected, "false|number")


if __name__ == "__main__":
    unittest.main()
