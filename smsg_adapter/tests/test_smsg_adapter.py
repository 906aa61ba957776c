"""Unit tests for message encoding, sizing and the simulated network."""

import unittest

from market_models.errors import TransientSendError
from market_models.models import SendParameters
from smsg_adapter.codec import MessageSizer, encode
from smsg_adapter.simulator import SimulatedSmsgNetwork, estimate_fee


def _params(**overrides) -> SendParameters:
    values = dict(wallet="market", from_address="pFrom", to_address="pTo", days_retention=4)
    values.update(overrides)
    return SendParameters(**values)


class CodecTests(unittest.TestCase):
    def test_encoding_is_deterministic(self) -> None:
        self.assertEqual(encode({"b": 1, "a": 2}), encode({"a": 2, "b": 1}))
        self.assertIn(b'"version"', encode({}))

    def test_sizer_uses_limit_per_kind(self) -> None:
        sizer = MessageSizer(max_paid_size=1000, max_free_size=10)
        message = {"title": "Lamp"}
        paid = sizer.message_size(message, paid=True)
        free = sizer.message_size(message, paid=False)
        self.assertEqual(paid.size, len(encode(message)))
        self.assertTrue(paid.fits)
        self.assertFalse(free.fits)


class SimulatedNetworkTests(unittest.IsolatedAsyncioTestCase):
    async def test_send_records_and_assigns_ids(self) -> None:
        network = SimulatedSmsgNetwork()
        first = await network.send(_params(), {"n": 1})
        second = await network.send(_params(), {"n": 1})
        self.assertNotEqual(first.msgid, second.msgid)
        self.assertEqual([item.msgid for item in network.sent], [first.msgid, second.msgid])

    async def test_estimate_flag_sends_nothing(self) -> None:
        network = SimulatedSmsgNetwork()
        receipt = await network.send(_params(estimate_fee=True), {"n": 1})
        self.assertEqual(receipt.msgid, "")
        self.assertGreater(receipt.fee, 0)
        self.assertEqual(network.sent, [])

    async def test_injected_failure(self) -> None:
        network = SimulatedSmsgNetwork(fail_when=lambda message: message.get("fail", False))
        with self.assertRaises(TransientSendError):
            await network.send(_params(), {"fail": True})
        self.assertEqual(network.sent, [])
        self.assertEqual(network.attempts, 1)

    async def test_free_messages_cost_nothing(self) -> None:
        self.assertEqual(estimate_fee(_params(paid_message=False), 5000), 0.0)
        self.assertGreater(estimate_fee(_params(days_retention=90), 5000), estimate_fee(_params(), 5000))
        network = SimulatedSmsgNetwork()
        self.assertEqual(await network.estimate_fee(_params(paid_message=False), {"n": 1}), 0.0)


if __name__ == "__main__":
    unittest.main()
