import asyncio
import unittest

from market_models.errors import InvalidParameterError
from market_models.models import Identity, Venue, VenueType
from message_orchestrator.lifecycle import DraftLifecycle, DraftState, LifecycleTransitionError
from message_orchestrator.locks import KeyedLock
from message_orchestrator.routing import resolve_route


class LifecycleTests(unittest.TestCase):
    def test_forward_transitions_are_recorded(self) -> None:
        lifecycle = DraftLifecycle(1, DraftState.UNPRICED)
        for state in (DraftState.PRICED, DraftState.FROZEN, DraftState.POSTING, DraftState.POSTED):
            lifecycle.advance(state)
        self.assertEqual(lifecycle.state, DraftState.POSTED)
        self.assertEqual(len(lifecycle.history), 5)

    def test_backward_transition_rejected(self) -> None:
        lifecycle = DraftLifecycle(1, DraftState.FROZEN)
        with self.assertRaises(LifecycleTransitionError):
            lifecycle.advance(DraftState.PRICED)

    def test_terminal_state_is_final(self) -> None:
        lifecycle = DraftLifecycle(1, DraftState.POSTING)
        lifecycle.advance(DraftState.POST_FAILED)
        with self.assertRaises(LifecycleTransitionError):
            lifecycle.advance(DraftState.POSTED)


class KeyedLockTests(unittest.IsolatedAsyncioTestCase):
    async def test_same_key_is_serialized(self) -> None:
        locks = KeyedLock()
        order = []

        async def worker(name: str) -> None:
            async with locks.hold("draft-1"):
                order.append(f"{name}-in")
                await asyncio.sleep(0)
                order.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))
        self.assertEqual(order, ["a-in", "a-out", "b-in", "b-out"])
        self.assertEqual(len(locks), 0)

    async def test_different_keys_do_not_block(self) -> None:
        locks = KeyedLock()
        async with locks.hold(1):
            self.assertTrue(locks.locked(1))
            self.assertFalse(locks.locked(2))
            async with locks.hold(2):
                self.assertEqual(len(locks), 2)
        self.assertFalse(locks.locked(1))


class RoutingTests(unittest.TestCase):
    def _venue(self, venue_type: VenueType, publish: str, receive: str) -> Venue:
        return Venue(
            venue_id=1,
            name="venue",
            venue_type=venue_type,
            receive_address=receive,
            publish_address=publish,
            identity=Identity(identity_id=1, wallet="w", address="pId"),
        )

    def test_storefront_may_use_distinct_addresses(self) -> None:
        route = resolve_route(self._venue(VenueType.STOREFRONT, "pPub", "pRecv"))
        self.assertEqual(route.from_address, "pPub")
        self.assertEqual(route.to_address, "pRecv")

    def test_empty_address_rejected(self) -> None:
        with self.assertRaises(InvalidParameterError):
            resolve_route(self._venue(VenueType.STOREFRONT, "", "pRecv"))


if __name__ == "__main__":
    unittest.main()
