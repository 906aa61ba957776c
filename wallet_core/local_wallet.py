"""In-process wallet capability with deterministic address derivation."""

from typing import Callable, Dict, Optional, Tuple
import hashlib
import hmac
import secrets

from market_models.models import AddressType, PaymentAddress

from .models import DerivationPath, DerivedAddress

_NORMAL_CHAIN = 0
_STEALTH_CHAIN = 2

NORMAL_ADDRESS_LENGTH = 41
STEALTH_ADDRESS_LENGTH = 98


class LocalWallet:
    """Derives addresses from a per-wallet seed; keys never leave the process."""

    def __init__(self, entropy_provider: Optional[Callable[[int], bytes]] = None) -> None:
        self._entropy_provider = entropy_provider or secrets.token_bytes
        self._seeds: Dict[str, bytes] = {}
        self._next_index: Dict[Tuple[str, int], int] = {}
        self._derived: Dict[str, Tuple[DerivedAddress, ...]] = {}

    def create_wallet(self, wallet: str) -> str:
        if wallet in self._seeds:
            raise ValueError(f"Wallet already exists: {wallet}")
        self._seeds[wallet] = self._entropy_provider(32)
        self._derived[wallet] = ()
        return wallet

    def list_addresses(self, wallet: str) -> Tuple[DerivedAddress, ...]:
        self._require_seed(wallet)
        return self._derived[wallet]

    async def get_new_address(self, wallet: str) -> str:
        derived = self._derive(wallet, _NORMAL_CHAIN)
        return derived.address

    async def get_new_stealth_address(self, wallet: str) -> PaymentAddress:
        derived = self._derive(wallet, _STEALTH_CHAIN)
        return PaymentAddress(address=derived.address, address_type=AddressType.STEALTH)

    def _derive(self, wallet: str, change: int) -> DerivedAddress:
        seed = self._require_seed(wallet)
        index = self._next_index.get((wallet, change), 0)
        path = DerivationPath(change=change, address_index=index).to_string()
        private_key = _derive_private_key(seed, path)
        if change == _STEALTH_CHAIN:
            address = _stealth_address(private_key)
        else:
            address = _normal_address(private_key)
        derived = DerivedAddress(address=address, derivation_path=path)
        self._next_index[(wallet, change)] = index + 1
        self._derived[wallet] = self._derived[wallet] + (derived,)
        return derived

    def _require_seed(self, wallet: str) -> bytes:
        seed = self._seeds.get(wallet)
        if seed is None:
            raise KeyError(f"Unknown wallet: {wallet}")
        return seed


def _derive_private_key(seed: bytes, path: str) -> bytes:
    return hmac.new(seed, path.encode("utf-8"), hashlib.sha256).digest()


def _normal_address(private_key: bytes) -> str:
    return "p" + hashlib.sha256(private_key).hexdigest()[: NORMAL_ADDRESS_LENGTH - 1]


def _stealth_address(private_key: bytes) -> str:
    scan_key = hmac.new(private_key, b"scan", hashlib.sha256).hexdigest()
    spend_key = hmac.new(private_key, b"spend", hashlib.sha256).hexdigest()
    half = (STEALTH_ADDRESS_LENGTH - 2) // 2
    return "ps" + scan_key[:half] + spend_key[:half]
