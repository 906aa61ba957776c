"""Payment address provisioning per escrow scheme."""

import logging
from typing import Protocol

from market_models.errors import EscrowNotImplementedError
from market_models.models import AddressType, EscrowScheme, PaymentAddress

from .local_wallet import NORMAL_ADDRESS_LENGTH, STEALTH_ADDRESS_LENGTH

logger = logging.getLogger(__name__)


class WalletCapability(Protocol):
    async def get_new_address(self, wallet: str) -> str:
        ...

    async def get_new_stealth_address(self, wallet: str) -> PaymentAddress:
        ...


class AddressProvisioner:
    """Requests exactly one address from the wallet for a provisionable scheme.

    Wallet failures propagate unchanged.
    """

    def __init__(
        self,
        wallet: WalletCapability,
        normal_length: int = NORMAL_ADDRESS_LENGTH,
        stealth_length: int = STEALTH_ADDRESS_LENGTH,
    ) -> None:
        self._wallet = wallet
        self._normal_length = normal_length
        self._stealth_length = stealth_length

    async def provision(self, wallet_ref: str, scheme: EscrowScheme) -> PaymentAddress:
        logger.info("provisioning %s payment address", scheme.name)
        if scheme == EscrowScheme.MULTISIG:
            address = await self._wallet.get_new_address(wallet_ref)
            return PaymentAddress(address=address, address_type=AddressType.NORMAL)
        if scheme == EscrowScheme.CONFIDENTIAL:
            return await self._wallet.get_new_stealth_address(wallet_ref)
        raise EscrowNotImplementedError(scheme.name)

    def placeholder(self, scheme: EscrowScheme) -> PaymentAddress:
        """Address of the shape ``provision`` would return, without a wallet call."""

        if scheme == EscrowScheme.MULTISIG:
            return PaymentAddress(
                address="p" + "0" * (self._normal_length - 1), address_type=AddressType.NORMAL
            )
        if scheme == EscrowScheme.CONFIDENTIAL:
            return PaymentAddress(
                address="ps" + "0" * (self._stealth_length - 2), address_type=AddressType.STEALTH
            )
        raise EscrowNotImplementedError(scheme.name)
