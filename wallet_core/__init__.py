from .local_wallet import LocalWallet
from .models import DerivationPath, DerivedAddress
from .provisioner import AddressProvisioner, WalletCapability

__all__ = [
    "AddressProvisioner",
    "DerivationPath",
    "DerivedAddress",
    "LocalWallet",
    "WalletCapability",
]
