"""Domain models for the wallet core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DerivationPath:
    """BIP44-style derivation path components."""

    purpose: int = 44
    coin_type: int = 44
    account: int = 0
    change: int = 0
    address_index: int = 0

    def to_string(self) -> str:
        return (
            f"m/{self.purpose}'/{self.coin_type}'/"
            f"{self.account}'/{self.change}/{self.address_index}"
        )


@dataclass(frozen=True)
class DerivedAddress:
    address: str
    derivation_path: str
