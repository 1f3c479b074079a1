"""Infrastructure DI providers."""

from vouch.util.di.infrastructure.crypto import ProdCryptoProvider
from vouch.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "PersistenceProvider",
    "ProdCryptoProvider",
    "ProdPersistenceProvider",
]
