"""Infrastructure providers."""

# Import bases
from .kafka import KafkaProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .kafka import ProdKafkaProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "KafkaProvider",
    "PersistenceProvider",
    "ProdKafkaProvider",
    "ProdPersistenceProvider",
]
