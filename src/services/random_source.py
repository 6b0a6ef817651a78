"""
Seedable source of the mock values assigned to invoices.
"""
import random
from typing import Optional, Sequence

MOCK_CLIENTS = (
    "Acme Corporation",
    "TechFlow Solutions",
    "Global Dynamics",
    "Innovate Industries",
    "NextGen Systems",
    "Prime Enterprises",
    "Digital Horizons",
    "Strategic Partners",
    "Future Ventures",
    "Elite Services",
)

MIN_AMOUNT_CENTS = 100
MAX_AMOUNT_CENTS = 10099


class RandomSource:
    """Wraps a random.Random so every mock draw can be seeded or scripted."""
    
    def __init__(self, seed: Optional[int] = None, clients: Sequence[str] = MOCK_CLIENTS):
        self._random = random.Random(seed)
        self.clients = tuple(clients)
    
    def client_name(self) -> str:
        return self._random.choice(self.clients)
    
    def amount_cents(self) -> int:
        """Amount in [100, 10099] cents."""
        return self._random.randint(MIN_AMOUNT_CENTS, MAX_AMOUNT_CENTS)
    
    def processing_delay_ms(self, min_ms: int, max_ms: int) -> int:
        """Delay drawn uniformly from [min_ms, max_ms)."""
        return self._random.randrange(min_ms, max_ms)
    
    def processing_succeeded(self, success_rate: float) -> bool:
        return self._random.random() < success_rate
