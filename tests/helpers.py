"""
Test doubles shared across test modules.
"""
from datetime import datetime, timedelta, timezone
from src.services.random_source import RandomSource


BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class ScriptedRandomSource(RandomSource):
    """RandomSource whose draws are fixed by the test."""

    def __init__(self, client="Acme Corporation", amount=500, delay_ms=20000, outcomes=None):
        super().__init__(seed=0)
        self.client = client
        self.amount = amount
        self.delay_ms = delay_ms
        self.outcomes = list(outcomes or [])

    def client_name(self):
        return self.client

    def amount_cents(self):
        return self.amount

    def processing_delay_ms(self, min_ms, max_ms):
        return self.delay_ms

    def processing_succeeded(self, success_rate):
        return self.outcomes.pop(0) if self.outcomes else True


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start=BASE_TIME):
        self.now = start

    def __call__(self):
        return self.now

    def tick(self, seconds):
        self.now = self.now + timedelta(seconds=seconds)
