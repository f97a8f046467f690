"""Shared fixtures for controller and UI tests."""
from datetime import date, timedelta
from pathlib import Path

from app.app_state import AppState
from app.services.app_config import AppConfig
from core.records import RecordStore

TODAY = date(2025, 5, 19)


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_store(count=3, start=date(2025, 4, 23), weights=None):
    store = RecordStore()
    weights = weights or [90.1, 89.9, 90.5, 90.1, 89.9]
    for i in range(count):
        store.append(start + timedelta(days=i), weights[i % len(weights)])
    return store


def make_state(store=None, clock=None):
    config = AppConfig(data_path=Path("unused.csv"))
    return AppState(
        store if store is not None else make_store(),
        config,
        clock=clock or FakeClock(),
        today=lambda: TODAY,
    )
