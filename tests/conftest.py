"""
Shared test fixtures and utilities.
"""
import pytest
from datetime import timedelta
from src.core import config
from src.models.invoice_model import Invoice, InvoiceStatus
from src.repositories.memory_invoice_repository import InMemoryInvoiceRepository
from src.services.scheduler import ManualScheduler
from tests.helpers import BASE_TIME, FakeClock


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch, tmp_path):
    """Fresh settings per test with uploads written to a temp directory."""
    upload_dir = str(tmp_path / "uploads")
    monkeypatch.setenv("UPLOAD_DIR", upload_dir)
    monkeypatch.setenv("STORAGE_BACKEND", "local")
    config.settings = config.Settings(upload_dir=upload_dir, storage_backend="local")
    yield
    monkeypatch.undo()
    config.settings = config.Settings()


@pytest.fixture
def repository():
    return InMemoryInvoiceRepository()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_invoice():
    """Factory for invoices with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "id": f"inv-{n}",
            "file_name": f"invoice_{n}.pdf",
            "file_size": 1024,
            "client_name": "Acme Corporation",
            "amount": 500,
            "file_path": f"uploads/inv-{n}.pdf",
            "upload_date": BASE_TIME + timedelta(minutes=n),
            "status": InvoiceStatus.PENDING,
        }
        fields.update(overrides)
        return Invoice(**fields)

    return _make
