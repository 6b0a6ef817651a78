"""
Unit tests for StatusSimulator.
Drives the transitions with a ManualScheduler and scripted randomness.
"""
import random
import pytest
from unittest.mock import Mock
from src.core import config
from src.models.invoice_model import InvoiceStatus
from src.services.random_source import RandomSource
from src.services.scheduler import ManualScheduler
from src.services.status_simulator import StatusSimulator
from tests.helpers import BASE_TIME, ScriptedRandomSource


@pytest.fixture
def make_simulator(repository, scheduler, clock):
    def _make(random_source=None):
        return StatusSimulator(
            repository=repository,
            scheduler=scheduler,
            random_source=random_source or ScriptedRandomSource(),
            clock=clock
        )
    return _make


class TestStatusSimulator:
    """Test suite for StatusSimulator."""
    
    def test_schedule_waits_start_delay(self, repository, scheduler, make_simulator, make_invoice):
        invoice = make_invoice()
        repository.put(invoice)
        simulator = make_simulator()
        
        simulator.schedule(invoice.id)
        
        assert len(scheduler.pending()) == 1
        assert scheduler.pending()[0].due == pytest.approx(1.0)
        scheduler.advance(0.999)
        assert invoice.status is InvoiceStatus.PENDING
    
    def test_start_moves_to_processing(self, repository, scheduler, clock, make_simulator, make_invoice):
        invoice = make_invoice()
        repository.put(invoice)
        simulator = make_simulator(ScriptedRandomSource(delay_ms=15000))
        
        simulator.schedule(invoice.id)
        clock.tick(1)
        scheduler.advance(1.0)
        
        assert invoice.status is InvoiceStatus.PROCESSING
        assert invoice.processing_start_time == clock.now
        assert invoice.processing_end_time is None
        
        finish = scheduler.pending()
        assert len(finish) == 1
        assert finish[0].due == pytest.approx(16.0)
    
    def test_finish_success(self, repository, scheduler, clock, make_simulator, make_invoice):
        invoice = make_invoice()
        repository.put(invoice)
        simulator = make_simulator(ScriptedRandomSource(outcomes=[True]))
        
        simulator.schedule(invoice.id)
        scheduler.run_all()
        
        assert invoice.status is InvoiceStatus.PROCESSED
        assert invoice.processing_end_time is not None
        assert simulator.pending_tasks() == {}
    
    def test_finish_failure_keeps_start_time(self, repository, scheduler, clock, make_simulator, make_invoice):
        invoice = make_invoice()
        repository.put(invoice)
        simulator = make_simulator(ScriptedRandomSource(delay_ms=30000, outcomes=[False]))
        
        simulator.schedule(invoice.id)
        clock.tick(1)
        scheduler.advance(1.0)
        started_at = invoice.processing_start_time
        
        clock.tick(30)
        scheduler.advance(30.0)
        
        assert invoice.status is InvoiceStatus.FAILED
        assert invoice.processing_start_time == started_at
        assert invoice.processing_end_time == clock.now
        assert invoice.processing_end_time > invoice.processing_start_time
    
    def test_start_for_missing_invoice_is_ignored(self, scheduler, make_simulator):
        simulator = make_simulator()
        simulator.schedule("ghost")
        
        assert scheduler.run_all() == 1
        assert scheduler.pending() == []
        assert simulator.pending_tasks() == {}
    
    def test_finish_for_missing_invoice_is_ignored(self, make_simulator):
        simulator = make_simulator()
        simulator.finish("ghost")
        assert simulator.pending_tasks() == {}
    
    def test_finish_rereads_store(self, repository, scheduler, make_simulator, make_invoice):
        invoice = make_invoice()
        repository.put(invoice)
        simulator = make_simulator()
        
        simulator.schedule(invoice.id)
        scheduler.advance(1.0)
        
        # The store's copy is replaced between Start and Finish
        replacement = make_invoice(id=invoice.id, status=InvoiceStatus.PROCESSING, processing_start_time=BASE_TIME)
        repository.put(replacement)
        scheduler.run_all()
        
        assert replacement.status is InvoiceStatus.PROCESSED
        assert invoice.status is InvoiceStatus.PROCESSING
    
    def test_writes_back_through_put(self, scheduler, make_invoice):
        invoice = make_invoice()
        repository = Mock()
        repository.get.return_value = invoice
        simulator = StatusSimulator(repository, scheduler, ScriptedRandomSource())
        
        simulator.schedule(invoice.id)
        scheduler.run_all()
        
        assert repository.put.call_count == 2
    
    def test_cancel_stops_pending_transition(self, repository, scheduler, make_simulator, make_invoice):
        invoice = make_invoice()
        repository.put(invoice)
        simulator = make_simulator()
        
        simulator.schedule(invoice.id)
        assert simulator.cancel(invoice.id) is True
        scheduler.run_all()
        
        assert invoice.status is InvoiceStatus.PENDING
        assert simulator.cancel(invoice.id) is False
    
    def test_shutdown_cancels_everything(self, repository, scheduler, make_simulator, make_invoice):
        invoices = [make_invoice() for _ in range(3)]
        for invoice in invoices:
            repository.put(invoice)
        simulator = make_simulator()
        for invoice in invoices:
            simulator.schedule(invoice.id)
        scheduler.advance(1.0)
        
        simulator.shutdown()
        scheduler.run_all()
        
        assert simulator.pending_tasks() == {}
        assert all(i.status is InvoiceStatus.PROCESSING for i in invoices)
    
    def test_uses_configured_delays(self, repository, scheduler, make_invoice):
        config.settings = config.Settings(processing_start_delay_ms=250, processing_min_ms=100, processing_max_ms=101)
        invoice = make_invoice()
        repository.put(invoice)
        simulator = StatusSimulator(repository, scheduler, RandomSource(seed=1))
        
        simulator.schedule(invoice.id)
        scheduler.advance(0.25)
        assert invoice.status is InvoiceStatus.PROCESSING
        assert scheduler.pending()[0].due == pytest.approx(0.35)
    
    def test_transitions_never_skip_or_regress(self, repository, make_invoice):
        """Random interleavings of many invoices only ever move forward."""
        scheduler = ManualScheduler()
        simulator = StatusSimulator(repository, scheduler, RandomSource(seed=42))
        invoices = [make_invoice() for _ in range(50)]
        for invoice in invoices:
            repository.put(invoice)
            simulator.schedule(invoice.id)
        
        order = [InvoiceStatus.PENDING, InvoiceStatus.PROCESSING]
        seen = {invoice.id: [InvoiceStatus.PENDING] for invoice in invoices}
        rng = random.Random(7)
        while scheduler.pending():
            scheduler.advance(rng.uniform(0.5, 5.0))
            for invoice in repository.list():
                if seen[invoice.id][-1] is not invoice.status:
                    seen[invoice.id].append(invoice.status)
                assert (invoice.processing_start_time is not None) == (invoice.status is not InvoiceStatus.PENDING)
                assert (invoice.processing_end_time is not None) == invoice.status.is_terminal
        
        for history in seen.values():
            assert history[:2] == order
            assert len(history) == 3
            assert history[2].is_terminal
