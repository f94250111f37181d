import pytest

from academics.policy import AcademicPolicy

from .fakes import InMemoryAcademicStore, InMemoryBookingStore


@pytest.fixture
def policy():
    return AcademicPolicy()


@pytest.fixture
def store():
    return InMemoryAcademicStore()


@pytest.fixture
def booking_store():
    return InMemoryBookingStore()
