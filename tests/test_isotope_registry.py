import threading

import pytest

from chemdesc.core.domain.models import Atom
from chemdesc.core.services.isotope_registry import IsotopeRegistry
from chemdesc.exceptions import NotFoundError, ReferenceDataError
from chemdesc.infrastructure.repositories.isotope_table_repository import (
    IsotopeTableRepository,
)


def test_isotope_registry():
    registry = IsotopeRegistry.get_instance()
    assert registry.size() > 0
    assert len(registry) == registry.size()

    isotope = registry.get_major_isotope("Te")
    assert isotope.exact_mass == 129.906229
    assert isotope.mass_number == 130

    isotope = registry.get_major_isotope(17)
    assert isotope.symbol == "Cl"


def test_element_lookup():
    registry = IsotopeRegistry.get_instance()
    assert registry.get_element("Br").atomic_number == 35


def test_lookups_are_idempotent():
    registry = IsotopeRegistry.get_instance()
    assert IsotopeRegistry.get_instance() is registry
    assert registry.get_major_isotope("Te") is registry.get_major_isotope("Te")
    assert registry.get_major_isotope(6) is registry.get_entry_by_symbol("C")


def test_missing_entries():
    registry = IsotopeRegistry.get_instance()
    with pytest.raises(NotFoundError):
        registry.get_entry_by_symbol("Xx")
    with pytest.raises(NotFoundError):
        registry.get_entry_by_atomic_number(999)
    with pytest.raises(TypeError):
        registry.get_major_isotope(1.0)


def test_isotopes_in_mass_order():
    masses = [entry.mass_number for entry in IsotopeRegistry.get_instance().get_isotopes("Te")]
    assert masses == sorted(masses)


def test_configure_atom():
    atom = Atom("Cl")
    IsotopeRegistry.get_instance().configure(atom)
    assert atom.atomic_number == 17
    assert atom.exact_mass == 34.968852721

    labelled = Atom("C", exact_mass=13.003354838)
    IsotopeRegistry.get_instance().configure(labelled)
    assert labelled.exact_mass == 13.003354838


def test_concurrent_first_access_loads_once(monkeypatch):
    monkeypatch.setattr(IsotopeRegistry, "_instance", None)
    loads = []
    original_get = IsotopeTableRepository.get

    def counting_get(self, id="isotopes"):
        loads.append(id)
        return original_get(self, id)

    monkeypatch.setattr(IsotopeTableRepository, "get", counting_get)

    barrier = threading.Barrier(8)
    seen = []

    def worker():
        barrier.wait()
        seen.append(IsotopeRegistry.get_instance())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(loads) == 1
    assert all(instance is seen[0] for instance in seen)
    assert seen[0].size() > 0


def test_registry_from_custom_table(tmp_path):
    (tmp_path / "mini.csv").write_text(
        "symbol,atomic_number,mass_number,exact_mass,natural_abundance\n"
        "X,200,400,400.1,40.0\n"
        "X,200,401,401.1,60.0\n"
    )
    registry = IsotopeRegistry(IsotopeTableRepository(tmp_path), table="mini")
    assert registry.size() == 2
    assert registry.get_major_isotope("X").mass_number == 401


def test_malformed_table(tmp_path):
    (tmp_path / "broken.csv").write_text("symbol,exact_mass\nC,12.0\n")
    with pytest.raises(ReferenceDataError):
        IsotopeRegistry(IsotopeTableRepository(tmp_path), table="broken")


def test_missing_table(tmp_path):
    with pytest.raises(NotFoundError):
        IsotopeRegistry(IsotopeTableRepository(tmp_path), table="absent")


def test_failed_first_load_is_retried(monkeypatch):
    monkeypatch.setattr(IsotopeRegistry, "_instance", None)
    original_get = IsotopeTableRepository.get
    calls = []

    def flaky_get(self, id="isotopes"):
        calls.append(id)
        if len(calls) == 1:
            raise ReferenceDataError("isotope table temporarily unreadable")
        return original_get(self, id)

    monkeypatch.setattr(IsotopeTableRepository, "get", flaky_get)

    with pytest.raises(ReferenceDataError):
        IsotopeRegistry.get_instance()
    assert IsotopeRegistry._instance is None

    registry = IsotopeRegistry.get_instance()
    assert registry.size() > 0
    assert IsotopeRegistry.get_instance() is registry
    assert len(calls) == 2
