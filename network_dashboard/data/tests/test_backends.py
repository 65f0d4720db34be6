import asyncio
from decimal import Decimal

import pandas as pd
import pytest

from network_dashboard.config import set_config_for_test
from network_dashboard.data.backends.csv_backend import CsvDataAccess
from network_dashboard.data.backends.mock_backend import MockDataAccess
from network_dashboard.data.backends.simulated import SimulatedMovementBackend
from network_dashboard.data.util import get_data_access


@pytest.fixture(autouse=True)
def quiet_config():
    set_config_for_test(log_level="WARNING")


def write_seed_csvs(data_dir, with_issues=True):
    """Dump the mock seed data into the CSV layout CsvDataAccess expects."""
    mock = MockDataAccess()
    pd.DataFrame([dc.model_dump() for dc in mock.list_distribution_centers()]).to_csv(
        data_dir / "distribution_centers.csv", index=False
    )
    pd.DataFrame([m.model_dump() for m in mock.list_movements()]).to_csv(data_dir / "movements.csv", index=False)
    if with_issues:
        rows = [
            {"group": group.title, "affected_kind": group.affected_kind, **issue.model_dump()}
            for group in mock.list_issue_groups()
            for issue in group.issues
        ]
        pd.DataFrame(rows).to_csv(data_dir / "issues.csv", index=False)


def test_mock_backend_counts():
    data = MockDataAccess()
    assert len(data.list_distribution_centers()) == 6
    assert [m.id for m in data.list_movements()] == ["mov-001", "mov-002", "mov-003", "mov-004", "mov-005"]
    assert [g.title for g in data.list_issue_groups()] == ["Order Issues", "Inbound Issues", "Inventory Issues"]


def test_mock_backend_hands_out_copies():
    data = MockDataAccess()
    movements = data.list_movements()
    movements[0].status = "approved"
    movements.pop()
    fresh = data.list_movements()
    assert fresh[0].status == "pending"
    assert len(fresh) == 5


def test_movement_id_is_immutable():
    movement = MockDataAccess().list_movements()[0]
    with pytest.raises(ValueError):
        movement.id = "mov-999"


def test_csv_backend_loads_seed_files(tmp_path):
    write_seed_csvs(tmp_path)
    data = CsvDataAccess(data_dir=tmp_path)
    expected = MockDataAccess()

    movements = data.list_movements()
    assert [m.id for m in movements] == [m.id for m in expected.list_movements()]
    first = movements[0]
    assert first.estimated_savings == Decimal("12500")
    assert first.quantity == 150
    assert first.category == "demand-balancing"
    assert first.created_at == expected.list_movements()[0].created_at
    assert all(m.approved_at is None for m in movements)

    centers = data.list_distribution_centers()
    assert [dc.name for dc in centers] == [dc.name for dc in expected.list_distribution_centers()]

    groups = data.list_issue_groups()
    assert [(g.title, g.affected_kind, len(g.issues)) for g in groups] == [
        ("Order Issues", "orders", 5),
        ("Inbound Issues", "shipments", 5),
        ("Inventory Issues", "SKUs", 5),
    ]


def test_csv_backend_without_issue_file(tmp_path):
    write_seed_csvs(tmp_path, with_issues=False)
    assert CsvDataAccess(data_dir=tmp_path).list_issue_groups() == []


def test_csv_backend_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvDataAccess(data_dir=tmp_path / "nope")


def test_csv_backend_missing_movements(tmp_path):
    write_seed_csvs(tmp_path)
    (tmp_path / "movements.csv").unlink()
    with pytest.raises(FileNotFoundError, match="movements.csv"):
        CsvDataAccess(data_dir=tmp_path)


def test_get_data_access_uses_config(tmp_path):
    write_seed_csvs(tmp_path)
    set_config_for_test(data_backend="csv", data_dir=str(tmp_path), log_level="WARNING")
    assert isinstance(get_data_access(), CsvDataAccess)
    assert isinstance(get_data_access("mock"), MockDataAccess)
    with pytest.raises(ValueError):
        get_data_access("warehouse")


def test_simulated_backend_uses_configured_delays():
    set_config_for_test(approve_delay_ms=7, reject_delay_ms=9, log_level="WARNING")
    backend = SimulatedMovementBackend()
    assert (backend.approve_delay_ms, backend.reject_delay_ms) == (7, 9)
    asyncio.run(backend.approve("mov-001"))
    asyncio.run(backend.reject("mov-001"))
