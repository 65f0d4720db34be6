import csv
from datetime import date

import pytest
from loguru import logger

from network_dashboard.config import set_config_for_test
from network_dashboard.core.export import (
    EXPORT_COLUMNS,
    default_export_filename,
    export_movements_csv,
    export_movements_to_csv,
    format_movements_for_export,
    to_csv_text,
)
from network_dashboard.core.locations import LocationDirectory
from network_dashboard.data.backends.mock_backend import MockDataAccess


@pytest.fixture(autouse=True)
def quiet_config():
    set_config_for_test(log_level="WARNING")


@pytest.fixture
def data():
    return MockDataAccess()


@pytest.fixture
def locations(data):
    return LocationDirectory(data.list_distribution_centers())


def test_five_movements_make_six_quoted_lines(data, locations):
    text = export_movements_csv(data.list_movements(), locations)
    lines = text.split("\n")
    assert len(lines) == 6
    for line in lines:
        fields = next(csv.reader([line]))
        assert len(fields) == 12
        assert line.startswith('"') and line.endswith('"')
        assert line.count('","') == 11


def test_header_row(data, locations):
    text = export_movements_csv(data.list_movements(), locations)
    assert text.split("\n")[0] == ",".join(f'"{label}"' for label in EXPORT_COLUMNS)


def test_record_values(data, locations):
    first = format_movements_for_export(data.list_movements()[:1], locations)[0]
    assert first["Origin DC"] == "Chicago DC"
    assert first["Destination DC"] == "Los Angeles DC"
    assert first["Category"] == "demand-balancing"

    text = export_movements_csv(data.list_movements()[:1], locations)
    row = next(csv.reader([text.split("\n")[1]]))
    assert row == [
        "mov-001", "DHL-8834-XL", "Rebalance high-demand SKU to meet seasonal demand",
        "pending", "high", "demand-balancing", "Chicago DC", "Los Angeles DC",
        "150", "12500", "2024-11-01T00:00:00", "2024-11-10T00:00:00",
    ]


def test_missing_category_exports_as_not_available(data, locations):
    movement = data.list_movements()[0].model_copy(update={"category": None})
    assert format_movements_for_export([movement], locations)[0]["Category"] == "N/A"


def test_quotes_are_doubled_and_nulls_are_empty():
    text = to_csv_text([{"note": 'Move "fragile" goods', "extra": None}])
    assert text == '"note","extra"\n"Move ""fragile"" goods",""'


def test_no_records_serialize_to_empty_text():
    assert to_csv_text([]) == ""
    assert to_csv_text([], columns=["ID", "SKU"]) == ""


def test_default_filename_embeds_date():
    assert default_export_filename(date(2024, 11, 5)) == "inventory-movements-2024-11-05.csv"


def test_empty_projection_writes_nothing(tmp_path, locations):
    warnings = []
    handler_id = logger.add(warnings.append, level="WARNING")
    try:
        assert export_movements_to_csv([], locations, directory=tmp_path) is None
    finally:
        logger.remove(handler_id)
    assert list(tmp_path.iterdir()) == []
    assert any("No data to export" in message for message in warnings)


def test_export_writes_file(tmp_path, data, locations):
    movements = data.list_movements()
    path = export_movements_to_csv(movements, locations, filename="out.csv", directory=tmp_path)
    assert path == tmp_path / "out.csv"
    assert path.read_text(encoding="utf-8") == export_movements_csv(movements, locations)
