from __future__ import annotations

from typing import Literal, Optional

from ..config import get_config
from .backends.csv_backend import CsvDataAccess
from .backends.mock_backend import MockDataAccess
from .interface import DataAccess


def get_data_access(kind: Optional[Literal["mock", "csv"]] = None) -> DataAccess:
    kind = kind or get_config().data_backend
    if kind == "mock":
        return MockDataAccess()
    if kind == "csv":
        # Reads from configured CSV folder
        config = get_config()
        return CsvDataAccess(data_dir=config.data_dir)
    raise ValueError(f"Unknown data access kind: {kind}")
