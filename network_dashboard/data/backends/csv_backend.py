from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from ...config import get_config
from ...logging import get_logger
from ..interface import DataAccess
from ..models import DistributionCenter, Issue, IssueGroup, Movement

logger = get_logger(__name__)

MOVEMENT_DATE_COLUMNS = ["created_at", "required_by", "approved_at"]
MOVEMENT_TEXT_COLUMNS = {"id": str, "sku": str, "estimated_savings": str, "category": str}


@dataclass
class _Tables:
    distribution_centers: pd.DataFrame
    movements: pd.DataFrame
    issues: pd.DataFrame


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    # Blank cells arrive as NaN/NaT; models expect None
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


class CsvDataAccess(DataAccess):
    """
    CSV-backed seed data.
    - Loads CSVs from `data_dir` once at construction.
    - Every call builds fresh models from the loaded frames, so the movement
      store never shares state with the source.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        if data_dir is None:
            config = get_config()
            data_dir = config.data_dir

        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            self.data_dir = (repo_root or current) / self.data_dir

        self._tables = self._load_tables(self.data_dir)
        logger.info(
            f"Loaded {len(self._tables.movements)} movements and "
            f"{len(self._tables.distribution_centers)} distribution centers from {self.data_dir}"
        )

    # ---------- loading helpers ----------

    @staticmethod
    def _load_tables(data_dir: Path) -> _Tables:
        if not data_dir.exists():
            raise FileNotFoundError(
                f"Data directory not found: {data_dir}\n"
                f"Please either:\n"
                f"  1. Set DATA_BACKEND=mock to use the built-in seed data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

        required_files = ["distribution_centers.csv", "movements.csv"]
        missing_files = [f for f in required_files if not (data_dir / f).exists()]

        if missing_files:
            raise FileNotFoundError(
                f"Required CSV files missing in {data_dir}:\n"
                f"  Missing: {', '.join(missing_files)}\n"
                f"  Expected files: {', '.join(required_files)}"
            )

        try:
            distribution_centers = pd.read_csv(data_dir / "distribution_centers.csv", dtype={"id": str, "code": str})
            movements = pd.read_csv(
                data_dir / "movements.csv",
                dtype=MOVEMENT_TEXT_COLUMNS,
                parse_dates=MOVEMENT_DATE_COLUMNS,
            )

            # Issues are optional
            issues = pd.DataFrame()
            if (data_dir / "issues.csv").exists():
                issues = pd.read_csv(data_dir / "issues.csv", dtype={"estimated_resolution": str})

        except Exception as e:
            raise RuntimeError(
                f"Error reading CSV files from {data_dir}: {e}\n"
                f"Please check that the CSV files are valid and readable."
            ) from e

        return _Tables(
            distribution_centers=distribution_centers,
            movements=movements,
            issues=issues,
        )

    # ---------- interface implementation ----------

    def list_distribution_centers(self) -> List[DistributionCenter]:
        return [DistributionCenter(**row) for row in _records(self._tables.distribution_centers)]

    def list_movements(self) -> List[Movement]:
        return [Movement(**row) for row in _records(self._tables.movements)]

    def list_issue_groups(self) -> List[IssueGroup]:
        if self._tables.issues.empty:
            return []

        groups = []
        for (title, kind), frame in self._tables.issues.groupby(["group", "affected_kind"], sort=False):
            rows = _records(frame.drop(columns=["group", "affected_kind"]))
            groups.append(IssueGroup(title=title, affected_kind=kind, issues=[Issue(**row) for row in rows]))
        return groups
