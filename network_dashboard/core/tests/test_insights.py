from datetime import date, datetime
from decimal import Decimal

import pytest

from network_dashboard.core.formatting import (
    format_currency,
    format_date,
    format_number,
    format_percentage,
)
from network_dashboard.core.insights import (
    capacity_utilisation,
    group_severity,
    movement_impact,
    summarize_issues,
)
from network_dashboard.data.backends.mock_backend import MockDataAccess
from network_dashboard.data.models import IssueGroup


@pytest.mark.parametrize(
    "amount, expected",
    [
        (12500, "$12,500"),
        (Decimal("47950"), "$47,950"),
        (1234.5, "$1,234.5"),
        (0, "$0"),
        (-4200, "-$4,200"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_number_date_and_percentage():
    assert format_number(1250) == "1,250"
    assert format_date(datetime(2024, 11, 1)) == "Nov 1, 2024"
    assert format_date(date(2024, 11, 15)) == "Nov 15, 2024"
    assert format_date("2024-11-06") == "Nov 6, 2024"
    assert format_percentage(94.23) == "94.2%"
    assert format_percentage(87.5, decimals=0) == "88%"


def test_issue_group_severity():
    order, inbound, inventory = MockDataAccess().list_issue_groups()
    assert group_severity(order) == "medium"
    assert group_severity(inbound) == "high"
    assert group_severity(inventory) == "high"
    assert group_severity(IssueGroup(title="Empty", affected_kind="orders")) == "low"


def test_summarize_issues():
    summaries = summarize_issues(MockDataAccess().list_issue_groups())
    assert [s.title for s in summaries] == ["Order Issues", "Inbound Issues", "Inventory Issues"]
    order = summaries[0]
    assert (order.count, order.affected, order.label) == (5, 23, "Moderate priority issues")


def test_capacity_utilisation():
    centers = {dc.id: dc for dc in MockDataAccess().list_distribution_centers()}
    assert capacity_utilisation(centers["dc-la-001"]) == pytest.approx(112.0)
    assert capacity_utilisation(centers["dc-sea-001"]) == pytest.approx(68.0)


def test_movement_impact():
    impact = movement_impact(MockDataAccess().list_movements())
    assert impact.pending_count == 3
    assert impact.pending_savings == Decimal("37000")
    assert impact.high_priority_pending == 2
    assert impact.approved_savings == Decimal("10950")
