"""
In-memory seed data for the network dashboard.

Six distribution centers, five suggested movements and three issue groups.
Every call hands out deep copies so the movement store can mutate its
collection without touching the seed.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import List

from ..interface import DataAccess
from ..models import DistributionCenter, Issue, IssueGroup, Movement

DISTRIBUTION_CENTERS = [
    DistributionCenter(
        id="dc-ny-001", name="New York DC", code="NY001",
        latitude=40.7128, longitude=-74.0060, status="healthy",
        capacity=95, max_capacity=100, orders=1250, issues=0,
        address="123 Industrial Blvd, Queens, NY 11101", manager="Sarah Johnson",
    ),
    DistributionCenter(
        id="dc-chi-001", name="Chicago DC", code="CHI001",
        latitude=41.8781, longitude=-87.6298, status="warning",
        capacity=87, max_capacity=100, orders=890, issues=3,
        address="456 Logistics Way, Chicago, IL 60601", manager="Michael Chen",
    ),
    DistributionCenter(
        id="dc-la-001", name="Los Angeles DC", code="LA001",
        latitude=34.0522, longitude=-118.2437, status="critical",
        capacity=112, max_capacity=100, orders=1450, issues=8,
        address="789 Port Ave, Los Angeles, CA 90021", manager="Jennifer Rodriguez",
    ),
    DistributionCenter(
        id="dc-dal-001", name="Dallas DC", code="DAL001",
        latitude=32.7767, longitude=-96.7970, status="healthy",
        capacity=78, max_capacity=100, orders=675, issues=1,
        address="321 Freight Rd, Dallas, TX 75201", manager="Robert Wilson",
    ),
    DistributionCenter(
        id="dc-atl-001", name="Atlanta DC", code="ATL001",
        latitude=33.7490, longitude=-84.3880, status="warning",
        capacity=92, max_capacity=100, orders=1100, issues=2,
        address="654 Distribution Dr, Atlanta, GA 30309", manager="Lisa Thompson",
    ),
    DistributionCenter(
        id="dc-sea-001", name="Seattle DC", code="SEA001",
        latitude=47.6062, longitude=-122.3321, status="healthy",
        capacity=68, max_capacity=100, orders=520, issues=0,
        address="987 Harbor St, Seattle, WA 98101", manager="Kevin Park",
    ),
]

MOVEMENTS = [
    Movement(
        id="mov-001", sku="DHL-8834-XL",
        description="Rebalance high-demand SKU to meet seasonal demand",
        status="pending", origin_dc="dc-chi-001", destination_dc="dc-la-001",
        quantity=150, estimated_savings=Decimal("12500"), priority="high",
        created_at=datetime(2024, 11, 1), required_by=datetime(2024, 11, 10),
        category="demand-balancing",
    ),
    Movement(
        id="mov-002", sku="DHL-2156-MD",
        description="Seasonal inventory adjustment for Q4 preparation",
        status="approved", origin_dc="dc-ny-001", destination_dc="dc-atl-001",
        quantity=89, estimated_savings=Decimal("6750"), priority="medium",
        created_at=datetime(2024, 10, 28), required_by=datetime(2024, 11, 15),
        category="seasonal-adjustment",
    ),
    Movement(
        id="mov-003", sku="DHL-9944-SM",
        description="Overflow capacity management to optimize storage",
        status="pending", origin_dc="dc-sea-001", destination_dc="dc-dal-001",
        quantity=205, estimated_savings=Decimal("8900"), priority="low",
        created_at=datetime(2024, 11, 2), required_by=datetime(2024, 11, 20),
        category="capacity-optimization",
    ),
    Movement(
        id="mov-004", sku="DHL-3367-LG",
        description="Critical shortage replenishment for key customer",
        status="pending", origin_dc="dc-dal-001", destination_dc="dc-la-001",
        quantity=75, estimated_savings=Decimal("15600"), priority="high",
        created_at=datetime(2024, 11, 3), required_by=datetime(2024, 11, 8),
        category="shortage-replenishment",
    ),
    Movement(
        id="mov-005", sku="DHL-7728-XS",
        description="Cost optimization transfer to reduce handling fees",
        status="approved", origin_dc="dc-atl-001", destination_dc="dc-chi-001",
        quantity=120, estimated_savings=Decimal("4200"), priority="medium",
        created_at=datetime(2024, 10, 30), required_by=datetime(2024, 11, 12),
        category="cost-optimization",
    ),
]


def _issue(id: str, description: str, severity: str, affected: int, resolution: str) -> Issue:
    return Issue(
        id=id, description=description, severity=severity,
        affected=affected, estimated_resolution=date.fromisoformat(resolution),
    )


ISSUE_GROUPS = [
    IssueGroup(title="Order Issues", affected_kind="orders", issues=[
        _issue("ord-001", "Delayed shipment to Los Angeles DC due to carrier issues", "high", 15, "2024-11-06"),
        _issue("ord-002", "Missing documentation for SKU DHL-8834", "medium", 3, "2024-11-05"),
        _issue("ord-003", "Customer complaint - wrong item delivered", "medium", 1, "2024-11-05"),
        _issue("ord-004", "Payment processing error for Order #45621", "low", 1, "2024-11-07"),
        _issue("ord-005", "Address validation failed for 3 orders", "medium", 3, "2024-11-06"),
    ]),
    IssueGroup(title="Inbound Issues", affected_kind="shipments", issues=[
        _issue("inb-001", "Chicago DC receiving dock capacity exceeded", "high", 8, "2024-11-08"),
        _issue("inb-002", "Quality control inspection backlog", "high", 12, "2024-11-07"),
        _issue("inb-003", "Supplier delay from Manufacturing Partner A", "medium", 5, "2024-11-10"),
        _issue("inb-004", "Temperature-sensitive items require immediate processing", "high", 3, "2024-11-05"),
        _issue("inb-005", "Customs clearance pending for international shipment", "medium", 2, "2024-11-09"),
    ]),
    IssueGroup(title="Inventory Issues", affected_kind="SKUs", issues=[
        _issue("inv-001", "Stock-out risk for DHL-3367-LG in Los Angeles", "high", 1, "2024-11-06"),
        _issue("inv-002", "Overstock situation in Seattle DC for seasonal items", "medium", 4, "2024-11-15"),
        _issue("inv-003", "Inventory discrepancy found during cycle count", "medium", 2, "2024-11-08"),
        _issue("inv-004", "Expired items need immediate removal from Dallas DC", "high", 3, "2024-11-05"),
        _issue("inv-005", "Safety stock levels below threshold for 8 SKUs", "high", 8, "2024-11-07"),
    ]),
]


class MockDataAccess(DataAccess):
    """Serves the built-in seed data from memory."""

    def list_distribution_centers(self) -> List[DistributionCenter]:
        return [dc.model_copy(deep=True) for dc in DISTRIBUTION_CENTERS]

    def list_movements(self) -> List[Movement]:
        return [m.model_copy(deep=True) for m in MOVEMENTS]

    def list_issue_groups(self) -> List[IssueGroup]:
        return [group.model_copy(deep=True) for group in ISSUE_GROUPS]
