import asyncio

import pytest

from network_dashboard.config import set_config_for_test
from network_dashboard.core.dashboard import DashboardContext
from network_dashboard.core.locations import LocationDirectory
from network_dashboard.core.movement_store import MovementStore
from network_dashboard.data.backends.mock_backend import MockDataAccess


class FailingBackend:
    async def approve(self, movement_id):
        raise RuntimeError("service unavailable")

    async def reject(self, movement_id):
        raise RuntimeError("service unavailable")


@pytest.fixture(autouse=True)
def fast_config():
    set_config_for_test(approve_delay_ms=1, reject_delay_ms=1, log_level="WARNING")


@pytest.fixture
def ctx():
    return DashboardContext.from_data_access(MockDataAccess())


def last(ctx):
    return ctx.notifications.notifications[-1]


def test_approve_reports_success(ctx):
    result = asyncio.run(ctx.approve("mov-001"))
    assert result.success
    assert (last(ctx).severity, last(ctx).message) == ("success", "Movement approved successfully")


def test_reject_reports_warning(ctx):
    asyncio.run(ctx.reject("mov-003"))
    assert (last(ctx).severity, last(ctx).message) == ("warning", "Movement rejected and removed")
    assert ctx.store.get("mov-003") is None


def test_failures_report_errors():
    ctx = DashboardContext.from_data_access(MockDataAccess(), backend=FailingBackend())
    result = asyncio.run(ctx.approve("mov-001"))
    assert not result.success
    assert (last(ctx).severity, last(ctx).message) == ("error", "service unavailable")
    assert ctx.store.get("mov-001").status == "pending"


def test_notifications_stay_capped_across_actions(ctx):
    for movement_id in ["mov-001", "mov-003", "mov-004", "missing"]:
        asyncio.run(ctx.approve(movement_id))
    assert len(ctx.notifications) == 3
    assert last(ctx).message == "Movement not found"


def test_show_details_pushes_sticky_info(ctx):
    ctx.show_details(ctx.store.get("mov-001"))
    notification = last(ctx)
    assert notification.severity == "info"
    assert notification.duration_ms == 0
    assert "• SKU: DHL-8834-XL" in notification.message
    assert "• From: Chicago DC" in notification.message
    assert "• Est. Savings: $12,500" in notification.message


def test_show_details_falls_back_to_alert():
    data = MockDataAccess()
    alerts = []
    ctx = DashboardContext(
        store=MovementStore(data.list_movements()),
        locations=LocationDirectory(data.list_distribution_centers()),
        notifications=None,
        alert=alerts.append,
    )
    ctx.show_details(ctx.store.get("mov-002"))
    assert len(alerts) == 1
    assert alerts[0].startswith("Movement Details:")
    assert "• To: Atlanta DC" in alerts[0]


def test_view_follows_projector(ctx):
    ctx.projector.set_search("dhl-8834")
    assert [m.id for m in ctx.view] == ["mov-001"]


def test_export_of_empty_view(tmp_path, ctx):
    ctx.projector.set_search("no such movement")
    assert ctx.export_text() is None
    assert ctx.export(directory=tmp_path) is None
    assert len(ctx.notifications) == 0


def test_export_reports_count(tmp_path, ctx):
    ctx.projector.set_priority_filter("high")
    path = ctx.export(filename="high.csv", directory=tmp_path)
    assert path.exists()
    assert len(path.read_text(encoding="utf-8").split("\n")) == 3
    assert last(ctx).message == "Exported 2 movements to CSV"


def test_close_clears_notifications(ctx):
    ctx.notifications.info("hello", duration_ms=0)
    ctx.close()
    assert len(ctx.notifications) == 0
