import asyncio

import pandas as pd
import streamlit as st

from network_dashboard.core.dashboard import DashboardContext
from network_dashboard.core.export import default_export_filename
from network_dashboard.core.formatting import (
    format_currency,
    format_date,
    format_number,
    format_percentage,
)
from network_dashboard.core.insights import capacity_utilisation, movement_impact, summarize_issues
from network_dashboard.data.util import get_data_access
from network_dashboard.logging import get_logger

logger = get_logger(__name__)

st.set_page_config(page_title="Network Overview", layout="wide")

SEVERITY_RENDERERS = {
    "success": st.success,
    "error": st.error,
    "warning": st.warning,
    "info": st.info,
}

SORT_COLUMNS = {
    "description": "Details",
    "status": "Status",
    "sku": "SKU",
    "origin_dc": "Ship From",
    "destination_dc": "Ship To",
    "quantity": "Quantity",
    "estimated_savings": "Est. Savings",
}

# -----------------------------------------------------------------------------
# Session context (constructed once per browser session)
# -----------------------------------------------------------------------------
if "dashboard" not in st.session_state:
    st.session_state.dashboard = DashboardContext.from_data_access(get_data_access(), alert=st.warning)
    logger.info("Dashboard session started")
ctx: DashboardContext = st.session_state.dashboard
projector = ctx.projector
store = ctx.store

st.title("Network Overview")
st.caption("Real-time distribution center monitoring and inventory management")

# -----------------------------------------------------------------------------
# Notifications
# -----------------------------------------------------------------------------
for notification in ctx.notifications:
    body, dismiss = st.columns([12, 1])
    with body:
        SEVERITY_RENDERERS[notification.severity](notification.message)
    with dismiss:
        if st.button("✕", key=f"dismiss-{notification.id}", help="Dismiss"):
            ctx.notifications.remove(notification.id)
            st.rerun()
if len(ctx.notifications) > 1 and st.button("Clear notifications"):
    ctx.notifications.clear()
    st.rerun()

# -----------------------------------------------------------------------------
# Network health map
# -----------------------------------------------------------------------------
st.markdown("### Network health")
centers = pd.DataFrame(
    [
        {
            "name": dc.name,
            "status": dc.status,
            "lat": dc.latitude,
            "lon": dc.longitude,
            "utilisation": format_percentage(capacity_utilisation(dc)),
            "orders": format_number(dc.orders),
            "issues": dc.issues,
            "manager": dc.manager,
        }
        for dc in ctx.locations
    ]
)
map_col, table_col = st.columns([3, 2])
with map_col:
    st.map(centers, latitude="lat", longitude="lon")
with table_col:
    st.dataframe(centers.drop(columns=["lat", "lon"]), use_container_width=True, hide_index=True)

# -----------------------------------------------------------------------------
# Sidebar filters
# -----------------------------------------------------------------------------
def _clear_filters() -> None:
    projector.clear_filters()
    st.session_state.search = ""
    st.session_state.status_filter = "all"
    st.session_state.priority_filter = "all"


st.sidebar.header("Filters")
projector.set_search(st.sidebar.text_input("Search SKU, description, or location", key="search"))
projector.set_status_filter(
    st.sidebar.selectbox("Status", ["all", "pending", "approved", "rejected"], key="status_filter")
)
projector.set_priority_filter(
    st.sidebar.selectbox("Priority", ["all", "high", "medium", "low"], key="priority_filter")
)
if projector.has_active_filters:
    st.sidebar.button("Clear all filters", on_click=_clear_filters)

# -----------------------------------------------------------------------------
# Suggested inventory movements
# -----------------------------------------------------------------------------
st.markdown(f"### Suggested inventory movements ({store.pending_count()} pending)")

if store.error:
    st.error(f"Error processing movements: {store.error}")
    if st.button("Retry"):
        store.clear_error()
        st.rerun()

sort_cols = st.columns(len(SORT_COLUMNS) + 1)
for col, (key, label) in zip(sort_cols, SORT_COLUMNS.items()):
    arrow = ""
    if projector.filters.sort_by == key:
        arrow = " ▲" if projector.filters.sort_direction == "asc" else " ▼"
    if col.button(label + arrow, key=f"sort-{key}"):
        projector.toggle_sort(key)
        st.rerun()

rows = ctx.view.items()
csv_text = ctx.export_text()
sort_cols[-1].download_button(
    "Export CSV",
    data=csv_text or "",
    file_name=default_export_filename(),
    mime="text/csv",
    disabled=csv_text is None,
)

for movement in rows:
    details, status, actions = st.columns([6, 2, 3])
    with details:
        st.markdown(
            f"**{movement.description}**  \n"
            f"`{movement.sku}` · {ctx.locations(movement.origin_dc)} → {ctx.locations(movement.destination_dc)} · "
            f"{format_number(movement.quantity)} units · {format_currency(movement.estimated_savings)} · "
            f"{movement.priority} priority · created {format_date(movement.created_at)}"
        )
    status.write(movement.status.upper())
    with actions:
        approve_col, reject_col, view_col = st.columns(3)
        if movement.status == "pending":
            if approve_col.button("Approve", key=f"approve-{movement.id}"):
                with st.spinner("Processing..."):
                    asyncio.run(ctx.approve(movement.id))
                st.rerun()
            if reject_col.button("Reject", key=f"reject-{movement.id}"):
                with st.spinner("Processing..."):
                    asyncio.run(ctx.reject(movement.id))
                st.rerun()
        if view_col.button("View", key=f"view-{movement.id}"):
            ctx.show_details(movement)
            st.rerun()

if not rows:
    if projector.has_active_filters:
        st.info("No movements match your filters. Try adjusting your search or filters.")
    else:
        st.info("No inventory movements available at this time.")

# -----------------------------------------------------------------------------
# Movement impact
# -----------------------------------------------------------------------------
st.markdown("### Suggested movement impact")
impact = movement_impact(store.movements)
c1, c2, c3, c4 = st.columns(4)
c1.metric("Pending movements", impact.pending_count)
c2.metric("Pending savings", format_currency(impact.pending_savings))
c3.metric("High-priority pending", impact.high_priority_pending)
c4.metric("Approved savings", format_currency(impact.approved_savings))

# -----------------------------------------------------------------------------
# Issues
# -----------------------------------------------------------------------------
st.markdown("### Issues")
groups = {group.title: group for group in ctx.issue_groups}
for col, summary in zip(st.columns(max(len(groups), 1)), summarize_issues(ctx.issue_groups)):
    group = groups[summary.title]
    with col:
        st.metric(summary.title, summary.count, help=summary.label)
        st.caption(f"{summary.label} · {format_number(summary.affected)} {group.affected_kind} affected")
        for issue in group.issues[:5]:
            st.write(f"• {issue.description} (due {format_date(issue.estimated_resolution)})")
        if len(group.issues) > 5:
            st.caption(f"View {len(group.issues) - 5} more issues...")
