"""Distribution network dashboard: movement workflow, notifications and views."""
