"""Terminal report service."""

from .terminal_report import TerminalReport
from .view import ReportView, TotalStats, page_stats


def main():
    """Entry point for the report tool."""
    import os

    from drainwatch.analysis import analyze_battery_data
    from drainwatch.loader import build_data_service, load_config
    from drainwatch.shared.logging import setup_logging

    config = load_config()
    setup_logging(config.log_level, use_rich=True)

    service = build_data_service(config)
    try:
        view = ReportView(analyze_battery_data(service.get_all_readings()))
    finally:
        service.close()

    if selected := os.environ.get("DRAINWATCH_FILTER"):
        view.set_filter(selected)
    if os.environ.get("DRAINWATCH_EXPAND", "").lower() in ("1", "true", "yes"):
        view.expand_all_schools()

    TerminalReport(view).render()


__all__ = ["TerminalReport", "ReportView", "TotalStats", "page_stats", "main"]
