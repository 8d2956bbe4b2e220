"""CSV export service."""

from .csv_export import (
    export_filtered_data,
    export_school_summary,
    export_stats,
    export_to_csv,
)


def main():
    """Entry point for the export tool."""
    from datetime import date
    from pathlib import Path

    from drainwatch.analysis import analyze_battery_data
    from drainwatch.loader import build_data_service, load_config
    from drainwatch.shared.logging import setup_logging, get_logger

    config = load_config()
    setup_logging(config.log_level)
    logger = get_logger("drainwatch.export")

    service = build_data_service(config)
    export_dir = Path(config.export_dir)

    try:
        export_filtered_data(service, None, export_dir)
        export_stats(service.fetch_battery_stats(), export_dir)

        result = analyze_battery_data(service.get_all_readings())
        summary_path = export_school_summary(
            result, export_dir / f"battery-schools-{date.today().isoformat()}.csv"
        )
        logger.info(f"Wrote school summary for {len(result.schools)} schools to {summary_path}")
    finally:
        service.close()


__all__ = [
    "export_filtered_data",
    "export_school_summary",
    "export_stats",
    "export_to_csv",
    "main",
]
