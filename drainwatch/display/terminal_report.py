"""
Terminal Report for battery drain analysis
Renders the ranked school list using the Rich library.
"""

from datetime import datetime
from typing import Optional

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from drainwatch.analysis.formatting import format_date, format_percentage
from drainwatch.shared.models import DeviceStatus, SchoolAnalysis, SchoolPriority
from .view import ReportView


STATUS_STYLES = {
    DeviceStatus.CRITICAL: "bold red",
    DeviceStatus.WARNING: "yellow",
    DeviceStatus.HEALTHY: "green",
    DeviceStatus.UNKNOWN: "dim",
}

PRIORITY_STYLES = {
    SchoolPriority.HIGH: "bold red",
    SchoolPriority.MEDIUM: "yellow",
    SchoolPriority.LOW: "green",
}


class TerminalReport:
    """Terminal-based battery report using Rich"""

    def __init__(self, view: ReportView, console: Optional[Console] = None):
        self.view = view
        self.console = console or Console()

    def render(self):
        """Print the full report"""
        if not self.view.has_data:
            self.console.print(Panel(Text("No analysis data loaded", style="bold red"), style="red"))
            return

        self.console.print(self._create_header())
        self.console.print(self._create_totals_panel())
        self.console.print(self._create_schools_panel())

    def _create_header(self) -> Panel:
        """Create header with title and timestamp"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        header_text = Text()
        header_text.append("BATTERY DRAIN REPORT", style="bold cyan")
        header_text.append(f" - {timestamp}", style="white")
        header_text.append(f" - Filter: {self.view.selected_filter}", style="white")

        return Panel(Align.center(header_text), style="cyan")

    def _create_totals_panel(self) -> Panel:
        """Create device totals panel"""
        stats = self.view.total_stats

        table = Table(show_header=True, header_style="bold cyan", box=None)
        for column in ("Devices", "Critical", "Warning", "Healthy", "Unknown", "Need Visits"):
            table.add_column(column, justify="right")

        table.add_row(
            str(stats.total_devices),
            Text(str(stats.total_critical), style=STATUS_STYLES[DeviceStatus.CRITICAL]),
            Text(str(stats.total_warning), style=STATUS_STYLES[DeviceStatus.WARNING]),
            Text(str(stats.total_healthy), style=STATUS_STYLES[DeviceStatus.HEALTHY]),
            Text(str(stats.total_unknown), style=STATUS_STYLES[DeviceStatus.UNKNOWN]),
            str(stats.schools_needing_visits),
        )

        return Panel(table, title="TOTALS", style="cyan")

    def _create_schools_panel(self) -> Panel:
        """Create ranked schools panel"""
        schools = self.view.filtered_schools
        if not schools:
            return Panel(Text("✓ No schools match this filter", style="green"), title="SCHOOLS", style="cyan")

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Academy", style="white")
        table.add_column("Priority")
        table.add_column("Critical", justify="right")
        table.add_column("Warning", justify="right")
        table.add_column("Healthy", justify="right")
        table.add_column("Unknown", justify="right")

        for school in schools:
            table.add_row(
                str(school.academy_id),
                Text(school.priority.value.upper(), style=PRIORITY_STYLES[school.priority]),
                str(school.critical_devices),
                str(school.warning_devices),
                str(school.healthy_devices),
                str(school.unknown_devices),
            )

        expanded = [
            self._create_device_table(school)
            for school in schools
            if self.view.is_school_expanded(school.academy_id)
        ]

        return Panel(Group(table, *expanded), title="SCHOOLS", style="cyan")

    def _create_device_table(self, school: SchoolAnalysis) -> Table:
        """Create device detail table for an expanded school"""
        table = Table(
            title=f"Academy {school.academy_id}",
            show_header=True,
            header_style="bold white",
        )
        table.add_column("Serial", style="white")
        table.add_column("Status")
        table.add_column("Daily Usage", justify="right")
        table.add_column("Employee")
        table.add_column("Last Reading")

        for device in school.devices:
            if device.last_reading:
                last_text = (
                    f"{format_percentage(device.last_reading.battery_level)} "
                    f"({format_date(device.last_reading.recorded_at)})"
                )
            else:
                last_text = "---"

            # Zero usage means no rate could be measured
            usage_text = "---" if device.status == DeviceStatus.UNKNOWN else format_percentage(device.daily_usage_rate)

            table.add_row(
                device.serial_number,
                Text(device.status.value, style=STATUS_STYLES[device.status]),
                usage_text,
                device.employee_id,
                last_text,
            )

        return table
