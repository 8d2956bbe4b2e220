"""Battery drain triage for handheld device fleets."""

__version__ = "0.1.0"
