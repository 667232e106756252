"""rpquery - typed launch queries against a ReportPortal server."""

__version__ = "0.1.0"
