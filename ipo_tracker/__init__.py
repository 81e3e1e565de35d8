"""IPO & Angel Investment Tracker - Backend.

This repository is intentionally backend-first:
- Records come from a Record Source (our own sample-data API by default).
- All aggregation happens in the backend.
- A UI (if any) is read-only: display + filter.

Core concepts:
- Two record shapes: upcoming IPOs and angel-investment opportunities.
- A Snapshot is one successful fetch of both lists; it fully replaces the last one.
- The aggregator only reads snapshots (sectors, filters, merged news feed).
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
