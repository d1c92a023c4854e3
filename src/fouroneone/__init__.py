"""fouroneone

Shared helpers for the 411 alerting service: running external programs,
site identity, timezone resolution through user and database configuration,
date parsing/formatting, and a handful of small web/CLI conveniences.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
