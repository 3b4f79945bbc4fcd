"""uitest-store utility modules."""

from uitest_store.utils.logging import configure_logging

__all__ = ["configure_logging"]
