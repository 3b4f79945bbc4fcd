"""Table names used by the test store."""

import re
from dataclasses import dataclass

from uitest_store.config.models import TABLE_NAME_PATTERN
from uitest_store.errors import ConfigurationError

IDENTIFIER_PATTERN = re.compile(TABLE_NAME_PATTERN)


def validate_identifier(name: str) -> str:
    """
    Check that a table name is a plain SQL identifier.

    Table names are interpolated into DDL and queries, so only
    letters, digits and underscores are accepted.

    Raises:
        ConfigurationError: If the name is not a plain identifier.
    """
    if not IDENTIFIER_PATTERN.fullmatch(name):
        raise ConfigurationError(f"Invalid table name: {name!r}")
    return name


@dataclass(frozen=True)
class TableNames:
    """Names of the owners, tests and reports tables."""

    owners: str = "Owners"
    tests: str = "Tests"
    reports: str = "Reports"

    def __post_init__(self) -> None:
        for name in (self.owners, self.tests, self.reports):
            validate_identifier(name)
        if len({self.owners.lower(), self.tests.lower(), self.reports.lower()}) != 3:
            raise ConfigurationError("Owners, tests and reports tables must be distinct")

    @property
    def scope(self) -> str:
        """Key under which this table set's schema version is recorded."""
        return f"{self.owners}/{self.tests}/{self.reports}"
