"""Configuration management for propledger."""

from dataclasses import dataclass, field
from pathlib import Path

from propledger.exceptions import ConfigurationError


@dataclass
class StorageConfig:
    """Snapshot storage configuration."""

    snapshot_path: Path = field(default_factory=lambda: Path("propledger.json"))
    pretty_json: bool = False
    seed_on_empty: bool = True


@dataclass
class ReportConfig:
    """Reporting windows and display settings."""

    chart_months: int = 6
    expiration_window_days: int = 60
    lease_warning_days: int = 30
    currency: str = "PHP"


@dataclass
class PropLedgerConfig:
    """Main configuration for propledger."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    reports: ReportConfig = field(default_factory=ReportConfig)
    seed: int | None = None
    log_level: str = "INFO"

    def validate(self) -> "PropLedgerConfig":
        """Check report windows are usable.

        Raises
        ------
        ConfigurationError
            If a window is not a positive number.
        """
        if self.reports.chart_months < 1:
            raise ConfigurationError(
                f"chart_months must be >= 1, got {self.reports.chart_months}"
            )
        if self.reports.expiration_window_days < 0:
            raise ConfigurationError(
                f"expiration_window_days must be >= 0, got {self.reports.expiration_window_days}"
            )
        if self.reports.lease_warning_days < 0:
            raise ConfigurationError(
                f"lease_warning_days must be >= 0, got {self.reports.lease_warning_days}"
            )
        return self

    @classmethod
    def from_env(cls) -> "PropLedgerConfig":
        """Create config from environment variables."""
        import os

        try:
            storage = StorageConfig(
                snapshot_path=Path(os.getenv("PROPLEDGER_SNAPSHOT", "propledger.json")),
                pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
                seed_on_empty=os.getenv("SEED_ON_EMPTY", "true").lower() == "true",
            )

            reports = ReportConfig(
                chart_months=int(os.getenv("CHART_MONTHS", "6")),
                expiration_window_days=int(os.getenv("EXPIRATION_WINDOW_DAYS", "60")),
                lease_warning_days=int(os.getenv("LEASE_WARNING_DAYS", "30")),
                currency=os.getenv("CURRENCY", "PHP"),
            )

            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric environment value: {exc}") from exc

        return cls(
            storage=storage,
            reports=reports,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        ).validate()
