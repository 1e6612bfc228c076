from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cyclorank.core import constants as cs
from cyclorank.data_models.models import ReportOptions

load_dotenv()


class AppConfig(BaseSettings):
    """Application settings, loaded from `CYCLORANK_*` environment variables or a .env file.

    Every field is a default for the matching command-line option; options given
    on the command line always win.
    """

    model_config = SettingsConfigDict(
        env_prefix="CYCLORANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    OVER: int = 0
    TOP: int | None = None
    AVG: bool = False

    RECURSIVE: bool = False
    SKIP_TESTS: bool = False
    EXCLUDE: frozenset[str] = Field(default=cs.DEFAULT_EXCLUDE_DIRS)

    LOG_LEVEL: str = "WARNING"

    def resolve_report_options(
        self,
        over: int | None = None,
        top: int | None = None,
        avg: bool | None = None,
    ) -> ReportOptions:
        """Combines command-line overrides with the configured defaults.

        Args:
            over (int | None): The `--over` value, or None if not given.
            top (int | None): The `--top` value, or None if not given.
            avg (bool | None): The `--avg` flag, or None if not given.

        Returns:
            ReportOptions: The effective selection parameters.
        """
        return ReportOptions(
            over=self.OVER if over is None else over,
            top=self.TOP if top is None else top,
            avg=self.AVG if avg is None else avg,
        )


settings = AppConfig()
