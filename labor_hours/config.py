import json
from dataclasses import replace
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import OvertimeSettings, RateSchedule, RoundingType
from .pay import rates_from_settings


class AppSettings(BaseSettings):
    env: str = Field(default="dev", description="Deployment environment")
    log_level: str = "INFO"
    sentry_dsn: str | None = Field(default=None, description="Sentry DSN for error monitoring")

    # Fallback pay rates for workers without a rate on file; unset premium
    # rates follow the OT and DT multipliers
    regular_rate: float = 15.0
    overtime_rate: float | None = None
    double_time_rate: float | None = None

    daily_ot_threshold: float = 8.0
    daily_dt_threshold: float = 12.0
    weekly_ot_threshold: float = 40.0
    weekly_dt_threshold: float = 60.0
    ot_multiplier: float = 1.5
    dt_multiplier: float = 2.0
    seventh_day_ot: bool = True
    seventh_day_dt: bool = True
    use_daily_ot: bool = False
    use_weekly_ot: bool = True
    rounding_interval: int = Field(default=15, ge=0)
    rounding_type: RoundingType = RoundingType.NEAREST

    model_config = SettingsConfigDict(env_prefix="LABOR_", env_file=".env", extra="ignore")

    def overtime_settings(self) -> OvertimeSettings:
        return OvertimeSettings(
            daily_ot_threshold=self.daily_ot_threshold,
            daily_dt_threshold=self.daily_dt_threshold,
            weekly_ot_threshold=self.weekly_ot_threshold,
            weekly_dt_threshold=self.weekly_dt_threshold,
            ot_multiplier=self.ot_multiplier,
            dt_multiplier=self.dt_multiplier,
            seventh_day_ot=self.seventh_day_ot,
            seventh_day_dt=self.seventh_day_dt,
            use_daily_ot=self.use_daily_ot,
            use_weekly_ot=self.use_weekly_ot,
            rounding_interval=self.rounding_interval,
            rounding_type=self.rounding_type,
        )

    def default_rates(self) -> RateSchedule:
        rates = rates_from_settings(self.regular_rate, self.overtime_settings())
        if self.overtime_rate is not None:
            rates = replace(rates, overtime_rate=self.overtime_rate)
        if self.double_time_rate is not None:
            rates = replace(rates, double_time_rate=self.double_time_rate)
        return rates


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()


class OvertimeSettingsFile(BaseModel):
    """Overtime settings as stored by the web application (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    daily_ot_threshold: float = Field(default=8.0, alias="dailyOTThreshold")
    daily_dt_threshold: float = Field(default=12.0, alias="dailyDTThreshold")
    weekly_ot_threshold: float = Field(default=40.0, alias="weeklyOTThreshold")
    weekly_dt_threshold: float = Field(default=60.0, alias="weeklyDTThreshold")
    ot_multiplier: float = Field(default=1.5, alias="otMultiplier")
    dt_multiplier: float = Field(default=2.0, alias="dtMultiplier")
    seventh_day_ot: bool = Field(default=True, alias="seventhDayOT")
    seventh_day_dt: bool = Field(default=True, alias="seventhDayDT")
    use_daily_ot: bool = Field(default=False, alias="useDailyOT")
    use_weekly_ot: bool = Field(default=True, alias="useWeeklyOT")
    rounding_interval: int = Field(default=15, ge=0, alias="roundingInterval")
    rounding_type: RoundingType = Field(default=RoundingType.NEAREST, alias="roundingType")

    def to_settings(self) -> OvertimeSettings:
        return OvertimeSettings(**self.model_dump())


def load_overtime_settings(path: Path) -> OvertimeSettings:
    if not path.exists():
        raise FileNotFoundError(f"Overtime settings not found at {path}")
    content = json.loads(path.read_text())
    return OvertimeSettingsFile.model_validate(content).to_settings()
