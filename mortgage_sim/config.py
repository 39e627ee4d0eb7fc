from decimal import Decimal

from pydantic_settings import BaseSettings

from mortgage_sim.engine.validation import FormLimits


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    currency: str = "EUR"

    # Loan form limits
    min_amount: Decimal = Decimal("1000")
    max_amount: Decimal = Decimal("5000000")
    max_rate_pct: Decimal = Decimal("20")
    max_cap_pct: Decimal = Decimal("30")  # Upper bound for a variable-rate CAP
    max_duration_years: int = 50
    max_duration_months: int = 600

    @property
    def form_limits(self) -> FormLimits:
        return FormLimits(
            min_amount=self.min_amount,
            max_amount=self.max_amount,
            max_rate_pct=self.max_rate_pct,
            max_cap_pct=self.max_cap_pct,
            max_duration_years=self.max_duration_years,
            max_duration_months=self.max_duration_months,
        )


settings = Settings()
