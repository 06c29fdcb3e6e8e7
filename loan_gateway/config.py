"""Configuration management using Pydantic Settings"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Loan amount bounds (EUR)
    min_loan_amount: int = Field(default=2000, gt=0)
    max_loan_amount: int = Field(default=10000, gt=0)
    loan_amount_step: int = Field(default=100, gt=0, description="Amount decrement per search step")

    # Loan period bounds (months)
    min_loan_period: int = Field(default=12, gt=0)
    max_loan_period: int = Field(default=60, gt=0)

    # Age eligibility (years); upper bound is the country life expectancy
    minimum_allowed_age: int = Field(default=18, ge=0)
    maximum_allowed_age: int = Field(default=80, gt=0)

    # Credit modifiers per segment of the personal code
    segment_1_credit_modifier: int = Field(default=100, gt=0)
    segment_2_credit_modifier: int = Field(default=300, gt=0)
    segment_3_credit_modifier: int = Field(default=1000, gt=0)

    @model_validator(mode="after")
    def check_ranges(self) -> "Settings":
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount must not exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period must not exceed max_loan_period")
        if self.minimum_allowed_age >= self.maximum_allowed_age:
            raise ValueError("minimum_allowed_age must be below maximum_allowed_age")
        return self


settings = Settings()
