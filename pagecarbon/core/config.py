"""
PageCarbon Backend — Configuration
Environment-driven settings for the page weight and carbon audit API.
"""
from pydantic_settings import BaseSettings

from pagecarbon.utils.carbon import Coefficients


class Settings(BaseSettings):
    # ── Application ──────────────────────────────────────────────────────
    APP_NAME: str = "PageCarbon"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:5500,http://localhost:3000"

    # ── Emission / Cost Coefficients ─────────────────────────────────────
    ENERGY_KWH_PER_GB: float = 0.81
    CARBON_G_PER_KWH: float = 475.0
    COST_USD_PER_GB: float = 0.08

    # ── Audit Pipeline ───────────────────────────────────────────────────
    AUDIT_CONCURRENCY: int = 6
    REQUEST_TIMEOUT_SECONDS: float = 20.0
    MAX_IMAGES: int = 20
    USER_AGENT: str = "PageCarbon/1.0 (Page Weight Auditor)"

    # ── Suggestion Thresholds ────────────────────────────────────────────
    LARGE_IMAGE_BYTES: int = 300 * 1024
    LARGE_SCRIPT_BYTES: int = 200 * 1024
    HEAVY_PAGE_BYTES: int = 2 * 1024 * 1024

    @property
    def coefficients(self) -> Coefficients:
        return Coefficients(
            energy_kwh_per_gb=self.ENERGY_KWH_PER_GB,
            carbon_g_per_kwh=self.CARBON_G_PER_KWH,
            cost_usd_per_gb=self.COST_USD_PER_GB,
        )

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
