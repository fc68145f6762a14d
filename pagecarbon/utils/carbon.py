"""
PageCarbon — Carbon Estimation Utility
Converts transferred bytes into energy, CO2 and bandwidth cost figures.
"""

from dataclasses import dataclass

BYTES_PER_GB = 1024 ** 3


@dataclass(frozen=True)
class Coefficients:
    """Per-gigabyte coefficients used for every estimate."""
    energy_kwh_per_gb: float
    carbon_g_per_kwh: float
    cost_usd_per_gb: float


@dataclass
class FootprintEstimate:
    """Footprint of a single page view and of one thousand views."""
    co2_g_per_view: float
    cost_usd_per_view: float
    co2_per_k_views_g: int
    cost_per_k_views_usd: float


def estimate_co2_g(total_bytes: int, coefficients: Coefficients) -> float:
    """Grams of CO2 emitted to transfer `total_bytes` once."""
    gb = total_bytes / BYTES_PER_GB
    kwh = gb * coefficients.energy_kwh_per_gb
    return kwh * coefficients.carbon_g_per_kwh


def estimate_cost_usd(total_bytes: int, coefficients: Coefficients) -> float:
    """Bandwidth cost in USD to transfer `total_bytes` once."""
    gb = total_bytes / BYTES_PER_GB
    return gb * coefficients.cost_usd_per_gb


def estimate_per_thousand_views(total_bytes: int, coefficients: Coefficients) -> FootprintEstimate:
    co2 = estimate_co2_g(total_bytes, coefficients)
    cost = estimate_cost_usd(total_bytes, coefficients)
    return FootprintEstimate(
        co2_g_per_view=co2,
        cost_usd_per_view=cost,
        co2_per_k_views_g=round(co2 * 1000),
        cost_per_k_views_usd=cost * 1000,
    )
