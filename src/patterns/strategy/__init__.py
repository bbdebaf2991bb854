from patterns.strategy.demo import run_strategy_demo
from patterns.strategy.filters import (
    FILTERS,
    NO_FILTER,
    BWFilter,
    DistortionFilter,
    Filter,
    SepiaFilter,
    create_filter,
)

__all__ = [
    "BWFilter",
    "DistortionFilter",
    "FILTERS",
    "Filter",
    "NO_FILTER",
    "SepiaFilter",
    "create_filter",
    "run_strategy_demo",
]
