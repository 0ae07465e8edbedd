from .standings import build_report, compute_group_tables, derive_points
from .league_data import compute_standings, get_data_source

__all__ = [
    "build_report",
    "compute_group_tables",
    "derive_points",
    "compute_standings",
    "get_data_source",
]
