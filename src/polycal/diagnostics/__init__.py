"""Diagnostics package.

- round_trip, pretty_month, new_years_table: standard library only
- year_lengths, new_year_scatter: need the `diagnostics` extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_lengths", "new_year_scatter"]
