"""Per-user family rosters: pure operations + RosterStore."""
