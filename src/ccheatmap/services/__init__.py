"""Grid, statistics, export and orchestration services."""
