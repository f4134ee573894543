"""Order inputs: contract models, file I/O and synthetic schedules."""
