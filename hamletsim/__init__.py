"""A day-by-day settlement simulation with buildings, a shared resource pool and observers."""

__version__ = "0.1.0"