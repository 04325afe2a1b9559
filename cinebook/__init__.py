"""Console cinema booking: movies, shows, hall seats, tickets, bills and revenue."""

__version__ = "1.0.0"