"""Simulations of classic operating-system algorithms: scheduling, deadlock
avoidance, memory allocation, paging, disk allocation and synchronisation."""

__version__ = "0.1.0"