"""Clinic record keeping: patients, appointments, health records, billing, inventory and staff."""

__version__ = "0.1.0"
