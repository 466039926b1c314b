"""
Payroll Kernel

Entities, typed errors, time and logging primitives, and the optional
SQLAlchemy persistence adapter that the payroll engine builds on.
"""

__version__ = "0.1.0"
