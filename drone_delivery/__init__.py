"""Drone delivery domain kernel.

Tactical domain-modeling building blocks for the drone delivery
bounded context, independent of any transport or storage layer.
"""

__version__ = "0.1.0"
