"""
Marina Boat Manager - Source Package

A small inventory manager for the boats kept at a marina: slips,
land bays, trailers and storage spots.

DESIGN PRINCIPLES:
1. The data file is the source of truth between sessions
2. Bad records are skipped on load, never fatal
3. Interactive mistakes are reported, never silently fixed
4. Every change to the fleet is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Marina Boat Manager Team"
