"""
Partner configs, one module per partner.
Add a module here and schedule it in data/schedule.py.
"""
from onchain_summer.data.partners.fwb import FWB

__all__ = ["FWB"]
