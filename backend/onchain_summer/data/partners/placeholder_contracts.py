"""
Contracts used while partner drops are not yet deployed.
Spread into a drop's fields, e.g. Drop(**UNLIMITED, ...). Replace with the real address at launch.
"""

# Open edition, no supply cap (placeholder address on Base Goerli)
UNLIMITED = {"address": "0x7d3F1b9f1c8A0A6f1E3a4c1E5b2D8e7C6a9B0f12"}
