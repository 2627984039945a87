"""
Household Ledger - Source Package

A personal income/expense ledger that records entries in a JSON file
and derives monthly and yearly net balances from them.

DESIGN PRINCIPLES:
1. Validate raw input before anything is constructed
2. Append-only entries; every save is a full snapshot
3. Signs are derived at summary time, never stored
4. The core raises typed errors and never exits the process
"""

__version__ = "0.1.0"
