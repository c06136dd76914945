"""
Utility functions module.

Time handling shared by the calculator:
- LNMP dates are anchored at local midnight
- The wall clock is read once per computation, or injected by the caller
"""
