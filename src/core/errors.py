"""
Error taxonomy for the pricing & settlement core.

All errors are local validation failures raised at the boundary of a
component, before any computation happens. Nothing here is retried: the
input or the configuration has to be fixed by the caller.

Hierarchy:
    PricingCoreError (ValueError)
    ├── InvalidFactor      — negative / NaN / infinite multiplier, bad hour or location
    ├── InvalidTierTable   — unsorted thresholds, mixed currencies, rate outside [0, 1]
    ├── InvalidWindow      — free >= partial >= 0 violated, percentage outside [0, 100]
    └── InvalidAmount      — negative money, currency mismatch between operands
"""


class PricingCoreError(ValueError):
    """Base class for all pricing core validation errors."""

    pass


class InvalidFactor(PricingCoreError):
    """A pricing multiplier (or the input it is resolved from) is invalid."""

    pass


class InvalidTierTable(PricingCoreError):
    """Commission tier table is not strictly increasing or has a bad rate."""

    pass


class InvalidWindow(PricingCoreError):
    """Cancellation window violates free >= partial >= 0 or percentage range."""

    pass


class InvalidAmount(PricingCoreError):
    """Negative money or operands in different currencies."""

    pass
