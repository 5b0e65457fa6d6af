# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fee domain: GST, SSG grant and funding-scheme claims."""

from tms_sync.domains.fees.calculator import (
    FeeCalculationResult,
    FundingBreakdown,
    FundingInputs,
    calculate_fees,
    is_mces_eligible,
    round_cents,
)

__all__ = [
    "FeeCalculationResult",
    "FundingBreakdown",
    "FundingInputs",
    "calculate_fees",
    "is_mces_eligible",
    "round_cents",
]
