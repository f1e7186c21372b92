from __future__ import annotations

# Total spend (production plus marketing and distribution) is estimated at 2.5x the production budget.
OVERHEAD_MULTIPLIER = 2.5
TOTAL_LOSS_ROI = -100.0


def compute_roi(budget: float, box_office: float) -> float:
    """Return ROI in percent against the overhead-adjusted budget.

    Without any spend the ROI is undefined, so a budget <= 0 maps to the
    total-loss value of -100.
    """
    if budget <= 0:
        return TOTAL_LOSS_ROI
    return (box_office / (budget * OVERHEAD_MULTIPLIER) * 100) - 100
