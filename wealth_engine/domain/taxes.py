"""Regressive withholding taxes on fixed-income returns (IOF, then IR)"""

from dataclasses import dataclass
from typing import List, Tuple

# IOF rate (% of the return) by calendar day held, index = day - 1
IOF_TABLE: List[int] = [
    96, 93, 90, 86, 83, 80, 76, 73, 70, 66,  # days 1-10
    63, 60, 56, 53, 50, 46, 43, 40, 36, 33,  # days 11-20
    30, 26, 23, 20, 16, 13, 10, 6, 3, 0,     # days 21-30
]

# IR brackets as (max calendar days inclusive, rate %)
IR_TABLE: List[Tuple[float, float]] = [
    (180, 22.5),
    (360, 20.0),
    (720, 17.5),
    (float("inf"), 15.0),
]


@dataclass
class Withholding:
    """Tax amounts and the rates applied to produce them"""

    iof_amount: float = 0.0
    iof_rate: float = 0.0
    ir_amount: float = 0.0
    ir_rate: float = 0.0

    @property
    def total(self) -> float:
        return self.iof_amount + self.ir_amount


def iof_rate(days: int) -> float:
    if days <= 0:
        return float(IOF_TABLE[0])
    if days > len(IOF_TABLE):
        return 0.0
    return float(IOF_TABLE[days - 1])


def ir_rate(days: int) -> float:
    for max_days, rate in IR_TABLE:
        if days <= max_days:
            return rate
    return IR_TABLE[-1][1]


def iof_amount(gross_return: float, days: int) -> float:
    """IOF on the gross return; no tax on a zero or negative return"""
    if gross_return <= 0:
        return 0.0
    return gross_return * (iof_rate(days) / 100)


def ir_amount(gross_return: float, iof: float, days: int) -> float:
    """IR on the gross return net of IOF"""
    base = gross_return - iof
    if base <= 0:
        return 0.0
    return base * (ir_rate(days) / 100)


def withhold(gross_return: float, days: int, exempt: bool = False) -> Withholding:
    """
    Apply both taxes in their fixed order.

    IOF is computed first on the gross return, IR second on what is left.
    Exempt positions skip both and report zero rates.
    """
    if exempt:
        return Withholding()

    iof = iof_amount(gross_return, days)
    return Withholding(
        iof_amount=iof,
        iof_rate=iof_rate(days),
        ir_amount=ir_amount(gross_return, iof, days),
        ir_rate=ir_rate(days),
    )
