"""Calendar month arithmetic for payment dates."""

from datetime import date

from dateutil.relativedelta import relativedelta


def add_months(start: date, months: int) -> date:
    """Shift a date by whole calendar months.

    Rolls over year boundaries and clamps the day to the last day of the
    target month: 2024-01-31 + 1 month is 2024-02-29, not March.
    """
    return start + relativedelta(months=months)


def payment_date(start: date, index: int) -> date:
    """Due date of the 1-based payment `index`, always offset from `start`.

    Offsetting from the loan start (rather than from the previous due date)
    keeps a 31st-of-month loan on the 31st whenever the month allows.
    """
    return add_months(start, index - 1)
