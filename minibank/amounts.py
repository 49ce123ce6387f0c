"""Amount parsing and checking.

Two layers use this module:

- the presentation boundary calls ``parse_amount`` to turn user-typed text into
  a float (or a ``ValidationError``);
- the BankSystem calls ``require_number`` so its operations only ever work on
  finite real numbers.

Neither function checks the sign. Each ledger operation owns its own sign rule
(``> 0`` for money movement, ``>= 0`` for an opening balance).
"""

import math
from numbers import Real
from typing import Any, Optional

from minibank.errors import ValidationError


def parse_amount(value: Any, *, field: str = "amount",
                 default: Optional[float] = None) -> float:
    """Parse user input into a finite float.

    Args:
        value: Raw input - ``str``, ``int`` or ``float``. Strings are stripped.
        field (str): Name used in error messages
        default (Optional[float]): Returned for blank input. If None, blank
            input is an error.

    Returns:
        float: The parsed amount

    Raises:
        ValidationError: If the input is blank (with no default), a bool,
            not numeric, NaN or infinite

    Example:
        ```python
        parse_amount(" 1500 ")               # 1500.0
        parse_amount("", default=0)          # 0.0
        parse_amount("12abc")                # ValidationError
        ```
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValidationError(f"{field.capitalize()} is required.")
        return float(default)

    if isinstance(value, bool):
        raise ValidationError(f"{field.capitalize()} must be a number.")

    if isinstance(value, str):
        try:
            number = float(value.strip().replace(",", ""))
        except ValueError:
            raise ValidationError(f"{field.capitalize()} must be a number.") from None
    elif isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            raise ValidationError(f"{field.capitalize()} must be a finite number.") from None
    else:
        raise ValidationError(f"{field.capitalize()} must be a number.")

    if not math.isfinite(number):
        raise ValidationError(f"{field.capitalize()} must be a finite number.")
    return number


def require_number(value: Any, message: str) -> float:
    """Strict check used inside the ledger: a finite real number, nothing else.

    Strings are rejected; text is converted at the boundary with
    ``parse_amount``.

    Raises:
        ValidationError: With ``message`` if the check fails
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(message)
    try:
        number = float(value)
    except OverflowError:
        raise ValidationError(message) from None
    if not math.isfinite(number):
        raise ValidationError(message)
    return number


def format_number(value: float) -> str:
    """Plain rendering of an amount for log details: ``1000``, ``12.5`` or ``1.5e+20``."""
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))
