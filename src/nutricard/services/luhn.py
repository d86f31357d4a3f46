"""Credit card number validation using the Luhn checksum."""

import logging
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")

_logger = logging.getLogger(__name__)


def is_valid(digits: str) -> bool:
    """Return true when the digit string passes the Luhn checksum.

    Any non-digit character makes the number invalid. An empty string sums
    to zero and is therefore reported as valid.
    """
    if any(char not in _DIGITS for char in digits):
        return False

    values = [int(char) for char in digits]
    # Double every second digit from the right, skipping the check digit.
    for index in range(len(values) - 2, -1, -2):
        doubled = values[index] * 2
        if doubled > 9:
            doubled -= 9
        values[index] = doubled

    return sum(values) % 10 == 0


def mask_card_number(card_number: str) -> str:
    """Hide everything except the last four characters."""
    if len(card_number) <= 4:
        return "*" * len(card_number)
    return "*" * (len(card_number) - 4) + card_number[-4:]


@dataclass
class CardValidationService:
    """Service validating card numbers."""

    debug: bool = False

    def validate(self, card_number: str) -> bool:
        """Validate a card number and return the checksum result."""
        result = is_valid(card_number)
        if self.debug:
            _logger.info(
                "Card number received: %s valid=%s",
                mask_card_number(card_number),
                result,
            )
        return result
