"""Domain validation utilities for box-office input."""

from decimal import Decimal
import re
from typing import Any, Optional

from box_office.platform.exception.exceptions import InputValidationError


HEX_COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


class StringValidators:
    @staticmethod
    def validate_required_string(value: Optional[str], field_name: str) -> None:
        if not value or not value.strip():
            raise InputValidationError(f'{field_name} is required', context={'field': field_name})

    @staticmethod
    def validate_category_name(_instance: Any, _attribute: Any, value: str) -> None:
        StringValidators.validate_required_string(value, 'name')


class NumericValidators:
    @staticmethod
    def validate_non_negative_price(_instance: Any, _attribute: Any, value: Decimal) -> None:
        if value is None or value < 0:
            raise InputValidationError(
                'price must be zero or greater', context={'field': 'price', 'value': str(value)}
            )


class ColorValidators:
    @staticmethod
    def validate_optional_hex_color(_instance: Any, attribute: Any, value: Optional[str]) -> None:
        """Accepts None, #RGB or #RRGGBB (for attrs validators)."""
        if value is None:
            return
        if not HEX_COLOR_PATTERN.match(value):
            raise InputValidationError(
                f'{attribute.name} must be a hex color like #RGB or #RRGGBB',
                context={'field': attribute.name, 'value': value},
            )
