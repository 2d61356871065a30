"""
FormatValidator - validates values against a named or custom regular expression.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator, ValidatorConfigError


class Format(BaseValidator):
    """
    Validates that a value matches a regular expression.

    Parameters:
    - format: Name of a pre-defined format (email, ip, alnum, hex) or a
              compiled Pattern

    Named formats fail with "not_<name>", custom patterns with "wrong_format".
    Non-string values are converted with str() before matching.
    """

    FORMATS: dict[str, Pattern] = {
        "email": re.compile(r"^[\w.+\-]+@[\w\-]+\.([\w\-]+\.)*[A-Za-z]+$"),
        "ip": re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$"),
        "alnum": re.compile(r"^[a-zA-Z0-9]+$"),
        "hex": re.compile(r"^[0-9a-fA-F]+$"),
    }

    error_codes = {
        "not_email": "has to be a valid email address",
        "not_ip": "has to be a valid ip address",
        "not_alnum": "can only contain letters and numbers",
        "not_hex": "has to be a valid hexadecimal number",
        "wrong_format": "has to be in the correct format",
    }

    def __init__(self, params: dict[str, Any] | None = None):
        super().__init__(params)

        if "format" not in self.params:
            raise ValidatorConfigError("Missing 'format' parameter for Format validator")

        fmt = self.params["format"]
        if isinstance(fmt, Pattern):
            self.pattern = fmt
            self.failure_code = "wrong_format"
        elif isinstance(fmt, str):
            if fmt not in self.FORMATS:
                raise ValidatorConfigError(f'Unknown format "{fmt}" in Format validator')
            self.pattern = self.FORMATS[fmt]
            self.failure_code = f"not_{fmt}"
        else:
            raise ValidatorConfigError(
                f"The 'format' parameter has to be either a format name or a compiled Pattern, "
                f"{type(fmt).__name__} given"
            )

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        if self.pattern.search(str(value)):
            return True

        self.set_error(self.failure_code)
        return False
