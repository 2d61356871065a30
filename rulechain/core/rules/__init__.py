"""
Validation engine: validations, chains, failure reports and chain configuration.
"""

from .chain_config import ChainConfigLoader, build_chain, parse_params
from .failure_report import FailureReport
from .model import ValidatedModel
from .record import DictRecord, ValidatableRecord
from .validation import ChainNode, Validation
from .validation_chain import ValidationChain

__all__ = [
    "ChainNode",
    "Validation",
    "ValidationChain",
    "FailureReport",
    "ValidatableRecord",
    "DictRecord",
    "ValidatedModel",
    "ChainConfigLoader",
    "build_chain",
    "parse_params",
]
