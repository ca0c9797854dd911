from atomcss.validation.rules import ALL_RULES
from atomcss.validation.validator import RuleFunc, validate

__all__ = ["ALL_RULES", "RuleFunc", "validate"]
