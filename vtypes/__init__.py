"""vtypes: Composable validation types, with sum types at the core."""

from .contract import Type, Undefined
from .result import Failure, Result, Success
from .errors import CoercionError, ConfigError, ConstraintError
from .logic import And, Or, Predicate, Rule, rule_from_options
from .nominal import Nominal
from .constrained import Constrained
from .sum import ConstrainedSum, Sum
from .serialization import dumps, loads
from .helpers import nil, nominal, strict, sum_of

__all__ = [
    # Contract
    "Type", "Undefined",
    # Results
    "Success", "Failure", "Result",
    # Errors
    "CoercionError", "ConstraintError", "ConfigError",
    # Logic
    "Rule", "Predicate", "And", "Or", "rule_from_options",
    # Types
    "Nominal", "Constrained", "Sum", "ConstrainedSum",
    # Serialization
    "dumps", "loads",
    # Helpers
    "nominal", "strict", "nil", "sum_of",
]
