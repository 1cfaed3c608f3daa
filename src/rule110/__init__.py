"""
Rule 110 Lattice Engine

One-dimensional cellular automaton evolved in place under rule 110, with
each generation reported to an injected host observer.
"""

from .engine import Rule110Engine, rule110
from .errors import ConfigurationError, InvalidArgument
from .host import (
    CallbackObserver, HostObserver, NullObserver, RecordingObserver, TextFrameRenderer
)
from .lattice import DEFAULT_SIZE, Lattice
from .rules import RULE_110_TABLE, RuleParams, apply_rule, encode_neighborhood

__version__ = "0.1.0"

__all__ = [
    'Rule110Engine',
    'rule110',
    'ConfigurationError',
    'InvalidArgument',
    'HostObserver',
    'CallbackObserver',
    'NullObserver',
    'RecordingObserver',
    'TextFrameRenderer',
    'Lattice',
    'DEFAULT_SIZE',
    'RuleParams',
    'RULE_110_TABLE',
    'apply_rule',
    'encode_neighborhood',
]
