from .config import DenyList, EmissionConfig, RedactionRule, load_emission_config
from .log import build_logger
from .ordered import OrderedSet

__all__ = [
    "DenyList",
    "EmissionConfig",
    "RedactionRule",
    "load_emission_config",
    "build_logger",
    "OrderedSet",
]
