"""
Strategy Registry Module - Looks up solving strategies by name.
"""

from typing import Dict, List, Type, Any

from .base import SolverStrategy


# name -> strategy class, filled by @register_strategy at import time
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "dfs"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    A later class with the same name replaces the earlier one.

    Usage:
        @register_strategy
        class DepthFirstStrategy(SolverStrategy):
            name = "dfs"
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate the strategy registered as name.

    Raises:
        ValueError: If nothing is registered under that name
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(_STRATEGIES))
        raise ValueError(f"Unknown strategy: {name}. Available: {known}") from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    """Registered names, in registration order."""
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """name/description pairs for listing strategies, e.g. in CLI help."""
    return [{"name": name, "description": cls.description} for name, cls in _STRATEGIES.items()]


def get_default_strategy_name() -> str:
    """DEFAULT_STRATEGY when registered, else the first registered name ("" if none)."""
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")
