import os
from typing import Mapping, Optional

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(environ: Mapping[str, str], key: str, default: bool) -> bool:
    if key not in environ:
        return default
    return environ[key].strip().lower() in _TRUTHY


class IntervalSetConfig:
    """Configuration for interval set operations"""

    COALESCE_ADJACENT_ENV = "ALLEN_COALESCE_ADJACENT"
    VALIDATE_INPUTS_ENV = "ALLEN_VALIDATE_INPUTS"

    def __init__(
        self,
        coalesce_adjacent: bool = True,
        validate_inputs: bool = False,
    ):
        """
        Args:
            coalesce_adjacent: whether union merges intervals that meet into one
            validate_inputs: whether eager set operations check that every input
                set is ordered and disjoint before combining them
        """
        self.coalesce_adjacent = coalesce_adjacent
        self.validate_inputs = validate_inputs
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.coalesce_adjacent, bool):
            raise ValueError("coalesce_adjacent must be a bool")
        if not isinstance(self.validate_inputs, bool):
            raise ValueError("validate_inputs must be a bool")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "IntervalSetConfig":
        """Builds a configuration from ALLEN_* environment variables"""
        if environ is None:
            environ = os.environ
        return cls(
            coalesce_adjacent=_env_flag(environ, cls.COALESCE_ADJACENT_ENV, True),
            validate_inputs=_env_flag(environ, cls.VALIDATE_INPUTS_ENV, False),
        )

    def __repr__(self) -> str:
        return (
            f"IntervalSetConfig(coalesce_adjacent={self.coalesce_adjacent}, "
            f"validate_inputs={self.validate_inputs})"
        )


_default_config: Optional[IntervalSetConfig] = None


def get_default_config() -> IntervalSetConfig:
    """Returns the process-wide default, read from the environment on first use"""
    global _default_config
    if _default_config is None:
        _default_config = IntervalSetConfig.from_env()
    return _default_config


def set_default_config(config: Optional[IntervalSetConfig]) -> None:
    """Replaces the process-wide default; None re-reads the environment on next use"""
    global _default_config
    _default_config = config
