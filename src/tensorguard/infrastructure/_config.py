"""
Environment-driven runtime switches.

tensorguard has no configuration file. The few knobs it exposes are opt-in
environment variables, read at call time so tests and long-running processes
can toggle them without re-importing the package.

Variables
---------
TENSORGUARD_DEBUG
    When set to anything other than ``""``, ``"0"`` or ``"false"`` (any
    case), the result mapper emits a ``RuntimeWarning`` for every backend
    fault it recovers and every NaN result it rejects.
"""

import os

DEBUG_ENV_VAR = "TENSORGUARD_DEBUG"

_FALSY = ("", "0", "false")


def env_flag(name: str, default: bool = False) -> bool:
    """
    Interpret an environment variable as a boolean switch.

    Parameters
    ----------
    name : str
        Environment variable name.
    default : bool, optional
        Value returned when the variable is unset. Defaults to False.

    Returns
    -------
    bool
        False for unset-with-default-False, ``""``, ``"0"`` and ``"false"``
        (case-insensitive); True otherwise.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


def debug_enabled() -> bool:
    return env_flag(DEBUG_ENV_VAR)
