"""CI and test-runner detection from the process environment."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from fijos.constants.discovery import (
    CI_FLAG_TRUE_VALUES,
    CI_FLAG_VARIABLE,
    CI_PRESENCE_VARIABLES,
    CI_REPOSITORY_PATH_VARIABLES,
    TEST_RUNNER_VARIABLES,
)
from fijos.types import Environment


def ci_repository_variable(
    environ: Environment | None = None,
    variables: Sequence[str] = CI_REPOSITORY_PATH_VARIABLES,
) -> str | None:
    """Return the name of the first CI checkout variable that holds a value."""
    env = os.environ if environ is None else environ
    for name in variables:
        if env.get(name, "").strip():
            return name
    return None


def ci_repository_path(
    environ: Environment | None = None,
    variables: Sequence[str] = CI_REPOSITORY_PATH_VARIABLES,
) -> Path | None:
    """Return the repository checkout path published by the CI system, if any."""
    env = os.environ if environ is None else environ
    name = ci_repository_variable(env, variables)
    if name is None:
        return None
    return Path(env[name].strip()).expanduser()


def is_ci(environ: Environment | None = None) -> bool:
    env = os.environ if environ is None else environ
    if env.get(CI_FLAG_VARIABLE, "").strip().lower() in CI_FLAG_TRUE_VALUES:
        return True
    return any(name in env for name in CI_PRESENCE_VARIABLES)


def is_running_tests(environ: Environment | None = None) -> bool:
    """Return True when the current process looks like a pytest run."""
    env = os.environ if environ is None else environ
    if any(name in env for name in TEST_RUNNER_VARIABLES):
        return True
    return "pytest" in sys.modules
