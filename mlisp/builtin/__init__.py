"""The builtin namespace installed into the root environment."""
from __future__ import annotations

from typing import Optional

import numpy as np

from mlisp import LispValue
from mlisp.builtin.core import CORE_BUILTINS
from mlisp.builtin.linalg import LINALG_BUILTINS, make_randmat, make_randmatf
from mlisp.config import get_random_seed
from mlisp.types.boolean import FALSE, TRUE
from mlisp.types.environment import Environment
from mlisp.types.function import NativeFunction
from mlisp.types.nil import Nil
from mlisp.types.symbol import Symbol


def build_namespace(rng: Optional[np.random.Generator] = None) -> dict[Symbol, NativeFunction]:
    """Map every builtin name to its NativeFunction.

    `rng` feeds randmat/randmatf; when omitted a Generator is seeded from
    MLISP_RANDOM_SEED (or fresh entropy when unset).
    """
    if rng is None:
        rng = np.random.default_rng(get_random_seed())
    table = {
        **CORE_BUILTINS,
        **LINALG_BUILTINS,
        "randmat": make_randmat(rng),
        "randmatf": make_randmatf(rng),
    }
    return {Symbol(name): NativeFunction(fn, name) for name, fn in table.items()}


def build_root_environment(
    namespace: Optional[dict[Symbol, LispValue]] = None,
) -> Environment:
    env = Environment()
    env.update(build_namespace() if namespace is None else namespace)
    env.bind(Symbol("true"), TRUE)
    env.bind(Symbol("false"), FALSE)
    env.bind(Symbol("nil"), Nil)
    # Matrix literals are vectors, so the row separator must evaluate to itself.
    env.bind(Symbol(";"), Symbol(";"))
    return env


__all__ = ["build_namespace", "build_root_environment"]
