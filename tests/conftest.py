import pytest

from ok.builtin.env_builtin import default_environment
from ok.builtin.host_builtin import register_host_builtins
from ok.evaluation.evaluator import eval_source


# Two environments are used across the suite:
# 1) `env`: the bare default environment (func, switch, let, id, list)
# 2) `host_env`: the default environment plus the operators the CLI installs


@pytest.fixture
def env():
    """Fresh default environment for each test."""
    return default_environment()


@pytest.fixture
def host_env():
    """Default environment with the host operators registered."""
    e = default_environment()
    register_host_builtins(e)
    return e


@pytest.fixture
def run():
    """Evaluate source text against an environment."""
    def _run(env, source):
        return eval_source("<test>", source, env)
    return _run
