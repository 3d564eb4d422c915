import pytest

from primegen.utils import EnvironmentManager, EnvironmentVariables


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Fixture to make sure no known variable leaks in from the host environment."""
    for env_var in EnvironmentVariables:
        monkeypatch.delenv(env_var.env_name, raising=False)

def test_defaults_when_unset():
    """Test that unset variables fall back to the enum defaults."""
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2
    assert EnvironmentManager.get_string(EnvironmentVariables.WORKER_MODE) == "process"
    assert EnvironmentManager.get_int(EnvironmentVariables.ROUNDS) == 10

def test_override_default():
    """Test that an explicit default overrides the enum default."""
    assert EnvironmentManager.get_int(EnvironmentVariables.ROUNDS, 20) == 20

def test_reads_environment(monkeypatch):
    """Test that set variables are read and converted."""
    monkeypatch.setenv("PARALLELISM_DIVISOR", "4")
    monkeypatch.setenv("PRIMEGEN_WORKER_MODE", "thread")
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 4
    assert EnvironmentManager.get_string(EnvironmentVariables.WORKER_MODE) == "thread"

def test_invalid_int_falls_back_to_default(monkeypatch):
    """Test that a non-integer value is ignored in favour of the default."""
    monkeypatch.setenv("PRIMEGEN_ROUNDS", "many")
    assert EnvironmentManager.get_int(EnvironmentVariables.ROUNDS) == 10

