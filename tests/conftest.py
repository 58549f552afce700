"""
- ScriptedPlayer feeds a fixed list of guesses, then signals end of input.
- Environment defaults are cleared and .env loading is disabled so a developer's
  shell or .env file cannot leak into tests.
"""
import pytest


class ScriptedPlayer:
    def __init__(self, guesses):
        self.guesses = list(guesses)
        self.calls = 0

    def get_next_guess(self):
        self.calls += 1
        if not self.guesses:
            return None
        return self.guesses.pop(0)


@pytest.fixture
def scripted_player():
    return ScriptedPlayer


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MASTERMIND_SECRET", "MASTERMIND_MAX_ATTEMPTS", "MASTERMIND_SEED"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv writes to os.environ behind monkeypatch's back
    monkeypatch.setattr("mastermind.main.load_dotenv", lambda *args, **kwargs: False)
    yield
