import pytest


class ScriptedRng:
    """
    Ersätter numpy Generator med förutbestämda dragningar.
    integers() tar nästa index ur `picks`, random() nästa värde ur `randoms`
    (0.5 när listan är slut — ger exakt centervärde utan jitter).
    """

    def __init__(self, picks=None, randoms=None):
        self.picks = list(picks or [])
        self.randoms = list(randoms or [])

    def integers(self, n):
        value = self.picks.pop(0)
        assert 0 <= value < n
        return value

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.5


@pytest.fixture
def scripted_rng():
    return ScriptedRng
