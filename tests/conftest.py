import pytest


def make_scan_result(name="axe-core"):
    return {
        "testEngine": {"name": name, "version": "4.6.3"},
        "testRunner": {"name": "axe"},
        "url": "http://localhost:9876/test/playground.html",
        "violations": [
            {"id": "image-alt", "impact": "critical", "nodes": [{"target": ["img"]}]},
        ],
        "passes": [],
    }


class FakeEngine:
    """Stands in for an axe engine.

    ``run`` follows axe's conventions: with a trailing callback the outcome is
    reported as ``callback(err, results)`` and nothing is returned; otherwise
    the results are returned (or the error raised).
    """

    version = "4.6.3"

    def __init__(self, results=None, error=None):
        self.results = make_scan_result() if results is None else results
        self.error = error
        self.calls = []

    async def run(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if args and callable(args[-1]):
            args[-1](self.error, None if self.error else self.results)
            return None
        if self.error:
            raise self.error
        return self.results

    async def run_partial(self, *args, **kwargs):
        return {"results": []}

    async def finish_run(self, partials, options=None):
        return make_scan_result()


@pytest.fixture
def engine():
    return FakeEngine()
