import httpx
import pytest
import requests

from txjurisdiction.services.arcgis_client import ArcGISClient

NO_FEATURES = {"features": []}


@pytest.fixture
def arcgis():
    """
    Builds an ArcGISClient whose transport answers from a {endpoint_url: answer} map.
    An answer is a JSON dict, an int status code, or an exception to raise.
    Endpoints missing from the map return an empty feature set.
    """
    def build(answers: dict, calls: list | None = None) -> ArcGISClient:
        def handler(request: httpx.Request) -> httpx.Response:
            url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
            if calls is not None:
                calls.append((url, dict(request.url.params)))
            answer = answers.get(url, NO_FEATURES)
            if isinstance(answer, Exception):
                raise answer
            if isinstance(answer, int):
                return httpx.Response(answer, text="unavailable")
            return httpx.Response(200, json=answer)

        return ArcGISClient(user_agent="test-agent", timeout=1.0, transport=httpx.MockTransport(handler))

    return build


class FakeHead:
    """Stands in for requests.head; hosts in `alive` answer, everything else fails to connect."""

    def __init__(self, alive=()):
        self.alive = set(alive)
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append(url)
        if any(url.startswith(prefix) for prefix in self.alive):
            return requests.Response()
        raise requests.ConnectionError(f"cannot reach {url}")


@pytest.fixture
def fake_head(monkeypatch):
    def install(alive=()):
        head = FakeHead(alive)
        monkeypatch.setattr("txjurisdiction.guesser.requests.head", head)
        return head

    return install
