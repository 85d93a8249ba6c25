import pytest

from corsdoctor.models import RequestInfo, ResponseInfo


@pytest.fixture
def make_req():
    def factory(**overrides) -> RequestInfo:
        fields = dict(origin="https://app.test", method="GET", url="/api/test")
        fields.update(overrides)
        return RequestInfo(**fields)
    return factory


@pytest.fixture
def make_res():
    def factory(**overrides) -> ResponseInfo:
        fields = dict(
            allow_origin="https://app.test",
            allow_origin_count=1,
            vary=("origin",),
            status=200,
        )
        fields.update(overrides)
        return ResponseInfo(**fields)
    return factory


@pytest.fixture
def captured():
    """Collects emitted text blocks; pass `captured.append` as the sink."""
    return []
