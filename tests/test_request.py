import pytest
import requests

from emojiparser import request
from emojiparser.request import RequestError, request_download, request_json


class FakeResponse:
    def __init__(self, status_code=200, text="", json_data=None, chunks=()):
        self.status_code = status_code
        self.text = text
        self._json = json_data
        self._chunks = chunks

    def json(self):
        return self._json

    def raise_for_status(self):
        if self.status_code != 200:
            raise requests.exceptions.HTTPError(response=self)

    def iter_content(self, chunk_size=1):
        yield from self._chunks

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response


@pytest.fixture
def fake_session(monkeypatch):
    def install(response):
        session = FakeSession(response)
        monkeypatch.setattr(request, "_table_session", lambda: session)
        monkeypatch.setattr(request, "_download_session", lambda: session)
        return session

    return install


class TestSessions:
    def test_table_cache_stays_in_memory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        session = request._table_session.__wrapped__()
        session.close()
        assert list(tmp_path.iterdir()) == []


class TestRequestJson:
    def test_json(self, fake_session):
        session = fake_session(FakeResponse(json_data={"smile": "😄"}))
        assert request_json("https://example.com/t.json") == {"smile": "😄"}
        url, kwargs = session.calls[0]
        assert url == "https://example.com/t.json"
        assert kwargs["headers"]["User-Agent"].startswith("emojiparser ")

    def test_error_status(self, fake_session):
        fake_session(FakeResponse(status_code=503, text="down"))
        with pytest.raises(RequestError) as excinfo:
            request_json("https://example.com/")
        assert str(excinfo.value) == "503"


class TestRequestDownload:
    def test_download(self, tmp_path, fake_session):
        fake_session(FakeResponse(chunks=[b"GIF8", b"9a"]))
        target = tmp_path / "custom" / "wave.gif"

        request_download("https://cdn.example.com/1.gif", target)

        assert target.read_bytes() == b"GIF89a"

    def test_http_error(self, tmp_path, fake_session):
        fake_session(FakeResponse(status_code=404))
        with pytest.raises(RequestError) as excinfo:
            request_download("https://cdn.example.com/1.gif", tmp_path / "1.gif")
        assert str(excinfo.value) == "404"

    def test_base_directory_is_a_file(self, tmp_path, fake_session):
        fake_session(FakeResponse())
        (tmp_path / "custom").write_text("")
        with pytest.raises(ValueError):
            request_download("https://cdn.example.com/1.gif", tmp_path / "custom" / "1.gif")
