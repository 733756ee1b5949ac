import threading
import urllib.error
import urllib.request

import pytest

from herewego.fileserver import make_server


@pytest.fixture
def served(tmp_path):
    (tmp_path / "book.txt").write_bytes(b"pages of a book")
    server = make_server(tmp_path, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
    thread.join()


def test_serves_file_content(served):
    with urllib.request.urlopen(served + "/book.txt") as response:
        assert response.read() == b"pages of a book"


def test_lists_directory(served):
    with urllib.request.urlopen(served + "/") as response:
        assert "book.txt" in response.read().decode("utf-8")


def test_missing_file_is_not_found(served):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(served + "/missing.txt")
    assert info.value.code == 404