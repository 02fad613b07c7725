import io

import pytest

import sha1bench

FOX = b"The quick brown fox jumps over the lazy dog"
FOX_SHA1 = "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"

@pytest.fixture(autouse=True)
def no_sha1sum(monkeypatch):
    monkeypatch.setenv("WITHOUT_SHA1SUM", "1")

def test_stdin():
    out = io.StringIO()
    assert sha1bench.main([], stdin=io.BytesIO(FOX), out=out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == FOX_SHA1
    assert [l.split(":")[0] for l in lines[1:]] == ["sha1.py", "hashlib"]

def test_file_and_chunk_size(tmp_path):
    path = tmp_path / "fox.txt"
    path.write_bytes(FOX)
    out = io.StringIO()
    sha1bench.main([str(path), "--chunk-size", "5"], out=out)
    assert out.getvalue().splitlines()[0] == FOX_SHA1

@pytest.mark.parametrize("size", ["0", "-3"])
def test_bad_chunk_size(size):
    with pytest.raises(SystemExit):
        sha1bench.main(["--chunk-size", size], stdin=io.BytesIO(b""), out=io.StringIO())

@pytest.mark.parametrize("chunk", [1, 63, 64, 65, 4096])
def test_pure_sha1_chunking(chunk):
    assert sha1bench.pure_sha1(FOX * 3, chunk) == sha1bench.pure_sha1(FOX * 3, 1 << 20)
