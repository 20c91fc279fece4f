import pytest


@pytest.fixture()
def sample_payload():
    return {
        "result": [[1, "a"], [2, "b"]],
        "columns": ["id", "name"],
        "ms": 12,
    }


@pytest.fixture()
def write_manifest(tmp_path):
    def _write(content: str):
        path = tmp_path / "manifest.json"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
