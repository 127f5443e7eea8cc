import pytest

from app.utils.config import Settings


class FakeGateway:
    """Tool gateway that records calls instead of spawning processes."""

    def __init__(self, available=(), outputs=None, error=None):
        self.available = set(available)
        self.outputs = outputs or {}
        self.error = error
        self.availability_checks: list[str] = []
        self.invocations: list[tuple[str, list[str]]] = []

    def is_available(self, command: str) -> bool:
        self.availability_checks.append(command)
        return command in self.available

    def invoke(self, command: str, args) -> str:
        self.invocations.append((command, list(args)))
        if self.error is not None:
            raise self.error
        return self.outputs.get(command, "")


@pytest.fixture
def fake_gateway():
    """Factory for FakeGateway instances."""
    return FakeGateway


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from the developer's environment and .env file."""
    for key in ("MAX_DEPTH", "TEXT_ENCODING", "PANDOC_COMMAND", "PDFTOTEXT_COMMAND", "EMBEDDINGS_DIR"):
        monkeypatch.delenv(key, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def make_tree(tmp_path):
    """Create files from a {relative_path: content} mapping under tmp_path/root."""

    def _make(files: dict[str, str]):
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make
