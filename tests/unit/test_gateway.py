import sys

import pytest

from domains.file_ingest.errors import ToolExecutionFailed
from domains.file_ingest.processors import gateway as gateway_module
from domains.file_ingest.processors.gateway import SubprocessGateway, tool_exists

PYTHON = sys.executable


def test_invoke_returns_stdout():
    gateway = SubprocessGateway()

    assert gateway.invoke(PYTHON, ["-c", "print('hello from tool')"]) == "hello from tool\n"


def test_arguments_are_passed_verbatim():
    gateway = SubprocessGateway()

    output = gateway.invoke(PYTHON, ["-c", "import sys; print(sys.argv[1:])", "a b", "-"])

    assert output.strip() == "['a b', '-']"


def test_undecodable_output_is_replaced():
    gateway = SubprocessGateway()

    output = gateway.invoke(PYTHON, ["-c", "import sys; sys.stdout.buffer.write(b'ok \\xff')"])

    assert output == "ok �"


def test_non_zero_exit_uses_stderr():
    gateway = SubprocessGateway()
    script = "import sys; sys.stderr.write('bad input file\\n'); sys.exit(3)"

    with pytest.raises(ToolExecutionFailed) as exc_info:
        gateway.invoke(PYTHON, ["-c", script])

    assert str(exc_info.value) == "bad input file"
    assert exc_info.value.tool_name == PYTHON


def test_non_zero_exit_without_stderr_names_tool():
    gateway = SubprocessGateway()

    with pytest.raises(ToolExecutionFailed) as exc_info:
        gateway.invoke(PYTHON, ["-c", "import sys; sys.exit(1)"])

    assert str(exc_info.value) == f"`{PYTHON}` exited with non-zero status."


def test_unknown_command_fails_cleanly():
    gateway = SubprocessGateway()

    with pytest.raises(ToolExecutionFailed):
        gateway.invoke("watchman-no-such-converter", [])


def test_timeout():
    gateway = SubprocessGateway(timeout=0.5)

    with pytest.raises(ToolExecutionFailed) as exc_info:
        gateway.invoke(PYTHON, ["-c", "import time; time.sleep(5)"])

    assert "timed out" in str(exc_info.value)


def test_availability_lookup_is_injectable():
    gateway = SubprocessGateway(which=lambda command: command == "pandoc")

    assert gateway.is_available("pandoc")
    assert not gateway.is_available("pdftotext")


def test_tool_exists_is_computed_once(monkeypatch):
    calls = []

    def fake_which(command):
        calls.append(command)
        return "/usr/bin/" + command

    monkeypatch.setattr(gateway_module.shutil, "which", fake_which)
    tool_exists.cache_clear()
    try:
        assert tool_exists("watchman-fake-tool")
        assert tool_exists("watchman-fake-tool")
    finally:
        tool_exists.cache_clear()

    assert calls == ["watchman-fake-tool"]
