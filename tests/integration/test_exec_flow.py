import asyncio
import shutil
import pytest
from vod_downloader.process import exec_command


@pytest.mark.integration
@pytest.mark.skipif(shutil.which("echo") is None, reason="echo not available")
def test_echo_hello_prints_and_exits_zero(capsys):
    code = asyncio.run(exec_command(["echo", "hello"]))
    out, _ = capsys.readouterr()
    assert code == 0
    assert "hello" in out
