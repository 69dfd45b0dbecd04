import json
import sys
from pathlib import Path
import pytest

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from vod_downloader import config as config_module  # noqa: E402
from vod_downloader.config import AppConfig  # noqa: E402
from vod_downloader.logging_utils import get_logger  # noqa: E402

# Bind the log handler to the session stderr, not a per-test capture
get_logger()


@pytest.fixture(autouse=True)
def reset_config():
    yield
    config_module.set_config(None)  # type: ignore[arg-type]


@pytest.fixture()
def app_config(tmp_path):
    return AppConfig(project_root=tmp_path / "root")


@pytest.fixture()
def config_file(tmp_path, app_config):
    path = tmp_path / "config.json"
    app_config.save(path)
    return path


@pytest.fixture()
def run_cli(capsys):
    from vod_downloader.cli import run_cli as _run_cli

    def _invoke(args):
        try:
            code = _run_cli(args)
        except SystemExit as e:
            code = e.code
        out, err = capsys.readouterr()
        return code, out, err

    return _invoke


@pytest.fixture()
def sample_ids():
    return ["v300", "v200", "v100"]


@pytest.fixture()
def write_json(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path

    return _write
