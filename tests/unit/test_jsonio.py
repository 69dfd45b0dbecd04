import asyncio
from vod_downloader.jsonio import read_json_file


def test_missing_file_returns_empty_list(tmp_path):
    assert asyncio.run(read_json_file(tmp_path / "missing.json")) == []


def test_corrupt_file_returns_empty_list(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("not json")
    assert asyncio.run(read_json_file(p)) == []


def test_directory_returns_empty_list(tmp_path):
    assert asyncio.run(read_json_file(tmp_path)) == []


def test_valid_object(write_json):
    p = write_json("vods.json", {"vods": ["a", "b"], "count": 2})
    assert asyncio.run(read_json_file(p)) == {"vods": ["a", "b"], "count": 2}


def test_valid_list(write_json):
    p = write_json("ids.json", ["v1", "v2"])
    assert asyncio.run(read_json_file(p)) == ["v1", "v2"]
