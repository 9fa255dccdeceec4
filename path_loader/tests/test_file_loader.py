import asyncio
import os

import pytest

from path_loader.adapters.loader_fs import FsFileLoader
from path_loader.adapters.loader_fs_browser import UnsupportedFileLoader
from path_loader.app.settings import LoaderSettings
from path_loader.app.wiring import build_loader
from path_loader.domain.errors import FileLoadError, UnsupportedEnvironmentError
from path_loader.domain.models import LoadOptions

PROJECT_JSON = '{"name":"x"}'


@pytest.fixture()
def project(tmp_path):
    d = tmp_path / "test" / "browser"
    d.mkdir(parents=True)
    p = d / "project.json"
    p.write_text(PROJECT_JSON, encoding="utf-8")
    return p


def _load(target, options=None, settings=None):
    loader = build_loader(settings or LoaderSettings(environment="server"))
    return loader.load_sync(target, options)


def test_absolute_relative_and_file_url_give_same_content(project, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    variants = [
        str(project),
        "test/browser/project.json",
        "./test/browser/project.json",
        "file://" + str(project),
        project,
    ]
    contents = {_load(v) for v in variants}
    assert contents == {PROJECT_JSON}


def test_load_returns_raw_text_without_parsing(project, monkeypatch):
    monkeypatch.chdir(project.parent)
    out = _load("./project.json")
    assert out == '{"name":"x"}'
    assert isinstance(out, str)


def test_missing_file_reports_code_and_absolute_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    missing = os.path.join(str(tmp_path), "missing.json")

    with pytest.raises(FileLoadError) as ei:
        _load("missing.json")

    msg = str(ei.value)
    assert "ENOENT" in msg
    assert missing in msg
    assert ei.value.code == "ENOENT"
    assert ei.value.path == missing


def test_directory_is_an_error(tmp_path):
    with pytest.raises(FileLoadError) as ei:
        _load(str(tmp_path))
    assert ei.value.code == "EISDIR"
    assert str(tmp_path) in str(ei.value)


def test_encoding_override(tmp_path):
    p = tmp_path / "latin.txt"
    p.write_bytes("café".encode("latin-1"))

    assert _load(str(p), {"encoding": "latin-1"}) == "café"

    with pytest.raises(FileLoadError) as ei:
        _load(str(p))
    assert ei.value.code == "EILSEQ"


def test_base_dir_is_used_for_relative_paths(project):
    loader = FsFileLoader(base_dir=str(project.parent))
    out = asyncio.run(loader.load("project.json", LoadOptions()))
    assert out == PROJECT_JSON
    assert loader.resolve("../browser/project.json") == str(project)


def test_browser_environment_has_no_filesystem(project):
    with pytest.raises(UnsupportedEnvironmentError) as ei:
        _load(str(project), settings=LoaderSettings(environment="browser"))
    assert "not supported in this environment" in str(ei.value)

    with pytest.raises(UnsupportedEnvironmentError):
        asyncio.run(UnsupportedFileLoader().load("file.txt", LoadOptions()))
