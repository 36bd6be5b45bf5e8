# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from js_packer.config import PackerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("inline: true\nsiteRootPath: /blog/", ".yaml", None),
        (json.dumps({"inline": True, "siteRootPath": "/blog/"}), ".json", None),
        ("inline: true\nsite_root_path: /blog/", ".yml", None),
        ("inline: true\nunknown_option: 1", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("{broken", ".json", ValueError),
        ("inline = true", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, PackerConfig)
        assert cfg.inline is True
        assert cfg.site_root_path == "/blog/"


def test_defaults():
    cfg = PackerConfig()
    assert cfg.inline is False
    assert cfg.site_root_path == "/"
    assert cfg.output_path == "assets/javascript/"
    assert cfg.uglify is True
    assert cfg.uglify_options == {}
    assert cfg.minifier == "rjsmin"
    assert cfg.html_extension == ".html"
    assert cfg.fetch_timeout is None
    assert cfg.retry_times == 0


def test_aliases_and_output_path_slash():
    cfg = PackerConfig.model_validate(
        {"outputPath": "static/js", "uglifyOptions": {"keep_bang_comments": True}, "source": "content"}
    )
    assert cfg.output_path == "static/js/"
    assert cfg.uglify_options == {"keep_bang_comments": True}
    assert cfg.source_dir == Path("content")


def test_bundle_paths():
    cfg = PackerConfig(site_root_path="/site/", output_path="js/")
    assert cfg.bundle_file("abc") == "js/abc.min.js"
    assert cfg.bundle_url("abc") == "/site/js/abc.min.js"


def test_config_is_frozen():
    cfg = PackerConfig()
    with pytest.raises(ValidationError):
        cfg.inline = True


def test_negative_retries_rejected():
    with pytest.raises(ValidationError):
        PackerConfig(retry_times=-1)


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == PackerConfig()


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "js_packer.yaml").write_text("uglify: false\n", encoding="utf-8")
    assert load_config(None).uglify is False


def test_config_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
