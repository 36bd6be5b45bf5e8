# File: tests/test_bundles.py
import hashlib

import pytest

from js_packer.bundles import BundleGrouper
from js_packer.utils import bundle_key, normalize_remote_url, resolve_local_path, script_key


def test_script_key_is_sha1_hex():
    assert script_key("console.log(1)") == hashlib.sha1(b"console.log(1)").hexdigest()
    assert len(script_key("x")) == 40


def test_bundle_key_is_order_sensitive():
    assert bundle_key(["a", "b"]) != bundle_key(["b", "a"])
    assert bundle_key(["a", "b"]) == hashlib.sha1(b"a.b").hexdigest()


def test_pages_with_same_list_share_a_bundle():
    grouper = BundleGrouper()
    first = grouper.register("index.html", ["k1", "k2"])
    second = grouper.register("about.html", ["k1", "k2"])
    assert first is second
    assert first.using_documents == ["index.html", "about.html"]
    assert first.script_keys == ("k1", "k2")
    assert len(grouper) == 1


def test_reversed_order_is_a_different_bundle():
    grouper = BundleGrouper()
    ab = grouper.register("ab.html", ["a", "b"])
    ba = grouper.register("ba.html", ["b", "a"])
    assert ab.bundle_key != ba.bundle_key
    assert [b.bundle_key for b in grouper] == [ab.bundle_key, ba.bundle_key]


def test_empty_list_is_rejected():
    with pytest.raises(ValueError):
        BundleGrouper().register("empty.html", [])


def test_document_registered_once():
    grouper = BundleGrouper()
    grouper.register("index.html", ["k"])
    bundle = grouper.register("index.html", ["k"])
    assert bundle.using_documents == ["index.html"]


def test_normalize_remote_url():
    assert normalize_remote_url("//cdn.example.com/a.js") == "http://cdn.example.com/a.js"
    assert normalize_remote_url("https://cdn.example.com/a.js") == "https://cdn.example.com/a.js"


@pytest.mark.parametrize(
    "src,expected",
    [
        ("/js/app.js", "js/app.js"),
        ("js/app.js", "js/app.js"),
        ("js/app.js?v=3#top", "js/app.js"),
    ],
)
def test_resolve_local_path(tmp_path, src, expected):
    assert resolve_local_path(tmp_path, src) == tmp_path / expected
