# File: tests/test_emitter.py
import pytest
from bs4 import BeautifulSoup

from js_packer.config import PackerConfig
from js_packer.emitter import OutputEmitter
from js_packer.models import Bundle
from js_packer.store import ScriptStore

from conftest import page


@pytest.fixture()
def store() -> ScriptStore:
    store = ScriptStore(None)
    for key, content in (("a", "a();"), ("b", "b();")):
        store.claim(key, "inline script")
        store.set(key, content)
    return store


def test_payload_terminates_each_script_with_newline(store):
    emitter = OutputEmitter(PackerConfig(), store)
    assert emitter.payload(Bundle("k", ("a", "b"))) == "a();\nb();\n"
    assert emitter.payload(Bundle("k", ("b", "a"))) == "b();\na();\n"


def test_externalized_bundle_becomes_a_file(store):
    emitter = OutputEmitter(PackerConfig(output_path="js/"), store)
    files = {"index.html": page()}
    before = files["index.html"]

    artifacts = emitter.emit([Bundle("deadbeef", ("a", "b"), ["index.html"])], files)

    assert artifacts == ["js/deadbeef.min.js"]
    assert files["js/deadbeef.min.js"] == b"a();\nb();\n"
    assert files["index.html"] == before


def test_inlined_bundle_goes_into_every_page(store):
    emitter = OutputEmitter(PackerConfig(inline=True), store)
    files = {"one.html": page(), "two.html": page(), "other.html": page()}

    artifacts = emitter.emit([Bundle("k", ("a",), ["one.html", "two.html"])], files)

    assert artifacts == []
    assert set(files) == {"one.html", "two.html", "other.html"}
    for name in ("one.html", "two.html"):
        soup = BeautifulSoup(files[name].decode("utf-8"), "html.parser")
        assert soup.body.find_all("script")[-1].string == "a();\n"
    assert files["other.html"] == page()


def test_unfinished_script_cannot_be_emitted():
    store = ScriptStore()
    store.claim("r", "remote script http://x/r.js")
    with pytest.raises(LookupError):
        OutputEmitter(PackerConfig(), store).emit([Bundle("k", ("r",), ["a.html"])], {"a.html": page()})
