import json

from handbook_feeds import store


def test_load_missing_file_is_empty(tmp_path):
    assert store.load(tmp_path / "nope.json") == {}


def test_load_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text("{not json", encoding="utf-8")
    assert store.load(path) == {}


def test_load_non_object_is_empty(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert store.load(path) == {}


def test_canonicalize_sorts_keys():
    mapping = {"zeta": {"en": "zeta.html"}, "alpha": {"en": "alpha.html"}, "mid": {}}
    result = store.canonicalize(mapping)
    assert list(result) == ["alpha", "mid", "zeta"]
    assert result == mapping
    assert store.canonicalize(result) == result
    assert list(store.canonicalize(result)) == list(result)


def test_save_writes_canonical_json(tmp_path):
    path = tmp_path / "data" / "articles.json"
    store.save(path, {"b": {"title_en": "Bé", "en": "b.html"}, "a": {"en": "a.html"}})

    text = path.read_text(encoding="utf-8")
    assert text == (
        "{\n"
        '  "a": {\n'
        '    "en": "a.html"\n'
        "  },\n"
        '  "b": {\n'
        '    "en": "b.html",\n'
        '    "title_en": "Bé"\n'
        "  }\n"
        "}\n"
    )


def test_save_is_idempotent(tmp_path):
    path = tmp_path / "articles.json"
    path.write_text(json.dumps({"z": {"en": "z.html"}, "a": {"pubdate": "2024-01-01", "en": "a.html"}}))

    store.save(path, store.load(path))
    first = path.read_bytes()
    store.save(path, store.load(path))
    assert path.read_bytes() == first


def test_dumps_does_not_depend_on_input_order():
    a = {"x": {"en": "x.html", "title_en": "X"}, "y": {"en": "y.html"}}
    b = {"y": {"en": "y.html"}, "x": {"title_en": "X", "en": "x.html"}}
    assert store.dumps(a) == store.dumps(b)
