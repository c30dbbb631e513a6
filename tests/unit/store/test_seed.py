"""Unit tests for seed.py"""

import pytest

from docstore.seed import load_documents


def test_load_documents_yaml_list(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text(
        "- id: d1\n"
        "  title: Alpha\n"
        "  content: hello\n"
        "  author: {id: a1, name: Ann}\n"
        "  created: 2024-01-01 10:00:00\n"
        "- title: Beta\n"
    )
    docs = load_documents(path)
    assert [d.title for d in docs] == ["Alpha", "Beta"]
    assert docs[0].author.id == "a1"
    assert docs[0].created.year == 2024
    assert docs[1].id is None


def test_load_documents_json_mapping(tmp_path):
    """A mapping with a 'documents' key is accepted; JSON parses as YAML."""
    path = tmp_path / "docs.json"
    path.write_text('{"documents": [{"id": "d1", "title": "Alpha"}]}')
    docs = load_documents(path)
    assert docs[0].id == "d1"


def test_load_documents_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_documents(path) == []


def test_load_documents_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Cannot read"):
        load_documents(path)


def test_load_documents_wrong_shape(tmp_path):
    path = tmp_path / "scalar.yaml"
    path.write_text("just a string\n")
    with pytest.raises(ValueError, match="expected a list"):
        load_documents(path)


def test_load_documents_bad_field_type(tmp_path):
    path = tmp_path / "typed.yaml"
    path.write_text("- created: not-a-date\n")
    with pytest.raises(ValueError):
        load_documents(path)


def test_load_documents_missing_file(tmp_path):
    with pytest.raises(ValueError, match="Cannot read"):
        load_documents(tmp_path / "nope.yaml")


def test_load_documents_mapping_without_documents_key(tmp_path):
    """A mapping that lacks 'documents' is rejected rather than read as empty."""
    path = tmp_path / "docs.yaml"
    path.write_text("docs:\n  - title: Alpha\n")
    with pytest.raises(ValueError, match="expected a list"):
        load_documents(path)
