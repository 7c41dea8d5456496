import io
import json

import pytest

from dynamis.jsonm import JsonRecord


def test_single_then_repeated_values_become_list():
    rec = JsonRecord()
    rec.add_element("time", "1")
    assert rec.data["time"] == "1"
    rec.add_element("time", "2")
    assert rec.data["time"] == ["1", "2"]
    rec.add_element("time", "3")
    assert rec.data["time"] == ["1", "2", "3"]


def test_record_values_are_copied():
    inner = JsonRecord()
    inner.add_element("a", "x")
    rec = JsonRecord()
    rec.add_element("run", inner)
    inner.add_element("a", "y")
    assert rec.data["run"] == {"a": "x"}
    rec.add_element("run", inner)
    assert rec.data["run"] == [{"a": "x"}, {"a": ["x", "y"]}]


def test_nested_elements():
    rec = JsonRecord()
    rec.add_nested("info", "file", "data.txt")
    rec.add_nested("info", "param_k", "4")
    rec.add_nested("info", "file", "other.txt")
    assert rec.data == {"info": {"file": ["data.txt", "other.txt"], "param_k": "4"}}


def test_nested_record_value():
    inner = JsonRecord()
    inner.add_element("size", "3")
    rec = JsonRecord()
    rec.add_nested("step", "0", inner)
    rec.add_nested("step", "0", inner)
    assert rec.data["step"]["0"] == [{"size": "3"}, {"size": "3"}]


def test_nested_under_non_object_raises():
    rec = JsonRecord()
    rec.add_element("info", "text")
    with pytest.raises(TypeError):
        rec.add_nested("info", "file", "x")


def test_dumps_is_compact_and_sorted():
    rec = JsonRecord()
    rec.add_element("b", "2")
    rec.add_element("a", "1")
    assert rec.dumps() == '{"a":"1","b":"2"}'


def test_print_writes_json():
    rec = JsonRecord()
    rec.add_nested("info", "algo_type", "grid")
    buf = io.StringIO()
    rec.print(buf)
    assert json.loads(buf.getvalue()) == rec.data


def test_output_writes_file(tmp_path):
    (tmp_path / "RESULT").mkdir()
    rec = JsonRecord()
    rec.add_element("k", "v")
    path = rec.output(str(tmp_path), "-grid-add", "data.txt")
    assert path == tmp_path / "RESULT" / "data.txt-grid-add"
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}


def test_output_missing_folder_raises(tmp_path):
    rec = JsonRecord()
    with pytest.raises(FileNotFoundError):
        rec.output(str(tmp_path / "absent"), "-x", "f")