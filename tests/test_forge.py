"""Tests for fdf_form/forge.py"""
import json
import re

from fdf_form.forge import FDF_HEADER, forge_fdf


def _field_dicts(fdf: bytes):
    return re.findall(rb"<< /T .*?>> \r", fdf)


def test_empty_document_layout():
    fdf = forge_fdf("", {}, {})

    assert fdf == (
        b"%FDF-1.2\r%\xe2\xe3\xcf\xd3\r\n"
        b"1 0 obj\r<< \r/FDF << /Fields [ ] \r"
        b">> \r>> \rendobj\r"
        b"trailer\r<<\r/Root 1 0 R \r\r>>\r"
        b"%%EOF\r\n"
    )


def test_header_and_eof():
    fdf = forge_fdf(None, {"a": "1"}, {"b": "Yes"}, ["a"], ["b"])

    assert FDF_HEADER == b"%FDF-1.2\x0d%\xe2\xe3\xcf\xd3\x0d\x0a"
    assert fdf.startswith(FDF_HEADER)
    assert fdf.endswith(b"%%EOF\r\n")


def test_end_to_end_fields():
    fdf = forge_fdf(
        "",
        {"name": "Jane Doe"},
        {"subscribe": "Yes"},
        hidden=set(),
        readonly={"name"},
    )
    fields = _field_dicts(fdf)

    assert fields == [
        b"<< /T (name) /V (Jane Doe) /ClrF 2 /SetFf 1 >> \r",
        b"<< /T (subscribe) /V /Yes /ClrF 2 /ClrFf 1 >> \r",
    ]


def test_string_fields_precede_name_fields():
    fdf = forge_fdf("", {"z.text": "t"}, {"a": "Off"})

    assert fdf.index(b"/T (z)") < fdf.index(b"/T (a)")


def test_form_url_written_when_given():
    fdf = forge_fdf("forms/w9 (2024).pdf", {}, {})

    assert b"/F (forms/w9 \\(2024\\).pdf) \r>> \r>> \rendobj\r" in fdf


def test_form_url_omitted_when_empty():
    assert b"/F (" not in forge_fdf("", {"a": "1"}, {})
    assert b"/F (" not in forge_fdf(None, {"a": "1"}, {})


def test_flag_names_coerced_to_text():
    fdf = forge_fdf("", {1: "one"}, {}, hidden=[1])

    assert b"<< /T (1) /V (one) /SetF 2 /ClrFf 1 >> \r" in fdf


def test_deterministic_output():
    strings = {"b": "2", "a.x": "1", "a.y": "(3)"}
    names = {"box": "Yes"}

    first = forge_fdf("f.pdf", strings, names, ["a.x"], ["b"])
    second = forge_fdf("f.pdf", dict(strings), dict(names), ["a.x"], ["b"])

    assert first == second


def test_nested_fields_inside_fields_array():
    fdf = forge_fdf("", {"address.city": "Springfield", "address.zip": "12345"}, {})

    assert (
        b"/Fields [ << /T (address) /Kids [ "
        b"<< /T (city) /V (Springfield) /ClrF 2 /ClrFf 1 >> \r"
        b"<< /T (zip) /V (12345) /ClrF 2 /ClrFf 1 >> \r"
        b"] >> \r] \r"
    ) in fdf


def test_lone_surrogate_names_and_values_still_forge():
    value = json.loads('"\\ud800abc"')
    key = json.loads('"f\\udc80"')

    fdf = forge_fdf(value, {"name": value}, {key: "Yes"})

    assert b"<< /T (name) /V (\\355\\240\\200abc) /ClrF 2 /ClrFf 1 >> \r" in fdf
    assert b"<< /T (f\\355\\262\\200) /V /Yes /ClrF 2 /ClrFf 1 >> \r" in fdf
    assert b"/F (\\355\\240\\200abc) \r" in fdf
    assert fdf.endswith(b"%%EOF\r\n")
