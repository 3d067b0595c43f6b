"""
Tests for presetlib.parser

Parsing, type inference, id disambiguation and serialization.
"""

import pytest

from conftest import make_preset_text
from presetlib.parser import (
    Preset,
    PresetMetaEntry,
    PresetParam,
    PresetParseError,
    find_duplicate_ids,
    format_value,
    parse_preset,
    parse_value,
    serialize_preset,
    value_type,
)


class TestParseValue:
    @pytest.mark.parametrize("raw,expected", [
        ("10", (10, "integer")),
        ("-3", (-3, "integer")),
        ("10.0", (10, "integer")),
        ("10.5", (10.5, "float")),
        ("-0.25", (-0.25, "float")),
        (".5", (0.5, "float")),
        ("1e-3", (0.001, "float")),
        ("hello", ("hello", "string")),
        ("", ("", "string")),
        ("nan", ("nan", "string")),
        ("inf", ("inf", "string")),
        ("0x10", ("0x10", "string")),
        ("1_000", ("1_000", "string")),
        ("1e400", ("1e400", "string")),
    ])
    def test_inference(self, raw, expected):
        value, kind = parse_value(raw)
        assert kind == expected[1]
        assert value == expected[0]
        assert type(value) is {"integer": int, "float": float, "string": str}[kind]

    @pytest.mark.parametrize("raw", ["0", "42", "-7", "3.14", "0.01", "-12.75", "2e-7"])
    def test_numeric_values_survive_formatting(self, raw):
        value, kind = parse_value(raw)
        again, again_type = parse_value(format_value(value))
        assert again_type == kind
        assert again == value

    def test_integral_float_formats_without_fraction(self):
        assert format_value(2.0) == "2"
        assert format_value(2.25) == "2.25"

    @pytest.mark.parametrize("value,text", [
        (0.00005, "0.00005"),
        (2e-7, "0.0000002"),
        (-0.0001, "-0.0001"),
        (0.1, "0.1"),
        (123456.789, "123456.789"),
    ])
    def test_small_floats_format_as_plain_decimals(self, value, text):
        assert format_value(value) == text

    def test_value_type_matches_parsing(self):
        assert value_type(60) == "integer"
        assert value_type(60.0) == "integer"
        assert value_type(60.5) == "float"
        assert value_type("Saw") == "string"


class TestParsePreset:
    def test_example_body(self):
        preset = parse_preset(make_preset_text("A=1\nB=2.5\nC=hello\n"), "Test.h2p")

        assert [(p.id, p.type, p.value) for p in preset.params] == [
            ("MAIN/A", "integer", 1),
            ("MAIN/B", "float", 2.5),
            ("MAIN/C", "string", "hello"),
        ]
        assert [p.index for p in preset.params] == [0, 1, 2]

    def test_name_and_path(self, sample_preset):
        assert sample_preset.file_path == "Bass/Sample Bass.h2p"
        assert sample_preset.preset_name == "Sample Bass"

    def test_windows_path_name(self):
        preset = parse_preset(make_preset_text("A=1"), "Bass\\Wobble.h2p")
        assert preset.preset_name == "Wobble"

    def test_metadata(self, sample_preset):
        assert sample_preset.meta == [
            PresetMetaEntry("Author", "Tester"),
            PresetMetaEntry("Categories", ["Bass", "Lead"]),
        ]

    def test_lowercase_meta_marker(self):
        text = make_preset_text("A=1").replace("/*@Meta", "/*@meta")
        preset = parse_preset(text, "x.h2p")
        assert preset.meta[0] == PresetMetaEntry("Author", "Tester")

    def test_sections(self, sample_preset):
        sections = {p.key: p.section for p in sample_preset.params if p.key != "#ms"}
        assert sections["#AM"] == "MAIN"
        assert sections["Ver"] == "MAIN"
        assert sections["Tune"] == "OSC"
        assert sections["Cutoff"] == "VCF1"

    def test_section_marker_is_kept_as_param(self, sample_preset):
        markers = [p for p in sample_preset.params if p.key == "#cm"]
        assert [(p.id, p.value) for p in markers] == [("OSC/#cm", "OSC"), ("VCF1/#cm", "VCF1")]

    def test_repeating_key_gets_index(self, sample_preset):
        ms = [p.id for p in sample_preset.params if p.key == "#ms"]
        assert ms == ["OSC/#ms/5", "OSC/#ms/6"]

    def test_ids_unique(self, sample_preset):
        ids = [p.id for p in sample_preset.params]
        assert len(ids) == len(set(ids))
        assert find_duplicate_ids(sample_preset) == []

    def test_collisions_are_reported(self):
        preset = parse_preset(make_preset_text("A=1\nA=2\nB=3"), "x.h2p")
        assert find_duplicate_ids(preset) == ["MAIN/A"]

    def test_value_keeps_extra_equals(self):
        preset = parse_preset(make_preset_text("Name=a=b"), "x.h2p")
        assert preset.params[0].value == "a=b"

    def test_crlf_line_endings(self):
        text = make_preset_text("A=1\nB=x").replace("\n", "\r\n")
        preset = parse_preset(text, "x.h2p")
        assert [(p.key, p.value) for p in preset.params] == [("A", 1), ("B", "x")]

    def test_binary_tail_is_ignored(self, sample_preset):
        assert all("binary" not in str(p.value) for p in sample_preset.params)


class TestParseErrors:
    def test_missing_section_marker(self):
        text = "/*@Meta\n\nAuthor:\n'me'\n\n*/\n\nA=1\nB=2\n"
        with pytest.raises(PresetParseError, match="parameter body"):
            parse_preset(text, "x.h2p")

    def test_missing_comment_end(self):
        with pytest.raises(PresetParseError):
            parse_preset("A=1\n// Section\n", "x.h2p")

    def test_empty_body(self):
        text = "/*@Meta\n\n*/\n\n\n// Section for ugly compressed binary Data\n"
        with pytest.raises(PresetParseError):
            parse_preset(text, "x.h2p")

    def test_metadata_key_without_value(self):
        text = "/*@Meta\n\nAuthor:\n'me'\nDescription:\n*/\n\nA=1\n// Section\n"
        with pytest.raises(PresetParseError, match="Description"):
            parse_preset(text, "x.h2p")


class TestSerialize:
    def test_layout(self):
        preset = Preset("x.h2p", "x",
                        meta=[PresetMetaEntry("Author", "me"),
                              PresetMetaEntry("Categories", ["Pad", "Soft"])],
                        params=[PresetParam("MAIN/A", "A", "MAIN", 1, 0, "integer"),
                                PresetParam("MAIN/B", "B", "MAIN", 0.5, 1, "float"),
                                PresetParam("MAIN/C", "C", "MAIN", "hi", 2, "string")])

        assert serialize_preset(preset) == (
            "/*@Meta\n\n"
            "Author:\n'me'\n\n"
            "Categories:\n'Pad, Soft'\n\n"
            "*/\n\n"
            "A=1\nB=0.5\nC=hi\n"
            "\n\n\n\n"
            "// Section for ugly compressed binary Data\n"
            "// DON'T TOUCH THIS\n\n"
        )

    def test_round_trip(self, sample_preset):
        again = parse_preset(serialize_preset(sample_preset), sample_preset.file_path)

        assert again.params == sample_preset.params
        assert again.meta == sample_preset.meta

    def test_tiny_float_written_without_exponent(self):
        preset = parse_preset(make_preset_text("Tune=0.00005"), "x.h2p")
        text = serialize_preset(preset)

        assert "Tune=0.00005\n" in text
        assert "e-" not in text
        assert parse_preset(text, "x.h2p").params == preset.params

    def test_binary_payload_dropped(self, sample_text, sample_preset):
        assert "[binary:AAAA]" in sample_text
        assert "[binary:AAAA]" not in serialize_preset(sample_preset)


class TestClone:
    def test_clone_does_not_alias(self, sample_preset):
        copy = sample_preset.clone()
        assert copy == sample_preset

        copy.params[0].value = "changed"
        copy.meta[1].value.append("Pad")
        copy.preset_name = "other"

        assert sample_preset.params[0].value == "Diva"
        assert sample_preset.meta[1].value == ["Bass", "Lead"]
        assert sample_preset.preset_name == "Sample Bass"
