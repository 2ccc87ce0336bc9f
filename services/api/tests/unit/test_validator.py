"""Unit tests for model output validation."""

import json

import pytest

from src.errors import ErrorKind, LLMInvalidJSON, LLMMissingFields
from src.generation.validator import inline_stylesheet, parse_page_response

REACT = "export default function Page() { return <main /> }"
HTML = "<!DOCTYPE html><html><head></head><body></body></html>"


class TestReactProfile:
    def test_valid_response(self):
        raw = json.dumps({"reactComponent": REACT, "previewHtml": HTML})

        page = parse_page_response(raw, "react")

        assert page.code == REACT
        assert page.markup == HTML

    def test_code_fence_stripped(self):
        raw = "```json\n" + json.dumps({"reactComponent": REACT, "previewHtml": HTML}) + "\n```"

        page = parse_page_response(raw, "react")

        assert page.code == REACT

    def test_extra_fields_ignored(self):
        raw = json.dumps({"reactComponent": REACT, "previewHtml": HTML, "notes": "hi"})

        assert parse_page_response(raw).markup == HTML

    def test_not_json(self):
        raw = "Sure! Here is your page: <html>"

        with pytest.raises(LLMInvalidJSON) as exc_info:
            parse_page_response(raw, "react")

        assert exc_info.value.raw == raw
        assert exc_info.value.kind == ErrorKind.LLM_INVALID_JSON
        assert raw not in exc_info.value.public_message

    @pytest.mark.parametrize("raw", ["[]", "null", "5", '"text"', json.dumps([REACT, HTML])])
    def test_json_that_is_not_an_object_lacks_fields(self, raw):
        with pytest.raises(LLMMissingFields) as exc_info:
            parse_page_response(raw, "react")

        assert exc_info.value.missing == ["reactComponent", "previewHtml"]
        assert exc_info.value.kind == ErrorKind.LLM_MISSING_FIELDS

    def test_missing_field(self):
        raw = json.dumps({"reactComponent": REACT})

        with pytest.raises(LLMMissingFields) as exc_info:
            parse_page_response(raw, "react")

        assert exc_info.value.missing == ["previewHtml"]
        assert exc_info.value.kind == ErrorKind.LLM_MISSING_FIELDS

    def test_non_string_field(self):
        raw = json.dumps({"reactComponent": REACT, "previewHtml": {"html": HTML}})

        with pytest.raises(LLMMissingFields) as exc_info:
            parse_page_response(raw, "react")

        assert exc_info.value.missing == ["previewHtml"]

    def test_both_missing(self):
        with pytest.raises(LLMMissingFields) as exc_info:
            parse_page_response("{}", "react")

        assert sorted(exc_info.value.missing) == ["previewHtml", "reactComponent"]


class TestStaticProfile:
    def test_css_inlined_before_head_close(self):
        css = "html { color: black; }"
        raw = json.dumps({"html": HTML, "css": css})

        page = parse_page_response(raw, "static")

        assert page.code == css
        assert "<style>\nhtml { color: black; }\n  </style>\n</head>" in page.markup

    def test_react_fields_do_not_satisfy_static(self):
        raw = json.dumps({"reactComponent": REACT, "previewHtml": HTML})

        with pytest.raises(LLMMissingFields) as exc_info:
            parse_page_response(raw, "static")

        assert sorted(exc_info.value.missing) == ["css", "html"]


class TestInlineStylesheet:
    def test_head_close_case_insensitive(self):
        result = inline_stylesheet("<html><HEAD></HEAD></html>", "p{}")

        assert result == "<html><HEAD>  <style>\np{}\n  </style>\n</head></html>"

    def test_without_head_goes_after_doctype(self):
        result = inline_stylesheet("<!doctype html><body></body>", "p{}")

        assert result == "<!DOCTYPE html>\n<style>\np{}\n</style>\n<body></body>"

    def test_backslashes_in_css_preserved(self):
        css = r'.icon::before { content: "\2014"; }'

        result = inline_stylesheet(HTML, css)

        assert css in result
