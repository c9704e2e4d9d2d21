"""Tests for rendering merged documents."""

import datetime as _datetime
import json as _json
import math as _math
import tomllib as _tomllib

import pytest as _pytest

import tomlmerge.errors as errors
import tomlmerge.render as render


class TestRenderToml:
    def test_round_trips_through_parser(self) -> None:
        document = {
            "title": "x",
            "when": _datetime.datetime(1979, 5, 27, 7, 32, tzinfo=_datetime.timezone.utc),
            "ports": [1, 2],
            "server": {"host": "h", "tls": {"enabled": True}},
            "items": [{"a": 1}, {"a": 2}],
        }
        text = render.render_toml(document)
        assert _tomllib.loads(text) == document

    def test_no_trailing_newline(self) -> None:
        assert not render.render_toml({"a": 1}).endswith("\n")

    def test_empty_document(self) -> None:
        assert render.render_toml({}) == ""

    def test_non_finite_floats_are_valid_toml(self) -> None:
        text = render.render_toml({"a": _math.inf})
        assert _tomllib.loads(text)["a"] == _math.inf


class TestRenderJson:
    def test_single_line(self) -> None:
        text = render.render_json({"a": {"b": [1, 2]}, "s": "x y"})
        assert "\n" not in text
        assert text == '{"a":{"b":[1,2]},"s":"x y"}'

    def test_empty_document(self) -> None:
        assert render.render_json({}) == "{}"

    def test_unicode_kept(self) -> None:
        assert render.render_json({"name": "café"}) == '{"name":"café"}'

    def test_non_finite_error(self) -> None:
        with _pytest.raises(errors.ConversionError):
            render.render_json({"a": _math.nan})

    def test_non_finite_null(self) -> None:
        assert _json.loads(render.render_json({"a": _math.nan}, non_finite="null")) == {"a": None}


class TestRender:
    def test_dispatches_on_format(self) -> None:
        document = {"a": 1}
        assert render.render(document, "toml") == "a = 1"
        assert render.render(document, "json") == '{"a":1}'

    def test_default_is_toml(self) -> None:
        assert render.render({"a": "b"}) == 'a = "b"'

    def test_unknown_format(self) -> None:
        with _pytest.raises(ValueError, match="Unknown output format"):
            render.render({}, "yaml")  # type: ignore[arg-type]
