import json
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from api_mock_gen.parser.detect import detect_source
from api_mock_gen.parser.spec import SpecError, load_spec, parse_spec

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectSource:
    def test_detect_url(self):
        assert detect_source("https://example.com/spec.json") == "url"
        assert detect_source("http://localhost/spec") == "url"

    def test_detect_yaml(self):
        assert detect_source("spec.yaml") == "yaml"
        assert detect_source("dir/spec.YML") == "yaml"

    def test_detect_json_by_default(self):
        assert detect_source("./api-spec.json") == "json"
        assert detect_source("spec.txt") == "json"


class TestLoadSpecFromFile:
    def test_load_json_fixture(self):
        spec = load_spec(str(FIXTURES / "users.json"))
        assert len(spec.apis) == 4
        post = [e for e in spec.apis if e.method == "POST"][0]
        assert post.request_body == {"name": "Bob"}
        assert post.status_code == 201

    def test_load_yaml_fixture(self):
        spec = load_spec(str(FIXTURES / "users.yaml"))
        assert [e.method for e in spec.apis] == ["GET", "PATCH"]
        assert spec.apis[1].request_body == {"status": "shipped"}

    def test_yaml_timestamp_kept_as_date(self):
        spec = load_spec(str(FIXTURES / "users.yaml"))
        assert spec.apis[0].response[0]["created"] == date(2024, 1, 1)

    def test_relative_path(self, tmp_path, monkeypatch):
        (tmp_path / "spec.json").write_text('{"apis": []}', encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_spec("spec.json").apis == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecError, match="not found"):
            load_spec(str(tmp_path / "nope.json"))

    def test_malformed_json(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text("{not json", encoding="utf-8")
        with pytest.raises(SpecError, match="Invalid JSON"):
            load_spec(str(f))

    def test_malformed_yaml(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("apis: [unclosed\n", encoding="utf-8")
        with pytest.raises(SpecError, match="Invalid YAML"):
            load_spec(str(f))


class TestLoadSpecFromUrl:
    @patch("api_mock_gen.parser.spec.requests.get")
    def test_fetch_json(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.json.return_value = {"apis": [{"method": "GET", "path": "/api/a", "response": {}}]}
        mock_get.return_value = mock_resp

        spec = load_spec("https://example.com/spec.json", timeout=5)

        assert spec.apis[0].path == "/api/a"
        mock_get.assert_called_once_with("https://example.com/spec.json", timeout=5)

    @patch("api_mock_gen.parser.spec.requests.get")
    def test_fetch_without_timeout_waits(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.json.return_value = {"apis": []}
        mock_get.return_value = mock_resp

        load_spec("https://example.com/spec.json")

        assert mock_get.call_args[1]["timeout"] is None

    @patch("api_mock_gen.parser.spec.requests.get")
    def test_fetch_failure(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(SpecError, match="Failed to fetch"):
            load_spec("https://example.com/spec.json")

    @patch("api_mock_gen.parser.spec.requests.get")
    def test_http_error_status(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = mock_resp
        with pytest.raises(SpecError, match="Failed to fetch"):
            load_spec("https://example.com/spec.json")

    @patch("api_mock_gen.parser.spec.requests.get")
    def test_response_not_json(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        mock_get.return_value = mock_resp
        with pytest.raises(SpecError, match="not valid JSON"):
            load_spec("https://example.com/spec.json")


class TestParseSpec:
    @pytest.mark.parametrize("data", [{}, {"apis": {}}, {"apis": "x"}, [], None])
    def test_apis_missing_or_not_a_list(self, data):
        with pytest.raises(SpecError, match="Expected"):
            parse_spec(data)

    def test_missing_response(self):
        with pytest.raises(SpecError, match=r"apis\.0\.response"):
            parse_spec({"apis": [{"method": "GET", "path": "/api/users"}]})

    def test_entry_not_an_object(self):
        with pytest.raises(SpecError):
            parse_spec({"apis": ["GET /api/users"]})
