"""End-to-end search flow tests.

Runs the real RestCountriesFetcher, normalizer, lookup service and web app
together. Only requests.Session.get is replaced, with recorded REST Countries
responses, so no network access is needed.
"""

import json
import logging
from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from country_explorer.config.models import AppConfig
from country_explorer.main import main
from country_explorer.web import create_app_from_config
from tests.helpers import load_response, make_response

pytestmark = pytest.mark.integration

API = "https://restcountries.com/v3.1"


def routed_get(routes):
    """Build a Session.get replacement that answers by URL."""

    def fake_get(url, params=None, timeout=None):
        handler = routes.get(url)
        if handler is None:
            return make_response(status_code=404, body={"status": 404, "message": "Not Found"}, reason="Not Found")
        if isinstance(handler, Exception):
            raise handler
        return handler

    return fake_get


@pytest.fixture
def routes():
    france = load_response("france.json")
    return {
        f"{API}/capital/Paris": make_response(body=load_response("capital_paris.json")),
        f"{API}/name/land": make_response(body=load_response("country_land.json")),
        f"{API}/name/France": make_response(body=[france]),
        f"{API}/region/europe": requests.exceptions.Timeout("read timed out"),
    }


@pytest.fixture
def client(routes):
    with patch("requests.Session.get", side_effect=routed_get(routes)):
        yield TestClient(create_app_from_config(AppConfig()))


class TestWebFlow:
    def test_search_then_view(self, client):
        page = client.get("/search", params={"capital": "Paris"})

        assert page.status_code == 200
        assert 'href="/view/France"' in page.text

        detail = client.get("/view/France")

        assert detail.status_code == 200
        country = detail.json()["country"]
        assert country["capital"] == "Paris"
        assert country["population"] == "67,391,582"
        assert country["area"] == "551,695 km²"
        assert country["borders"] == "AND, BEL, DEU, ITA, LUX, MCO, ESP, CHE"

    def test_form_post_then_view(self, client):
        page = client.post("/search", data={"countrySearch": "", "capitalSearch": "Paris", "regionSearch": ""})

        assert page.status_code == 200
        assert 'href="/view/France"' in page.text
        assert client.get("/view/France").json()["country"]["name"] == "France"

    def test_substring_search_lists_every_match(self, client):
        page = client.get("/search", params={"country": "land"})

        assert "Iceland" in page.text
        assert "South Africa" in page.text
        assert "2 results" in page.text

    def test_no_match_is_a_friendly_message(self, client):
        page = client.get("/search", params={"country": "xyznotacountry"})

        assert page.status_code == 200
        assert "No countries found for &#34;xyznotacountry&#34;" in page.text

    def test_timeout_is_a_generic_message(self, client, caplog):
        with caplog.at_level(logging.WARNING):
            page = client.get("/search", params={"region": "europe"})

        assert page.status_code == 200
        assert "Failed to fetch country data. Please try again." in page.text
        assert "read timed out" not in page.text
        events = [getattr(r, "event", None) for r in caplog.records]
        assert "fetcher.timeout" in events
        assert "lookup.search.failed" in events

    def test_view_unknown_country(self, client):
        response = client.get("/view/Atlantis")

        assert response.status_code == 404
        assert response.json() == {"error": "Country not found"}

    def test_search_logs_are_tagged_with_component(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/search", params={"capital": "Paris"}, headers={"X-Request-ID": "req-42"})

        completed = [r for r in caplog.records if getattr(r, "event", None) == "lookup.search.completed"]
        assert completed
        assert completed[0].component == "lookup"


class TestCliFlow:
    @pytest.fixture(autouse=True)
    def isolated(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        with patch("country_explorer.main.load_dotenv"), patch("country_explorer.main.configure_logging"):
            yield

    def test_search_json(self, routes, capsys):
        with patch("requests.Session.get", side_effect=routed_get(routes)):
            exit_code = main(["search", "--country", "land", "--json"])

        records = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert records[1]["capital"] == "Pretoria, Bloemfontein, Cape Town"
        assert records[1]["languages"] == "Afrikaans, English, Zulu"

    def test_view_text(self, routes, capsys):
        with patch("requests.Session.get", side_effect=routed_get(routes)):
            exit_code = main(["view", "France"])

        assert exit_code == 0
        assert "Currencies:       Euro (€)" in capsys.readouterr().out

    def test_search_timeout(self, routes, capsys):
        with patch("requests.Session.get", side_effect=routed_get(routes)):
            exit_code = main(["search", "--region", "europe"])

        assert exit_code == 1
        assert "Failed to fetch country data. Please try again." in capsys.readouterr().err
