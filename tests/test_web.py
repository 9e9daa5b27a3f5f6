import pytest
import responses

from pocketdemos.web import (
    LOCATION_URL,
    NO_DESCRIPTION,
    POKEMON_URL,
    SPECIES_URL,
    Location,
    LocationError,
    Pokemon,
    PokemonNotFound,
    download_page,
    fetch_location,
    fetch_pokemon,
    format_location,
    format_pokemon,
    open_url,
    pokemon_slug,
)


def test_fetch_location_success():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, LOCATION_URL, json={
            "status": "success", "city": "Oslo", "country": "Norway",
            "lat": 59.5, "lon": 10.5, "query": "192.0.2.1",
        })
        location = fetch_location()
    assert location.city == "Oslo"
    assert location.ip_address == "192.0.2.1"
    assert format_location(location) == [
        "Your IP: 192.0.2.1",
        "Location: Oslo, Norway",
        "Geographic Coordinates: (59.5, 10.5)",
    ]


def test_fetch_location_failure_message():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, LOCATION_URL,
                 json={"status": "fail", "message": "reserved range"})
        with pytest.raises(LocationError, match="API Error: reserved range"):
            fetch_location()


def test_fetch_location_failure_without_message():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, LOCATION_URL, json={"status": "fail"})
        with pytest.raises(LocationError, match="Unknown Error"):
            fetch_location()


def test_format_location_defaults():
    lines = format_location(Location(status="success"))
    assert lines[0] == "Your IP: N/A"
    assert lines[1] == "Location: Unknown, Unknown"
    assert lines[2].endswith("(0, 0)")


def test_pokemon_slug():
    assert pokemon_slug("  Charizard Mega Y\n") == "charizard-mega-y"


def _pokemon_payload(cries=True):
    data = {
        "name": "pikachu",
        "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
        "sprites": {"front_default": "front.png", "front_shiny": None},
    }
    if cries:
        data["cries"] = {"latest": "new.ogg", "legacy": "old.ogg"}
    return data


def test_fetch_pokemon_picks_english_description():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POKEMON_URL.format("pikachu"), json=_pokemon_payload())
        rsps.add(responses.GET, SPECIES_URL.format("pikachu"), json={
            "flavor_text_entries": [
                {"flavor_text": "Bonjour", "language": {"name": "fr"}},
                {"flavor_text": "Line one\nline two", "language": {"name": "en"}},
            ],
        })
        pokemon = fetch_pokemon(" Pikachu ")
    assert pokemon.types == ("electric",)
    assert pokemon.description == "Line one line two"
    assert pokemon.cries == ("new.ogg", "old.ogg")
    report = format_pokemon(pokemon)
    assert "\tELECTRIC" in report
    assert '\tFront: "front.png"' in report
    assert '\tBack: "N/A"' in report


def test_fetch_pokemon_without_english_text():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POKEMON_URL.format("pikachu"),
                 json=_pokemon_payload(cries=False))
        rsps.add(responses.GET, SPECIES_URL.format("pikachu"),
                 json={"flavor_text_entries": []})
        pokemon = fetch_pokemon("pikachu")
    assert pokemon.description == NO_DESCRIPTION
    assert "No cries were found...." in format_pokemon(pokemon)


def test_fetch_pokemon_not_found():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, POKEMON_URL.format("nobody"), status=404)
        with pytest.raises(PokemonNotFound):
            fetch_pokemon("nobody")


def test_format_pokemon_description_quoted():
    report = format_pokemon(Pokemon(name="eevee", types=("normal",)))
    assert report.splitlines()[0] == "Details about 'eevee':"
    assert report.endswith(f"\t'{NO_DESCRIPTION}'")


def test_download_page_writes_html(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://example.com/", body="<p>hello</p>")
        path = download_page("https://example.com/\n", str(tmp_path / "page") + "\n")
    assert path.name == "page.html"
    assert path.read_text(encoding="utf-8") == "<p>hello</p>"


def test_open_url_reports_success():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://example.com/", body="ok")
        assert open_url(" https://example.com/ ") is True


def test_open_url_reports_failure_status():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://example.com/", status=500)
        assert open_url("https://example.com/") is False


def test_open_url_reports_invalid_url():
    assert open_url("not a url") is False