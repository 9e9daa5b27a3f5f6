"""Small web tasks: IP geolocation, Pokémon lookup, page download, URL opening."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import requests

LOCATION_URL = "http://ip-api.com/json/"
POKEMON_URL = "https://pokeapi.co/api/v2/pokemon/{}"
SPECIES_URL = "https://pokeapi.co/api/v2/pokemon-species/{}"
NO_DESCRIPTION = "No description available."


class LocationError(RuntimeError):
    """The geolocation service reported a failure."""


class PokemonNotFound(LookupError):
    """No Pokémon exists under the requested name."""


def _num(x: float) -> str:
    return str(int(x)) if x == int(x) else repr(x)


def _quoted(text: str) -> str:
    escaped = (text.replace("\\", "\\\\").replace('"', '\\"')
               .replace("\n", "\\n").replace("\t", "\\t").replace("\r", "\\r"))
    return f'"{escaped}"'


@dataclass(frozen=True)
class Location:
    """Result of an IP geolocation lookup."""

    status: str
    message: str | None = None
    city: str | None = None
    country: str | None = None
    lat: float | None = None
    lon: float | None = None
    ip_address: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Location:
        return cls(
            status=data["status"],
            message=data.get("message"),
            city=data.get("city"),
            country=data.get("country"),
            lat=data.get("lat"),
            lon=data.get("lon"),
            ip_address=data.get("query"),
        )


def fetch_location(session=None) -> Location:
    """Look up the caller's public IP location; raises LocationError on failure."""
    http = session or requests
    location = Location.from_json(http.get(LOCATION_URL).json())
    if location.status != "success":
        raise LocationError(f"API Error: {location.message or 'Unknown Error'}")
    return location


def format_location(location: Location) -> list[str]:
    """Lines describing a location."""
    return [
        f"Your IP: {location.ip_address or 'N/A'}",
        f"Location: {location.city or 'Unknown'}, {location.country or 'Unknown'}",
        "Geographic Coordinates: "
        f"({_num(location.lat or 0.0)}, {_num(location.lon or 0.0)})",
    ]


@dataclass(frozen=True)
class Pokemon:
    """Details gathered about a Pokémon."""

    name: str
    types: tuple[str, ...] = ()
    front: str | None = None
    back: str | None = None
    shiny: str | None = None
    cries: tuple[str, str] | None = None
    description: str = NO_DESCRIPTION
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


def pokemon_slug(name: str) -> str:
    """The name as the API expects it: trimmed, hyphenated, lower case."""
    return name.strip().replace(" ", "-").lower()


def _description(species: dict[str, Any]) -> str:
    for entry in species.get("flavor_text_entries", []):
        if entry["language"]["name"] == "en":
            return entry["flavor_text"].replace("\n", " ")
    return NO_DESCRIPTION


def fetch_pokemon(name: str, session=None) -> Pokemon:
    """Fetch a Pokémon and its English description; raises PokemonNotFound."""
    http = session or requests
    slug = pokemon_slug(name)
    response = http.get(POKEMON_URL.format(slug))
    if not response.ok:
        raise PokemonNotFound("Oops! No data for the entered pokemon could be found....")
    data = response.json()
    species = http.get(SPECIES_URL.format(slug)).json()
    sprites = data["sprites"]
    cries = data.get("cries")
    return Pokemon(
        name=data["name"],
        types=tuple(t["type"]["name"] for t in data["types"]),
        front=sprites.get("front_default"),
        back=sprites.get("rear_default"),
        shiny=sprites.get("front_shiny"),
        cries=(cries["latest"], cries["legacy"]) if cries else None,
        description=_description(species),
    )


def format_pokemon(pokemon: Pokemon) -> str:
    """A multi-line report about a Pokémon."""
    lines = [
        f"Details about '{pokemon.name}':",
        "- Types:\n\t" + "\t".join(t.upper() for t in pokemon.types),
        "- Sprites:\n"
        f"\tFront: {_quoted(pokemon.front or 'N/A')}\n"
        f"\tBack: {_quoted(pokemon.back or 'N/A')}\n"
        f"\tShiny: {_quoted(pokemon.shiny or 'N/A')}",
    ]
    if pokemon.cries:
        latest, legacy = pokemon.cries
        lines.append(f"- Cries:\n\tLatest: {_quoted(latest)}\n"
                     f"\tLegacy (OG): {_quoted(legacy)}")
    else:
        lines.append("No cries were found....")
    lines.append(f"Description of the Pokemon:\n\t'{pokemon.description}'")
    return "\n".join(lines)


def download_page(url: str, name: str, session=None) -> Path:
    """Save the body of url to '<name>.html' and return the file's path."""
    http = session or requests
    text = http.get(url.strip()).text
    path = Path(f"{name.strip()}.html")
    path.write_text(text, encoding="utf-8")
    return path


def open_url(url: str) -> bool:
    """Open url over HTTP; report whether it answered successfully."""
    try:
        return bool(requests.get(url.strip()).ok)
    except requests.RequestException:
        return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="web", description=__doc__)
    parser.add_argument("task", choices=["location", "pokemon", "download", "open"])
    args = parser.parse_args(argv)
    match args.task:
        case "location":
            try:
                location = fetch_location()
            except LocationError as exc:
                print(exc, file=sys.stderr)
                return 0
            print("\n".join(format_location(location)))
        case "pokemon":
            name = input("Enter the name of the Pokemon (Ex: Charizard-mega-y): ")
            try:
                pokemon = fetch_pokemon(name)
            except PokemonNotFound as exc:
                print(exc)
                return 0
            print(format_pokemon(pokemon))
        case "download":
            url = input("Enter the URL of the page to be downloaded "
                        "(Ex: https://youtube.com): ")
            name = input("Enter the name of the file for saving "
                         "(without any extensions): ")
            download_page(url, name)
            print("Download Successful!")
        case "open":
            url = input("Enter the URL to be opened: ").strip()
            if open_url(url):
                print(f"Opened URL: {url}")
            else:
                print(f"Failed to open URL: {url}", file=sys.stderr)
                return 1
    return 0