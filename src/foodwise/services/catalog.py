"""Loading and validating catalog reference data."""

import json
import logging
import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from foodwise.domain.catalog import Catalogs, FoodItem, Location, MenuDish
from foodwise.errors import CatalogError

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent.parent / "data"
PRICE_RANGES = ("low", "medium", "high")
MAX_RATING = 5.0

_DISTANCE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:mi|miles?)?\s*$")

_T = TypeVar("_T")

_logger = logging.getLogger(__name__)


def parse_distance(value: object) -> float:
    """Return a distance in miles from a number or a string like "0.3 miles"."""
    if isinstance(value, bool):
        raise CatalogError(f"Invalid distance: {value!r}")
    if isinstance(value, int | float):
        distance = float(value)
    elif isinstance(value, str) and (match := _DISTANCE_PATTERN.match(value)):
        distance = float(match.group(1))
    else:
        raise CatalogError(f"Invalid distance: {value!r}")
    if distance < 0:
        raise CatalogError(f"Invalid distance: {value!r}")
    return distance


def parse_food_catalog(records: Sequence[Mapping[str, object]]) -> tuple[FoodItem, ...]:
    """Validate raw food records."""
    _require_list(records, "foods")
    return tuple(
        _validate(FoodItem, record, f"foods[{index}]")
        for index, record in enumerate(records)
    )


def parse_menu_catalog(
    menus: Mapping[str, Sequence[Mapping[str, object]]],
) -> dict[str, tuple[MenuDish, ...]]:
    """Validate raw menus keyed by location name."""
    if not isinstance(menus, Mapping):
        raise CatalogError(
            f"menus: expected an object keyed by location name, "
            f"got {type(menus).__name__}"
        )
    parsed: dict[str, tuple[MenuDish, ...]] = {}
    for location_name, dishes in menus.items():
        _require_list(dishes, f"menus[{location_name!r}]")
        parsed_dishes = []
        for index, record in enumerate(dishes):
            where = f"menus[{location_name!r}][{index}]"
            dish = _validate(MenuDish, record, where)
            _check_rating(dish.rating, where)
            parsed_dishes.append(dish)
        parsed[location_name] = tuple(parsed_dishes)
    return parsed


def parse_location_catalog(
    records: Sequence[Mapping[str, object]],
) -> tuple[Location, ...]:
    """Validate raw location records.

    ``distance`` may be given instead of ``distance_miles`` as a number or a
    "N.N miles" string.
    """
    _require_list(records, "locations")
    locations = []
    for index, record in enumerate(records):
        where = f"locations[{index}]"
        if not isinstance(record, Mapping):
            raise CatalogError(
                f"{where}: expected an object, got {type(record).__name__}"
            )
        normalized = dict(record)
        if "distance_miles" not in normalized and "distance" in normalized:
            try:
                normalized["distance_miles"] = parse_distance(
                    normalized.pop("distance")
                )
            except CatalogError as exc:
                raise CatalogError(f"{where}.distance: {exc}") from exc
        location = _validate(Location, normalized, where)
        _check_rating(location.rating, where)
        if location.price_range not in PRICE_RANGES:
            raise CatalogError(
                f"{where}.price_range: expected one of {PRICE_RANGES}, "
                f"got {location.price_range!r}"
            )
        locations.append(location)
    return tuple(locations)


def load_default_catalogs(directory: Path | str | None = None) -> Catalogs:
    """Load foods.json, menus.json and locations.json from a directory."""
    base = Path(directory) if directory else DEFAULT_CATALOG_DIR
    catalogs = Catalogs(
        foods=parse_food_catalog(_read_json(base / "foods.json")),
        menus=parse_menu_catalog(_read_json(base / "menus.json")),
        locations=parse_location_catalog(_read_json(base / "locations.json")),
    )
    _logger.info(
        "Loaded catalogs from %s: foods=%s menus=%s locations=%s",
        base,
        len(catalogs.foods),
        len(catalogs.menus),
        len(catalogs.locations),
    )
    return catalogs


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Cannot read catalog file {path}: {exc}") from exc


def _validate(model: type[_T], record: object, where: str) -> _T:
    try:
        return _adapter(model).validate_python(record)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<entry>'}: "
            f"{error['msg']}"
            for error in exc.errors()
        )
        raise CatalogError(f"{where}: {problems}") from exc


@lru_cache
def _adapter(model: type[_T]) -> TypeAdapter[_T]:
    return TypeAdapter(model)


def _check_rating(rating: float, where: str) -> None:
    if not 0 <= rating <= MAX_RATING:
        raise CatalogError(f"{where}.rating: must be between 0 and 5, got {rating}")


def _require_list(value: object, where: str) -> None:
    if not isinstance(value, list | tuple):
        raise CatalogError(f"{where}: expected a list, got {type(value).__name__}")
