"""Simple launcher for the campus path finder.

Loads the configured campus data, lists the known locations, then asks
for a departure and an arrival and prints the shortest route.
"""

from __future__ import annotations

import sys

from campus_paths.config import get_config
from campus_paths.container import get_container
from campus_paths.domain.errors import DataLoadError
from campus_paths.logging_config import configure_logging
from campus_paths.services import CampusMapService


def main() -> None:
    configure_logging(get_config().observability)
    service = get_container().resolve(CampusMapService)

    try:
        locations = service.list_locations()
    except DataLoadError as e:
        print(f"Impossible de charger la carte : {e}")
        sys.exit(1)

    print("=== Campus paths ===")
    for location in locations:
        print(f"{location.id:<8} {location.display_name}")

    start_id = input("Départ : ").strip()
    dest_id = input("Arrivée : ").strip()

    route = service.shortest_path(start_id, dest_id)
    print(service.format_route(start_id, dest_id, route))


if __name__ == "__main__":
    main()
