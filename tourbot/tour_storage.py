"""Loading tours from, and writing JSON to, files on disk."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Union

from tourbot.tour import Tour

PathType = Union[str, "PathLike[str]"]


class TourNotFoundError(LookupError):
    """Raised when a tours file has no tour with the requested name."""


@dataclass
class TourStorage:
    """Holds the tour loaded from a tours file."""

    loaded_tour: Tour = field(default_factory=Tour)

    def read_json(self, path: PathType) -> Any:
        """Parse a JSON file, keeping the key order."""
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)

    def write_json(self, data: Any, path: PathType) -> None:
        """Write data to a file as JSON indented by four spaces."""
        text = json.dumps(data, indent=4, ensure_ascii=False)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def load_tour(self, path: PathType, tour_name: str) -> Tour:
        """Load the named tour from a tours file and keep it as the loaded tour."""
        tours_json = self.read_json(path)
        if not isinstance(tours_json, dict):
            raise TypeError("a tours file must hold a JSON object")
        if tour_name not in tours_json:
            raise TourNotFoundError(f"tour {tour_name!r} not found in {path}")
        tours = {name: Tour.from_dict(data) for name, data in tours_json.items()}
        self.loaded_tour = tours[tour_name]
        return self.loaded_tour