"""A tour: points of interest per language and the active visiting order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tourbot.poi import PoI

_KEY_POIS = "m_availablePoIs"
_KEY_ACTIVE = "m_activeTourPoIs"


@dataclass
class Tour:
    """Points of interest grouped by language, plus the ordered active list."""

    current_language: str = ""
    available_pois: dict[str, dict[str, PoI]] = field(default_factory=dict)
    active_tour_pois: list[str] = field(default_factory=list)

    def available_languages(self) -> list[str]:
        """Return the languages the tour is available in."""
        return list(self.available_pois)

    def language_supported(self, lang: str) -> bool:
        """Tell whether the tour is available in the given language."""
        return lang in self.available_pois

    def set_current_language(self, lang: str) -> None:
        """Select the tour language; raise ValueError if it is not available."""
        if not self.language_supported(lang):
            raise ValueError(f"language {lang!r} is not available")
        self.current_language = lang

    def get_poi(self, poi_name: str, lang: str | None = None) -> PoI:
        """Return a point of interest in the given or current language."""
        language = self.current_language if lang is None else lang
        try:
            return self.available_pois.get(language, {})[poi_name]
        except KeyError:
            raise KeyError(
                f"point of interest {poi_name!r} not found for language {language!r}"
            ) from None

    def pois_list(self) -> list[str]:
        """Return the names of the active points of interest, in order."""
        return list(self.active_tour_pois)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of this tour."""
        return {
            _KEY_POIS: {
                lang: {name: poi.to_dict() for name, poi in pois.items()}
                for lang, pois in self.available_pois.items()
            },
            _KEY_ACTIVE: list(self.active_tour_pois),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tour":
        """Build a tour from its JSON representation; no language is selected."""
        raw_pois = data[_KEY_POIS]
        active = data[_KEY_ACTIVE]
        if not isinstance(raw_pois, Mapping):
            raise TypeError(f"{_KEY_POIS} must be an object")
        if not isinstance(active, list) or not all(isinstance(n, str) for n in active):
            raise TypeError(f"{_KEY_ACTIVE} must be a list of strings")
        pois = {
            lang: {name: PoI.from_dict(item) for name, item in entries.items()}
            for lang, entries in raw_pois.items()
        }
        return cls("", pois, list(active))