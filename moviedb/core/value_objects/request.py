"""
Objets valeur pour les requetes vers le catalogue.

Un Descriptor est hashable: il sert directement de cle au cache d'images.
"""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote, urlencode

from moviedb.utils.constants import API_KEY_PARAM


class ImageSize(str, Enum):
    """Paliers de taille servis par le CDN d'images TMDB."""

    W92 = "w92"
    W154 = "w154"
    W185 = "w185"
    W300 = "w300"
    W342 = "w342"
    W500 = "w500"
    W780 = "w780"
    W1280 = "w1280"
    H632 = "h632"
    ORIGINAL = "original"


class TimeWindow(str, Enum):
    """Periode d'agregation des tendances."""

    DAY = "day"
    WEEK = "week"


@dataclass(frozen=True)
class Descriptor:
    """
    Requete entierement resolue, prete a etre executee par un transport.

    Attributs :
        base_url : Hote et prefixe versionne (ex: "https://api.themoviedb.org/3")
        path : Chemin relatif commencant par "/" (ex: "/search/movie")
        query : Paires (cle, valeur) dans l'ordre d'emission, credential en dernier
    """

    base_url: str
    path: str
    query: tuple[tuple[str, str], ...] = ()

    @property
    def url(self) -> str:
        """URL complete, chemin et query encodes en pourcentage."""
        url = self.base_url + quote(self.path, safe="/")
        if self.query:
            url = f"{url}?{urlencode(self.query, quote_via=quote)}"
        return url

    @property
    def params(self) -> dict[str, str]:
        return dict(self.query)

    def __str__(self) -> str:
        # La cle API n'apparait jamais dans les logs
        visible = [(k, "xxx" if k == API_KEY_PARAM else v) for k, v in self.query]
        masked = Descriptor(self.base_url, self.path, tuple(visible))
        return masked.url
