"""
Objets valeur immutables decrivant les requetes sortantes.

Exports :
- Descriptor : Requete entierement resolue (hote + chemin + query + credential)
- ImageSize : Palier de taille d'image (segment de chemin fixe)
- TimeWindow : Periode d'agregation des tendances (jour, semaine)
"""

from moviedb.core.value_objects.request import Descriptor, ImageSize, TimeWindow

__all__ = [
    "Descriptor",
    "ImageSize",
    "TimeWindow",
]
