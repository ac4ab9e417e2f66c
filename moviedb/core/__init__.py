"""
Couche domaine (core).

Contient les entités du catalogue, les ports (interfaces abstraites) et la
taxonomie d'erreurs. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(httpx, Pillow, cache).

Sous-packages :
- entities/ : Entités du catalogue (Movie, TVShow, Genre, Credit, Page...)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
