"""
Constantes globales pour moviedb.

Ce module contient:
- Les URL de base de l'API TMDB v3 et du CDN d'images
- Le nom du parametre de credential
- Les valeurs par defaut de pagination et de cache
"""

# API TMDB v3
DEFAULT_API_BASE_URL = "https://api.themoviedb.org/3"

# CDN d'images: /<taille>/<chemin>
DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"

# Parametre de requete portant la cle API (toujours en dernier)
API_KEY_PARAM = "api_key"

# Premiere page pour les endpoints pagines
FIRST_PAGE = 1

# Nombre d'images conservees en memoire par defaut
DEFAULT_IMAGE_CACHE_SIZE = 256

# Timeout HTTP par defaut (secondes)
DEFAULT_REQUEST_TIMEOUT = 30.0
