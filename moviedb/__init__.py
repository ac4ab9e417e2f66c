"""
moviedb - Client asynchrone pour le catalogue TMDB (films et series TV).

Ce package construit les requetes sortantes, les execute via un transport
injectable, decode les reponses JSON en entites typees et met en cache
les images.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- adapters/ : Couche infrastructure (endpoints, decodage, transport, cache, client)
"""
