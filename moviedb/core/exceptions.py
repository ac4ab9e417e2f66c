"""
Taxonomie d'erreurs du client catalogue.

Trois conditions seulement remontent a l'appelant:
- MalformedRequest : le descripteur de requete n'a pas pu etre construit
- TransportFailure : erreur reseau ou reponse non-2xx
- DecodingFailed : le corps de la reponse ne correspond pas a la forme attendue

Les dates illisibles et les images illisibles ne sont PAS des erreurs:
elles se degradent en None.
"""

from typing import Optional


class MovieDatabaseError(Exception):
    """Base de toutes les erreurs du client catalogue."""


class MalformedRequest(MovieDatabaseError):
    """
    Parametre manquant, vide ou impossible a encoder.

    Attributes:
        parameter: Nom du parametre fautif (si connu)
    """

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class TransportFailure(MovieDatabaseError):
    """
    Echec reseau ou reponse HTTP non-2xx.

    Attributes:
        status_code: Code HTTP de la reponse, ou None pour une erreur reseau
        url: URL de la requete en echec (sans garantie de masquage de la cle)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodingFailed(MovieDatabaseError):
    """Le corps de la reponse ne correspond pas a l'entite attendue."""
