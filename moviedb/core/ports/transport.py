"""
Interface port pour le transport reseau.

Le transport est un collaborateur externe: il recoit un Descriptor et
retourne les octets du corps de reponse, ou echoue. Timeouts et
politique de connexion sont sa responsabilite.
"""

from abc import ABC, abstractmethod

from moviedb.core.value_objects import Descriptor


class ITransport(ABC):
    """
    Contrat d'execution d'une requete.

    Les implémentations doivent échouer (exception) sur toute réponse
    non-2xx ou erreur d'entrée/sortie. Le client propage l'exception
    telle quelle.
    """

    @abstractmethod
    async def execute(self, descriptor: Descriptor) -> bytes:
        """
        Exécute la requête décrite et retourne le corps brut.

        Args :
            descriptor : Requête entièrement résolue

        Retourne :
            Corps de la réponse
        """
        ...
