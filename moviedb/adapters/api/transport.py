"""
Transport HTTP par defaut, base sur httpx.

Execute un Descriptor et retourne le corps brut. Toute reponse non-2xx
ou erreur reseau devient TransportFailure. Aucun retry: la politique de
relance appartient a l'appelant.

Usage:
    transport = HttpxTransport(timeout=30.0)
    body = await transport.execute(descriptor)
    await transport.close()
"""

from typing import Optional

import httpx
from loguru import logger

from moviedb.core.exceptions import TransportFailure
from moviedb.core.ports.transport import ITransport
from moviedb.core.value_objects import Descriptor
from moviedb.utils.constants import DEFAULT_REQUEST_TIMEOUT


class HttpxTransport(ITransport):
    """
    Transport asynchrone sur httpx.AsyncClient.

    Le client HTTP est cree paresseusement au premier appel, ou injecte
    (utile pour partager un pool de connexions).
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le transport.

        Args:
            timeout: Timeout global par requete, en secondes
            client: Client httpx existant (optionnel)
        """
        self._timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json, image/*"},
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def execute(self, descriptor: Descriptor) -> bytes:
        """
        Execute une requete GET.

        Args:
            descriptor: Requete entierement resolue

        Returns:
            Corps de la reponse

        Raises:
            TransportFailure: Erreur reseau ou statut non-2xx
        """
        client = self._get_client()
        logger.debug("GET {}", str(descriptor))
        try:
            response = await client.get(descriptor.url)
        except httpx.HTTPError as e:
            raise TransportFailure(
                f"Erreur reseau sur {descriptor.path}: {e}", url=str(descriptor)
            ) from e

        if not response.is_success:
            raise TransportFailure(
                f"Statut HTTP {response.status_code} sur {descriptor.path}",
                status_code=response.status_code,
                url=str(descriptor),
            )
        return response.content

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
