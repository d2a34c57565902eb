from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from zettelbranch.api.auth import verify_credentials
from zettelbranch.config import settings
from zettelbranch.domain.network import Network
from zettelbranch.hierarchy import ZettelNetworkBuilder, parse_zettel_id
from zettelbranch.note_store import NoteStore


def _build_network(
    note_store: NoteStore,
    network_builder: ZettelNetworkBuilder,
    zettel_id: str,
    depth: int | None,
    max_branches: int | None,
) -> dict:
    """Build the network for a zettel id and serialize it for the response.

    Missing query parameters fall back to the configured defaults.
    """
    try:
        universe = note_store.get_universe()
        network: Network | None = network_builder.build(
            universe,
            zettel_id,
            max_depth=depth or settings.show_depth,
            max_branches=max_branches or settings.max_branches,
        )
    except Exception as e:
        logger.error(f"Error building network for {zettel_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error") from e

    if network is None:
        raise HTTPException(status_code=404, detail="Zettel not found")
    return network.model_dump(mode="json", by_alias=True)


def _create_network_endpoint(note_store: NoteStore, network_builder: ZettelNetworkBuilder):
    """Create the network endpoint handler."""

    async def get_network(
        zettel_id: str,
        depth: int | None = Query(default=None, ge=1, le=3),  # noqa: B008
        max_branches: int | None = Query(default=None, ge=1),  # noqa: B008
        _: str | None = Depends(verify_credentials),
    ) -> dict:
        return _build_network(note_store, network_builder, zettel_id, depth, max_branches)

    return get_network


def _create_network_by_name_endpoint(
    note_store: NoteStore, network_builder: ZettelNetworkBuilder
):
    """Create the endpoint that builds a network from a note's display name."""

    async def get_network_by_name(
        note: str,
        depth: int | None = Query(default=None, ge=1, le=3),  # noqa: B008
        max_branches: int | None = Query(default=None, ge=1),  # noqa: B008
        _: str | None = Depends(verify_credentials),
    ) -> dict:
        zettel_id = parse_zettel_id(note)
        if zettel_id is None:
            raise HTTPException(status_code=404, detail="No zettel identifier in note name")
        return _build_network(note_store, network_builder, zettel_id, depth, max_branches)

    return get_network_by_name


def _create_note_endpoint(note_store: NoteStore):
    """Create the note lookup endpoint handler."""

    async def get_note(
        zettel_id: str,
        _: str | None = Depends(verify_credentials),
    ) -> dict:
        note = note_store.get_note(zettel_id)
        if note is None:
            raise HTTPException(status_code=404, detail="Note not found")
        return note.model_dump()

    return get_note


def get_endpoints_router(
    *,
    note_store: NoteStore,
    network_builder: ZettelNetworkBuilder,
) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/api/network")(_create_network_by_name_endpoint(note_store, network_builder))
    router.get("/api/network/{zettel_id}")(_create_network_endpoint(note_store, network_builder))
    router.get("/api/notes/{zettel_id}")(_create_note_endpoint(note_store))

    return router
