from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zettelbranch.api.endpoints import get_endpoints_router
from zettelbranch.hierarchy import ZettelNetworkBuilder
from zettelbranch.note_store import NoteStore


def create_app(
    *,
    note_store: NoteStore,
    network_builder: ZettelNetworkBuilder | None = None,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        router=get_endpoints_router(
            note_store=note_store,
            network_builder=network_builder or ZettelNetworkBuilder(),
        )
    )

    return app
