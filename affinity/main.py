from fastapi import FastAPI

from affinity.routes.incr import router as incr_router
from affinity.services.session_counter import SessionCounterStore


def create_app(store: SessionCounterStore | None = None) -> FastAPI:
    application = FastAPI(
        title="Session Affinity Counter",
        version="0.1.0",
        description="Counts requests per session_id so load-balancer stickiness can be observed.",
    )

    application.state.session_store = store if store is not None else SessionCounterStore()

    application.include_router(incr_router)

    return application


app = create_app()
