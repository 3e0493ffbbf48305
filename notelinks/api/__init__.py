from contextlib import asynccontextmanager

from fastapi import FastAPI

from notelinks.api.endpoints import get_endpoints_router
from notelinks.links.provider import LinkProvider


def create_app(*, provider: LinkProvider) -> FastAPI:
    """Create FastAPI app."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):  # noqa: ARG001
        yield
        provider.shutdown()

    app = FastAPI(lifespan=lifespan)

    app.include_router(router=get_endpoints_router(provider=provider))

    return app
