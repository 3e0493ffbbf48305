from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger

from notelinks.api.auth import verify_credentials
from notelinks.domain.graph import LinkGraph
from notelinks.domain.links import FileLinks, LinkRecord
from notelinks.errors import GraphInvariantError
from notelinks.links.provider import LinkProvider


def _create_report_endpoint(provider: LinkProvider):
    """Create the link report endpoint handler."""

    def report_links(record: LinkRecord, _: str = Depends(verify_credentials)) -> Response:
        provider.report(record.source_path, record.outbound_links, record.source_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return report_links


def _create_remove_endpoint(provider: LinkProvider):
    """Create the link removal endpoint handler."""

    def remove_links(
        source_path: str,
        source_id: str | None = None,
        _: str = Depends(verify_credentials),
    ) -> Response:
        provider.remove(source_path, source_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return remove_links


def _create_links_endpoint(provider: LinkProvider):
    """Create the inbound/outbound links endpoint handler."""

    def get_links(file_path: str, _: str = Depends(verify_credentials)) -> FileLinks:
        return provider.get_links(file_path)

    return get_links


def _create_graph_endpoint(provider: LinkProvider):
    """Create the link graph endpoint handler."""

    def get_graph(_: str = Depends(verify_credentials)) -> LinkGraph:
        try:
            return provider.get_graph()
        except GraphInvariantError as e:
            logger.error(f"Error building link graph: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal graph error") from e

    return get_graph


def get_endpoints_router(*, provider: LinkProvider) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.post("/api/links", status_code=204)(_create_report_endpoint(provider))
    router.delete("/api/links", status_code=204)(_create_remove_endpoint(provider))
    router.get("/api/links", response_model=FileLinks)(_create_links_endpoint(provider))
    router.get("/api/graph", response_model=LinkGraph)(_create_graph_endpoint(provider))

    return router
