"""Stats API views - thin layer over the stats service."""

from collections.abc import Callable

from app.container import Container
from app.errors import InvalidInput, StoreUnavailable
from app.services.stats import resolve_identity
from web.api.errors import ValidationError, validate_post_id

from .schemas import (
    ClientBreakdownItem,
    ClientBreakdownResponse,
    DatabaseStatusResponse,
    PostViewsResponse,
    TrackViewRequest,
    TrackViewResponse,
)


def track_view(
    container: Container,
    request: TrackViewRequest,
    is_published: Callable[[int], bool] | None = None,
) -> TrackViewResponse:
    """Record a view from raw request signals. Never raises."""
    try:
        post_id = validate_post_id(request.post_id)
    except ValidationError as e:
        return TrackViewResponse(success=False, error=e.message)

    if is_published is not None and not is_published(post_id):
        return TrackViewResponse(success=False, error="Post not published")

    identity = resolve_identity(
        user_id=request.user_id,
        forwarded_for=request.forwarded_for,
        client_ip=request.client_ip,
        remote_addr=request.remote_addr,
    )

    try:
        container.stats.record_view(
            post_id,
            identity.user_id,
            identity.ip_address,
            request.user_agent,
        )
    except (InvalidInput, StoreUnavailable) as e:
        return TrackViewResponse(success=False, error=e.message)

    return TrackViewResponse(success=True)


def get_post_views(container: Container, post_id: int) -> PostViewsResponse:
    """Get cached total views for a post."""
    post_id = validate_post_id(post_id)
    return PostViewsResponse(post_id=post_id, views=container.stats.get_view_count(post_id))


def get_client_breakdown(container: Container, post_id: int) -> ClientBreakdownResponse:
    """Get views per browser/device for a post."""
    post_id = validate_post_id(post_id)
    df = container.stats.client_breakdown(post_id)

    items = [ClientBreakdownItem(**row) for row in df.iter_rows(named=True)]

    return ClientBreakdownResponse(
        post_id=post_id,
        items=items,
        total_views=sum(i.views for i in items),
    )


def get_database_status(container: Container) -> DatabaseStatusResponse:
    """Report whether the stats table is installed."""
    return DatabaseStatusResponse(
        db_path=container.db_path,
        table_exists=container.db.tables_exist(),
        schema_version=container.db.schema_version(),
    )


def create_database(container: Container) -> DatabaseStatusResponse:
    """Create the stats tables if missing and report the result."""
    if not container.db.tables_exist():
        container.db.init_tables()
    return get_database_status(container)
