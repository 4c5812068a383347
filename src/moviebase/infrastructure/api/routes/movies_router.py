"""Router for movie management.

Each write runs in the request session's transaction: the handler commits
after the transactor succeeds and rolls back when anything raises.
"""

import uuid

from fastapi import APIRouter, Request

from moviebase.core.config import get_settings
from moviebase.core.logging import get_logger
from moviebase.domain.entities.movie import new_movie
from moviebase.infrastructure.api.dependencies import (
    AuthenticatedUser,
    DBSession,
    RandomStrings,
    RequestID,
    Selector,
    Transactor,
)
from moviebase.infrastructure.api.schemas.movie_schemas import (
    DeleteMovieResponse,
    ErrorResponse,
    MovieRequest,
    MovieResponse,
    StandardResponse,
)
from moviebase.infrastructure.persistence.database import transaction
from moviebase.infrastructure.persistence.repositories.movie_repository import (
    translate_store_errors,
)

router = APIRouter(
    tags=["Movies"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
logger = get_logger(__name__)


@router.post(
    "",
    response_model=StandardResponse[MovieResponse],
    summary="Create a movie",
)
async def create_movie(
    body: MovieRequest,
    request: Request,
    current_user: AuthenticatedUser,
    transactor: Transactor,
    session: DBSession,
    random_strings: RandomStrings,
    request_id: RequestID,
) -> StandardResponse[MovieResponse]:
    """Create a movie with a new internal ID and a random external ID."""
    external_id = random_strings.crypto_string(get_settings().external_id_bytes)

    movie = (
        new_movie(uuid.uuid4(), external_id, current_user)
        .set_title(body.title)
        .set_rated(body.rated)
        .set_released(body.release_date)
        .set_run_time(body.run_time)
        .set_director(body.director)
        .set_writer(body.writer)
    )
    movie.is_valid()

    with translate_store_errors("create movie", external_id):
        async with transaction(session):
            await transactor.create(movie)

    logger.info("Movie created", extl_id=movie.external_id, user=current_user.email)
    return StandardResponse[MovieResponse](
        path=request.url.path,
        request_id=request_id,
        data=MovieResponse.from_movie(movie),
    )


@router.put(
    "/{extl_id}",
    response_model=StandardResponse[MovieResponse],
    summary="Update a movie",
)
async def update_movie(
    extl_id: str,
    body: MovieRequest,
    request: Request,
    current_user: AuthenticatedUser,
    transactor: Transactor,
    selector: Selector,
    session: DBSession,
    request_id: RequestID,
) -> StandardResponse[MovieResponse]:
    """Replace a movie's attributes and record who updated it."""
    with translate_store_errors("update movie", extl_id):
        async with transaction(session):
            movie = await selector.find_by_id(extl_id)
            (
                movie.set_title(body.title)
                .set_rated(body.rated)
                .set_released(body.release_date)
                .set_run_time(body.run_time)
                .set_director(body.director)
                .set_writer(body.writer)
                .set_update_user(current_user)
                .set_update_time()
            )
            movie.is_valid()
            await transactor.update(movie)

    logger.info("Movie updated", extl_id=extl_id, user=current_user.email)
    return StandardResponse[MovieResponse](
        path=request.url.path,
        request_id=request_id,
        data=MovieResponse.from_movie(movie),
    )


@router.delete(
    "/{extl_id}",
    response_model=StandardResponse[DeleteMovieResponse],
    summary="Delete a movie",
)
async def delete_movie(
    extl_id: str,
    request: Request,
    current_user: AuthenticatedUser,
    transactor: Transactor,
    selector: Selector,
    session: DBSession,
    request_id: RequestID,
) -> StandardResponse[DeleteMovieResponse]:
    """Delete a movie by external ID."""
    with translate_store_errors("delete movie", extl_id):
        async with transaction(session):
            movie = await selector.find_by_id(extl_id)
            await transactor.delete(movie)

    logger.info("Movie deleted", extl_id=extl_id, user=current_user.email)
    return StandardResponse[DeleteMovieResponse](
        path=request.url.path,
        request_id=request_id,
        data=DeleteMovieResponse(extl_id=movie.external_id, deleted=True),
    )


@router.get(
    "/{extl_id}",
    response_model=StandardResponse[MovieResponse],
    summary="Get a movie",
)
async def find_movie_by_id(
    extl_id: str,
    request: Request,
    current_user: AuthenticatedUser,
    selector: Selector,
    request_id: RequestID,
) -> StandardResponse[MovieResponse]:
    """Get a movie by external ID."""
    movie = await selector.find_by_id(extl_id)
    return StandardResponse[MovieResponse](
        path=request.url.path,
        request_id=request_id,
        data=MovieResponse.from_movie(movie),
    )


@router.get(
    "",
    response_model=StandardResponse[list[MovieResponse]],
    summary="List movies",
)
async def find_all_movies(
    request: Request,
    current_user: AuthenticatedUser,
    selector: Selector,
    request_id: RequestID,
) -> StandardResponse[list[MovieResponse]]:
    """List all movies, oldest first."""
    movies = await selector.find_all()
    return StandardResponse[list[MovieResponse]](
        path=request.url.path,
        request_id=request_id,
        data=[MovieResponse.from_movie(movie) for movie in movies],
    )
