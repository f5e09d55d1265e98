"""
Routes des films : CRUD, likes et classement des films populaires.

Les services etant synchrones (SQLModel), chaque appel est execute dans un
thread via asyncio.to_thread.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends

from ...config import Settings
from ...core.validation import ensure_valid, validate_film, validate_film_update
from ...services import FilmService
from ..deps import get_film_service, get_settings
from ..schemas import FilmIn, FilmOut, FilmPatchIn

router = APIRouter(prefix="/films", tags=["films"])


@router.post("", status_code=201, response_model=FilmOut)
async def create_film(body: FilmIn, service: FilmService = Depends(get_film_service)):
    film = body.to_entity()
    ensure_valid(validate_film(film))
    added = await asyncio.to_thread(service.add_film, film)
    return FilmOut.from_entity(added)


@router.put("", response_model=FilmOut)
async def update_film(body: FilmIn, service: FilmService = Depends(get_film_service)):
    film = body.to_entity()
    ensure_valid(validate_film(film, require_id=True))
    updated = await asyncio.to_thread(service.update_film, film)
    return FilmOut.from_entity(updated)


@router.patch("", response_model=FilmOut)
async def patch_film(body: FilmPatchIn, service: FilmService = Depends(get_film_service)):
    update = body.to_update()
    ensure_valid(validate_film_update(update))
    updated = await asyncio.to_thread(service.patch_film, update)
    return FilmOut.from_entity(updated)


@router.get("", response_model=list[FilmOut])
async def list_films(service: FilmService = Depends(get_film_service)):
    films = await asyncio.to_thread(service.get_all_films)
    return [FilmOut.from_entity(film) for film in films]


# Declaree avant /{film_id} pour ne pas etre capturee par le parametre de chemin
@router.get("/popular", response_model=list[FilmOut])
async def popular_films(
    count: Optional[int] = None,
    service: FilmService = Depends(get_film_service),
    settings: Settings = Depends(get_settings),
):
    """Films les plus likes, du plus au moins populaire (count absent : valeur des Settings)."""
    if count is None:
        count = settings.popular_default_count
    films = await asyncio.to_thread(service.get_popular_films, count)
    return [FilmOut.from_entity(film) for film in films]


@router.get("/{film_id}", response_model=FilmOut)
async def get_film(film_id: int, service: FilmService = Depends(get_film_service)):
    film = await asyncio.to_thread(service.find_film_by_id, film_id)
    return FilmOut.from_entity(film)


@router.put("/{film_id}/like/{user_id}")
async def add_like(
    film_id: int, user_id: int, service: FilmService = Depends(get_film_service)
):
    await asyncio.to_thread(service.add_like, film_id, user_id)


@router.delete("/{film_id}/like/{user_id}")
async def remove_like(
    film_id: int, user_id: int, service: FilmService = Depends(get_film_service)
):
    await asyncio.to_thread(service.remove_like, film_id, user_id)
