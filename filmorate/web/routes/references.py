"""
Routes des referentiels en lecture seule : genres et classifications MPA.
"""

import asyncio

from fastapi import APIRouter, Depends

from ...services import GenreService, MpaService
from ..deps import get_genre_service, get_mpa_service
from ..schemas import GenreOut, MpaOut

router = APIRouter(tags=["references"])


@router.get("/genres", response_model=list[GenreOut])
async def list_genres(service: GenreService = Depends(get_genre_service)):
    genres = await asyncio.to_thread(service.get_all_genres)
    return [GenreOut.from_entity(genre) for genre in genres]


@router.get("/genres/{genre_id}", response_model=GenreOut)
async def get_genre(genre_id: int, service: GenreService = Depends(get_genre_service)):
    genre = await asyncio.to_thread(service.find_genre_by_id, genre_id)
    return GenreOut.from_entity(genre)


@router.get("/mpa", response_model=list[MpaOut])
async def list_mpa(service: MpaService = Depends(get_mpa_service)):
    ratings = await asyncio.to_thread(service.get_all_mpa)
    return [MpaOut.from_entity(mpa) for mpa in ratings]


@router.get("/mpa/{mpa_id}", response_model=MpaOut)
async def get_mpa(mpa_id: int, service: MpaService = Depends(get_mpa_service)):
    mpa = await asyncio.to_thread(service.find_mpa_by_id, mpa_id)
    return MpaOut.from_entity(mpa)
