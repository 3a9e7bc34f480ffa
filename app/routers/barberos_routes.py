# app/routers/barberos_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.deps import get_barbero_repository, get_cita_repository
from app.mappers import cita_to_public
from app.models import Barbero, Cita
from app.repository import Repository
from app.schemas import BarberoIn, BarberoPublic, CitaPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/barberos",
    tags=["barberos"],
)


def barbero_to_public(barbero: Barbero) -> dict:
    return {
        "id_barbero": barbero.id_barbero,
        "nombre": barbero.nombre,
    }


@router.get("", response_model=List[BarberoPublic])
def list_barberos(repo: Repository[Barbero] = Depends(get_barbero_repository)):
    return [barbero_to_public(b) for b in repo.find_all()]


@router.get("/{barbero_id}", response_model=BarberoPublic)
def get_barbero(barbero_id: int, repo: Repository[Barbero] = Depends(get_barbero_repository)):
    barbero = repo.find_by_id(barbero_id)
    if barbero is None:
        return Response(status_code=404)
    return barbero_to_public(barbero)


@router.post("", response_model=BarberoPublic)
def create_barbero(body: BarberoIn, repo: Repository[Barbero] = Depends(get_barbero_repository)):
    # a submitted idBarbero is kept as-is
    barbero = repo.save(Barbero(id_barbero=body.id_barbero, nombre=body.nombre))
    logger.info("Saved barbero %s", barbero.id_barbero)
    return barbero_to_public(barbero)


@router.put("/{barbero_id}", response_model=BarberoPublic)
def update_barbero(
    barbero_id: int,
    body: BarberoIn,
    repo: Repository[Barbero] = Depends(get_barbero_repository),
):
    if not repo.exists_by_id(barbero_id):
        return Response(status_code=404)

    barbero = repo.save(Barbero(id_barbero=barbero_id, nombre=body.nombre))
    logger.info("Updated barbero %s", barbero_id)
    return barbero_to_public(barbero)


@router.delete("/{barbero_id}", status_code=204)
def delete_barbero(barbero_id: int, repo: Repository[Barbero] = Depends(get_barbero_repository)):
    if not repo.exists_by_id(barbero_id):
        return Response(status_code=404)

    repo.delete_by_id(barbero_id)
    logger.info("Deleted barbero %s", barbero_id)
    return Response(status_code=204)


@router.get("/{barbero_id}/citas", response_model=List[CitaPublic])
def list_barbero_citas(
    barbero_id: int,
    repo: Repository[Barbero] = Depends(get_barbero_repository),
    citas: Repository[Cita] = Depends(get_cita_repository),
):
    if not repo.exists_by_id(barbero_id):
        return Response(status_code=404)
    return [cita_to_public(c) for c in citas.find_by(Cita.id_barbero, barbero_id)]
