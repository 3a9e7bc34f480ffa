# app/routers/citas_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.deps import get_cita_repository
from app.mappers import cita_from_body, cita_to_public
from app.models import Cita
from app.repository import Repository
from app.schemas import CitaIn, CitaPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/citas",
    tags=["citas"],
)


@router.get("", response_model=List[CitaPublic])
def list_citas(repo: Repository[Cita] = Depends(get_cita_repository)):
    return [cita_to_public(c) for c in repo.find_all()]


@router.get("/{cita_id}", response_model=CitaPublic)
def get_cita(cita_id: int, repo: Repository[Cita] = Depends(get_cita_repository)):
    cita = repo.find_by_id(cita_id)
    if cita is None:
        return Response(status_code=404)
    return cita_to_public(cita)


@router.post("", response_model=CitaPublic)
def create_cita(body: CitaIn, repo: Repository[Cita] = Depends(get_cita_repository)):
    # referenced rows are not looked up here; the foreign keys reject missing ones
    cita = repo.save(cita_from_body(body, body.id_cita))
    logger.info(
        "Saved cita %s (barbero=%s cliente=%s servicio=%s)",
        cita.id_cita, cita.id_barbero, cita.id_cliente, cita.id_servicio,
    )
    return cita_to_public(cita)


@router.put("/{cita_id}", response_model=CitaPublic)
def update_cita(cita_id: int, body: CitaIn, repo: Repository[Cita] = Depends(get_cita_repository)):
    if not repo.exists_by_id(cita_id):
        return Response(status_code=404)

    cita = repo.save(cita_from_body(body, cita_id))
    logger.info("Updated cita %s", cita_id)
    return cita_to_public(cita)


@router.delete("/{cita_id}", status_code=204)
def delete_cita(cita_id: int, repo: Repository[Cita] = Depends(get_cita_repository)):
    if not repo.exists_by_id(cita_id):
        return Response(status_code=404)

    repo.delete_by_id(cita_id)
    logger.info("Deleted cita %s", cita_id)
    return Response(status_code=204)
