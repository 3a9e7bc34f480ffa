# app/routers/servicios_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.deps import get_servicio_repository, get_cita_repository
from app.mappers import cita_to_public
from app.models import Servicio, Cita
from app.repository import Repository
from app.schemas import ServicioIn, ServicioPublic, CitaPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/servicios",
    tags=["servicios"],
)


def servicio_to_public(servicio: Servicio) -> dict:
    return {
        "id_servicio": servicio.id_servicio,
        "descripcion": servicio.descripcion,
        "costo": servicio.costo,
    }


@router.get("", response_model=List[ServicioPublic])
def list_servicios(repo: Repository[Servicio] = Depends(get_servicio_repository)):
    return [servicio_to_public(s) for s in repo.find_all()]


@router.get("/{servicio_id}", response_model=ServicioPublic)
def get_servicio(servicio_id: int, repo: Repository[Servicio] = Depends(get_servicio_repository)):
    servicio = repo.find_by_id(servicio_id)
    if servicio is None:
        return Response(status_code=404)
    return servicio_to_public(servicio)


@router.post("", response_model=ServicioPublic)
def create_servicio(body: ServicioIn, repo: Repository[Servicio] = Depends(get_servicio_repository)):
    # a submitted idServicio is kept as-is
    servicio = repo.save(Servicio(id_servicio=body.id_servicio, descripcion=body.descripcion, costo=body.costo))
    logger.info("Saved servicio %s", servicio.id_servicio)
    return servicio_to_public(servicio)


@router.put("/{servicio_id}", response_model=ServicioPublic)
def update_servicio(
    servicio_id: int,
    body: ServicioIn,
    repo: Repository[Servicio] = Depends(get_servicio_repository),
):
    if not repo.exists_by_id(servicio_id):
        return Response(status_code=404)

    servicio = repo.save(Servicio(id_servicio=servicio_id, descripcion=body.descripcion, costo=body.costo))
    logger.info("Updated servicio %s", servicio_id)
    return servicio_to_public(servicio)


@router.delete("/{servicio_id}", status_code=204)
def delete_servicio(servicio_id: int, repo: Repository[Servicio] = Depends(get_servicio_repository)):
    if not repo.exists_by_id(servicio_id):
        return Response(status_code=404)

    repo.delete_by_id(servicio_id)
    logger.info("Deleted servicio %s", servicio_id)
    return Response(status_code=204)


@router.get("/{servicio_id}/citas", response_model=List[CitaPublic])
def list_servicio_citas(
    servicio_id: int,
    repo: Repository[Servicio] = Depends(get_servicio_repository),
    citas: Repository[Cita] = Depends(get_cita_repository),
):
    if not repo.exists_by_id(servicio_id):
        return Response(status_code=404)
    return [cita_to_public(c) for c in citas.find_by(Cita.id_servicio, servicio_id)]
