# app/routers/clientes_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.deps import get_cliente_repository, get_cita_repository
from app.mappers import cita_to_public
from app.models import Cliente, Cita
from app.repository import Repository
from app.schemas import ClienteIn, ClientePublic, CitaPublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/clientes",
    tags=["clientes"],
)


def cliente_to_public(cliente: Cliente) -> dict:
    return {
        "id_cliente": cliente.id_cliente,
        "nombre": cliente.nombre,
        "telefono": cliente.telefono,
    }


@router.get("", response_model=List[ClientePublic])
def list_clientes(repo: Repository[Cliente] = Depends(get_cliente_repository)):
    return [cliente_to_public(c) for c in repo.find_all()]


@router.get("/{cliente_id}", response_model=ClientePublic)
def get_cliente(cliente_id: int, repo: Repository[Cliente] = Depends(get_cliente_repository)):
    cliente = repo.find_by_id(cliente_id)
    if cliente is None:
        return Response(status_code=404)
    return cliente_to_public(cliente)


@router.post("", response_model=ClientePublic)
def create_cliente(body: ClienteIn, repo: Repository[Cliente] = Depends(get_cliente_repository)):
    # a submitted idCliente is kept as-is
    cliente = repo.save(Cliente(id_cliente=body.id_cliente, nombre=body.nombre, telefono=body.telefono))
    logger.info("Saved cliente %s", cliente.id_cliente)
    return cliente_to_public(cliente)


@router.put("/{cliente_id}", response_model=ClientePublic)
def update_cliente(
    cliente_id: int,
    body: ClienteIn,
    repo: Repository[Cliente] = Depends(get_cliente_repository),
):
    if not repo.exists_by_id(cliente_id):
        return Response(status_code=404)

    cliente = repo.save(Cliente(id_cliente=cliente_id, nombre=body.nombre, telefono=body.telefono))
    logger.info("Updated cliente %s", cliente_id)
    return cliente_to_public(cliente)


@router.delete("/{cliente_id}", status_code=204)
def delete_cliente(cliente_id: int, repo: Repository[Cliente] = Depends(get_cliente_repository)):
    if not repo.exists_by_id(cliente_id):
        return Response(status_code=404)

    repo.delete_by_id(cliente_id)
    logger.info("Deleted cliente %s", cliente_id)
    return Response(status_code=204)


@router.get("/{cliente_id}/citas", response_model=List[CitaPublic])
def list_cliente_citas(
    cliente_id: int,
    repo: Repository[Cliente] = Depends(get_cliente_repository),
    citas: Repository[Cita] = Depends(get_cita_repository),
):
    if not repo.exists_by_id(cliente_id):
        return Response(status_code=404)
    return [cita_to_public(c) for c in citas.find_by(Cita.id_cliente, cliente_id)]
