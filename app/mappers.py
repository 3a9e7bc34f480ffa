# app/mappers.py

from typing import Optional

from .models import Cita
from .schemas import CitaIn


def cita_to_public(cita: Cita) -> dict:
    # nested barbero/cliente/servicio objects are never serialized, only their ids
    return {
        "id_cita": cita.id_cita,
        "fecha": cita.fecha,
        "hora": cita.hora,
        "id_barbero": cita.id_barbero,
        "id_cliente": cita.id_cliente,
        "id_servicio": cita.id_servicio,
    }


def cita_from_body(body: CitaIn, cita_id: Optional[int] = None) -> Cita:
    return Cita(
        id_cita=cita_id,
        fecha=body.fecha,
        hora=body.hora,
        id_barbero=body.barbero.id_barbero,
        id_cliente=body.cliente.id_cliente,
        id_servicio=body.servicio.id_servicio,
    )
