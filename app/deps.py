# app/deps.py

from fastapi import Depends
from sqlmodel import Session

from .db import get_session
from .models import Barbero, Cita, Cliente, Servicio
from .repository import Repository


def get_barbero_repository(session: Session = Depends(get_session)) -> Repository[Barbero]:
    return Repository(Barbero, session)


def get_cliente_repository(session: Session = Depends(get_session)) -> Repository[Cliente]:
    return Repository(Cliente, session)


def get_servicio_repository(session: Session = Depends(get_session)) -> Repository[Servicio]:
    return Repository(Servicio, session)


def get_cita_repository(session: Session = Depends(get_session)) -> Repository[Cita]:
    return Repository(Cita, session)
