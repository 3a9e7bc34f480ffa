# app/models.py

from typing import Optional

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import SQLModel, Field


class Barbero(SQLModel, table=True):
    __tablename__ = "barbero"

    id_barbero: Optional[int] = Field(
        default=None, sa_column=Column("idBarbero", Integer, primary_key=True, autoincrement=True)
    )
    nombre: str = Field(max_length=200)


class Cliente(SQLModel, table=True):
    __tablename__ = "cliente"

    id_cliente: Optional[int] = Field(
        default=None, sa_column=Column("idCliente", Integer, primary_key=True, autoincrement=True)
    )
    nombre: str = Field(max_length=200)
    telefono: str = Field(max_length=45)


class Servicio(SQLModel, table=True):
    __tablename__ = "servicios"

    id_servicio: Optional[int] = Field(
        default=None, sa_column=Column("idServicio", Integer, primary_key=True, autoincrement=True)
    )
    descripcion: str = Field(max_length=200)
    costo: float  # no positivity check


class Cita(SQLModel, table=True):
    __tablename__ = "citas"

    id_cita: Optional[int] = Field(
        default=None, sa_column=Column("idCita", Integer, primary_key=True, autoincrement=True)
    )

    # date and time are free-form text
    fecha: str = Field(max_length=45)
    hora: str = Field(max_length=45)

    # one-directional foreign keys, resolved by query when needed
    id_barbero: int = Field(
        sa_column=Column("idBarbero", Integer, ForeignKey("barbero.idBarbero"), nullable=False, index=True)
    )
    id_cliente: int = Field(
        sa_column=Column("idCliente", Integer, ForeignKey("cliente.idCliente"), nullable=False, index=True)
    )
    id_servicio: int = Field(
        sa_column=Column("idServicio", Integer, ForeignKey("servicios.idServicio"), nullable=False, index=True)
    )
