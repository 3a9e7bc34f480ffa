# app/schemas.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Schema(BaseModel):
    # JSON uses the camelCase id names, Python code uses snake_case
    model_config = ConfigDict(populate_by_name=True)


# --- Barberos ---

class BarberoIn(_Schema):
    id_barbero: Optional[int] = Field(default=None, alias="idBarbero")
    nombre: str = Field(max_length=200)


class BarberoPublic(_Schema):
    id_barbero: int = Field(alias="idBarbero")
    nombre: str


# --- Clientes ---

class ClienteIn(_Schema):
    id_cliente: Optional[int] = Field(default=None, alias="idCliente")
    nombre: str = Field(max_length=200)
    telefono: str = Field(max_length=45)


class ClientePublic(_Schema):
    id_cliente: int = Field(alias="idCliente")
    nombre: str
    telefono: str


# --- Servicios ---

class ServicioIn(_Schema):
    id_servicio: Optional[int] = Field(default=None, alias="idServicio")
    descripcion: str = Field(max_length=200)
    costo: float


class ServicioPublic(_Schema):
    id_servicio: int = Field(alias="idServicio")
    descripcion: str
    costo: float


# --- Citas ---

class BarberoRef(_Schema):
    id_barbero: int = Field(alias="idBarbero")


class ClienteRef(_Schema):
    id_cliente: int = Field(alias="idCliente")


class ServicioRef(_Schema):
    id_servicio: int = Field(alias="idServicio")


class CitaIn(_Schema):
    """Appointment body.

    References are given either nested (``{"barbero": {"idBarbero": 1}}``)
    or flat (``{"idBarbero": 1}``). Only the id of a nested object is read.
    """

    id_cita: Optional[int] = Field(default=None, alias="idCita")
    fecha: str = Field(max_length=45)
    hora: str = Field(max_length=45)
    barbero: BarberoRef
    cliente: ClienteRef
    servicio: ServicioRef

    @model_validator(mode="before")
    @classmethod
    def accept_flat_ids(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for nested, key in (("barbero", "idBarbero"), ("cliente", "idCliente"), ("servicio", "idServicio")):
            if data.get(nested) is None and key in data:
                data[nested] = {key: data.pop(key)}
        return data


class CitaPublic(_Schema):
    id_cita: int = Field(alias="idCita")
    fecha: str
    hora: str
    id_barbero: int = Field(alias="idBarbero")
    id_cliente: int = Field(alias="idCliente")
    id_servicio: int = Field(alias="idServicio")
