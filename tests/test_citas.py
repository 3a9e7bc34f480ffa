# tests/test_citas.py


class TestCitas:
    def test_create_and_get(self, client, cita_body):
        response = client.post("/citas", json=cita_body)
        assert response.status_code == 200
        cita = response.json()
        assert isinstance(cita["idCita"], int)
        assert cita["fecha"] == "2024-05-01"
        assert cita["hora"] == "10:00"
        assert cita["idBarbero"] == cita_body["barbero"]["idBarbero"]

        fetched = client.get(f"/citas/{cita['idCita']}")
        assert fetched.status_code == 200
        assert fetched.json() == cita

    def test_read_suppresses_nested_objects(self, client, cita_body):
        cita = client.post("/citas", json=cita_body).json()
        assert set(cita) == {"idCita", "fecha", "hora", "idBarbero", "idCliente", "idServicio"}

    def test_flat_foreign_keys_accepted(self, client, cita_body):
        body = {
            "fecha": "2024-05-02",
            "hora": "11:30",
            "idBarbero": cita_body["barbero"]["idBarbero"],
            "idCliente": cita_body["cliente"]["idCliente"],
            "idServicio": cita_body["servicio"]["idServicio"],
        }
        response = client.post("/citas", json=body)
        assert response.status_code == 200
        assert response.json()["idServicio"] == body["idServicio"]

    def test_nested_fields_other_than_id_ignored(self, client, cita_body):
        cita_body["barbero"]["nombre"] = "Otro nombre"
        assert client.post("/citas", json=cita_body).status_code == 200

        barbero_id = cita_body["barbero"]["idBarbero"]
        assert client.get(f"/barberos/{barbero_id}").json()["nombre"] == "Luis Pérez"

    def test_unknown_reference_is_rejected(self, client, cita_body):
        cita_body["barbero"] = {"idBarbero": 999}
        response = client.post("/citas", json=cita_body)
        assert response.status_code == 400
        assert client.get("/citas").json() == []

    def test_over_length_fecha_and_hora_are_rejected(self, client, cita_body):
        assert client.post("/citas", json={**cita_body, "fecha": "x" * 46}).status_code == 422
        assert client.post("/citas", json={**cita_body, "hora": "x" * 46}).status_code == 422
        assert client.post("/citas", json={**cita_body, "fecha": "x" * 45}).status_code == 200

    def test_update_with_unknown_reference_leaves_row_unchanged(self, client, cita_body):
        cita = client.post("/citas", json=cita_body).json()

        response = client.put(
            f"/citas/{cita['idCita']}",
            json={**cita_body, "hora": "18:00", "servicio": {"idServicio": 999}},
        )
        assert response.status_code == 400
        assert client.get(f"/citas/{cita['idCita']}").json() == cita

    def test_missing_reference_is_rejected(self, client, cita_body):
        del cita_body["servicio"]
        assert client.post("/citas", json=cita_body).status_code == 422

    def test_update_forces_path_id(self, client, cita_body):
        cita_id = client.post("/citas", json=cita_body).json()["idCita"]

        response = client.put(f"/citas/{cita_id}", json={**cita_body, "idCita": 42, "hora": "12:00"})
        assert response.status_code == 200
        assert response.json()["idCita"] == cita_id
        assert response.json()["hora"] == "12:00"
        assert client.get("/citas/42").status_code == 404

    def test_update_missing(self, client, cita_body):
        response = client.put("/citas/999", json=cita_body)
        assert response.status_code == 404
        assert response.content == b""

    def test_out_of_range_id_is_404(self, client, cita_body):
        huge = 2**70
        for response in (
            client.get(f"/citas/{huge}"),
            client.put(f"/citas/{huge}", json=cita_body),
            client.delete(f"/citas/{huge}"),
            client.get(f"/barberos/{huge}/citas"),
        ):
            assert response.status_code == 404
            assert response.content == b""

    def test_delete(self, client, cita_body):
        cita_id = client.post("/citas", json=cita_body).json()["idCita"]
        assert client.delete(f"/citas/{cita_id}").status_code == 204
        assert client.get(f"/citas/{cita_id}").status_code == 404
        assert client.delete(f"/citas/{cita_id}").status_code == 404

    def test_no_overlap_check(self, client, cita_body):
        # same barber, same slot twice: both stored
        assert client.post("/citas", json=cita_body).status_code == 200
        assert client.post("/citas", json=cita_body).status_code == 200
        assert len(client.get("/citas").json()) == 2


class TestBackReferences:
    def test_barbero_citas(self, client, cita_body):
        cita = client.post("/citas", json=cita_body).json()
        other = client.post("/barberos", json={"nombre": "Sin citas"}).json()

        response = client.get(f"/barberos/{cita['idBarbero']}/citas")
        assert response.status_code == 200
        assert response.json() == [cita]
        assert client.get(f"/barberos/{other['idBarbero']}/citas").json() == []

    def test_cliente_and_servicio_citas(self, client, cita_body):
        cita = client.post("/citas", json=cita_body).json()
        assert client.get(f"/clientes/{cita['idCliente']}/citas").json() == [cita]
        assert client.get(f"/servicios/{cita['idServicio']}/citas").json() == [cita]

    def test_unknown_parent(self, client):
        response = client.get("/servicios/999/citas")
        assert response.status_code == 404
        assert response.content == b""

    def test_referenced_barbero_cannot_be_deleted(self, client, cita_body):
        client.post("/citas", json=cita_body)
        barbero_id = cita_body["barbero"]["idBarbero"]

        assert client.delete(f"/barberos/{barbero_id}").status_code == 400
        assert client.get(f"/barberos/{barbero_id}").status_code == 200
