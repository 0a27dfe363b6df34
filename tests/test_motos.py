def _criar_motos(client, quantidade):
    for i in range(quantidade):
        response = client.post("/api/moto", json={"placa": f"PLC{i:04d}", "modelo": f"Modelo {i}"})
        assert response.status_code == 201


def test_create_moto(client):
    response = client.post("/api/moto", json={"placa": "ABC1234", "modelo": "CB500"})

    assert response.status_code == 201
    body = response.json()
    assert body["placa"] == "ABC1234"
    assert body["modelo"] == "CB500"
    assert isinstance(body["id"], int)
    assert response.headers["location"] == f"http://testserver/api/moto/{body['id']}"


def test_create_moto_ignores_body_id(client):
    response = client.post("/api/moto", json={"id": 999, "placa": "XYZ9876", "modelo": "Fazer"})

    assert response.status_code == 201
    assert response.json()["id"] != 999


def test_create_moto_missing_field(client):
    response = client.post("/api/moto", json={"placa": "ABC1234"})
    assert response.status_code == 422


def test_get_moto(client, moto):
    response = client.get(f"/api/moto/{moto['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == moto["id"]
    assert body["placa"] == "ABC1234"
    assert body["modelo"] == "CB500"


def test_get_moto_not_found(client):
    response = client.get("/api/moto/42")

    assert response.status_code == 404
    assert "detail" in response.json()


def test_get_moto_by_placa(client, moto):
    response = client.get("/api/moto/placa/ABC1234")

    assert response.status_code == 200
    body = response.json()
    assert {k: body[k] for k in ("id", "placa", "modelo")} == moto
    assert body == client.get(f"/api/moto/{moto['id']}").json()
    assert [link["rel"] for link in body["links"]] == ["self", "update", "delete"]


def test_get_moto_by_placa_is_exact(client, moto):
    assert client.get("/api/moto/placa/abc1234").status_code == 404
    assert client.get("/api/moto/placa/ABC123").status_code == 404


def test_get_moto_by_placa_returns_first(client, moto):
    client.post("/api/moto", json={"placa": "ABC1234", "modelo": "Outra"})

    response = client.get("/api/moto/placa/ABC1234")

    assert response.json()["id"] == moto["id"]


def test_list_motos_links(client, moto):
    response = client.get("/api/moto")

    assert response.status_code == 200
    items = response.json()
    assert len(items) == 1
    href = f"/api/moto/{moto['id']}"
    assert items[0]["links"] == [
        {"rel": "self", "href": href},
        {"rel": "update", "href": href},
        {"rel": "delete", "href": href},
    ]


def test_list_motos_default_page_size(client):
    _criar_motos(client, 12)

    items = client.get("/api/moto").json()

    assert len(items) == 10
    assert items[0]["placa"] == "PLC0000"


def test_list_motos_pagination(client):
    _criar_motos(client, 15)

    items = client.get("/api/moto", params={"pageNumber": 2, "pageSize": 10}).json()

    assert [m["placa"] for m in items] == [f"PLC{i:04d}" for i in range(10, 15)]


def test_list_motos_page_past_end(client):
    _criar_motos(client, 3)

    items = client.get("/api/moto", params={"pageNumber": 5, "pageSize": 2}).json()

    assert items == []


def test_list_motos_non_positive_page_number_is_first_page(client):
    _criar_motos(client, 4)

    primeira = client.get("/api/moto", params={"pageNumber": 1, "pageSize": 2}).json()
    zero = client.get("/api/moto", params={"pageNumber": 0, "pageSize": 2}).json()
    negativa = client.get("/api/moto", params={"pageNumber": -3, "pageSize": 2}).json()

    assert zero == primeira
    assert negativa == primeira


def test_list_motos_non_positive_page_size_is_empty(client):
    _criar_motos(client, 4)

    assert client.get("/api/moto", params={"pageSize": 0}).json() == []


def test_list_motos_huge_page_size_returns_everything(client):
    _criar_motos(client, 12)

    response = client.get("/api/moto", params={"pageNumber": 1, "pageSize": 2**63})

    assert response.status_code == 200
    assert len(response.json()) == 12


def test_list_motos_huge_page_number_is_empty(client):
    _criar_motos(client, 3)

    response = client.get("/api/moto", params={"pageNumber": 2**62, "pageSize": 10})

    assert response.status_code == 200
    assert response.json() == []


def test_update_moto(client, moto):
    response = client.put(
        f"/api/moto/{moto['id']}",
        json={"id": moto["id"], "placa": "NEW0001", "modelo": "CB650"},
    )

    assert response.status_code == 204
    body = client.get(f"/api/moto/{moto['id']}").json()
    assert body["placa"] == "NEW0001"
    assert body["modelo"] == "CB650"


def test_update_moto_id_mismatch(client, moto):
    response = client.put(
        f"/api/moto/{moto['id']}",
        json={"id": moto["id"] + 1, "placa": "NEW0001", "modelo": "CB650"},
    )

    assert response.status_code == 400
    assert client.get(f"/api/moto/{moto['id']}").json()["placa"] == "ABC1234"


def test_update_moto_without_body_id(client, moto):
    response = client.put(f"/api/moto/{moto['id']}", json={"placa": "NEW0001", "modelo": "CB650"})
    assert response.status_code == 400


def test_update_moto_not_found(client):
    response = client.put("/api/moto/77", json={"id": 77, "placa": "NEW0001", "modelo": "CB650"})
    assert response.status_code == 404


def test_delete_moto(client, moto):
    response = client.delete(f"/api/moto/{moto['id']}")

    assert response.status_code == 204
    assert client.get(f"/api/moto/{moto['id']}").status_code == 404


def test_delete_moto_not_found(client):
    assert client.delete("/api/moto/5").status_code == 404
