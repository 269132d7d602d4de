from tests.factories import add_image, add_planet


def test_image_crud_cycle(client):
    created = client.post("/images/", json={"name": "earth.jpg", "path": "/img/earth.jpg"})
    assert created.status_code == 201
    image_id = created.json()["id"]

    assert client.get("/images").json() == [
        {"id": image_id, "name": "earth.jpg", "path": "/img/earth.jpg"}
    ]

    updated = client.put(f"/images/{image_id}", json={"name": "blue.jpg", "path": "/img/blue.jpg"})
    assert updated.status_code == 200
    assert updated.json() == {"id": image_id, "name": "blue.jpg", "path": "/img/blue.jpg"}
    assert client.get(f"/images/{image_id}").json()["name"] == "blue.jpg"

    deleted = client.delete(f"/images/{image_id}")
    assert deleted.status_code == 204
    assert client.get(f"/images/{image_id}").status_code == 404


def test_get_unknown_image(client):
    response = client.get("/images/3")
    assert response.status_code == 404
    assert response.json() == {"error": "Image not found"}


def test_delete_unknown_image(client):
    response = client.delete("/images/3")
    assert response.status_code == 404
    assert response.json() == {"error": "Image not found"}


def test_blank_name_is_rejected(client):
    response = client.post("/images", json={"name": "  ", "path": "/img/x.jpg"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_update_unknown_image(client):
    response = client.put("/images/8", json={"name": "a.jpg", "path": "/a.jpg"})
    assert response.status_code == 404


def test_delete_image_used_by_planet_conflicts(client, session):
    image = add_image(session)
    add_planet(session, image.id)
    response = client.delete(f"/images/{image.id}")
    assert response.status_code == 409
    assert client.get(f"/images/{image.id}").status_code == 200


def test_huge_image_id_is_not_found(client):
    huge = "99999999999999999999"
    assert client.get(f"/images/{huge}").status_code == 404
    assert client.put(f"/images/{huge}", json={"name": "a.jpg", "path": "/a.jpg"}).status_code == 404
    response = client.delete(f"/images/{huge}")
    assert response.status_code == 404
    assert response.json() == {"error": "Image not found"}
