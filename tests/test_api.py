"""
HTTP endpoint tests
"""
import pytest


@pytest.fixture
def beetle(client):
    response = client.post("/insects", json={"species": "Stag Beetle", "price": 10.0, "image_url": "http://img/b.jpg"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def cricket(client):
    response = client.post("/insects", json={"species": "Cricket", "price": 5.0, "image_url": "http://img/c.jpg"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def registered(client):
    response = client.post("/auth/register", json={
        "username": "noah", "password": "password1", "email": "noah@example.com"
    })
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["database"] == "healthy"


class TestInsects:
    def test_create_and_get(self, client, beetle):
        response = client.get(f"/insects/{beetle['id']}")
        
        assert response.status_code == 200
        assert response.json() == {
            "id": beetle["id"], "species": "Stag Beetle", "price": 10.0, "image_url": "http://img/b.jpg"
        }
    
    def test_duplicate_species_is_400(self, client, beetle):
        response = client.post("/insects", json={"species": "Stag Beetle", "price": 1.0})
        
        assert response.status_code == 400
        assert "Duplicate insect" in response.json()["error"]["message"]
    
    def test_invalid_body_is_400(self, client):
        response = client.post("/insects", json={"species": "", "price": -1})
        
        assert response.status_code == 400
    
    def test_search(self, client, beetle, cricket):
        response = client.get("/insects", params={"minPrice": 6, "speciesLike": "beetle"})
        
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["insects"][0]["species"] == "Stag Beetle"
    
    def test_search_inverted_range_is_400(self, client, beetle):
        response = client.get("/insects", params={"minPrice": 10, "maxPrice": 1})
        
        assert response.status_code == 400
    
    def test_patch(self, client, beetle):
        response = client.patch(f"/insects/{beetle['id']}", json={"price": 9.99})
        
        assert response.status_code == 200
        assert response.json()["price"] == 9.99
        assert response.json()["species"] == "Stag Beetle"
    
    def test_patch_species_is_400(self, client, beetle):
        response = client.patch(f"/insects/{beetle['id']}", json={"species": "Moth"})
        
        assert response.status_code == 400
    
    def test_patch_empty_is_400(self, client, beetle):
        response = client.patch(f"/insects/{beetle['id']}", json={})
        
        assert response.status_code == 400
    
    def test_missing_is_404(self, client):
        assert client.get("/insects/999").status_code == 404
        assert client.patch("/insects/999", json={"price": 1}).status_code == 404
        assert client.delete("/insects/999").status_code == 404
    
    def test_delete(self, client, beetle):
        assert client.delete(f"/insects/{beetle['id']}").status_code == 204
        assert client.get(f"/insects/{beetle['id']}").status_code == 404


class TestOrders:
    @pytest.fixture
    def order(self, client, beetle, cricket, registered):
        response = client.post("/orders", json={
            "phone": "555-0100",
            "delivery_address": "1 Hive Lane",
            "submit_time": "2024-03-01T12:30:00",
            "items": [beetle["id"], cricket["id"]],
            "user_order_id": registered["id"],
        })
        assert response.status_code == 201
        return response.json()
    
    def test_get_includes_item_detail(self, client, order):
        response = client.get(f"/orders/{order['id']}")
        
        assert response.status_code == 200
        assert [item["species"] for item in response.json()["items"]] == ["Cricket", "Stag Beetle"]
    
    def test_duplicate_submission_is_400(self, client, order):
        response = client.post("/orders", json={
            "phone": "555-0100",
            "delivery_address": "1 Hive Lane",
            "submit_time": "2024-03-01T12:30:00",
            "items": [1],
            "user_order_id": order["user_order_id"],
        })
        
        assert response.status_code == 400
    
    def test_total(self, client, order):
        response = client.get(f"/orders/{order['id']}/total")
        
        assert response.status_code == 200
        assert response.json() == {"order_id": order["id"], "total": 17}
    
    def test_apply_total(self, client, order):
        response = client.post(f"/orders/{order['id']}/total")
        
        assert response.status_code == 200
        assert response.json()["total"] == 17
        listed = client.get("/orders", params={"minTotal": 17, "maxTotal": 17}).json()
        assert [o["id"] for o in listed["orders"]] == [order["id"]]
    
    def test_search_by_user(self, client, order):
        response = client.get("/orders", params={"user_order_id": order["user_order_id"]})
        
        assert response.json()["total"] == 1
    
    def test_search_inverted_range_is_400(self, client):
        response = client.get("/orders", params={"minTotal": 10, "maxTotal": 1})
        
        assert response.status_code == 400
    
    def test_delete(self, client, order):
        assert client.delete(f"/orders/{order['id']}").status_code == 204
        assert client.get(f"/orders/{order['id']}").status_code == 404
        assert client.get(f"/orders/{order['id']}/total").status_code == 404


class TestUsers:
    def test_register_hides_password(self, client, registered):
        assert registered["username"] == "noah"
        assert registered["isAdmin"] is False
        assert "password" not in registered
        assert "password_hash" not in registered
    
    def test_register_duplicate_is_400(self, client, registered):
        response = client.post("/auth/register", json={
            "username": "noah", "password": "password2", "email": "other@example.com"
        })
        
        assert response.status_code == 400
    
    def test_register_password_over_72_bytes_is_400(self, client):
        response = client.post("/auth/register", json={
            "username": "emile", "password": "\u00e9" * 40, "email": "emile@example.com"
        })
        
        assert response.status_code == 400
        assert client.get("/users/emile").status_code == 404
    
    def test_update_password_over_72_bytes_is_400(self, client, registered):
        response = client.patch("/users/noah", json={"password": "\u00e9" * 40})
        
        assert response.status_code == 400
        login = client.post("/auth/login", json={"username": "noah", "password": "password1"})
        assert login.status_code == 200
    
    def test_login(self, client, registered):
        response = client.post("/auth/login", json={"username": "noah", "password": "password1"})
        
        assert response.status_code == 200
        assert response.json() == {"username": "noah", "email": "noah@example.com", "isAdmin": False}
    
    def test_login_failures_are_indistinguishable(self, client, registered):
        wrong_password = client.post("/auth/login", json={"username": "noah", "password": "nope"})
        unknown_user = client.post("/auth/login", json={"username": "ghost", "password": "password1"})
        
        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()
    
    def test_list_hides_passwords(self, client, registered):
        body = client.get("/users").json()
        
        assert body["total"] == 1
        assert "password_hash" not in body["users"][0]
    
    def test_get_hides_password(self, client, registered):
        response = client.get("/users/noah")
        
        assert response.status_code == 200
        assert response.json()["orders"] == []
        assert "password_hash" not in response.json()
    
    def test_update(self, client, registered):
        response = client.patch("/users/noah", json={"password": "changed-pw", "isAdmin": True})
        
        assert response.status_code == 200
        assert response.json()["isAdmin"] is True
        assert "password_hash" not in response.json()
        login = client.post("/auth/login", json={"username": "noah", "password": "changed-pw"})
        assert login.status_code == 200
    
    def test_update_missing_is_404(self, client):
        assert client.patch("/users/ghost", json={"isAdmin": True}).status_code == 404
    
    def test_delete(self, client, registered):
        assert client.delete("/users/noah").status_code == 204
        assert client.get("/users/noah").status_code == 404
