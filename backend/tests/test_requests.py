class TestRequests:
    def _create_user(self, client, username):
        r = client.post("/api/users", json={"username": username})
        return r.json()["id"]

    def _auth(self, user_id):
        return {"X-User-Id": user_id}

    def _create_request(self, client, user_id, description="need a size M coat", color="red", size="M"):
        return client.post("/api/requests", json={
            "contact": "555-0199",
            "description": description,
            "color": color,
            "size": size,
        }, headers=self._auth(user_id))

    def test_create_request(self, client):
        user_id = self._create_user(client, "alice")
        r = self._create_request(client, user_id)
        assert r.status_code == 201
        data = r.json()
        assert data["author"] == "alice"
        assert data["color"] == "red"
        assert data["images"] == []
        assert "author_id" not in data

    def test_create_then_list_by_size(self, client):
        user_id = self._create_user(client, "alice")
        self._create_request(client, user_id, description="need a size M coat", size="M")
        self._create_request(client, user_id, description="small gloves", size="S")

        r = client.get("/api/requests?size=M")
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 1
        assert data[0]["description"] == "need a size M coat"
        assert data[0]["author"] == "alice"
        assert data[0]["author"] != user_id

    def test_list_combined_filters(self, client):
        alice = self._create_user(client, "alice")
        bob = self._create_user(client, "bob")
        self._create_request(client, alice, color="red", size="M")
        self._create_request(client, alice, color="blue", size="M")
        self._create_request(client, bob, color="red", size="M")

        r = client.get("/api/requests?author=alice&color=red&size=M")
        assert len(r.json()) == 1

        r = client.get("/api/requests?color=red&size=M")
        assert len(r.json()) == 2

        r = client.get("/api/requests?author=bob&color=blue")
        assert r.status_code == 200
        assert r.json() == []

    def test_list_unknown_author_is_404(self, client):
        r = client.get("/api/requests?author=ghost")
        assert r.status_code == 404

    def test_list_newest_first(self, client):
        user_id = self._create_user(client, "alice")
        for description in ("first", "second", "third"):
            self._create_request(client, user_id, description=description)

        r = client.get("/api/requests")
        assert [req["description"] for req in r.json()] == ["third", "second", "first"]

    def test_description_validation(self, client):
        user_id = self._create_user(client, "alice")
        r = self._create_request(client, user_id, description="   ")
        assert r.status_code == 400

        r = self._create_request(client, user_id, description="x" * 301)
        assert r.status_code == 413

        r = self._create_request(client, user_id, description="x" * 300)
        assert r.status_code == 201

    def test_requires_user_header(self, client):
        r = client.post("/api/requests", json={"description": "a coat"})
        assert r.status_code == 422

    def test_unknown_user_header(self, client):
        r = client.post("/api/requests", json={"description": "a coat"}, headers=self._auth("nobody"))
        assert r.status_code == 401

    def test_update_description(self, client):
        user_id = self._create_user(client, "alice")
        request_id = self._create_request(client, user_id).json()["id"]

        r = client.patch(f"/api/requests/{request_id}", json={"description": "need a size L coat"},
                         headers=self._auth(user_id))
        assert r.status_code == 200
        assert r.json()["description"] == "need a size L coat"

    def test_update_by_other_user_forbidden(self, client):
        alice = self._create_user(client, "alice")
        bob = self._create_user(client, "bob")
        request_id = self._create_request(client, alice).json()["id"]

        r = client.patch(f"/api/requests/{request_id}", json={"description": "mine now"},
                         headers=self._auth(bob))
        assert r.status_code == 403

    def test_delete_request(self, client):
        user_id = self._create_user(client, "alice")
        request_id = self._create_request(client, user_id).json()["id"]

        r = client.delete(f"/api/requests/{request_id}", headers=self._auth(user_id))
        assert r.status_code == 200

        r = client.get(f"/api/requests/{request_id}")
        assert r.status_code == 404

    def test_delete_missing_request_repeatable(self, client):
        user_id = self._create_user(client, "alice")
        for _ in range(2):
            r = client.delete("/api/requests/does-not-exist", headers=self._auth(user_id))
            assert r.status_code == 404

    def test_append_images(self, client):
        user_id = self._create_user(client, "alice")
        request_id = self._create_request(client, user_id).json()["id"]
        h = self._auth(user_id)

        client.post(f"/api/requests/{request_id}/images", json={"image_url": "https://img/1.jpg"}, headers=h)
        r = client.post(f"/api/requests/{request_id}/images", json={"image_url": "https://img/2.jpg"}, headers=h)
        assert r.status_code == 201
        assert r.json()["images"] == ["https://img/1.jpg", "https://img/2.jpg"]

        r = client.get(f"/api/requests/{request_id}/images")
        assert r.json() == ["https://img/1.jpg", "https://img/2.jpg"]

    def test_images_for_missing_request(self, client):
        r = client.get("/api/requests/does-not-exist/images")
        assert r.status_code == 404

    def test_user_requests_route(self, client):
        alice = self._create_user(client, "alice")
        bob = self._create_user(client, "bob")
        self._create_request(client, alice)
        self._create_request(client, bob)

        r = client.get("/api/users/alice/requests")
        assert r.status_code == 200
        assert [req["author"] for req in r.json()] == ["alice"]
