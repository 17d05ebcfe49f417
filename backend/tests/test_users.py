class TestUsers:
    def _auth(self, user_id):
        return {"X-User-Id": user_id}

    def test_create_and_get_user(self, client):
        r = client.post("/api/users", json={"username": "alice", "location": "Boston"})
        assert r.status_code == 201
        assert r.json()["username"] == "alice"

        r = client.get("/api/users/alice")
        assert r.status_code == 200
        assert r.json()["location"] == "Boston"

    def test_duplicate_username(self, client):
        client.post("/api/users", json={"username": "alice"})
        r = client.post("/api/users", json={"username": "alice"})
        assert r.status_code == 409

    def test_missing_user(self, client):
        assert client.get("/api/users/ghost").status_code == 404
        assert client.get("/api/users/ghost/requests").status_code == 404

    def test_delete_user_removes_owned_records(self, client):
        alice = client.post("/api/users", json={"username": "alice"}).json()["id"]
        bob = client.post("/api/users", json={"username": "bob"}).json()["id"]

        client.post("/api/requests", json={"description": "need boots"}, headers=self._auth(alice))
        client.post("/api/requests", json={"description": "need a hat"}, headers=self._auth(bob))
        alice_event = client.post("/api/events", json={
            "name": "Boot drive", "start_date": "2026-05-01", "end_date": "2026-05-02",
        }, headers=self._auth(alice)).json()["id"]
        bob_event = client.post("/api/events", json={
            "name": "Hat drive", "start_date": "2026-05-03", "end_date": "2026-05-04",
        }, headers=self._auth(bob)).json()["id"]
        client.post(f"/api/events/{alice_event}/responses", json={"description": "boots"}, headers=self._auth(bob))
        client.post(f"/api/events/{bob_event}/responses", json={"description": "hats"}, headers=self._auth(alice))
        client.post(f"/api/events/{bob_event}/responses", json={"description": "more hats"}, headers=self._auth(bob))

        r = client.delete(f"/api/users/{alice}", headers=self._auth(bob))
        assert r.status_code == 403

        r = client.delete(f"/api/users/{alice}", headers=self._auth(alice))
        assert r.status_code == 200

        assert client.get("/api/users/alice").status_code == 404
        assert [req["author"] for req in client.get("/api/requests").json()] == ["bob"]
        assert [e["id"] for e in client.get("/api/events").json()] == [bob_event]
        assert [resp["description"] for resp in client.get("/api/responses").json()] == ["more hats"]
