from app.models.interests import Interest
from app.models.saved_businesses import SavedBusiness


def test_save_business_snapshots_post(client, owner, investor, headers, make_post):
    post = make_post(owner, status="approved", industry=None)

    response = client.post(
        "/api/investor/saved",
        json={"businessId": post.id},
        headers=headers(investor),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["businessId"] == post.id
    assert body["businessName"] == "EcoFarm"
    assert body["industry"] == "Not specified"
    assert body["investmentNeeded"] == 5000


def test_duplicate_save_conflicts_without_mutation(client, db, owner, investor, headers, make_post):
    post = make_post(owner, status="approved")
    first = client.post("/api/investor/saved", json={"businessId": post.id}, headers=headers(investor)).json()

    second = client.post("/api/investor/saved", json={"businessId": post.id}, headers=headers(investor))

    assert second.status_code == 409
    assert second.json()["detail"] == "Business already saved"
    db.expire_all()
    rows = db.query(SavedBusiness).all()
    assert len(rows) == 1
    assert rows[0].id == first["id"]


def test_existing_saved_row_is_not_overwritten(client, db, owner, investor, headers, make_post):
    post = make_post(owner, status="approved")
    db.add(SavedBusiness(investor_id=investor.id, business_id=post.id, business_name="Old name"))
    db.commit()

    response = client.post("/api/investor/saved", json={"businessId": post.id}, headers=headers(investor))

    assert response.status_code == 409
    db.expire_all()
    assert db.query(SavedBusiness).one().business_name == "Old name"


def test_cannot_save_unapproved_post(client, owner, investor, headers, make_post):
    post = make_post(owner, status="pending")

    response = client.post("/api/investor/saved", json={"businessId": post.id}, headers=headers(investor))

    assert response.status_code == 404


def test_remove_saved_business_scoped_to_investor(client, owner, investor, make_account, headers, make_post):
    post = make_post(owner, status="approved")
    saved = client.post("/api/investor/saved", json={"businessId": post.id}, headers=headers(investor)).json()
    someone_else = make_account("investor")

    assert client.delete(f"/api/investor/saved/{saved['id']}", headers=headers(someone_else)).status_code == 404
    assert client.delete(f"/api/investor/saved/{saved['id']}", headers=headers(investor)).status_code == 200
    assert client.get("/api/investor/saved", headers=headers(investor)).json() == []


def test_express_interest_copies_owner_contact(client, owner, investor, headers, make_post):
    post = make_post(owner, status="approved")

    response = client.post(
        "/api/investor/interests",
        json={"businessId": post.id, "message": "Keen to discuss a seed round"},
        headers=headers(investor),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pending"
    assert body["contactName"] == owner.name
    assert body["contactEmail"] == owner.email
    assert body["message"] == "Keen to discuss a seed round"

    listed = client.get("/api/investor/interests", headers=headers(investor)).json()
    assert [i["id"] for i in listed] == [body["id"]]


def test_duplicate_interest_conflicts(client, db, owner, investor, headers, make_post):
    post = make_post(owner, status="approved")
    client.post("/api/investor/interests", json={"businessId": post.id, "message": "first"}, headers=headers(investor))

    second = client.post(
        "/api/investor/interests",
        json={"businessId": post.id, "message": "second"},
        headers=headers(investor),
    )

    assert second.status_code == 409
    db.expire_all()
    assert db.query(Interest).one().message == "first"


def test_snapshot_not_refreshed_on_edit(client, owner, investor, headers, make_post, db):
    post = make_post(owner, status="approved")
    client.post("/api/investor/saved", json={"businessId": post.id}, headers=headers(investor))

    post.title = "Renamed"
    db.commit()

    saved = client.get("/api/investor/saved", headers=headers(investor)).json()
    assert saved[0]["businessName"] == "EcoFarm"


def test_ledgers_are_investor_only(client, owner, admin, headers):
    for account in (owner, admin):
        assert client.get("/api/investor/saved", headers=headers(account)).status_code == 403
        assert client.get("/api/investor/interests", headers=headers(account)).status_code == 403
