from app.payments.service import mask_details
from conftest import auth


def test_mask_details_drops_cvv():
    out = mask_details({"card_number": "1234-5678-9012-3456", "expiry_date": "12/27", "cvv": "123"})
    assert out == {"expiry_date": "12/27", "card_last4": "3456"}


def test_create_payment_intent(client, make_user):
    user = make_user()
    body = {"amount": 9900, "payment_method": "card", "payment_details": {"card_number": "4111111111111111", "cvv": "999"}}
    r = client.post("/payments", json=body, headers=auth(user))
    assert r.status_code == 201
    out = r.json()
    assert out["status"] == "pending"
    assert out["payment_details"] == {"card_last4": "1111"}

    listed = client.get("/payments", headers=auth(user)).json()
    assert [p["id"] for p in listed] == [out["id"]]


def test_payment_validation(client, make_user):
    user = make_user()
    assert client.post("/payments", json={"amount": 0}, headers=auth(user)).status_code == 422
    assert client.post("/payments", json={"amount": 10, "payment_method": "cash"}, headers=auth(user)).status_code == 422
    assert client.post("/payments", json={"amount": 10}).status_code == 401
