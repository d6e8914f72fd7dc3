from datetime import datetime, timezone

import pytest

from app.inquiries.models import Inquiry
from app.inquiries.schemas import InquiryCreate, InquiryUpdate
from app.inquiries.service import (
    create_inquiry,
    list_inquiries,
    get_inquiry,
    update_inquiry,
    reply_inquiry,
    delete_inquiry,
)
from app.shared.errors import Forbidden, NotFound, ValidationError
from conftest import auth, caller_of


@pytest.fixture
def people(make_user):
    return make_user(is_admin=True), make_user(), make_user()


def test_non_admin_sees_only_own(db, people):
    admin, alice, bob = people
    a1 = create_inquiry(db, caller_of(alice), InquiryCreate(title="a1", content="x"))
    create_inquiry(db, caller_of(bob), InquiryCreate(title="b1", content="y"))
    a2 = create_inquiry(db, caller_of(alice), InquiryCreate(title="a2", content="z"))

    mine = list_inquiries(db, caller_of(alice))
    assert [i.id for i in mine] == [a2.id, a1.id]
    assert all(i.user_id == alice.id for i in mine)

    with pytest.raises(NotFound):
        get_inquiry(db, caller_of(bob), a1.id)


def test_admin_sees_all(db, people):
    admin, alice, bob = people
    create_inquiry(db, caller_of(alice), InquiryCreate(title="a", content="x"))
    create_inquiry(db, caller_of(bob), InquiryCreate(title="b", content="y"))
    assert len(list_inquiries(db, caller_of(admin))) == 2


@pytest.mark.parametrize("title,content", [("", "body"), ("   ", "body"), ("title", " \n\t")])
def test_create_requires_text(db, people, title, content):
    _, alice, _ = people
    with pytest.raises(ValidationError):
        create_inquiry(db, caller_of(alice), InquiryCreate(title=title, content=content))
    assert db.query(Inquiry).count() == 0


def test_stranger_cannot_update(db, people):
    admin, alice, bob = people
    inq = create_inquiry(db, caller_of(alice), InquiryCreate(title="orig", content="orig body"))
    with pytest.raises(Forbidden):
        update_inquiry(db, caller_of(bob), inq.id, InquiryUpdate(title="hacked"))
    with pytest.raises(Forbidden):
        update_inquiry(db, caller_of(admin), inq.id, InquiryUpdate(title="hacked"))
    db.expire_all()
    assert db.get(Inquiry, inq.id).title == "orig"

    updated = update_inquiry(db, caller_of(alice), inq.id, InquiryUpdate(content="new body"))
    assert (updated.title, updated.content) == ("orig", "new body")


def test_reply_flow(db, people):
    admin, alice, _ = people
    inq = create_inquiry(db, caller_of(alice), InquiryCreate(title="help", content="please"))
    assert inq.status == "pending" and inq.reply_date is None

    with pytest.raises(Forbidden):
        reply_inquiry(db, caller_of(alice), inq.id, "self answer")

    answered = reply_inquiry(db, caller_of(admin), inq.id, "  done  ")
    assert answered.reply == "done"
    assert answered.reply_date is not None
    assert answered.status == "answered"


def test_empty_reply_sets_nothing(db, people):
    admin, alice, _ = people
    inq = create_inquiry(db, caller_of(alice), InquiryCreate(title="help", content="please"))
    with pytest.raises(ValidationError):
        reply_inquiry(db, caller_of(admin), inq.id, "   ")
    db.expire_all()
    fresh = db.get(Inquiry, inq.id)
    assert fresh.reply is None and fresh.reply_date is None and fresh.status == "pending"


def test_empty_reply_to_id_5(db, people):
    admin, _, _ = people
    with pytest.raises(ValidationError):
        reply_inquiry(db, caller_of(admin), 5, "")


def test_delete_is_admin_only(db, people):
    admin, alice, _ = people
    inq = create_inquiry(db, caller_of(alice), InquiryCreate(title="t", content="c"))
    with pytest.raises(Forbidden):
        delete_inquiry(db, caller_of(alice), inq.id)
    delete_inquiry(db, caller_of(admin), inq.id)
    assert db.get(Inquiry, inq.id) is None


def test_http_flow(client, people):
    admin, alice, bob = people
    r = client.post("/inquiries", json={"title": "결제 문의", "content": "환불 가능한가요?"}, headers=auth(alice))
    assert r.status_code == 201
    inq_id = r.json()["id"]

    assert client.get("/inquiries").status_code == 401
    assert client.get("/inquiries", headers=auth(bob)).json() == []
    assert client.get(f"/inquiries/{inq_id}", headers=auth(bob)).status_code == 404
    assert client.patch(f"/inquiries/{inq_id}", json={"title": "x"}, headers=auth(bob)).status_code == 403

    r = client.post(f"/inquiries/{inq_id}/reply", json={"reply": ""}, headers=auth(admin))
    assert r.status_code == 400
    r = client.post(f"/inquiries/{inq_id}/reply", json={"reply": "가능합니다"}, headers=auth(admin))
    assert r.status_code == 200 and r.json()["status"] == "answered"

    assert client.get(f"/inquiries/{inq_id}", headers=auth(alice)).json()["reply"] == "가능합니다"
    assert client.delete(f"/inquiries/{inq_id}", headers=auth(admin)).status_code == 204


def test_same_timestamp_lists_higher_id_first(db, people):
    admin, alice, _ = people
    stamp = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    first = Inquiry(title="a", content="a", user_id=alice.id, status="pending", created_at=stamp)
    second = Inquiry(title="b", content="b", user_id=alice.id, status="pending", created_at=stamp)
    db.add_all([first, second])
    db.commit()

    assert second.id > first.id
    for caller in (caller_of(alice), caller_of(admin)):
        assert [i.id for i in list_inquiries(db, caller)] == [second.id, first.id]
