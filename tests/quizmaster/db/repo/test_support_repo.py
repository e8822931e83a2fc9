from quizmaster.db.repo import support_repo as mod


def test_ensure_is_idempotent_and_get():
    assert mod.ticket_get("alice") is None
    mod.ticket_ensure("alice")
    mod.ticket_ensure("alice")

    assert mod.ticket_get("alice") == {
        "username": "alice",
        "messages": [],
        "last_message_from": None,
        "user_has_unread": False,
        "admin_has_unread": False,
    }
    assert len(mod.ticket_list()) == 1


def test_add_message_updates_ticket_state():
    mod.ticket_ensure("alice")
    mod.ticket_add_message("alice", sender="user", text="hi", timestamp="t1", user_has_unread=False, admin_has_unread=True)

    ticket = mod.ticket_get("alice")
    assert ticket["last_message_from"] == "user"
    assert ticket["admin_has_unread"] is True
    assert ticket["messages"] == [{"sender": "user", "text": "hi", "timestamp": "t1", "is_read": False}]


def test_mark_read_only_touches_other_side():
    mod.ticket_ensure("alice")
    mod.ticket_add_message("alice", sender="user", text="q", timestamp="t1", user_has_unread=False, admin_has_unread=True)
    mod.ticket_add_message("alice", sender="admin", text="a", timestamp="t2", user_has_unread=True, admin_has_unread=False)

    assert mod.ticket_mark_read("alice", reader="user") is True
    ticket = mod.ticket_get("alice")
    assert ticket["user_has_unread"] is False
    assert [m["is_read"] for m in ticket["messages"]] == [False, True]

    assert mod.ticket_mark_read("ghost", reader="admin") is False


def test_delete_cascades_messages():
    mod.ticket_ensure("alice")
    mod.ticket_add_message("alice", sender="user", text="q", timestamp="t1", user_has_unread=False, admin_has_unread=True)

    assert mod.ticket_delete("alice") is True
    mod.ticket_ensure("alice")
    assert mod.ticket_get("alice")["messages"] == []


def test_ticket_username_is_case_insensitive():
    mod.ticket_ensure("alice")
    mod.ticket_ensure("ALICE")
    mod.ticket_add_message("Alice", sender="user", text="q", timestamp="t1", user_has_unread=False, admin_has_unread=True)

    assert len(mod.ticket_list()) == 1
    assert mod.ticket_get("aLiCe")["messages"][0]["text"] == "q"
    assert mod.ticket_delete("ALICE") is True
