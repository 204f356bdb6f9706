from core.auth import authenticate


def test_demo_account_signs_in():
    ok, msg = authenticate("demo@clues.com", "demo123")
    assert ok
    assert msg == "Welcome back, demo@clues.com!"


def test_rejections():
    assert authenticate("", "demo123") == (False, "Please enter both email and password")
    assert authenticate("demo", "demo123") == (False, "Please enter a valid email address")
    assert authenticate("demo@clues.com", "abc") == (False, "Password must be at least 6 characters")
    ok, msg = authenticate("demo@clues.com", "wrongpass")
    assert not ok
    assert msg.startswith("Invalid email or password")
