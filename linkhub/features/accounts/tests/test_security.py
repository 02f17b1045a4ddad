"""Tests for password hashing, session tokens and sanitizing."""

from linkhub.features.accounts.security import (
    generate_session_token,
    hash_password,
    hash_session_token,
    sanitize_input,
    verify_password,
)


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("correct-horse")

        assert hashed != "correct-horse"
        assert hashed.startswith("$pbkdf2-sha256$")

    def test_verify(self):
        hashed = hash_password("correct-horse")

        assert verify_password("correct-horse", hashed) is True
        assert verify_password("wrong-horse", hashed) is False

    def test_hashes_are_salted(self):
        assert hash_password("same-password") != hash_password("same-password")


class TestSessionTokens:
    def test_tokens_are_unique(self):
        tokens = {generate_session_token() for _ in range(50)}
        assert len(tokens) == 50

    def test_token_is_url_safe(self):
        token = generate_session_token()
        assert len(token) >= 43
        assert all(ch.isalnum() or ch in "-_" for ch in token)

    def test_digest_is_stable_sha256_hex(self):
        digest = hash_session_token("abc")

        assert digest == hash_session_token("abc")
        assert digest == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestSanitizeInput:
    def test_strips_whitespace(self):
        assert sanitize_input("  alice  ") == "alice"

    def test_drops_angle_brackets(self):
        assert sanitize_input("<script>alice</script>") == "scriptalice/script"

    def test_plain_value_unchanged(self):
        assert sanitize_input("alice@example.com") == "alice@example.com"
