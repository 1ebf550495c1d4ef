import unittest

from teachify_admin.security import hash_password, verify_password


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_bcrypt_and_salted(self):
        first = hash_password("admin123", rounds=4)
        second = hash_password("admin123", rounds=4)

        self.assertTrue(first.startswith("$2b$04$"))
        self.assertNotEqual(first, second)
        self.assertNotIn("admin123", first)

    def test_verify_password(self):
        hashed = hash_password("admin123", rounds=4)

        self.assertTrue(verify_password("admin123", hashed))
        self.assertFalse(verify_password("admin124", hashed))

    def test_verify_rejects_non_bcrypt_value(self):
        self.assertFalse(verify_password("admin123", "admin123"))

    def test_long_passwords_are_truncated_to_72_bytes(self):
        base = "x" * 72
        hashed = hash_password(base + "tail", rounds=4)

        self.assertTrue(verify_password(base + "other", hashed))


if __name__ == "__main__":
    unittest.main()
