"""Settings defaults and validation."""

import unittest

from pydantic import ValidationError

from careconnect.core.config import DEFAULT_CORS_ORIGINS, Settings


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        self.assertEqual(settings.BCRYPT_ROUNDS, 10)
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.CORS_ORIGINS, DEFAULT_CORS_ORIGINS)
        self.assertEqual(len(settings.CORS_ORIGINS), 2)


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_non_mongo_uri(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(MONGO_URI="postgresql://localhost/db")

    def test_accepts_srv_uri(self) -> None:
        settings = Settings(MONGO_URI=" mongodb+srv://user:pw@cluster.example.net ")
        self.assertEqual(settings.MONGO_URI, "mongodb+srv://user:pw@cluster.example.net")

    def test_rejects_empty_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="   ")

    def test_rejects_out_of_range_bcrypt_rounds(self) -> None:
        for rounds in (3, 32):
            with self.subTest(rounds=rounds):
                with self.assertRaises(ValidationError):
                    Settings(BCRYPT_ROUNDS=rounds)

    def test_rejects_invalid_port(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(PORT=0)

    def test_blank_openai_key_treated_as_unset(self) -> None:
        self.assertIsNone(Settings(OPENAI_API_KEY="").OPENAI_API_KEY)
