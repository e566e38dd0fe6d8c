import unittest

import jwt
from fastapi import HTTPException

from core.config_loader import settings
from auth.services import auth_service


class AuthServiceTests(unittest.TestCase):
    def test_token_round_trip(self):
        token = auth_service.create_access_token(42)
        self.assertEqual(auth_service.decode_access_token(token), 42)

    def test_expired_token_401(self):
        token = auth_service.create_access_token(42, expires_minutes=-1)
        with self.assertRaises(HTTPException) as ctx:
            auth_service.decode_access_token(token)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_garbage_token_401(self):
        with self.assertRaises(HTTPException) as ctx:
            auth_service.decode_access_token("not-a-token")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_wrong_secret_401(self):
        token = jwt.encode({"sub": "42"}, settings.SECRET_KEY + "-other", algorithm=settings.JWT_ALGORITHM)
        with self.assertRaises(HTTPException):
            auth_service.decode_access_token(token)

    def test_non_numeric_subject_401(self):
        token = jwt.encode({"sub": "someone"}, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        with self.assertRaises(HTTPException) as ctx:
            auth_service.decode_access_token(token)
        self.assertEqual(ctx.exception.headers, {"WWW-Authenticate": "Bearer"})

    def test_missing_token_401(self):
        with self.assertRaises(HTTPException) as ctx:
            auth_service.get_current_person(token=None, db=None)
        self.assertEqual(ctx.exception.status_code, 401)


if __name__ == "__main__":
    unittest.main()
