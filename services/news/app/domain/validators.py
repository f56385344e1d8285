"""
Validadores de formato para las credenciales de usuario.
"""
import re

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,20}$")
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 50


def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def is_valid_password(password: str) -> bool:
    """La contraseña debe tener entre 6 y 50 caracteres con al menos una letra y un número."""
    if not password or not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        return False
    has_letter = any(c.isalpha() for c in password)
    has_digit = any(c.isdigit() for c in password)
    return has_letter and has_digit


def is_valid_username(username: str) -> bool:
    """Entre 3 y 20 caracteres: letras, números o guion bajo."""
    return bool(username) and USERNAME_PATTERN.match(username) is not None
